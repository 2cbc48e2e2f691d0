# scripts/score_resume.py
#!/usr/bin/env python3
"""
Score a resume against the rules of a career domain

Usage:
    python scripts/score_resume.py --resume data/resume.json --domain web-developer
    python scripts/score_resume.py --resume data/resume.json --job-description data/jd.txt --strategy both
    python scripts/score_resume.py --resume data/resume.json --output reports/score.json
    python scripts/score_resume.py --list-domains
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from datetime import datetime

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from resume_engine.config import EngineConfig, get_config
from resume_engine.engine import RuleEngine
from resume_engine.errors import RuleLoadError
from resume_engine.jd_parser import JobDescriptionParser
from resume_engine.models import Resume
from resume_engine.report import generate_report
from resume_engine.rules.loader import SUPPORTED_DOMAINS

logger = logging.getLogger(__name__)


def load_resume(resume_file: str) -> Resume:
    """Load a resume from a JSON file"""
    path = Path(resume_file)

    if not path.exists():
        raise FileNotFoundError(f"Resume file not found: {resume_file}")

    with open(path, 'r', encoding='utf-8') as f:
        return Resume.from_json(f.read())


def load_job_description(jd_file: str, title: str = None):
    """Parse a plain-text job description into a JobContext"""
    path = Path(jd_file)

    if not path.exists():
        raise FileNotFoundError(f"Job description file not found: {jd_file}")

    with open(path, 'r', encoding='utf-8') as f:
        return JobDescriptionParser().parse(f.read(), title=title)


def save_report(output_file: str, domain: str, score=None, verdict=None, suggestions=None):
    """Save results as JSON"""
    output_path = Path(output_file)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    report = {
        'evaluated_at': datetime.now().isoformat(),
        'domain': domain,
    }
    if score is not None:
        report['score'] = score.to_dict()
    if verdict is not None:
        report['verdict'] = verdict.to_dict()
    report['suggestions'] = [s.to_dict() for s in suggestions or []]

    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(report, f, indent=2, ensure_ascii=False)

    print(f"✓ Report saved to: {output_file}")


def main():
    parser = argparse.ArgumentParser(
        description='Score a resume against the rules of a career domain'
    )

    parser.add_argument(
        '--resume',
        help='Path to resume file (.json)'
    )

    parser.add_argument(
        '--domain',
        help='Career domain (default: from config)'
    )

    parser.add_argument(
        '--job-description',
        help='Path to job description text file (.txt)'
    )

    parser.add_argument(
        '--job-title',
        help='Job title, if not on the first lines of the job description'
    )

    parser.add_argument(
        '--strategy',
        choices=['legacy', 'verdict', 'both'],
        default='legacy',
        help='Scoring strategy'
    )

    parser.add_argument(
        '--config',
        help='Path to engine config file (.yaml)'
    )

    parser.add_argument(
        '--output',
        help='Output file for the report (JSON)'
    )

    parser.add_argument(
        '--list-domains',
        action='store_true',
        help='List supported domains and exit'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(message)s'
    )

    if args.list_domains:
        for domain in SUPPORTED_DOMAINS:
            print(domain)
        sys.exit(0)

    if not args.resume:
        parser.error('--resume is required')

    try:
        config = EngineConfig.from_yaml(args.config) if args.config else get_config()
        domain = args.domain or config.default_domain

        resume = load_resume(args.resume)
        job_context = None
        if args.job_description:
            job_context = load_job_description(args.job_description, args.job_title)

        engine = RuleEngine(config)
        engine.initialize(domain)

        score = None
        verdict = None
        if args.strategy in ('legacy', 'both'):
            score = engine.calculate_score(resume)
        if args.strategy in ('verdict', 'both'):
            verdict = engine.calculate_verdict(resume, job_context)

        suggestions = engine.get_global_suggestions(resume)

        print(generate_report(domain, score=score, verdict=verdict, suggestions=suggestions))

        if args.output:
            save_report(args.output, domain, score, verdict, suggestions)

        sys.exit(0)

    except RuleLoadError as e:
        logger.error(f"ERROR: {e}")
        sys.exit(1)

    except Exception as e:
        logger.error(f"ERROR: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(2)


if __name__ == '__main__':
    main()
