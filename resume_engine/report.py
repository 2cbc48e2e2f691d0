# resume_engine/report.py
from collections import defaultdict
from typing import List, Optional

from resume_engine.scoring.aggregator import get_score_feedback
from resume_engine.scoring.models import ATSScore, VerdictResult
from resume_engine.suggestions.models import Suggestion

WIDTH = 70

SEVERITY_ORDER = ['critical', 'high', 'medium', 'low']


def _header(title: str) -> List[str]:
    return ["=" * WIDTH, title, "=" * WIDTH, ""]


def format_score(score: ATSScore) -> List[str]:
    feedback = get_score_feedback(score.overall_score)
    lines = [
        f"Overall ATS Score: {score.overall_score}/100 ({feedback.level})",
        f"  {feedback.message}",
        "",
        "Component Scores:",
    ]
    for item in score.breakdown:
        lines.append(f"  {item.category + ':':<20} {item.score:>3}/100  (weight {item.weight:.2f})")
    lines.append("")
    return lines


def format_verdict(result: VerdictResult) -> List[str]:
    lines = [
        f"Verdict: {result.verdict.value.upper()} ({result.final}/100)",
        "",
        "Component Scores:",
        f"  ATS: {result.ats}/100",
        f"  HR:  {result.hr}/100",
        f"  JD:  {result.jd}/100",
        f"  Red flag penalty: -{result.red_flag_penalty:g}",
        "",
    ]

    failed = result.failed
    if failed:
        lines.append(f"Failed Rules ({len(failed)}):")
        lines.append("-" * WIDTH)
        for evaluation in failed:
            lines.append(f"  [{evaluation.rule_id}] {evaluation.description}")
        lines.append("")

    if result.top_fixes:
        lines.append("Top Fixes:")
        lines.append("-" * WIDTH)
        for i, fix in enumerate(result.top_fixes, 1):
            lines.append(f"{i}. {fix}")
        lines.append("")

    return lines


def format_suggestions(suggestions: List[Suggestion]) -> List[str]:
    """Suggestions grouped by severity, most severe first"""
    lines = []
    by_severity = defaultdict(list)
    for suggestion in suggestions:
        by_severity[suggestion.severity.value].append(suggestion)

    for severity in SEVERITY_ORDER:
        if severity not in by_severity:
            continue
        lines.append(f"{severity.upper()} PRIORITY ({len(by_severity[severity])} items):")
        lines.append("-" * WIDTH)

        for i, suggestion in enumerate(by_severity[severity], 1):
            lines.append(f"{i}. {suggestion.message}")
            lines.append(f"   → {suggestion.suggestion}")
            if suggestion.apply_suggestion:
                lines.append(f"   Rewrite: {suggestion.apply_suggestion}")
            lines.append("")

    return lines


def generate_report(
    domain: str,
    score: Optional[ATSScore] = None,
    verdict: Optional[VerdictResult] = None,
    suggestions: Optional[List[Suggestion]] = None
) -> str:
    """
    Human-readable report of whatever results are given

    Returns:
        Formatted report string
    """
    lines = _header(f"RESUME REPORT - {domain}")

    if score is not None:
        lines.extend(format_score(score))
    if verdict is not None:
        lines.extend(format_verdict(verdict))
    if suggestions:
        lines.extend(format_suggestions(suggestions))

    lines.append("=" * WIDTH)
    return "\n".join(lines)
