# resume_engine/rules/ruleset.py
import logging
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Type, TypeVar

import yaml

from resume_engine.config import BUNDLED_RULESET
from resume_engine.errors import RuleLoadError
from resume_engine.rules.models import (
    ATSRuleDef, HRRuleDef, RedFlagRuleDef, JDMatchRuleDef,
    MetricType, ScoringFormula, UnifiedRuleset
)
from resume_engine.rules.validator import RuleSetValidator

logger = logging.getLogger(__name__)

T = TypeVar('T')


def _build(cls: Type[T], data: Dict[str, Any]) -> T:
    """Instantiate a rule record, ignoring keys the record does not declare"""
    known = {f.name for f in fields(cls)}
    return cls(**{k: v for k, v in data.items() if k in known})


def _records(cls: Type[T], items: Optional[List[Dict[str, Any]]]) -> List[T]:
    return [_build(cls, item) for item in items or [] if isinstance(item, dict)]


def parse_ruleset(data: Dict[str, Any]) -> UnifiedRuleset:
    """Build a UnifiedRuleset from its YAML/JSON dictionary"""
    formula = data.get('scoring_formula') or {}
    defaults = ScoringFormula()

    return UnifiedRuleset(
        ats_rules=_records(ATSRuleDef, data.get('ats_rules')),
        hr_rules=_records(HRRuleDef, data.get('hr_rules')),
        red_flags=_records(RedFlagRuleDef, data.get('red_flags') or data.get('recruiter_red_flags')),
        jd_rules=_records(JDMatchRuleDef, data.get('jd_rules') or data.get('jd_matching_rules')),
        scoring_formula=ScoringFormula(
            weights=formula.get('weights') or defaults.weights,
            verdict_thresholds=formula.get('verdict_thresholds') or defaults.verdict_thresholds,
        ),
        role_specific_tips=data.get('role_specific_tips') or {},
        action_verbs=data.get('action_verbs') or {},
        metric_types=_records(MetricType, data.get('metric_types')),
    )


def load_ruleset(path: Optional[Path] = None) -> UnifiedRuleset:
    """
    Load the unified ATS/HR/red flag/JD rule set

    Args:
        path: YAML file; defaults to the rule set bundled with the package

    Returns:
        UnifiedRuleset
    """
    path = Path(path) if path else BUNDLED_RULESET
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise RuleLoadError('ruleset', f"Unable to read rule set {path}: {e}") from e

    ruleset = parse_ruleset(data)

    is_valid, issues = RuleSetValidator().validate_ruleset(ruleset)
    for issue in issues:
        logger.warning(issue)
    if not is_valid:
        raise RuleLoadError('ruleset', f"Invalid rule set {path}")

    stats = ruleset.stats()
    logger.info(
        f"Loaded rule set: {stats['ats_rules']} ATS, {stats['hr_rules']} HR, "
        f"{stats['red_flags']} red flag, {stats['jd_rules']} JD rules"
    )
    return ruleset
