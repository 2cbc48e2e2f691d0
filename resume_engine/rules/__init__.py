# resume_engine/rules/__init__.py
"""
Domain rule bundles: typed records, shape detection, loading and caching
"""

from resume_engine.rules.models import (
    SkillRule, PowerWord, MetricExample, ResumeSection, RedFlag, ATSRule,
    ScoringWeights, ExperienceLevelRules, DomainRules, UnifiedRuleset
)
from resume_engine.rules.cache import RuleCache
from resume_engine.rules.shapes import (
    FlatKeyedShape, LegacyNestedShape, DEFAULT_SHAPES, transform_new_structure
)
from resume_engine.rules.loader import RuleLoader, SUPPORTED_DOMAINS
from resume_engine.rules.ruleset import load_ruleset, parse_ruleset
from resume_engine.rules.validator import RuleSetValidator

__all__ = [
    'SkillRule',
    'PowerWord',
    'MetricExample',
    'ResumeSection',
    'RedFlag',
    'ATSRule',
    'ScoringWeights',
    'ExperienceLevelRules',
    'DomainRules',
    'UnifiedRuleset',
    'RuleCache',
    'FlatKeyedShape',
    'LegacyNestedShape',
    'DEFAULT_SHAPES',
    'transform_new_structure',
    'RuleLoader',
    'SUPPORTED_DOMAINS',
    'load_ruleset',
    'parse_ruleset',
    'RuleSetValidator',
]
