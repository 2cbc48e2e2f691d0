# resume_engine/rules/models.py
from dataclasses import dataclass, field, asdict
from typing import Optional, List, Dict, Any, FrozenSet


def _items(data: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
    value = data.get(key) or []
    return [item for item in value if isinstance(item, dict)]


def _strings(value: Any) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    return [str(v) for v in value]


# ---------------------------------------------------------------------------
# Domain rule items
# ---------------------------------------------------------------------------

@dataclass
class SkillRule:
    """Skill expected for a domain level"""
    skill: str
    context: str = ""
    priority: str = "medium"        # critical, high, medium, low
    weight: float = 0.5
    alternatives: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SkillRule':
        return cls(
            skill=str(data.get('skill', '')),
            context=data.get('context') or '',
            priority=data.get('priority') or 'medium',
            weight=float(data.get('weight', 0.5)),
            alternatives=_strings(data.get('alternatives')),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class PowerWord:
    """Action verb with its strength"""
    verb: str
    context: str = ""
    strength: str = "medium"        # low, medium, high, very high
    example: str = ""

    @property
    def is_strong(self) -> bool:
        return self.strength in ('high', 'very high')

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PowerWord':
        return cls(
            verb=str(data.get('verb', '')),
            context=data.get('context') or '',
            strength=data.get('strength') or 'medium',
            example=data.get('example') or '',
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class MetricExample:
    type: str
    examples: List[str] = field(default_factory=list)
    priority: str = "medium"
    applicable: bool = True

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MetricExample':
        return cls(
            type=str(data.get('type', '')),
            examples=_strings(data.get('examples')),
            priority=data.get('priority') or 'medium',
            applicable=bool(data.get('applicable', True)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ResumeSection:
    """Structure guideline for one resume section"""
    section: str
    required: bool = False
    guidelines: str = ""
    order: int = 0
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    recommended_items: Optional[int] = None
    bullets_per_role: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ResumeSection':
        return cls(
            section=str(data.get('section', '')),
            required=bool(data.get('required', False)),
            guidelines=data.get('guidelines') or '',
            order=int(data.get('order', 0)),
            min_length=data.get('minLength'),
            max_length=data.get('maxLength'),
            recommended_items=data.get('recommendedItems'),
            bullets_per_role=data.get('bulletsPerRole'),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class RedFlag:
    flag: str
    severity: str = "medium"        # critical, high, medium, low
    reason: str = ""
    suggestion: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RedFlag':
        return cls(
            flag=str(data.get('flag', '')),
            severity=data.get('severity') or 'medium',
            reason=data.get('reason') or '',
            suggestion=data.get('suggestion') or data.get('solution') or '',
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ATSRule:
    rule: str
    details: str = ""
    importance: str = "medium"      # critical, high, medium
    impact: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ATSRule':
        return cls(
            rule=str(data.get('rule', '')),
            details=data.get('details') or '',
            importance=data.get('importance') or 'medium',
            impact=data.get('impact') or '',
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Rule categories of an experience level
# ---------------------------------------------------------------------------

@dataclass
class SkillCategory:
    category: str = "Skills"
    importance: float = 0.0
    skills: List[SkillRule] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]], default_name: str) -> 'SkillCategory':
        data = data or {}
        return cls(
            category=data.get('category') or default_name,
            importance=float(data.get('importance', 0.0)),
            skills=[SkillRule.from_dict(s) for s in _items(data, 'skills')],
        )


@dataclass
class PowerWordCategory:
    category: str = "Power Words"
    importance: float = 0.0
    verbs: List[PowerWord] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'PowerWordCategory':
        data = data or {}
        return cls(
            category=data.get('category') or 'Power Words',
            importance=float(data.get('importance', 0.0)),
            verbs=[PowerWord.from_dict(v) for v in _items(data, 'verbs')],
        )


@dataclass
class MetricsFramework:
    category: str = "Metrics"
    importance: float = 0.0
    metric_types: List[MetricExample] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'MetricsFramework':
        data = data or {}
        return cls(
            category=data.get('category') or 'Metrics',
            importance=float(data.get('importance', 0.0)),
            metric_types=[MetricExample.from_dict(m) for m in _items(data, 'metricTypes')],
        )


@dataclass
class StructureCategory:
    category: str = "Resume Structure"
    importance: float = 0.0
    sections: List[ResumeSection] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'StructureCategory':
        data = data or {}
        return cls(
            category=data.get('category') or 'Resume Structure',
            importance=float(data.get('importance', 0.0)),
            sections=[ResumeSection.from_dict(s) for s in _items(data, 'sections')],
        )


@dataclass
class RedFlagCategory:
    category: str = "Red Flags"
    importance: float = 0.0
    flags: List[RedFlag] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'RedFlagCategory':
        data = data or {}
        return cls(
            category=data.get('category') or 'Red Flags',
            importance=float(data.get('importance', 0.0)),
            flags=[RedFlag.from_dict(f) for f in _items(data, 'flags')],
        )


@dataclass
class ATSCategory:
    category: str = "ATS Optimization"
    importance: float = 0.0
    rules: List[ATSRule] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'ATSCategory':
        data = data or {}
        return cls(
            category=data.get('category') or 'ATS Optimization',
            importance=float(data.get('importance', 0.0)),
            rules=[ATSRule.from_dict(r) for r in _items(data, 'rules')],
        )


@dataclass
class ScoringWeights:
    """Weights of the five ATS score categories; unknown keys are kept in extra"""
    keyword_match: float = 0.0
    format_compliance: float = 0.0
    metrics_present: float = 0.0
    power_words: float = 0.0
    skill_relevance: float = 0.0
    extra: Dict[str, float] = field(default_factory=dict)
    # Canonical camelCase keys the source file actually declared
    declared_keys: FrozenSet[str] = field(default_factory=frozenset)

    KEYS = {
        'keywordMatch': 'keyword_match',
        'formatCompliance': 'format_compliance',
        'metricsPresent': 'metrics_present',
        'powerWords': 'power_words',
        'powerWordsUsage': 'power_words',
        'skillRelevance': 'skill_relevance',
    }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'ScoringWeights':
        weights = cls()
        declared = set()
        for key, value in (data or {}).items():
            try:
                value = float(value)
            except (TypeError, ValueError):
                continue
            attr = cls.KEYS.get(key)
            if attr is None:
                weights.extra[key] = value
                declared.add(key)
            elif key == 'powerWordsUsage' and 'powerWords' in data:
                # powerWords wins when both spellings are present
                continue
            else:
                setattr(weights, attr, value)
                declared.add('powerWords' if key == 'powerWordsUsage' else key)
        weights.declared_keys = frozenset(declared)
        return weights

    def scoring_total(self) -> float:
        """Sum of the weights the legacy score actually uses"""
        return (self.keyword_match + self.format_compliance + self.metrics_present +
                self.power_words + self.skill_relevance)

    def total(self) -> float:
        """Sum of every declared weight"""
        return self.scoring_total() + sum(self.extra.values())

    def to_dict(self) -> Dict[str, float]:
        data = {
            'keywordMatch': self.keyword_match,
            'formatCompliance': self.format_compliance,
            'metricsPresent': self.metrics_present,
            'powerWords': self.power_words,
            'skillRelevance': self.skill_relevance,
        }
        data.update(self.extra)
        return data


@dataclass
class ExperienceLevelRules:
    level: str = ""
    years_required: str = ""
    required_skills: SkillCategory = field(
        default_factory=lambda: SkillCategory(category="Required Skills"))
    nice_to_have_skills: SkillCategory = field(
        default_factory=lambda: SkillCategory(category="Nice to Have Skills"))
    power_words: PowerWordCategory = field(default_factory=PowerWordCategory)
    metrics_framework: MetricsFramework = field(default_factory=MetricsFramework)
    resume_structure: StructureCategory = field(default_factory=StructureCategory)
    red_flags: RedFlagCategory = field(default_factory=RedFlagCategory)
    ats_optimization: ATSCategory = field(default_factory=ATSCategory)
    scoring_weights: ScoringWeights = field(default_factory=ScoringWeights)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'ExperienceLevelRules':
        data = data or {}
        rules = data.get('rules') or {}
        return cls(
            level=data.get('level') or '',
            years_required=str(data.get('yearsRequired') or ''),
            required_skills=SkillCategory.from_dict(rules.get('requiredSkills'), 'Required Skills'),
            nice_to_have_skills=SkillCategory.from_dict(
                rules.get('niceToHaveSkills'), 'Nice to Have Skills'),
            power_words=PowerWordCategory.from_dict(rules.get('powerWords')),
            metrics_framework=MetricsFramework.from_dict(rules.get('metricsFramework')),
            resume_structure=StructureCategory.from_dict(rules.get('resumeStructure')),
            red_flags=RedFlagCategory.from_dict(rules.get('redFlags')),
            ats_optimization=ATSCategory.from_dict(rules.get('atsOptimization')),
            scoring_weights=ScoringWeights.from_dict(data.get('scoringWeights')),
        )


# ---------------------------------------------------------------------------
# Extra domain data carried by the flat rule files
# ---------------------------------------------------------------------------

@dataclass
class RoleVariant:
    role: str = ""
    focus_skills: List[str] = field(default_factory=list)
    secondary_skills: List[str] = field(default_factory=list)
    key_metrics: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RoleVariant':
        return cls(
            role=data.get('role') or '',
            focus_skills=_strings(data.get('focusSkills')),
            secondary_skills=_strings(data.get('secondarySkills')),
            key_metrics=_strings(data.get('keyMetrics')),
        )


@dataclass
class HighValueKeyword:
    keyword: str
    priority: str = "medium"
    variations: List[str] = field(default_factory=list)
    context: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'HighValueKeyword':
        return cls(
            keyword=str(data.get('keyword', '')),
            priority=data.get('priority') or 'medium',
            variations=_strings(data.get('variations')),
            context=data.get('context') or '',
        )


@dataclass
class SkillTrend:
    """Emerging or declining skill; status holds the trend or decline status"""
    skill: str
    status: str = ""
    rationale: str = ""
    advice: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SkillTrend':
        return cls(
            skill=str(data.get('skill', '')),
            status=data.get('trend') or data.get('status') or '',
            rationale=data.get('rationale') or '',
            advice=data.get('implementation') or data.get('recommendation') or '',
        )


@dataclass
class DomainRules:
    """Canonical rule bundle for one career domain"""
    domain: str
    description: str = ""
    experience_levels: Dict[str, ExperienceLevelRules] = field(default_factory=dict)
    overall_scoring_weights: ScoringWeights = field(default_factory=ScoringWeights)

    # Only present in flat rule files
    role_variants: Dict[str, RoleVariant] = field(default_factory=dict)
    high_value_keywords: List[HighValueKeyword] = field(default_factory=list)
    domain_red_flags: List[RedFlag] = field(default_factory=list)
    trending_skills: List[SkillTrend] = field(default_factory=list)
    declining_skills: List[SkillTrend] = field(default_factory=list)

    LEVELS = ('entryLevel', 'junior', 'midLevel', 'senior')

    @classmethod
    def from_dict(cls, data: Dict[str, Any], domain: Optional[str] = None) -> 'DomainRules':
        """Build from the canonical (camelCase) rule dictionary"""
        levels = data.get('experienceLevels') or {}
        return cls(
            domain=domain or data.get('domain') or '',
            description=data.get('description') or '',
            experience_levels={
                name: ExperienceLevelRules.from_dict(levels[name])
                for name in levels if isinstance(levels[name], dict)
            },
            overall_scoring_weights=ScoringWeights.from_dict(data.get('overallScoringWeights')),
            role_variants={
                name: RoleVariant.from_dict(variant)
                for name, variant in (data.get('roleVariants') or {}).items()
                if isinstance(variant, dict)
            },
            high_value_keywords=[
                HighValueKeyword.from_dict(k) for k in _items(data, 'highValueKeywords')],
            domain_red_flags=[RedFlag.from_dict(f) for f in _items(data, 'domainRedFlags')],
            trending_skills=[SkillTrend.from_dict(s) for s in _items(data, 'trendingSkills')],
            declining_skills=[SkillTrend.from_dict(s) for s in _items(data, 'decliningSkills')],
        )

    def level(self, name: str = 'midLevel') -> ExperienceLevelRules:
        """Rules for an experience level, falling back to midLevel, then the first level"""
        if name in self.experience_levels:
            return self.experience_levels[name]
        if 'midLevel' in self.experience_levels:
            return self.experience_levels['midLevel']
        for rules in self.experience_levels.values():
            return rules
        return ExperienceLevelRules()

    def skill_trend_status(self, skill: str) -> str:
        """'emerging', 'declining' or 'stable' for a skill name"""
        skill_lower = skill.lower()
        if any(skill_lower in trend.skill.lower() for trend in self.trending_skills):
            return 'emerging'
        if any(skill_lower in trend.skill.lower() for trend in self.declining_skills):
            return 'declining'
        return 'stable'


# ---------------------------------------------------------------------------
# Unified ATS / HR / red flag / JD rule set used by the verdict scoring path
# ---------------------------------------------------------------------------

@dataclass
class ATSRuleDef:
    id: str
    description: str
    weight: float
    category: str = "structure"
    suggestion: str = ""
    check: List[str] = field(default_factory=list)
    regex: Optional[str] = None
    min_skills: Optional[int] = None
    max_skills: Optional[int] = None
    rationale: str = ""


@dataclass
class HRRuleDef:
    id: str
    description: str
    weight: float
    category: str = "impact"
    suggestion: str = ""
    check: str = ""
    min_words: Optional[int] = None
    max_words: Optional[int] = None
    rationale: str = ""


@dataclass
class RedFlagRuleDef:
    id: str
    description: str
    penalty: float
    suggestion: str = ""
    patterns: List[str] = field(default_factory=list)
    check: str = ""
    max_occurrences: Optional[int] = None
    weak_verb_ratio: Optional[float] = None
    severity: str = "medium"

    def __post_init__(self):
        # Penalties are always stored negative
        self.penalty = -abs(self.penalty)


@dataclass
class JDMatchRuleDef:
    id: str
    description: str
    weight: float
    suggestion: str = ""
    check: str = ""


@dataclass
class MetricType:
    type: str
    examples: List[str] = field(default_factory=list)
    priority: str = "medium"


@dataclass
class ScoringFormula:
    weights: Dict[str, float] = field(default_factory=lambda: {'ats': 0.4, 'hr': 0.3, 'jd': 0.3})
    verdict_thresholds: Dict[str, float] = field(
        default_factory=lambda: {'pass': 75, 'borderline': 55, 'fail': 0})


@dataclass
class UnifiedRuleset:
    ats_rules: List[ATSRuleDef] = field(default_factory=list)
    hr_rules: List[HRRuleDef] = field(default_factory=list)
    red_flags: List[RedFlagRuleDef] = field(default_factory=list)
    jd_rules: List[JDMatchRuleDef] = field(default_factory=list)
    scoring_formula: ScoringFormula = field(default_factory=ScoringFormula)
    role_specific_tips: Dict[str, List[str]] = field(default_factory=dict)
    action_verbs: Dict[str, List[str]] = field(default_factory=dict)
    metric_types: List[MetricType] = field(default_factory=list)

    def stats(self) -> Dict[str, int]:
        return {
            'ats_rules': len(self.ats_rules),
            'hr_rules': len(self.hr_rules),
            'red_flags': len(self.red_flags),
            'jd_rules': len(self.jd_rules),
        }
