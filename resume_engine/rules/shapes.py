# resume_engine/rules/shapes.py
"""
Rule file shapes.

Two historical layouts exist for domain rule files:

* flat-keyed: ``{"webDevRules": {"experienceLevelSpecifics": ..., "coreSkillsMatrix": ...}}``
  describing skills per level as plain strings. It is converted to the canonical
  layout by :func:`transform_new_structure`.
* legacy-nested: ``{"ruleEngine": {"domains": {"<domain>": {...}}}}`` already holding
  canonical DomainRules data.

Each layout has a detector; the loader tries them in order and uses the first match.
"""
import logging
import re
from typing import Any, Dict, List, Optional

from resume_engine.rules.models import DomainRules

logger = logging.getLogger(__name__)

LEVEL_NAMES = ('entryLevel', 'junior', 'midLevel', 'senior')

FLAT_MARKERS = ('experienceLevelSpecifics', 'coreSkillsMatrix')

DEFAULT_SCORING_WEIGHTS = {
    'keywordMatch': 0.30,
    'formatCompliance': 0.20,
    'metricsPresent': 0.20,
    'powerWords': 0.15,
    'skillRelevance': 0.15,
}

# Category importance used when a flat file does not declare its own
CATEGORY_IMPORTANCE = {
    'requiredSkills': 0.30,
    'niceToHaveSkills': 0.10,
    'powerWords': 0.15,
    'metricsFramework': 0.20,
    'resumeStructure': 0.10,
    'redFlags': 0.10,
    'atsOptimization': 0.05,
}

DEFAULT_ACTION_VERBS = {
    'leadership': ['Architected', 'Led', 'Mentored', 'Spearheaded', 'Directed', 'Championed'],
    'creation': ['Built', 'Developed', 'Designed', 'Created', 'Engineered', 'Established'],
    'improvement': ['Optimized', 'Enhanced', 'Improved', 'Streamlined', 'Refactored', 'Modernized'],
    'analysis': ['Analyzed', 'Identified', 'Diagnosed', 'Evaluated', 'Assessed', 'Investigated'],
    'collaboration': ['Collaborated', 'Partnered', 'Coordinated', 'Facilitated', 'Integrated', 'Aligned'],
}

VERB_STRENGTH = {
    'leadership': 'very high',
    'improvement': 'high',
    'creation': 'high',
    'analysis': 'medium',
    'collaboration': 'medium',
}

DEFAULT_METRIC_TYPES = [
    {
        'type': 'Performance Metrics',
        'examples': ['Reduced load time by X%', 'Improved Lighthouse score from X to Y',
                     'Decreased response time by X seconds'],
        'priority': 'very high',
    },
    {
        'type': 'User Impact',
        'examples': ['Increased user engagement by X%', 'Reduced bounce rate by X%',
                     'Boosted conversion rate by X%'],
        'priority': 'high',
    },
    {
        'type': 'Business Impact',
        'examples': ['Generated X% increase in revenue', 'Reduced support tickets by X%',
                     'Saved X hours/week through automation'],
        'priority': 'high',
    },
    {
        'type': 'Scale/Scope',
        'examples': ['Built features serving X+ users', 'Handled X+ API requests per day',
                     'Led team of X developers'],
        'priority': 'medium',
    },
]

DEFAULT_SECTIONS = [
    {'section': 'Contact Information', 'required': True, 'order': 1,
     'guidelines': 'Name, email, phone, location and LinkedIn/GitHub links at the top'},
    {'section': 'Professional Summary', 'required': True, 'order': 2, 'minLength': 50, 'maxLength': 600,
     'guidelines': '2-4 sentences with target title, years of experience and top skills'},
    {'section': 'Skills', 'required': True, 'order': 3, 'recommendedItems': 12,
     'guidelines': 'Group technical skills by category (Languages, Frameworks, Tools)'},
    {'section': 'Experience', 'required': True, 'order': 4, 'bulletsPerRole': '3-5',
     'guidelines': 'Reverse chronological; start bullets with action verbs and quantify impact'},
    {'section': 'Projects', 'required': False, 'order': 5, 'recommendedItems': 3,
     'guidelines': 'Name, stack, link and measurable outcome for each project'},
    {'section': 'Education', 'required': True, 'order': 6,
     'guidelines': 'Degree, institution, graduation date; GPA if above 3.5'},
]

KEYWORD_IMPORTANCE = {
    'critical': 'critical',
    'very high': 'high',
    'high': 'high',
}


def _camel_case(domain: str) -> str:
    return re.sub(r'-([a-z])', lambda m: m.group(1).upper(), domain)


def _skill_alternatives(entry: str) -> List[str]:
    """Alternatives spelled inside an entry: "Framework (React, Vue)" or "React or Vue.js" """
    alternatives = []
    inner = re.search(r'\(([^)]*)\)', entry)
    if inner:
        alternatives.extend(p.strip() for p in inner.group(1).split(','))
    elif re.search(r'\bor\b', entry):
        alternatives.extend(p.strip() for p in re.split(r'\bor\b', entry))
    return [a for a in alternatives if a]


def _core_skills(payload: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Every skill record of the coreSkillsMatrix, whatever its sub-group key"""
    skills = []
    for group in (payload.get('coreSkillsMatrix') or {}).values():
        if not isinstance(group, dict):
            continue
        for items in group.values():
            if isinstance(items, list):
                skills.extend(item for item in items if isinstance(item, dict) and item.get('skill'))
    return skills


def _matching_core_skill(entry: str, core_skills: List[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    lower_entry = entry.lower()
    for core in core_skills:
        name = str(core['skill']).lower()
        if name == lower_entry:
            return core
    for core in core_skills:
        name = str(core['skill']).lower()
        if name in lower_entry or lower_entry in name:
            return core
    return None


def _skill_rule(entry: str, priority: str, weight: float,
                core_skills: List[Dict[str, Any]]) -> Dict[str, Any]:
    alternatives = _skill_alternatives(entry)
    context = ''
    core = _matching_core_skill(entry, core_skills)
    if core:
        context = core.get('context') or ''
        for variation in core.get('variations') or []:
            if variation not in alternatives:
                alternatives.append(variation)
    return {
        'skill': entry,
        'context': context,
        'priority': priority,
        'weight': weight,
        'alternatives': alternatives,
    }


def _first_list(group: Any, *preferred: str) -> List[Dict[str, Any]]:
    """List under one of the preferred keys, else the first list value of the group"""
    if not isinstance(group, dict):
        return []
    for key in preferred:
        if isinstance(group.get(key), list):
            return group[key]
    if preferred:
        return []
    for value in group.values():
        if isinstance(value, list):
            return value
    return []


def _trend_group(payload: Dict[str, Any]) -> Dict[str, Any]:
    """The trendingSkills* object (files suffix it with the period it covers)"""
    for key, value in payload.items():
        if key.startswith('trendingSkills') and isinstance(value, dict):
            return value
    return {}


def _flat_payload(document: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """Inner payload of a flat-keyed document, or the document itself if already inner"""
    if any(marker in document for marker in FLAT_MARKERS):
        return document
    for key, value in document.items():
        if key.endswith('Rules') and isinstance(value, dict):
            if any(marker in value for marker in FLAT_MARKERS):
                return value
    return None


def transform_new_structure(payload: Dict[str, Any], domain: Optional[str] = None) -> DomainRules:
    """
    Convert a flat-keyed rule file into canonical DomainRules

    Args:
        payload: Whole flat document (``{"webDevRules": {...}}``) or its inner object
        domain: Domain identifier to record on the result

    Returns:
        DomainRules whose level requiredSkills mirror each level's criticalSkills
    """
    inner = _flat_payload(payload)
    if inner is None:
        raise ValueError("Not a flat-keyed rule payload")

    core_skills = _core_skills(inner)
    weights = inner.get('scoringWeights') or DEFAULT_SCORING_WEIGHTS
    action_verbs = inner.get('actionVerbs') or DEFAULT_ACTION_VERBS
    metric_types = inner.get('metricTypes') or DEFAULT_METRIC_TYPES

    power_words = []
    for category, verbs in action_verbs.items():
        for verb in verbs:
            power_words.append({
                'verb': verb,
                'context': category,
                'strength': VERB_STRENGTH.get(category, 'medium'),
                'example': '',
            })

    domain_red_flags = _first_list(inner.get('redFlagsSpecific'))
    keywords = ((inner.get('keywordOptimization') or {}).get('highValueKeywords') or {}).get('keywords') or []
    ats_rules = [
        {
            'rule': f"Include '{k.get('keyword', '')}'",
            'details': f"Variations: {', '.join(k.get('variations') or [])}",
            'importance': KEYWORD_IMPORTANCE.get(k.get('priority', ''), 'medium'),
            'impact': k.get('context') or '',
        }
        for k in keywords
    ]

    levels = {}
    specifics = inner.get('experienceLevelSpecifics') or {}
    for name in LEVEL_NAMES:
        level = specifics.get(name)
        if not isinstance(level, dict):
            continue

        red_flags = [
            {'flag': f.get('flag', ''), 'severity': f.get('severity', 'medium'),
             'reason': f.get('reason', ''), 'suggestion': f.get('solution', '')}
            for f in domain_red_flags
        ]
        red_flags.extend(
            {'flag': mistake, 'severity': 'medium', 'reason': 'Common mistake at this level',
             'suggestion': ''}
            for mistake in level.get('commonMistakes') or []
        )

        levels[name] = {
            'level': level.get('level', ''),
            'yearsRequired': level.get('yearsRequired', ''),
            'rules': {
                'requiredSkills': {
                    'category': 'Required Skills',
                    'importance': CATEGORY_IMPORTANCE['requiredSkills'],
                    'skills': [_skill_rule(s, 'critical', 0.9, core_skills)
                               for s in level.get('criticalSkills') or []],
                },
                'niceToHaveSkills': {
                    'category': 'Nice to Have Skills',
                    'importance': CATEGORY_IMPORTANCE['niceToHaveSkills'],
                    'skills': [_skill_rule(s, 'medium', 0.5, core_skills)
                               for s in level.get('niceToHave') or []],
                },
                'powerWords': {
                    'category': 'Power Words',
                    'importance': CATEGORY_IMPORTANCE['powerWords'],
                    'verbs': power_words,
                },
                'metricsFramework': {
                    'category': 'Metrics',
                    'importance': CATEGORY_IMPORTANCE['metricsFramework'],
                    'metricTypes': metric_types,
                },
                'resumeStructure': {
                    'category': 'Resume Structure',
                    'importance': CATEGORY_IMPORTANCE['resumeStructure'],
                    'sections': DEFAULT_SECTIONS,
                },
                'redFlags': {
                    'category': 'Red Flags',
                    'importance': CATEGORY_IMPORTANCE['redFlags'],
                    'flags': red_flags,
                },
                'atsOptimization': {
                    'category': 'ATS Optimization',
                    'importance': CATEGORY_IMPORTANCE['atsOptimization'],
                    'rules': ats_rules,
                },
            },
            'scoringWeights': weights,
        }

    trends = _trend_group(inner)
    canonical = {
        'domain': domain or inner.get('domain') or '',
        'description': inner.get('description', ''),
        'experienceLevels': levels,
        'overallScoringWeights': weights,
        'roleVariants': inner.get('roleVariants') or {},
        'highValueKeywords': keywords,
        'domainRedFlags': domain_red_flags,
        'trendingSkills': _first_list(trends, 'emergingHighValue', 'emerging'),
        'decliningSkills': _first_list(trends, 'decliningSkills', 'declining'),
    }
    return DomainRules.from_dict(canonical, domain=domain)


class FlatKeyedShape:
    """``{"<name>Rules": {...}}`` files with plain-string skills per level"""

    name = 'flat-keyed'

    def detect(self, document: Dict[str, Any], domain: str) -> Optional[Dict[str, Any]]:
        return _flat_payload(document)

    def build(self, payload: Dict[str, Any], domain: str) -> DomainRules:
        return transform_new_structure(payload, domain=domain)


class LegacyNestedShape:
    """``{"ruleEngine": {"domains": {...}}}`` files already in canonical form"""

    name = 'legacy-nested'

    def detect(self, document: Dict[str, Any], domain: str) -> Optional[Dict[str, Any]]:
        engine = document.get('ruleEngine') or document
        domains = engine.get('domains') if isinstance(engine, dict) else None
        if not isinstance(domains, dict) or not domains:
            return None

        payload = domains.get(domain) or domains.get(_camel_case(domain))
        if payload is None:
            first_key = next(iter(domains))
            logger.info(f"Using first domain key '{first_key}' for {domain}")
            payload = domains[first_key]

        return payload if isinstance(payload, dict) else None

    def build(self, payload: Dict[str, Any], domain: str) -> DomainRules:
        return DomainRules.from_dict(payload, domain=domain)


DEFAULT_SHAPES = (FlatKeyedShape(), LegacyNestedShape())
