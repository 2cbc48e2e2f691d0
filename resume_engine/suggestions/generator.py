# resume_engine/suggestions/generator.py
import logging
import re
from typing import Callable, Dict, Iterable, List, Tuple

from resume_engine.models import Resume
from resume_engine.rules.models import DomainRules, ExperienceLevelRules
from resume_engine.suggestions.analyzers import (
    analyze_bullet_point, analyze_project_description, analyze_skills,
    analyze_summary, check_for_metrics, check_passive_voice
)
from resume_engine.suggestions.models import Severity, Suggestion, SuggestionType
from resume_engine.text import declared_skills

logger = logging.getLogger(__name__)

ANY_FIELD = '*'

ANY_NUMBER = re.compile(r"\d+%|\d+")

Analyzer = Callable[[str, ExperienceLevelRules, Iterable[str]], List[Suggestion]]


def _experience_description(text, level, extra_units):
    return (analyze_bullet_point(text, level.power_words.verbs) +
            check_for_metrics(text, extra_units) +
            check_passive_voice(text))


def _personal_summary(text, level, extra_units):
    return analyze_summary(text, level.required_skills.skills)


def _skills(text, level, extra_units):
    return analyze_skills(text, level.required_skills.skills)


def _project_description(text, level, extra_units):
    return analyze_project_description(text)


# (section, field) -> analyzer; ANY_FIELD matches every field of the section
ROUTES: Dict[Tuple[str, str], Analyzer] = {
    ('experience', 'description'): _experience_description,
    ('personal', 'summary'): _personal_summary,
    ('skills', ANY_FIELD): _skills,
    ('projects', 'description'): _project_description,
}


def dedupe(suggestions: List[Suggestion]) -> List[Suggestion]:
    """Drop suggestions whose message was already seen, keeping the first"""
    seen = set()
    unique = []
    for suggestion in suggestions:
        if suggestion.message not in seen:
            seen.add(suggestion.message)
            unique.append(suggestion)
    return unique


def suggest_field(
    text: str,
    field_name: str,
    field_section: str,
    rules: DomainRules,
    level: str = 'midLevel',
    extra_metric_units: Iterable[str] = ()
) -> List[Suggestion]:
    """
    Suggestions for the text of one field

    Args:
        text: Current field value
        field_name: Field within the section (e.g. 'description', 'summary')
        field_section: Resume section (e.g. 'experience', 'personal', 'skills')
        rules: Domain rules
        level: Experience level whose rules apply
        extra_metric_units: Units counted as metrics in addition to the defaults

    Returns:
        De-duplicated suggestions; empty for fields without an analyzer
    """
    analyzer = ROUTES.get((field_section, field_name)) or ROUTES.get((field_section, ANY_FIELD))
    if analyzer is None:
        return []

    suggestions = dedupe(analyzer(text, rules.level(level), extra_metric_units))
    logger.debug(f"{len(suggestions)} suggestions for {field_section}.{field_name}")
    return suggestions


def suggest_global(resume: Resume, rules: DomainRules, level: str = 'midLevel') -> List[Suggestion]:
    """Resume-wide checks: contact, online presence, summary, experience, projects, skill gaps"""
    suggestions = []
    info = resume.personal_info
    level_rules = rules.level(level)

    if not info.email or not info.phone or not info.location:
        suggestions.append(Suggestion(
            type=SuggestionType.WARNING,
            severity=Severity.HIGH,
            message="Incomplete Contact Info",
            suggestion="Add email, phone, and location so recruiters can reach you.",
        ))

    if not info.linkedin and not info.github and not info.portfolio:
        suggestions.append(Suggestion(
            type=SuggestionType.IMPROVEMENT,
            severity=Severity.MEDIUM,
            message="Missing Online Presence",
            suggestion="Add links to LinkedIn, GitHub, or your Portfolio to showcase your work.",
        ))

    if len(info.summary or '') < 50:
        suggestions.append(Suggestion(
            type=SuggestionType.IMPROVEMENT,
            severity=Severity.MEDIUM,
            message="Short Professional Summary",
            suggestion="Write a stronger summary (2-3 sentences) highlighting your key years "
                       "of experience and top skills.",
        ))

    if not resume.experiences:
        suggestions.append(Suggestion(
            type=SuggestionType.WARNING,
            severity=Severity.CRITICAL,
            message="No Experience Listed",
            suggestion="Add at least one internship, job, or freelance role. Experience is crucial.",
        ))
    elif not any(ANY_NUMBER.search(e.description or '') for e in resume.experiences):
        suggestions.append(Suggestion(
            type=SuggestionType.IMPROVEMENT,
            severity=Severity.HIGH,
            message="Missing Quantifiable Results",
            suggestion='Try to add numbers to your experience descriptions '
                       '(e.g., "Increased sales by 20%").',
        ))

    if not resume.projects:
        suggestions.append(Suggestion(
            type=SuggestionType.TIP,
            severity=Severity.MEDIUM,
            message="No Projects Listed",
            suggestion="Adding personal projects demonstrates passion and practical skills, "
                       "especially for technical roles.",
        ))

    suggestions.extend(_skill_gap(resume, level_rules))
    return suggestions


def _skill_gap(resume: Resume, level: ExperienceLevelRules) -> List[Suggestion]:
    """Missing critical skills; nice-to-have skills only once no critical skill is missing"""
    user_skills = [s.lower() for s in declared_skills(resume)]

    def missing(rules):
        return [r.skill for r in rules
                if not any(r.skill.lower() in us for us in user_skills)]

    missing_critical = missing(s for s in level.required_skills.skills if s.priority == 'critical')
    if missing_critical:
        return [Suggestion(
            type=SuggestionType.WARNING,
            severity=Severity.HIGH,
            message="Missing Critical Skills",
            suggestion=f"Your profile is missing core skills for this role: "
                       f"{', '.join(missing_critical[:3])}.",
        )]

    missing_nice = missing(level.nice_to_have_skills.skills)
    if missing_nice:
        return [Suggestion(
            type=SuggestionType.TIP,
            severity=Severity.LOW,
            message="Level Up Your Profile",
            suggestion=f"Consider learning: {', '.join(missing_nice[:2])} to stand out.",
        )]

    return []
