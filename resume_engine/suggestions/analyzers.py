# resume_engine/suggestions/analyzers.py
"""
Field analyzers. Each takes the text of one resume field and returns the
suggestions it triggers; none of them touch the rest of the resume.
"""
import re
from typing import Iterable, List

from resume_engine.rules.models import PowerWord, SkillRule
from resume_engine.suggestions.models import Severity, Suggestion, SuggestionType
from resume_engine.text import FIELD_UNITS, PROJECT_UNITS, build_metric_pattern

WEAK_VERBS = ('responsible', 'worked', 'helped', 'did', 'made', 'involved', 'was')

FALLBACK_VERB = 'Developed'

MIN_BULLET_LENGTH = 20
MAX_BULLET_LENGTH = 200
MIN_SUMMARY_LENGTH = 50
MIN_SKILL_ENTRIES = 5

PASSIVE_PATTERN = re.compile(r"(was|were|being)\s+\w+ed", re.IGNORECASE)
YEARS_PATTERN = re.compile(r"\d+\+?\s*(years?|yrs?)", re.IGNORECASE)
# Capitalised names followed by a comma or the end of text ("React, Node.js")
TECHNOLOGY_PATTERN = re.compile(r"[A-Z]+[\w\s]*(,|$)")

PROJECT_METRIC_PATTERN = build_metric_pattern(PROJECT_UNITS)


def _weak_verb_pattern(verb: str):
    # Whole word at the start, or a space-delimited word further in
    return re.compile(rf"^{verb}\b|(?<= ){verb}(?= )", re.IGNORECASE)


WEAK_VERB_PATTERNS = {verb: _weak_verb_pattern(verb) for verb in WEAK_VERBS}


def _find_weak_verb(text: str):
    for verb, pattern in WEAK_VERB_PATTERNS.items():
        if pattern.search(text):
            return verb
    return None


def _replace_weak_verb(text: str, weak_verb: str, replacement: str) -> str:
    """Swap the first occurrence of the weak verb, keeping its leading case"""
    def swap(match):
        if match.group(0)[0].isupper():
            return replacement[:1].upper() + replacement[1:]
        return replacement[:1].lower() + replacement[1:]

    return WEAK_VERB_PATTERNS[weak_verb].sub(swap, text, count=1)


def strong_verbs(power_words: List[PowerWord], limit: int = 5) -> List[str]:
    return [w.verb for w in power_words if w.is_strong][:limit]


def analyze_bullet_point(text: str, power_words: List[PowerWord]) -> List[Suggestion]:
    """Weak opening verb and bullet length"""
    suggestions = []

    weak_verb = _find_weak_verb(text)
    if weak_verb:
        verbs = strong_verbs(power_words)
        replacement = verbs[0] if verbs else FALLBACK_VERB
        improved = _replace_weak_verb(text, weak_verb, replacement)

        suggestions.append(Suggestion(
            type=SuggestionType.IMPROVEMENT,
            severity=Severity.HIGH,
            message="Weak action verb detected",
            suggestion=f"Start with a stronger action verb like: {', '.join(verbs or [FALLBACK_VERB])}",
            example='Bad: "Responsible for developing websites"\nGood: "Architected responsive websites"',
            apply_suggestion=improved,
        ))

    if len(text) < MIN_BULLET_LENGTH:
        suggestions.append(Suggestion(
            type=SuggestionType.WARNING,
            severity=Severity.MEDIUM,
            message="Bullet point too short",
            suggestion="Add more details about what you accomplished and the impact. "
                       "Aim for at least 15-20 words.",
        ))

    if len(text) > MAX_BULLET_LENGTH:
        suggestions.append(Suggestion(
            type=SuggestionType.TIP,
            severity=Severity.LOW,
            message="Bullet point is quite long",
            suggestion="Consider breaking into 2 shorter bullet points for readability",
        ))

    return suggestions


def check_for_metrics(text: str, extra_units: Iterable[str] = ()) -> List[Suggestion]:
    pattern = build_metric_pattern(FIELD_UNITS, extra_units)
    if pattern.search(text):
        return []

    return [Suggestion(
        type=SuggestionType.IMPROVEMENT,
        severity=Severity.HIGH,
        message="Missing quantifiable metrics",
        suggestion='Add numbers/percentages to show impact. Examples: "increased by X%", '
                   '"saved X hours", "served X users", "improved load time by X seconds"',
        example='Bad: "Improved website performance"\n'
                'Good: "Improved website load time by 40%, reducing bounce rate by 15%"',
    )]


def check_passive_voice(text: str) -> List[Suggestion]:
    if not PASSIVE_PATTERN.search(text):
        return []

    return [Suggestion(
        type=SuggestionType.IMPROVEMENT,
        severity=Severity.MEDIUM,
        message="Passive voice detected",
        suggestion="Use active voice to show what YOU did, not what happened to you",
        example='Bad: "The website was improved by our team"\n'
                'Good: "Led the team in improving the website, increasing user retention by 20%"',
    )]


def analyze_summary(text: str, required_skills: List[SkillRule]) -> List[Suggestion]:
    """Skill mentions, years of experience and length of a professional summary"""
    suggestions = []
    lower_text = text.lower()

    mentioned = sum(1 for s in required_skills if s.skill.lower() in lower_text)
    if mentioned < 2:
        critical = [s.skill for s in required_skills if s.priority == 'critical'][:3]
        suggestions.append(Suggestion(
            type=SuggestionType.IMPROVEMENT,
            severity=Severity.HIGH,
            message="Missing key technical skills",
            suggestion=f"Include at least 2-3 key technical skills in your summary. "
                       f"Critical skills: {', '.join(critical)}",
            example='Example: "Skilled Full-Stack Developer with 5+ years of experience '
                    'in React, Node.js, and MongoDB"',
        ))

    if not YEARS_PATTERN.search(text):
        suggestions.append(Suggestion(
            type=SuggestionType.TIP,
            severity=Severity.LOW,
            message="Consider mentioning years of experience",
            suggestion="Add your years of experience to establish credibility and relevance",
        ))

    if len(text) < MIN_SUMMARY_LENGTH:
        suggestions.append(Suggestion(
            type=SuggestionType.WARNING,
            severity=Severity.MEDIUM,
            message="Summary is too brief",
            suggestion="Expand your summary to 2-4 sentences. Include experience level, "
                       "key skills, and career focus.",
        ))

    return suggestions


def analyze_skills(text: str, required_skills: List[SkillRule]) -> List[Suggestion]:
    """Critical-skill gap and entry count of a comma-separated skills field"""
    suggestions = []
    entries = [s.strip().lower() for s in text.split(',') if s.strip()]

    def present(rule: SkillRule) -> bool:
        names = [rule.skill.lower()] + [alt.lower() for alt in rule.alternatives]
        return any(name in entry for entry in entries for name in names)

    missing = [s.skill for s in required_skills if s.priority == 'critical' and not present(s)]
    if missing:
        suggestions.append(Suggestion(
            type=SuggestionType.WARNING,
            severity=Severity.HIGH,
            message="Missing critical skills",
            suggestion=f"Add these essential skills: {', '.join(missing[:5])}",
        ))

    if len(entries) < MIN_SKILL_ENTRIES:
        suggestions.append(Suggestion(
            type=SuggestionType.TIP,
            severity=Severity.LOW,
            message="Consider adding more skills",
            suggestion="Aim for 8-12 core skills across different categories",
        ))

    return suggestions


def analyze_project_description(text: str) -> List[Suggestion]:
    suggestions = []

    if not PROJECT_METRIC_PATTERN.search(text):
        suggestions.append(Suggestion(
            type=SuggestionType.IMPROVEMENT,
            severity=Severity.MEDIUM,
            message="Add project metrics",
            suggestion="Include usage stats, performance improvements, or user engagement "
                       "numbers if applicable",
            example='Bad: "Built an e-commerce platform"\n'
                    'Good: "Built an e-commerce platform used by 10k+ users with 99.9% uptime"',
        ))

    if not TECHNOLOGY_PATTERN.search(text):
        suggestions.append(Suggestion(
            type=SuggestionType.TIP,
            severity=Severity.LOW,
            message="Mention technologies used",
            suggestion="Specify which technologies, languages, or frameworks you used in this project",
        ))

    return suggestions
