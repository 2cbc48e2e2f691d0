# resume_engine/text.py
"""
Text extraction helpers shared by the evaluators, scorers and suggestion analyzers.

Matching across the engine is substring based on purpose: the corpus is lowercased and
whitespace-joined but punctuation is kept, so "java" also matches inside "javascript".
"""
import math
import re
from typing import Iterable, List, Pattern, Sequence

from nltk.tokenize import WhitespaceTokenizer

from resume_engine.models import Resume

# Units recognised after a number ("40 users", "3 hours")
SCORING_UNITS = (
    'hour', 'second', 'minute', 'day', 'week', 'month', 'year',
    'user', 'customer', 'project', 'ticket', 'request', 'visit', 'download',
)

FIELD_UNITS = SCORING_UNITS + ('transaction', 'click', 'review')

PROJECT_UNITS = ('user', 'visit', 'download', 'star', 'like', 'view')

_tokenizer = WhitespaceTokenizer()


def build_metric_pattern(units: Sequence[str], extra_units: Iterable[str] = ()) -> Pattern:
    """
    Compile the metric regex for a unit vocabulary

    Args:
        units: Singular unit names; each also matches its plural with a trailing 's'
        extra_units: Caller supplied units appended to the vocabulary

    Returns:
        Case-insensitive pattern matching percentages or "<number> <unit>"
    """
    vocabulary = []
    for unit in list(units) + list(extra_units):
        unit = unit.strip().lower()
        if unit.endswith('s'):
            unit = unit[:-1]
        if unit and unit not in vocabulary:
            vocabulary.append(unit)

    alternatives = '|'.join(f"{re.escape(u)}s?" for u in vocabulary)
    return re.compile(rf"(\d+%|\d+\s*(?:{alternatives}))", re.IGNORECASE)


def count_pattern(pattern: Pattern, text: str) -> int:
    return sum(1 for _ in pattern.finditer(text or ''))


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive scores (Python's round() is banker's rounding)"""
    return int(math.floor(value + 0.5))


def word_count(text: str) -> int:
    """Number of whitespace separated tokens"""
    return len(_tokenizer.tokenize(text or ''))


def split_skill_entries(entries: Iterable[str]) -> List[str]:
    """Split "React, Node.js" style entries into individual skills"""
    skills = []
    for entry in entries:
        for part in (entry or '').split(','):
            part = part.strip()
            if part:
                skills.append(part)
    return skills


def unique(items: Iterable[str]) -> List[str]:
    seen = set()
    result = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def declared_skills(resume: Resume) -> List[str]:
    """Skills listed in the skills section only"""
    return split_skill_entries(skill for group in resume.skills for skill in group.skills)


def extract_all_skills(resume: Resume) -> List[str]:
    """Skills from the skills section plus project technologies, de-duplicated in order"""
    skills = declared_skills(resume)
    for project in resume.projects:
        skills.extend(split_skill_entries(project.technologies))
    return unique(skills)


def extract_all_text(resume: Resume) -> str:
    """
    Flatten the resume into one lowercase corpus

    Includes name, summary, experience company/position/description, project
    name/description, every skill and education institution/degree/field.
    """
    info = resume.personal_info
    parts = [info.full_name, info.summary]
    parts.extend(f"{e.company} {e.position} {e.description}" for e in resume.experiences)
    parts.extend(f"{p.name} {p.description}" for p in resume.projects)
    parts.extend(skill for group in resume.skills for skill in group.skills)
    parts.extend(f"{e.institution} {e.degree} {e.field_of_study}" for e in resume.education)

    return ' '.join(part for part in parts if part).lower()


def get_resume_text(resume: Resume) -> str:
    """Narrative text (summary, experience and project write-ups) in original case"""
    parts = [resume.personal_info.summary]
    for exp in resume.experiences:
        parts.append(exp.description)
        parts.append(' '.join(exp.achievements))
    for project in resume.projects:
        parts.append(project.description)
        parts.append(' '.join(project.highlights))

    return ' '.join(parts)
