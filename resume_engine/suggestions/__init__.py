# resume_engine/suggestions/__init__.py
"""
Field, resume-wide and evaluation-driven suggestions
"""

from resume_engine.suggestions.models import (
    Suggestion, SuggestionType, Severity, AISuggestion, AIReframe
)
from resume_engine.suggestions.generator import suggest_field, suggest_global, dedupe
from resume_engine.suggestions.contextual import ContextualAdvisor, resolve_role

__all__ = [
    'Suggestion',
    'SuggestionType',
    'Severity',
    'AISuggestion',
    'AIReframe',
    'suggest_field',
    'suggest_global',
    'dedupe',
    'ContextualAdvisor',
    'resolve_role',
]
