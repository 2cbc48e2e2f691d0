# resume_engine/scoring/__init__.py
"""
Resume scoring strategies
"""

from resume_engine.scoring.models import (
    ATSScore, CategoryScore, Verdict, VerdictResult, ScoreFeedback
)
from resume_engine.scoring.weighted import LegacyWeightedScore
from resume_engine.scoring.verdict import VerdictScore, category_score
from resume_engine.scoring.aggregator import evaluate, get_score_feedback

__all__ = [
    'ATSScore',
    'CategoryScore',
    'Verdict',
    'VerdictResult',
    'ScoreFeedback',
    'LegacyWeightedScore',
    'VerdictScore',
    'category_score',
    'evaluate',
    'get_score_feedback',
]
