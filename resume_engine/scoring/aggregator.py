# resume_engine/scoring/aggregator.py
import logging
from typing import Optional, Union

from resume_engine.models import JobContext, Resume
from resume_engine.rules.models import DomainRules
from resume_engine.scoring.models import ATSScore, ScoreFeedback, VerdictResult
from resume_engine.scoring.verdict import VerdictScore
from resume_engine.scoring.weighted import LegacyWeightedScore

logger = logging.getLogger(__name__)

ScoringStrategy = Union[LegacyWeightedScore, VerdictScore]

# (minimum score, level, message, color), highest band first
FEEDBACK_BANDS = (
    (85, 'excellent', 'Excellent! Your resume is highly optimized for ATS', 'green'),
    (70, 'good', 'Good! Your resume is ATS-friendly, but can be improved', 'blue'),
    (50, 'fair', 'Fair. Follow the suggestions to improve ATS compatibility', 'yellow'),
)


def evaluate(
    resume: Resume,
    domain_rules: DomainRules,
    job_context: Optional[JobContext] = None,
    strategy: Optional[ScoringStrategy] = None
) -> Union[ATSScore, VerdictResult]:
    """
    Score a resume with the given strategy

    Args:
        resume: Resume to score
        domain_rules: Loaded domain rule bundle
        job_context: Target job, used by strategies that match against one
        strategy: LegacyWeightedScore (default) or VerdictScore

    Returns:
        The strategy's result type
    """
    strategy = strategy or LegacyWeightedScore()
    logger.debug(f"Scoring with {strategy.name} strategy")
    return strategy.score(resume, domain_rules, job_context)


def get_score_feedback(score: float) -> ScoreFeedback:
    """Feedback band for an overall score"""
    for minimum, level, message, color in FEEDBACK_BANDS:
        if score >= minimum:
            return ScoreFeedback(level=level, message=message, color=color)
    return ScoreFeedback(
        level='needs_improvement',
        message='Needs improvement. Check the suggestions panel for help',
        color='red',
    )
