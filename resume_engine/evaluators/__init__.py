# resume_engine/evaluators/__init__.py
"""
ATS, HR, red flag and job-description rule evaluators
"""

from resume_engine.evaluators.models import RuleEvaluation
from resume_engine.evaluators.facts import ResumeFacts
from resume_engine.evaluators.ats import evaluate_ats_rules
from resume_engine.evaluators.hr import evaluate_hr_rules
from resume_engine.evaluators.red_flags import evaluate_red_flags
from resume_engine.evaluators.jd_match import evaluate_jd_match, skill_overlap

__all__ = [
    'RuleEvaluation',
    'ResumeFacts',
    'evaluate_ats_rules',
    'evaluate_hr_rules',
    'evaluate_red_flags',
    'evaluate_jd_match',
    'skill_overlap',
]
