# resume_engine/evaluators/jd_match.py
import logging
from typing import List, Optional, Tuple

from resume_engine.evaluators.facts import CheckResult, ResumeFacts, resolve_check
from resume_engine.evaluators.models import RuleEvaluation
from resume_engine.models import JobContext, Resume, RoleDomain
from resume_engine.ontology import find_stack_cluster
from resume_engine.rules.models import JDMatchRuleDef

logger = logging.getLogger(__name__)

JD_CATEGORY = 'jd_match'


def skill_overlap(user_skills: List[str], wanted: List[str]) -> Tuple[List[str], List[str]]:
    """
    Split wanted skills into (matched, missing)

    A wanted skill matches when it contains, or is contained in, any user skill.
    """
    user_lower = [s.lower() for s in user_skills]
    matched, missing = [], []
    for skill in wanted:
        skill_lower = skill.lower()
        if any(us in skill_lower or skill_lower in us for us in user_lower):
            matched.append(skill_lower)
        else:
            missing.append(skill_lower)
    return matched, missing


def _required_overlap(job: JobContext, facts: ResumeFacts) -> CheckResult:
    matched, missing = skill_overlap(facts.skills, job.required_skills)
    ratio = len(matched) / len(job.required_skills) if job.required_skills else 1
    if ratio >= 0.6:
        return True, None
    return False, f"Missing required skills: {', '.join(missing[:5])}"


def _preferred_overlap(job: JobContext, facts: ResumeFacts) -> CheckResult:
    matched, missing = skill_overlap(facts.skills, job.preferred_skills)
    ratio = len(matched) / len(job.preferred_skills) if job.preferred_skills else 0.5
    if ratio >= 0.3:
        return True, None
    return False, f"Consider adding preferred skills: {', '.join(missing[:3])}"


def _stack_cluster(job: JobContext, facts: ResumeFacts) -> CheckResult:
    if find_stack_cluster(facts.skills) is not None:
        return True, None
    return False, "Consider grouping your skills around a known tech stack (MERN, MEAN, etc.)"


def _role_alignment(job: JobContext, facts: ResumeFacts) -> CheckResult:
    return job.domain != RoleDomain.OTHER, None


CHECKS = {
    'JD_01': _required_overlap,
    'JD_02': _preferred_overlap,
    'JD_03': _stack_cluster,
    'JD_05': _role_alignment,
}


def evaluate_jd_match(
    resume: Resume,
    rules: List[JDMatchRuleDef],
    job_context: Optional[JobContext] = None,
    facts: Optional[ResumeFacts] = None
) -> List[RuleEvaluation]:
    """
    Evaluate how well the resume matches a target job

    Returns:
        Empty list without a job context
    """
    if job_context is None:
        return []

    facts = facts or ResumeFacts.collect(resume)
    evaluations = []

    for rule in rules:
        check = resolve_check(rule.id, CHECKS, ())
        passed, override = check(job_context, facts) if check else (True, None)

        evaluations.append(RuleEvaluation(
            rule_id=rule.id,
            passed=passed,
            description=rule.description,
            suggestion=None if passed else (override or rule.suggestion),
            weight=rule.weight,
            category=JD_CATEGORY,
        ))

    logger.debug(f"JD rules: {sum(e.passed for e in evaluations)}/{len(evaluations)} passed")
    return evaluations
