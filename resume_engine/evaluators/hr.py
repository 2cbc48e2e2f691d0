# resume_engine/evaluators/hr.py
import logging
from typing import List, Optional

from resume_engine.evaluators.facts import CheckResult, ResumeFacts, resolve_check
from resume_engine.evaluators.models import RuleEvaluation
from resume_engine.models import Resume
from resume_engine.ontology import has_github_or_portfolio
from resume_engine.rules.models import HRRuleDef

logger = logging.getLogger(__name__)

UNPROFESSIONAL_EMAIL_WORDS = ('dragon', 'coolboy', 'ninja', 'gamer', '420', '69', 'xxx')

COLLABORATION_WORDS = ('collaborated', 'partnered', 'coordinated', 'team', 'cross-functional')


def _quantified_impact(resume: Resume, rule: HRRuleDef, facts: ResumeFacts) -> CheckResult:
    if facts.metrics_count >= 2:
        return True, None
    return False, (f'Add quantified achievements (e.g., "Improved performance by 40%"). '
                   f'Currently found: {facts.metrics_count} metrics')


def _action_verbs(resume: Resume, rule: HRRuleDef, facts: ResumeFacts) -> CheckResult:
    verbs = facts.verbs
    if verbs['ratio'] >= 0.2 or verbs['strong'] >= 2:
        return True, None
    return False, (f"Use stronger action verbs. Found {verbs['strong']} strong verbs "
                   f"vs {verbs['weak']} weak ones")


def _portfolio(resume: Resume, rule: HRRuleDef, facts: ResumeFacts) -> CheckResult:
    return has_github_or_portfolio(resume), None


def _has_projects(resume: Resume, rule: HRRuleDef, facts: ResumeFacts) -> CheckResult:
    return bool(resume.projects), None


def _skill_credibility(resume: Resume, rule: HRRuleDef, facts: ResumeFacts) -> CheckResult:
    return facts.skills_demonstrated(), None


def _summary_length(resume: Resume, rule: HRRuleDef, facts: ResumeFacts) -> CheckResult:
    words = facts.summary_words
    min_words = rule.min_words or 0
    max_words = rule.max_words or 200

    if words < min_words:
        return False, (f"Add a professional summary ({min_words}-{max_words} words). "
                       f"Currently: {words} words")
    if words > max_words:
        return False, f"Shorten your summary (max {max_words} words). Currently: {words} words"
    return True, None


def _metrics_family(resume: Resume, rule: HRRuleDef, facts: ResumeFacts) -> CheckResult:
    return facts.metrics_count >= 2, None


def _professionalism(resume: Resume, rule: HRRuleDef, facts: ResumeFacts) -> CheckResult:
    if rule.id == 'HR-PROF-001':
        return bool(resume.personal_info.linkedin), None
    if rule.id == 'HR-PROF-002':
        return not any(word in facts.email for word in UNPROFESSIONAL_EMAIL_WORDS), None
    # HR-PROF-003 (writing quality) cannot be checked automatically
    return True, None


def _experience(resume: Resume, rule: HRRuleDef, facts: ResumeFacts) -> CheckResult:
    if rule.id == 'HR-EXP-001':
        return bool(resume.experiences), None
    if rule.id == 'HR-EXP-003':
        return bool(resume.experiences or resume.projects), None
    return True, None


def _soft_skills(resume: Resume, rule: HRRuleDef, facts: ResumeFacts) -> CheckResult:
    return any(word in facts.text_lower for word in COLLABORATION_WORDS), None


CHECKS = {
    'HR_01': _quantified_impact,
    'HR_02': _action_verbs,
    'HR_03': _portfolio,
    'HR_04': _skill_credibility,
    'HR_06': _summary_length,
    'HR-IMP-002': _action_verbs,
    'HR-PORT-002': _has_projects,
}

PREFIX_CHECKS = (
    ('HR-IMP', _metrics_family),
    ('HR-PORT', _portfolio),
    ('HR-PROF', _professionalism),
    ('HR-EXP', _experience),
    ('HR-SOFT', _soft_skills),
)


def evaluate_hr_rules(
    resume: Resume,
    rules: List[HRRuleDef],
    facts: Optional[ResumeFacts] = None
) -> List[RuleEvaluation]:
    """Evaluate recruiter-appeal rules against the narrative text of the resume"""
    facts = facts or ResumeFacts.collect(resume)
    evaluations = []

    for rule in rules:
        check = resolve_check(rule.id, CHECKS, PREFIX_CHECKS)
        passed, override = check(resume, rule, facts) if check else (True, None)

        evaluations.append(RuleEvaluation(
            rule_id=rule.id,
            passed=passed,
            description=rule.description,
            suggestion=None if passed else (override or rule.suggestion),
            weight=rule.weight,
            category=rule.category,
        ))

    logger.debug(f"HR rules: {sum(e.passed for e in evaluations)}/{len(evaluations)} passed")
    return evaluations
