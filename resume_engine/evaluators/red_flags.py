# resume_engine/evaluators/red_flags.py
import logging
from typing import List, Optional

from resume_engine.evaluators.facts import CheckResult, ResumeFacts, resolve_check
from resume_engine.evaluators.models import RuleEvaluation
from resume_engine.models import Resume
from resume_engine.rules.models import RedFlagRuleDef

logger = logging.getLogger(__name__)

RED_FLAG_CATEGORY = 'red_flag'

MAX_SKILLS = 30

GENERIC_BUZZWORDS = ('hard worker', 'team player', 'detail-oriented', 'self-starter')

OUTDATED_SKILLS = ('jquery', 'angularjs', 'flash', 'silverlight', 'bower')


# Every check returns passed=True when the flag is NOT raised

def _unprofessional_email(resume: Resume, rule: RedFlagRuleDef, facts: ResumeFacts) -> CheckResult:
    return not any(p.lower() in facts.email for p in rule.patterns), None


def _skill_stuffing(resume: Resume, rule: RedFlagRuleDef, facts: ResumeFacts) -> CheckResult:
    count = len(facts.skills)
    if count <= MAX_SKILLS:
        return True, None
    return False, f"Too many skills listed ({count}). Focus on your top 15-20 most relevant skills"


def _no_metrics(resume: Resume, rule: RedFlagRuleDef, facts: ResumeFacts) -> CheckResult:
    return facts.metrics_count >= 2, None


def _pronouns(resume: Resume, rule: RedFlagRuleDef, facts: ResumeFacts) -> CheckResult:
    count = facts.pronoun_count
    limit = rule.max_occurrences if rule.max_occurrences is not None else 3
    if count <= limit:
        return True, None
    return False, f"Found {count} first-person pronouns. Remove them for professional tone"


def _generic_duties(resume: Resume, rule: RedFlagRuleDef, facts: ResumeFacts) -> CheckResult:
    verbs = facts.verbs
    weak_share = verbs['weak'] / (verbs['weak'] + verbs['moderate'] + verbs['strong'] + 1)
    return weak_share < 0.5, None


def _hr_red_flag(resume: Resume, rule: RedFlagRuleDef, facts: ResumeFacts) -> CheckResult:
    text = facts.text_lower

    if rule.id == 'HR-RED-001':
        return 'objective:' not in text and 'career objective' not in text, None
    if rule.id == 'HR-RED-002':
        return sum(1 for b in GENERIC_BUZZWORDS if b in text) < 2, None
    if rule.id == 'HR-RED-004':
        return facts.metrics_count >= 2, None
    if rule.id == 'HR-RED-006':
        return not any(s.lower() in OUTDATED_SKILLS for s in facts.skills), None
    if rule.id == 'HR-RED-009':
        return facts.pronoun_count <= 3, None
    if rule.id == 'HR-RED-010':
        return facts.skills_demonstrated(), None
    # Personal info, formatting, job hopping and progression need data the resume does not carry
    return True, None


CHECKS = {
    'RF_01': _unprofessional_email,
    'RF_02': _skill_stuffing,
    'RF_03': _no_metrics,
    'RF_04': _pronouns,
    'RF_05': _generic_duties,
}

PREFIX_CHECKS = (
    ('HR-RED', _hr_red_flag),
)


def evaluate_red_flags(
    resume: Resume,
    rules: List[RedFlagRuleDef],
    facts: Optional[ResumeFacts] = None
) -> List[RuleEvaluation]:
    """
    Evaluate recruiter red flags

    Returns:
        One RuleEvaluation per flag; passed means the flag was not raised and
        the weight is the flag's negative penalty
    """
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
            weight=rule.penalty,
            category=RED_FLAG_CATEGORY,
        ))

    raised = [e.rule_id for e in evaluations if not e.passed]
    if raised:
        logger.debug(f"Red flags raised: {', '.join(raised)}")
    return evaluations
