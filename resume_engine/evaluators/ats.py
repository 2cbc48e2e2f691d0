# resume_engine/evaluators/ats.py
import logging
import re
from typing import List, Optional

from resume_engine.evaluators.facts import CheckResult, ResumeFacts, resolve_check
from resume_engine.evaluators.models import RuleEvaluation
from resume_engine.models import Resume
from resume_engine.rules.models import ATSRuleDef

logger = logging.getLogger(__name__)

ROLE_TITLE_WORDS = ('developer', 'engineer', 'designer', 'architect', 'lead', 'manager')


def _core_sections(resume: Resume, rule: ATSRuleDef, facts: ResumeFacts) -> CheckResult:
    info = resume.personal_info
    has_contact = bool(info.email and info.phone)
    has_work = bool(resume.experiences or resume.projects)
    return has_contact and bool(facts.skills) and has_work and bool(resume.education), None


def _email_format(resume: Resume, rule: ATSRuleDef, facts: ResumeFacts) -> CheckResult:
    if not rule.regex:
        return True, None
    return re.fullmatch(rule.regex, resume.personal_info.email or '', re.IGNORECASE) is not None, None


def _contact_complete(resume: Resume, rule: ATSRuleDef, facts: ResumeFacts) -> CheckResult:
    info = resume.personal_info
    return bool(info.email and info.phone and info.location), None


def _skill_count(resume: Resume, rule: ATSRuleDef, facts: ResumeFacts) -> CheckResult:
    count = len(facts.skills)
    min_skills = rule.min_skills or 0
    max_skills = rule.max_skills or 100

    if count < min_skills:
        return False, f"Add more relevant skills (currently {count}, recommended {min_skills}-{max_skills})"
    if count > max_skills:
        return False, f"Consider reducing skills list (currently {count}, recommended max {max_skills})"
    return True, None


def _keyword_rule(resume: Resume, rule: ATSRuleDef, facts: ResumeFacts) -> CheckResult:
    if rule.id == 'ATS-KW-001':
        return len(facts.skills) >= 5, None
    if rule.id == 'ATS-KW-002':
        summary = (resume.personal_info.summary or '').lower()
        return any(word in summary for word in ROLE_TITLE_WORDS), None
    if rule.id == 'ATS-KW-004':
        return len(facts.skills) > 0, None
    # ATS-KW-003 and other keyword advice cannot be checked automatically
    return True, None


def _content_rule(resume: Resume, rule: ATSRuleDef, facts: ResumeFacts) -> CheckResult:
    if rule.id == 'ATS-CNT-001':
        return len(facts.skills) >= 5, None
    if rule.id == 'ATS-CNT-002':
        info = resume.personal_info
        return bool(info.email and info.phone), None
    if rule.id == 'ATS-CNT-004':
        return 20 <= facts.summary_words <= 100, None
    return True, None


def _advisory(resume: Resume, rule: ATSRuleDef, facts: ResumeFacts) -> CheckResult:
    return True, None


CHECKS = {
    'ATS_01': _core_sections,
    'ATS_02': _email_format,
    'ATS_03': _contact_complete,
    'ATS_05': _skill_count,
}

PREFIX_CHECKS = (
    ('ATS-KW', _keyword_rule),
    ('ATS-FMT', _advisory),
    ('ATS-CNT', _content_rule),
    ('ATS-OPT', _advisory),
)


def evaluate_ats_rules(
    resume: Resume,
    rules: List[ATSRuleDef],
    facts: Optional[ResumeFacts] = None
) -> List[RuleEvaluation]:
    """
    Evaluate ATS parseability rules

    Args:
        resume: Resume to check
        rules: ATS rules of the unified rule set
        facts: Precomputed resume facts (collected when omitted)

    Returns:
        One RuleEvaluation per rule, weighted by the rule weight
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
            weight=rule.weight,
            category=rule.category,
        ))

    logger.debug(f"ATS rules: {sum(e.passed for e in evaluations)}/{len(evaluations)} passed")
    return evaluations
