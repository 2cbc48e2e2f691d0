# resume_engine/scoring/verdict.py
import logging
from typing import Dict, List, Optional

from resume_engine.evaluators import (
    RuleEvaluation, ResumeFacts,
    evaluate_ats_rules, evaluate_hr_rules, evaluate_red_flags, evaluate_jd_match
)
from resume_engine.models import JobContext, Resume
from resume_engine.rules.models import DomainRules, UnifiedRuleset
from resume_engine.scoring.models import Verdict, VerdictResult
from resume_engine.text import round_half_up

logger = logging.getLogger(__name__)


def category_score(evaluations: List[RuleEvaluation]) -> int:
    """Passed weight over total weight as 0-100; 100 when there is nothing to judge"""
    total = sum(e.weight for e in evaluations)
    if total <= 0:
        return 100
    passed = sum(e.weight for e in evaluations if e.passed)
    return round_half_up(passed / total * 100)


class VerdictScore:
    """
    ATS / HR / JD composite with a capped red flag penalty and a verdict

    final = round(ats * w_ats + hr * w_hr + jd * w_jd) - min(penalty, cap), clamped to 0-100
    """

    name = 'verdict'

    def __init__(
        self,
        ruleset: UnifiedRuleset,
        weights: Optional[Dict[str, float]] = None,
        thresholds: Optional[Dict[str, float]] = None,
        penalty_cap: float = 20,
        default_jd_score: float = 70,
        max_top_fixes: int = 5
    ):
        self.ruleset = ruleset
        self.weights = weights or ruleset.scoring_formula.weights
        self.thresholds = thresholds or ruleset.scoring_formula.verdict_thresholds
        self.penalty_cap = penalty_cap
        self.default_jd_score = default_jd_score
        self.max_top_fixes = max_top_fixes

    def score(
        self,
        resume: Resume,
        rules: Optional[DomainRules] = None,
        job_context: Optional[JobContext] = None
    ) -> VerdictResult:
        """
        Evaluate every rule family and combine the results

        Args:
            resume: Resume to score
            rules: Unused; the unified rule set drives this strategy
            job_context: Target job; without it the JD score is the configured default

        Returns:
            VerdictResult
        """
        facts = ResumeFacts.collect(resume)
        ats_evals = evaluate_ats_rules(resume, self.ruleset.ats_rules, facts)
        hr_evals = evaluate_hr_rules(resume, self.ruleset.hr_rules, facts)
        flag_evals = evaluate_red_flags(resume, self.ruleset.red_flags, facts)
        jd_evals = evaluate_jd_match(resume, self.ruleset.jd_rules, job_context, facts)

        ats = category_score(ats_evals)
        hr = category_score(hr_evals)
        jd = category_score(jd_evals) if jd_evals else round_half_up(self.default_jd_score)

        penalty = sum(abs(e.weight) for e in flag_evals if not e.passed)

        weighted = (ats * self.weights.get('ats', 0) +
                    hr * self.weights.get('hr', 0) +
                    jd * self.weights.get('jd', 0))
        final = round_half_up(weighted) - min(penalty, self.penalty_cap)
        final = int(max(0, min(100, final)))

        evaluations = ats_evals + hr_evals + flag_evals + jd_evals
        result = VerdictResult(
            ats=ats,
            hr=hr,
            jd=jd,
            red_flag_penalty=penalty,
            final=final,
            verdict=self.verdict_for(final),
            evaluations=evaluations,
            top_fixes=self.top_fixes(evaluations),
        )

        logger.info(
            f"Verdict: {result.verdict.value} (final {final}; ats {ats}, hr {hr}, jd {jd}, "
            f"penalty {penalty})"
        )
        return result

    def verdict_for(self, final: float) -> Verdict:
        if final >= self.thresholds.get('pass', 75):
            return Verdict.PASS
        if final >= self.thresholds.get('borderline', 55):
            return Verdict.BORDERLINE
        return Verdict.FAIL

    def top_fixes(self, evaluations: List[RuleEvaluation]) -> List[str]:
        """Suggestions of failed rules, heaviest first"""
        failed = [e for e in evaluations if not e.passed and e.suggestion]
        failed.sort(key=lambda e: abs(e.weight), reverse=True)
        return [e.suggestion for e in failed[:self.max_top_fixes]]
