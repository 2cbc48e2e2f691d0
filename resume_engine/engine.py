# resume_engine/engine.py
import logging
from typing import List, Optional

from resume_engine.config import EngineConfig
from resume_engine.errors import EngineNotInitializedError
from resume_engine.models import JobContext, Resume
from resume_engine.rules.loader import RuleLoader
from resume_engine.rules.models import (
    DomainRules, PowerWord, RedFlag, ResumeSection, SkillRule, UnifiedRuleset
)
from resume_engine.rules.ruleset import load_ruleset
from resume_engine.scoring.aggregator import evaluate, get_score_feedback
from resume_engine.scoring.models import ATSScore, ScoreFeedback, VerdictResult
from resume_engine.scoring.verdict import VerdictScore
from resume_engine.scoring.weighted import LegacyWeightedScore
from resume_engine.suggestions.contextual import ContextualAdvisor
from resume_engine.suggestions.generator import suggest_field, suggest_global
from resume_engine.suggestions.models import AIReframe, AISuggestion, Suggestion

logger = logging.getLogger(__name__)


class RuleEngine:
    """
    Entry point for callers: load a domain once, then ask for suggestions and scores

    Example:
        engine = RuleEngine()
        engine.initialize('web-developer')
        suggestions = engine.get_suggestions('my text', 'description', 'experience')
        score = engine.calculate_score(resume)

    Loading errors are raised. Once initialized, scoring and suggestion calls
    never raise: failures are logged and an empty result is returned.
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        loader: Optional[RuleLoader] = None,
        ruleset: Optional[UnifiedRuleset] = None
    ):
        self.config = config or EngineConfig()
        self.loader = loader or RuleLoader(rules_dir=self.config.rules_dir)
        self.ruleset = ruleset

        self.rules: Optional[DomainRules] = None
        self.current_domain: Optional[str] = None

        self.weighted_scorer: Optional[LegacyWeightedScore] = None
        self.verdict_scorer: Optional[VerdictScore] = None
        self.advisor: Optional[ContextualAdvisor] = None

    def initialize(self, domain: str):
        """
        Load the rules of a domain (e.g. 'web-developer', 'data-scientist')

        Raises:
            RuleLoadError: Domain rules or the rule set cannot be loaded
        """
        logger.info(f"Initializing rule engine for domain: {domain}")

        rules = self.loader.load_rules(domain)
        if self.ruleset is None:
            self.ruleset = load_ruleset(self.config.ruleset_path)

        self.weighted_scorer = LegacyWeightedScore(
            experience_level=self.config.experience_level,
            metrics_target=self.config.metrics_target,
            extra_metric_units=self.config.extra_metric_units,
        )
        self.verdict_scorer = VerdictScore(
            self.ruleset,
            weights=self.config.verdict_weights,
            thresholds=self.config.verdict_thresholds,
            penalty_cap=self.config.red_flag_penalty_cap,
            default_jd_score=self.config.default_jd_score,
            max_top_fixes=self.config.max_top_fixes,
        )
        self.advisor = ContextualAdvisor(self.ruleset, self.verdict_scorer)

        self.rules = rules
        self.current_domain = domain
        logger.info(f"Rule engine ready for domain: {domain}")

    def _require_rules(self) -> DomainRules:
        if self.rules is None:
            raise EngineNotInitializedError()
        return self.rules

    # ------------------------------------------------------------------
    # Suggestions
    # ------------------------------------------------------------------

    def get_suggestions(self, field_value: str, field_name: str, field_section: str) -> List[Suggestion]:
        """
        Suggestions for one field, called as the user edits it

        Args:
            field_value: Text the user entered
            field_name: Field name (e.g. 'description')
            field_section: Section (e.g. 'experience')

        Returns:
            List of Suggestion; empty for blank values or on error
        """
        rules = self._require_rules()
        if not isinstance(field_value, str) or not field_value.strip():
            return []

        try:
            suggestions = suggest_field(
                field_value,
                field_name,
                field_section,
                rules,
                level=self.config.experience_level,
                extra_metric_units=self.config.extra_metric_units,
            )
        except Exception as e:
            logger.error(f"Error generating suggestions for {field_section}.{field_name}: {e}")
            return []

        logger.debug(f"Generated {len(suggestions)} suggestions for {field_section}.{field_name}")
        return suggestions

    def get_global_suggestions(self, resume: Resume) -> List[Suggestion]:
        """Resume-wide suggestions, called when the resume structure changes"""
        rules = self._require_rules()
        try:
            suggestions = suggest_global(resume, rules, level=self.config.experience_level)
        except Exception as e:
            logger.error(f"Error generating global suggestions: {e}")
            return []

        logger.debug(f"Generated {len(suggestions)} global suggestions")
        return suggestions

    def generate_ai_suggestions(
        self,
        resume: Resume,
        field: str,
        value: str,
        job_context: Optional[JobContext] = None
    ) -> List[AISuggestion]:
        self._require_rules()
        try:
            return self.advisor.generate_ai_suggestions(resume, field, value, job_context)
        except Exception as e:
            logger.error(f"Error generating suggestions for {field}: {e}")
            return []

    def generate_reframe(self, text: str, job_context: Optional[JobContext] = None) -> AIReframe:
        """Rewritten sentence; the text comes back unchanged if reframing fails"""
        self._require_rules()
        try:
            return self.advisor.generate_reframe(text, job_context)
        except Exception as e:
            logger.error(f"Error reframing text: {e}")
            original = text if isinstance(text, str) else ''
            return AIReframe(original=original, reframed=original, improvements=[])

    def get_contextual_tips(self, resume: Resume, job_context: Optional[JobContext] = None) -> List[str]:
        self._require_rules()
        try:
            return self.advisor.get_contextual_tips(resume, job_context)
        except Exception as e:
            logger.error(f"Error generating contextual tips: {e}")
            return []

    # ------------------------------------------------------------------
    # Scoring
    # ------------------------------------------------------------------

    def calculate_score(self, resume: Resume) -> ATSScore:
        """
        Weighted five-category ATS score

        Returns:
            ATSScore; all zeros if scoring fails
        """
        rules = self._require_rules()
        try:
            score = evaluate(resume, rules, strategy=self.weighted_scorer)
        except Exception as e:
            logger.error(f"Error calculating score: {e}")
            return ATSScore.zero()

        logger.info(f"ATS score for {self.current_domain}: {score.overall_score}/100")
        return score

    def calculate_verdict(self, resume: Resume, job_context: Optional[JobContext] = None) -> VerdictResult:
        """
        ATS / HR / JD composite with red flag penalty and verdict

        Returns:
            VerdictResult; all zeros (verdict fail) if scoring fails
        """
        rules = self._require_rules()
        try:
            return evaluate(resume, rules, job_context, strategy=self.verdict_scorer)
        except Exception as e:
            logger.error(f"Error calculating verdict: {e}")
            return VerdictResult.zero()

    def get_score_feedback(self, score: float) -> ScoreFeedback:
        return get_score_feedback(score)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def get_rules(self) -> DomainRules:
        return self._require_rules()

    def get_domain(self) -> str:
        if self.current_domain is None:
            raise EngineNotInitializedError()
        return self.current_domain

    def is_initialized(self) -> bool:
        return self.rules is not None and self.current_domain is not None

    def get_required_skills(self) -> List[SkillRule]:
        return self._require_rules().level(self.config.experience_level).required_skills.skills

    def get_power_words(self) -> List[PowerWord]:
        return self._require_rules().level(self.config.experience_level).power_words.verbs

    def get_red_flags(self) -> List[RedFlag]:
        return self._require_rules().level(self.config.experience_level).red_flags.flags

    def get_structure_guidelines(self) -> List[ResumeSection]:
        return self._require_rules().level(self.config.experience_level).resume_structure.sections
