# resume_engine/scoring/weighted.py
import logging
import math
from typing import Iterable, List, Optional

from resume_engine.models import JobContext, Resume
from resume_engine.rules.models import DomainRules, SkillRule
from resume_engine.scoring.models import ATSScore, CategoryScore
from resume_engine.text import (
    SCORING_UNITS, build_metric_pattern, count_pattern, declared_skills,
    extract_all_text, round_half_up
)

logger = logging.getLogger(__name__)


class LegacyWeightedScore:
    """
    Five-category ATS score weighted by the domain's overallScoringWeights

    Categories: keyword match, format compliance, metrics present, power word
    usage and skill relevance, each 0-100. The overall score is the rounded
    weighted sum (weights are not re-normalized), clamped to 0-100.
    """

    name = 'legacy'

    # Format compliance penalties
    PENALTIES = {
        'missing_contact': 10,
        'no_experience': 20,
        'no_education': 15,
        'no_skills': 15,
        'thin_experience_description': 10,
    }

    MIN_DESCRIPTION_LENGTH = 10

    def __init__(
        self,
        experience_level: str = 'midLevel',
        metrics_target: int = 5,
        extra_metric_units: Iterable[str] = ()
    ):
        self.experience_level = experience_level
        self.metrics_target = metrics_target
        self.metric_pattern = build_metric_pattern(SCORING_UNITS, extra_metric_units)

    def score(
        self,
        resume: Resume,
        rules: DomainRules,
        job_context: Optional[JobContext] = None
    ) -> ATSScore:
        """
        Score a resume against a domain rule bundle

        Args:
            resume: Resume to score
            rules: Domain rules (weights and the configured level's skills/power words)
            job_context: Unused by this strategy

        Returns:
            ATSScore
        """
        level = rules.level(self.experience_level)
        weights = rules.overall_scoring_weights
        required = level.required_skills.skills

        keyword = self.keyword_match(resume, required)
        format_score = self.format_compliance(resume)
        metrics = self.metrics_present(resume)
        power = self.power_words_usage(resume, [v.verb for v in level.power_words.verbs])
        relevance = self.skill_relevance(resume, required)

        logger.debug(
            f"Category scores: keyword={keyword} format={format_score} metrics={metrics} "
            f"power_words={power} skill_relevance={relevance}"
        )

        overall = 0
        if weights.scoring_total() > 0:
            weighted = (keyword * weights.keyword_match +
                        format_score * weights.format_compliance +
                        metrics * weights.metrics_present +
                        power * weights.power_words +
                        relevance * weights.skill_relevance)
            if not math.isnan(weighted):
                overall = min(100, max(0, round_half_up(weighted)))

        result = ATSScore(
            overall_score=overall,
            keyword_match=keyword,
            format_compliance=format_score,
            metrics_present=metrics,
            power_words=power,
            skill_relevance=relevance,
            breakdown=[
                CategoryScore('Keyword Match', keyword, weights.keyword_match),
                CategoryScore('Format Compliance', format_score, weights.format_compliance),
                CategoryScore('Metrics Present', metrics, weights.metrics_present),
                CategoryScore('Power Words', power, weights.power_words),
                CategoryScore('Skill Relevance', relevance, weights.skill_relevance),
            ],
        )

        logger.info(f"ATS score for {rules.domain or 'domain'}: {result.overall_score}/100")
        return result

    def keyword_match(self, resume: Resume, required: List[SkillRule]) -> int:
        """Share of required skill names found anywhere in the resume"""
        if not required:
            return 100

        corpus = extract_all_text(resume)
        matched = sum(1 for skill in required if skill.skill.lower() in corpus)
        return round_half_up(matched / len(required) * 100)

    def format_compliance(self, resume: Resume) -> int:
        """100 minus penalties for missing contact details and sections"""
        info = resume.personal_info
        penalties = {
            'missing_contact': not info.email or not info.phone,
            'no_experience': not resume.experiences,
            'no_education': not resume.education,
            'no_skills': not resume.skills,
            'thin_experience_description': any(
                len(e.description or '') < self.MIN_DESCRIPTION_LENGTH for e in resume.experiences
            ),
        }

        total = sum(self.PENALTIES[name] for name, applies in penalties.items() if applies)
        return max(0, 100 - total)

    def metrics_present(self, resume: Resume) -> int:
        """Quantified results in experience and project descriptions, against a target count"""
        text = ' '.join(
            [e.description for e in resume.experiences] +
            [p.description for p in resume.projects]
        )
        found = count_pattern(self.metric_pattern, text)
        if self.metrics_target <= 0:
            return 100
        return round_half_up(min(100, found / self.metrics_target * 100))

    def power_words_usage(self, resume: Resume, verbs: List[str]) -> int:
        if not verbs:
            return 100

        corpus = extract_all_text(resume)
        found = sum(1 for verb in verbs if verb.lower() in corpus)
        return round_half_up(found / len(verbs) * 100)

    def skill_relevance(self, resume: Resume, required: List[SkillRule]) -> int:
        """
        Declared skills against required skills, critical skills weighted 60%

        A required skill is covered when its name and a declared skill contain
        one another, or (for the overall share only) an alternative appears in a
        declared skill.
        """
        if not required:
            return 100

        user_skills = [s.lower() for s in declared_skills(resume)]

        def names_overlap(rule: SkillRule) -> bool:
            name = rule.skill.lower()
            return any(us in name or name in us for us in user_skills)

        def covered(rule: SkillRule) -> bool:
            if names_overlap(rule):
                return True
            return any(alt.lower() in us for alt in rule.alternatives for us in user_skills)

        critical = [s for s in required if s.priority == 'critical']
        critical_pct = (sum(1 for s in critical if names_overlap(s)) / len(critical) * 100
                        if critical else 100)
        overall_pct = sum(1 for s in required if covered(s)) / len(required) * 100

        return round_half_up(critical_pct * 0.6 + overall_pct * 0.4)
