# resume_engine/suggestions/contextual.py
import logging
import re
from typing import List, Optional

from resume_engine.models import JobContext, Resume, RoleDomain
from resume_engine.ontology import (
    ACTION_VERB_STRENGTH, ROLES, SKILL_TAXONOMY,
    analyze_verb_strength, count_metrics, detect_role_from_title
)
from resume_engine.rules.models import UnifiedRuleset
from resume_engine.scoring.verdict import VerdictScore
from resume_engine.suggestions.models import AIReframe, AISuggestion

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 5
MAX_TIPS = 5

# Rule categories worth surfacing while a given field is edited
FIELD_CATEGORIES = {
    'summary': ('impact', 'language', 'structure'),
    'description': ('impact', 'language'),
    'skills': ('keywords',),
    'email': ('contact',),
}

IMPACT_KEYWORDS = ['40%', '2x faster', '$100K saved', '5 team members']

REFRAME_PRONOUNS = re.compile(r"\b(I |I'm |I've |my |me )", re.IGNORECASE)

WEAK_TO_STRONG = {
    'was responsible for': 'Led',
    'helped with': 'Contributed to',
    'worked on': 'Developed',
    'involved in': 'Participated in delivering',
    'participated in': 'Contributed to',
}


def resolve_role(job_context: Optional[JobContext]) -> RoleDomain:
    """Role of the job context, detected from its position when the domain is unset"""
    if job_context is None:
        return RoleDomain.OTHER
    if job_context.domain != RoleDomain.OTHER:
        return job_context.domain
    return detect_role_from_title(job_context.position)


def keywords_for_category(category: str, role: RoleDomain) -> List[str]:
    if category == 'keywords':
        return SKILL_TAXONOMY['core_languages'][:5]
    if category == 'impact':
        return list(IMPACT_KEYWORDS)
    if category == 'language':
        return ACTION_VERB_STRENGTH['strong'][:5]
    role_data = ROLES.get(role.value)
    return role_data['primary_skills'][:5] if role_data else []


class ContextualAdvisor:
    """
    Evaluation-driven advice: field suggestions from failed rules, template
    reframing of a sentence and tips based on the current verdict scores
    """

    def __init__(self, ruleset: UnifiedRuleset, scorer: Optional[VerdictScore] = None):
        self.ruleset = ruleset
        self.scorer = scorer or VerdictScore(ruleset)

    def role_tips(self, role: RoleDomain) -> List[str]:
        return list(self.ruleset.role_specific_tips.get(role.value) or [])

    def generate_ai_suggestions(
        self,
        resume: Resume,
        field: str,
        value: str,
        job_context: Optional[JobContext] = None
    ) -> List[AISuggestion]:
        """
        Up to five suggestions for the field being edited

        Args:
            resume: Whole resume, evaluated to find failing rules
            field: Field name ('summary', 'description', 'skills', 'email', ...)
            value: Current value of the field
            job_context: Target job

        Returns:
            List of AISuggestion
        """
        role = resolve_role(job_context)
        result = self.scorer.score(resume, job_context=job_context)
        relevant = FIELD_CATEGORIES.get(field, ())
        suggestions = []

        for evaluation in result.evaluations:
            if evaluation.passed or not evaluation.suggestion:
                continue
            if evaluation.category not in relevant:
                continue
            suggestions.append(AISuggestion(
                field=field,
                original=value,
                suggestion=evaluation.suggestion,
                reason=f"Rule {evaluation.rule_id}: {evaluation.description}",
                keywords=keywords_for_category(evaluation.category, role),
            ))

        if role != RoleDomain.OTHER and len(suggestions) < 3:
            tips = self.role_tips(role)
            if tips:
                suggestions.append(AISuggestion(
                    field=field,
                    original=value,
                    suggestion=tips[0],
                    reason=f"Tip for {role.value} roles",
                ))

        if len(value) > 10:
            verbs = analyze_verb_strength(value)
            if verbs['weak'] > verbs['strong']:
                suggestions.append(AISuggestion(
                    field=field,
                    original=value,
                    suggestion='Replace weak phrases like "was responsible for" with action verbs '
                               'like "led", "developed", "optimized"',
                    reason="Strong action verbs increase impact",
                    keywords=['led', 'developed', 'optimized', 'architected', 'spearheaded'],
                ))

            if count_metrics(value) < 1 and field in ('description', 'summary'):
                suggestions.append(AISuggestion(
                    field=field,
                    original=value,
                    suggestion='Add quantified achievements (e.g., "reduced load time by 40%", '
                               '"managed team of 5")',
                    reason="Metrics make achievements concrete and memorable",
                    keywords=['40%', '5 team members', '$100K', '10x improvement'],
                ))

        return suggestions[:MAX_SUGGESTIONS]

    def generate_reframe(self, text: str, job_context: Optional[JobContext] = None) -> AIReframe:
        """Rewrite text by template: drop pronouns, swap weak phrases, capitalise"""
        improvements = []
        reframed = text

        if REFRAME_PRONOUNS.search(reframed):
            reframed = REFRAME_PRONOUNS.sub('', reframed)
            improvements.append("Removed first-person pronouns")

        for weak, strong in WEAK_TO_STRONG.items():
            if weak in reframed.lower():
                reframed = re.sub(re.escape(weak), strong, reframed, flags=re.IGNORECASE)
                improvements.append(f'Replaced "{weak}" with "{strong}"')

        role = resolve_role(job_context)
        role_data = ROLES.get(role.value)
        if role_data:
            lower_text = reframed.lower()
            missing = [c for c in role_data['concepts'] if c.lower() not in lower_text]
            if missing:
                improvements.append(f"Consider mentioning: {', '.join(missing[:2])}")

        if count_metrics(reframed) == 0:
            improvements.append("Add quantifiable metrics (percentages, numbers, dollar amounts)")

        reframed = re.sub(r"\s+", ' ', reframed).strip()
        if reframed:
            reframed = reframed[0].upper() + reframed[1:]

        return AIReframe(original=text, reframed=reframed, improvements=improvements)

    def get_contextual_tips(self, resume: Resume, job_context: Optional[JobContext] = None) -> List[str]:
        result = self.scorer.score(resume, job_context=job_context)
        tips = []

        if result.ats < 70:
            tips.append("Focus on ATS compliance: ensure all sections are complete and use standard keywords")
        if result.hr < 70:
            tips.append("Improve HR appeal: add quantified achievements and strong action verbs")
        if result.jd < 70 and job_context is not None:
            tips.append("Tailor your resume: include more skills from the job description")

        role = resolve_role(job_context)
        if role != RoleDomain.OTHER:
            tips.extend(self.role_tips(role)[:2])

        return tips[:MAX_TIPS]
