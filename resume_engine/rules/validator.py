# resume_engine/rules/validator.py
import logging
from typing import List, Tuple

from resume_engine.rules.models import DomainRules, ExperienceLevelRules, UnifiedRuleset

logger = logging.getLogger(__name__)


class RuleSetValidator:
    """Validate loaded rule bundles"""

    WEIGHT_TOLERANCE = 0.05

    def validate_domain(self, rules: DomainRules) -> Tuple[bool, List[str]]:
        """
        Validate a domain rule bundle

        Returns:
            Tuple of (is_valid, list of errors/warnings)
        """
        issues = []
        prefix = f"Domain[{rules.domain}]"

        if not rules.experience_levels:
            issues.append(f"ERROR: {prefix}: No experience levels defined")
        elif 'midLevel' not in rules.experience_levels:
            issues.append(f"WARNING: {prefix}: No midLevel rules, falling back to "
                          f"{next(iter(rules.experience_levels))}")

        weights = rules.overall_scoring_weights
        total = weights.total()
        if abs(total - 1.0) > self.WEIGHT_TOLERANCE:
            issues.append(f"WARNING: {prefix}: overallScoringWeights sum to {total:.2f} (expected ~1.0)")
        if weights.scoring_total() <= 0:
            issues.append(f"WARNING: {prefix}: No score category weights, overall score will be 0")

        # Every level should declare the same scoring-weight keys
        key_sets = {
            name: level.scoring_weights.declared_keys
            for name, level in rules.experience_levels.items()
        }
        if len(set(key_sets.values())) > 1:
            details = '; '.join(f"{name}: {', '.join(sorted(keys)) or 'none'}"
                                for name, keys in key_sets.items())
            issues.append(f"WARNING: {prefix}: Scoring weight keys differ between experience levels "
                          f"({details})")

        for name, level in rules.experience_levels.items():
            issues.extend(self._validate_level(level, f"{prefix}.{name}"))

        has_errors = any(issue.startswith("ERROR") for issue in issues)
        return not has_errors, issues

    def _validate_level(self, level: ExperienceLevelRules, prefix: str) -> List[str]:
        issues = []

        if not level.required_skills.skills:
            issues.append(f"INFO: {prefix}: No required skills (keyword and skill scores default to 100)")
        if not level.power_words.verbs:
            issues.append(f"INFO: {prefix}: No power words")
        elif not any(verb.is_strong for verb in level.power_words.verbs):
            issues.append(f"WARNING: {prefix}: No high strength power words for verb replacement")

        for skill in level.required_skills.skills:
            if not skill.skill:
                issues.append(f"ERROR: {prefix}: Required skill without a name")

        return issues

    def validate_ruleset(self, ruleset: UnifiedRuleset) -> Tuple[bool, List[str]]:
        """Check the unified rule set has every rule family and sane scoring"""
        issues = []

        if not ruleset.ats_rules:
            issues.append("ERROR: No ATS rules loaded")
        if not ruleset.hr_rules:
            issues.append("ERROR: No HR rules loaded")
        if not ruleset.red_flags:
            issues.append("ERROR: No red flag rules loaded")
        if not ruleset.jd_rules:
            issues.append("WARNING: No JD matching rules loaded")

        weight_total = sum(ruleset.scoring_formula.weights.values())
        if abs(weight_total - 1.0) > self.WEIGHT_TOLERANCE:
            issues.append(f"WARNING: Verdict weights sum to {weight_total:.2f} (expected ~1.0)")

        thresholds = ruleset.scoring_formula.verdict_thresholds
        if thresholds.get('pass', 0) < thresholds.get('borderline', 0):
            issues.append("ERROR: Pass threshold is below borderline threshold")

        seen = set()
        for rule_id in [r.id for r in ruleset.ats_rules] + [r.id for r in ruleset.hr_rules] + \
                [r.id for r in ruleset.red_flags] + [r.id for r in ruleset.jd_rules]:
            if rule_id in seen:
                issues.append(f"WARNING: Duplicate rule id {rule_id}")
            seen.add(rule_id)

        has_errors = any(issue.startswith("ERROR") for issue in issues)
        return not has_errors, issues

    def generate_report(self, rules: DomainRules) -> str:
        """Generate validation report"""
        is_valid, issues = self.validate_domain(rules)

        report = f"""
=== Rule Set Validation Report ===
Domain: {rules.domain}
Experience Levels: {', '.join(rules.experience_levels) or 'none'}
Scoring Weight Total: {rules.overall_scoring_weights.total():.2f}

Status: {'VALID' if is_valid else 'INVALID'}

Issues Found: {len(issues)}
"""

        if issues:
            report += "\n".join(f"  - {issue}" for issue in issues)
        else:
            report += "\n  No issues found!"

        return report
