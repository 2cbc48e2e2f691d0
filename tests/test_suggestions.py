import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_engine.models import Resume  # noqa: E402
from resume_engine.rules.loader import RuleLoader  # noqa: E402
from resume_engine.rules.models import SkillRule  # noqa: E402
from resume_engine.suggestions import (  # noqa: E402
    Severity, Suggestion, SuggestionType, dedupe, suggest_field, suggest_global
)
from resume_engine.suggestions.analyzers import analyze_project_description, check_for_metrics  # noqa: E402
from tests.helpers import critical, make_domain_rules, make_experience, make_resume  # noqa: E402


def messages(suggestions):
    return [s.message for s in suggestions]


class FieldSuggestionTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.rules = RuleLoader().load_rules('web-developer')

    def test_weak_opening_verb(self):
        suggestions = suggest_field("Responsible for developing websites", 'description', 'experience', self.rules)
        weak = suggestions[0]

        self.assertEqual(weak.message, "Weak action verb detected")
        self.assertEqual(weak.type, SuggestionType.IMPROVEMENT)
        self.assertEqual(weak.severity, Severity.HIGH)
        self.assertEqual(weak.apply_suggestion, "Architected for developing websites")
        self.assertIn("Missing quantifiable metrics", messages(suggestions))

    def test_weak_verb_inside_bullet_is_replaced(self):
        suggestions = suggest_field(
            "Team member who helped build the checkout service", 'description', 'experience', self.rules
        )
        weak = suggestions[0]

        self.assertEqual(weak.message, "Weak action verb detected")
        self.assertEqual(weak.apply_suggestion, "Team member who architected build the checkout service")

    def test_only_first_weak_verb_is_replaced(self):
        suggestions = suggest_field(
            "Worked with QA and worked on release tooling", 'description', 'experience', self.rules
        )
        self.assertEqual(suggestions[0].apply_suggestion, "Architected with QA and worked on release tooling")

    def test_weak_verb_prefix_of_longer_word_is_ignored(self):
        suggestions = suggest_field(
            "Wasted no time shipping 12 releases", 'description', 'experience', self.rules
        )
        self.assertNotIn("Weak action verb detected", messages(suggestions))

    def test_team_size_and_percentage_count_as_metrics(self):
        self.assertEqual(check_for_metrics("Led a team of 5 engineers, improving load time by 40%"), [])

    def test_quantified_bullet_has_no_metrics_suggestion(self):
        suggestions = suggest_field(
            "Cut infrastructure costs by 40% for 200 customers", 'description', 'experience', self.rules
        )
        self.assertNotIn("Missing quantifiable metrics", messages(suggestions))

    def test_extra_metric_units(self):
        text = "Delivered the payments rewrite across 12 sprints"

        without = suggest_field(text, 'description', 'experience', self.rules)
        with_units = suggest_field(text, 'description', 'experience', self.rules, extra_metric_units=['sprint'])

        self.assertIn("Missing quantifiable metrics", messages(without))
        self.assertNotIn("Missing quantifiable metrics", messages(with_units))

    def test_passive_voice(self):
        suggestions = suggest_field(
            "The checkout API was redesigned to serve 300 requests", 'description', 'experience', self.rules
        )
        self.assertIn("Passive voice detected", messages(suggestions))

    def test_short_and_long_bullets(self):
        short = suggest_field("Built APIs", 'description', 'experience', self.rules)
        long = suggest_field("Built " + "very " * 50 + "fast APIs for 10 users", 'description',
                             'experience', self.rules)

        self.assertIn("Bullet point too short", messages(short))
        self.assertIn("Bullet point is quite long", messages(long))

    def test_unrouted_field(self):
        self.assertEqual(suggest_field("Jane Doe", 'fullName', 'personal', self.rules), [])
        self.assertEqual(suggest_field("anything", 'description', 'education', self.rules), [])

    def test_summary(self):
        rules = make_domain_rules(required=[critical('React'), critical('Docker')])
        suggestions = suggest_field("Developer", 'summary', 'personal', rules)

        self.assertEqual(messages(suggestions), [
            "Missing key technical skills",
            "Consider mentioning years of experience",
            "Summary is too brief",
        ])
        self.assertIn("Critical skills: React, Docker", suggestions[0].suggestion)

    def test_complete_summary(self):
        rules = make_domain_rules(required=[critical('React'), critical('Node.js')])
        summary = "Full-stack developer with 6 years of experience shipping React and Node.js products"

        self.assertEqual(suggest_field(summary, 'summary', 'personal', rules), [])

    def test_skills_field_matches_any_field_name(self):
        rules = make_domain_rules(required=[critical('Docker'), critical('Frameworks', 'React')])
        suggestions = suggest_field("React, CSS", 'frontend', 'skills', rules)

        self.assertEqual(suggestions[0].message, "Missing critical skills")
        self.assertEqual(suggestions[0].suggestion, "Add these essential skills: Docker")
        self.assertEqual(suggestions[1].message, "Consider adding more skills")

    def test_project_description(self):
        self.assertEqual(
            messages(analyze_project_description("built a small tool")),
            ["Add project metrics", "Mention technologies used"],
        )
        self.assertEqual(messages(analyze_project_description("Built a dashboard with React")),
                         ["Add project metrics"])
        self.assertEqual(analyze_project_description("Built a dashboard with React, used by 500 users"), [])

    def test_dedupe_keeps_first(self):
        first = Suggestion(SuggestionType.TIP, Severity.LOW, "Same", "first")
        second = Suggestion(SuggestionType.WARNING, Severity.HIGH, "Same", "second")
        other = Suggestion(SuggestionType.TIP, Severity.LOW, "Other", "third")

        self.assertEqual(dedupe([first, second, other]), [first, other])

    def test_to_dict_omits_empty_fields(self):
        data = Suggestion(SuggestionType.TIP, Severity.LOW, "m", "s").to_dict()
        self.assertEqual(data, {'type': 'tip', 'severity': 'low', 'message': 'm', 'suggestion': 's'})


class GlobalSuggestionTests(unittest.TestCase):
    def test_empty_resume(self):
        rules = RuleLoader().load_rules('web-developer')

        self.assertEqual(messages(suggest_global(Resume(), rules)), [
            "Incomplete Contact Info",
            "Missing Online Presence",
            "Short Professional Summary",
            "No Experience Listed",
            "No Projects Listed",
            "Missing Critical Skills",
        ])

    def test_strong_resume_needs_nothing(self):
        rules = make_domain_rules(required=[critical('React')])
        self.assertEqual(suggest_global(make_resume(), rules), [])

    def test_experience_without_numbers(self):
        resume = make_resume(experiences=[make_experience(description="Maintained the company website")])
        self.assertIn("Missing Quantifiable Results", messages(suggest_global(resume, make_domain_rules())))

    def test_missing_critical_skills(self):
        rules = make_domain_rules(required=[critical('Kubernetes'), critical('React')])
        gap = suggest_global(make_resume(), rules)[-1]

        self.assertEqual(gap.severity, Severity.HIGH)
        self.assertEqual(gap.suggestion, "Your profile is missing core skills for this role: Kubernetes.")

    def test_nice_to_have_only_after_critical(self):
        rules = make_domain_rules(
            required=[critical('React')],
            nice_to_have=[SkillRule(skill='Docker', priority='low')],
        )
        gap = suggest_global(make_resume(), rules)

        self.assertEqual(messages(gap), ["Level Up Your Profile"])
        self.assertEqual(gap[0].suggestion, "Consider learning: Docker to stand out.")


if __name__ == '__main__':
    unittest.main()
