import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_engine.evaluators import (  # noqa: E402
    ResumeFacts, evaluate_ats_rules, evaluate_hr_rules, evaluate_jd_match, evaluate_red_flags,
    skill_overlap
)
from resume_engine.models import JobContext, Resume, RoleDomain, SkillGroup  # noqa: E402
from resume_engine.rules.models import ATSRuleDef, HRRuleDef  # noqa: E402
from resume_engine.rules.ruleset import load_ruleset  # noqa: E402
from tests.helpers import make_personal_info, make_resume, skills_resume  # noqa: E402


def by_id(evaluations):
    return {e.rule_id: e for e in evaluations}


class RedFlagTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.rules = load_ruleset().red_flags

    def test_strong_resume_raises_no_flags(self):
        evaluations = evaluate_red_flags(make_resume(), self.rules)

        self.assertEqual([e.rule_id for e in evaluations if not e.passed], [])
        self.assertTrue(all(e.category == 'red_flag' for e in evaluations))
        self.assertTrue(all(e.weight < 0 for e in evaluations))

    def test_skill_stuffing(self):
        rf_02 = by_id(evaluate_red_flags(skills_resume(32), self.rules))['RF_02']

        self.assertFalse(rf_02.passed)
        self.assertEqual(rf_02.weight, -6)
        self.assertEqual(
            rf_02.suggestion,
            "Too many skills listed (32). Focus on your top 15-20 most relevant skills"
        )

    def test_thirty_skills_are_allowed(self):
        self.assertTrue(by_id(evaluate_red_flags(skills_resume(30), self.rules))['RF_02'].passed)

    def test_unprofessional_email(self):
        resume = make_resume(personal_info=make_personal_info(email="dragon99@example.com"))
        self.assertFalse(by_id(evaluate_red_flags(resume, self.rules))['RF_01'].passed)

    def test_pronoun_overuse(self):
        summary = "I led the team. I built the app. I shipped my code. I tested it."
        resume = make_resume(personal_info=make_personal_info(summary=summary))
        evaluations = by_id(evaluate_red_flags(resume, self.rules))

        self.assertFalse(evaluations['RF_04'].passed)
        self.assertEqual(evaluations['RF_04'].suggestion,
                         "Found 5 first-person pronouns. Remove them for professional tone")
        self.assertFalse(evaluations['HR-RED-009'].passed)

    def test_missing_metrics(self):
        resume = make_resume(
            personal_info=make_personal_info(summary="Web developer"),
            experiences=[],
            projects=[],
        )
        evaluations = by_id(evaluate_red_flags(resume, self.rules))

        self.assertFalse(evaluations['RF_03'].passed)
        self.assertEqual(evaluations['RF_03'].suggestion, "Add at least 2-3 achievements with measurable impact")


class ATSRuleTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.rules = load_ruleset().ats_rules

    def test_complete_resume_passes_core_checks(self):
        evaluations = by_id(evaluate_ats_rules(make_resume(), self.rules))

        for rule_id in ('ATS_01', 'ATS_02', 'ATS_03', 'ATS_05'):
            self.assertTrue(evaluations[rule_id].passed, rule_id)
            self.assertIsNone(evaluations[rule_id].suggestion)

    def test_invalid_email(self):
        resume = make_resume(personal_info=make_personal_info(email="not-an-email"))
        ats_02 = by_id(evaluate_ats_rules(resume, self.rules))['ATS_02']

        self.assertFalse(ats_02.passed)
        self.assertEqual(ats_02.suggestion, "Use a professional email format (firstname.lastname@domain.com)")

    def test_email_with_trailing_newline(self):
        resume = make_resume(personal_info=make_personal_info(email="jane.doe@example.com\n"))
        self.assertFalse(by_id(evaluate_ats_rules(resume, self.rules))['ATS_02'].passed)

    def test_too_few_skills(self):
        resume = make_resume(skills=[SkillGroup(skills=["React", "CSS", "Git"])], projects=[])
        ats_05 = by_id(evaluate_ats_rules(resume, self.rules))['ATS_05']

        self.assertFalse(ats_05.passed)
        self.assertEqual(ats_05.suggestion, "Add more relevant skills (currently 3, recommended 5-25)")

    def test_missing_location(self):
        resume = make_resume(personal_info=make_personal_info(location=""))
        self.assertFalse(by_id(evaluate_ats_rules(resume, self.rules))['ATS_03'].passed)

    def test_role_keyword_in_summary(self):
        self.assertTrue(by_id(evaluate_ats_rules(make_resume(), self.rules))['ATS-KW-002'].passed)

        summary = "Passionate about shipping reliable software for customers, every single week of the year."
        resume = make_resume(personal_info=make_personal_info(summary=summary))
        self.assertFalse(by_id(evaluate_ats_rules(resume, self.rules))['ATS-KW-002'].passed)

    def test_advisory_families_pass(self):
        evaluations = evaluate_ats_rules(Resume(), self.rules)
        advisory = [e for e in evaluations if e.rule_id.startswith(('ATS-FMT', 'ATS-OPT'))]

        self.assertTrue(advisory)
        self.assertTrue(all(e.passed for e in advisory))

    def test_rules_without_a_check_pass(self):
        rule = ATSRuleDef(id='ATS-ZZZ-001', description='Unknown', weight=5, suggestion='x')
        evaluation = evaluate_ats_rules(make_resume(), [rule])[0]

        self.assertTrue(evaluation.passed)
        self.assertEqual(evaluation.weight, 5)


class HRRuleTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.rules = load_ruleset().hr_rules

    def test_short_summary(self):
        resume = make_resume(personal_info=make_personal_info(summary="Developer with React skills here."))
        hr_06 = by_id(evaluate_hr_rules(resume, self.rules))['HR_06']

        self.assertFalse(hr_06.passed)
        self.assertEqual(hr_06.suggestion, "Add a professional summary (20-100 words). Currently: 5 words")

    def test_no_online_presence(self):
        info = make_personal_info(linkedin=None, github=None, portfolio=None)
        evaluations = by_id(evaluate_hr_rules(make_resume(personal_info=info), self.rules))

        self.assertFalse(evaluations['HR_03'].passed)
        self.assertFalse(evaluations['HR-PROF-001'].passed)

    def test_strong_resume_has_impact_and_verbs(self):
        evaluations = by_id(evaluate_hr_rules(make_resume(), self.rules))

        for rule_id in ('HR_01', 'HR_02', 'HR-IMP-001', 'HR-IMP-002', 'HR-SOFT-001', 'HR-PORT-002'):
            self.assertTrue(evaluations[rule_id].passed, rule_id)

    def test_weak_verbs(self):
        resume = make_resume(
            experiences=[],
            projects=[],
            personal_info=make_personal_info(summary="Worked on websites and was responsible for fixes"),
        )
        hr_02 = by_id(evaluate_hr_rules(resume, self.rules))['HR_02']

        self.assertFalse(hr_02.passed)
        self.assertEqual(hr_02.suggestion, "Use stronger action verbs. Found 0 strong verbs vs 2 weak ones")

    def test_experience_and_email_families(self):
        resume = make_resume(
            experiences=[],
            projects=[],
            personal_info=make_personal_info(email="dragon99@example.com"),
        )
        evaluations = by_id(evaluate_hr_rules(resume, self.rules))

        self.assertFalse(evaluations['HR-EXP-001'].passed)
        self.assertFalse(evaluations['HR-PROF-002'].passed)

    def test_undemonstrated_skills(self):
        self.assertFalse(by_id(evaluate_hr_rules(skills_resume(10), self.rules))['HR_04'].passed)

    def test_category_comes_from_rule(self):
        rule = HRRuleDef(id='HR_01', description='d', weight=10, category='impact')
        self.assertEqual(evaluate_hr_rules(make_resume(), [rule])[0].category, 'impact')


class JDMatchTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.rules = load_ruleset().jd_rules

    def test_no_job_context(self):
        self.assertEqual(evaluate_jd_match(make_resume(), self.rules), [])

    def test_required_skill_gap(self):
        job = JobContext(domain=RoleDomain.FRONTEND, required_skills=['React', 'Kubernetes', 'Rust'])
        evaluations = by_id(evaluate_jd_match(make_resume(), self.rules, job))

        self.assertFalse(evaluations['JD_01'].passed)
        self.assertEqual(evaluations['JD_01'].suggestion, "Missing required skills: kubernetes, rust")
        self.assertTrue(evaluations['JD_02'].passed)
        self.assertTrue(evaluations['JD_03'].passed)
        self.assertTrue(evaluations['JD_05'].passed)
        self.assertTrue(all(e.category == 'jd_match' for e in evaluations.values()))

    def test_role_alignment_needs_a_role(self):
        evaluations = by_id(evaluate_jd_match(make_resume(), self.rules, JobContext()))
        self.assertFalse(evaluations['JD_05'].passed)

    def test_skill_overlap(self):
        matched, missing = skill_overlap(["React", "Node.js"], ["react", "Go"])

        self.assertEqual(matched, ["react"])
        self.assertEqual(missing, ["go"])


class ResumeFactsTests(unittest.TestCase):
    def test_collect(self):
        facts = ResumeFacts.collect(make_resume())

        self.assertIn("MongoDB", facts.skills)
        self.assertEqual(facts.email, "jane.doe@example.com")
        self.assertGreaterEqual(facts.metrics_count, 2)
        self.assertEqual(facts.pronoun_count, 0)
        self.assertTrue(facts.skills_demonstrated())


if __name__ == '__main__':
    unittest.main()
