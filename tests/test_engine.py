import sys
import unittest
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_engine import EngineConfig, EngineNotInitializedError, RuleEngine, RuleLoadError  # noqa: E402
from resume_engine.models import JobContext, Resume, RoleDomain  # noqa: E402
from resume_engine.rules.cache import RuleCache  # noqa: E402
from resume_engine.rules.loader import RuleLoader  # noqa: E402
from resume_engine.scoring import Verdict  # noqa: E402
from tests.helpers import make_resume  # noqa: E402


class UninitializedEngineTests(unittest.TestCase):
    def setUp(self):
        self.engine = RuleEngine()

    def test_not_initialized(self):
        self.assertFalse(self.engine.is_initialized())

    def test_calls_raise_before_initialize(self):
        calls = [
            lambda: self.engine.get_suggestions("Built things", 'description', 'experience'),
            lambda: self.engine.get_suggestions("", 'description', 'experience'),
            lambda: self.engine.get_global_suggestions(Resume()),
            lambda: self.engine.calculate_score(Resume()),
            lambda: self.engine.calculate_verdict(Resume()),
            lambda: self.engine.generate_reframe("I was responsible for it"),
            self.engine.get_rules,
            self.engine.get_domain,
            self.engine.get_required_skills,
        ]
        for call in calls:
            with self.assertRaises(EngineNotInitializedError):
                call()

    def test_unknown_domain(self):
        with self.assertRaises(RuleLoadError):
            self.engine.initialize('astronaut')
        self.assertFalse(self.engine.is_initialized())


class RuleEngineTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.cache = RuleCache()

    def setUp(self):
        self.engine = RuleEngine(loader=RuleLoader(cache=self.cache))
        self.engine.initialize('web-developer')

    def test_initialize(self):
        self.assertTrue(self.engine.is_initialized())
        self.assertEqual(self.engine.get_domain(), 'web-developer')
        self.assertEqual(len(self.engine.get_required_skills()), 4)
        self.assertEqual(len(self.engine.get_structure_guidelines()), 6)
        self.assertTrue(self.engine.get_power_words())
        self.assertIsInstance(self.engine.get_red_flags(), list)

    def test_reinitialize_switches_domain(self):
        self.engine.initialize('devops-engineer')

        self.assertEqual(self.engine.get_domain(), 'devops-engineer')
        self.assertEqual(self.engine.get_rules().domain, 'devops-engineer')

    def test_blank_value_has_no_suggestions(self):
        self.assertEqual(self.engine.get_suggestions("   ", 'description', 'experience'), [])

    def test_non_text_value_has_no_suggestions(self):
        self.assertEqual(self.engine.get_suggestions(None, 'description', 'experience'), [])
        self.assertEqual(self.engine.get_suggestions(42, 'description', 'experience'), [])

    def test_field_suggestions(self):
        suggestions = self.engine.get_suggestions("Responsible for developing websites", 'description', 'experience')
        self.assertEqual(suggestions[0].apply_suggestion, "Architected for developing websites")

    def test_suggestion_errors_are_logged(self):
        with patch('resume_engine.engine.suggest_field', side_effect=RuntimeError("boom")):
            with self.assertLogs('resume_engine.engine', level='ERROR'):
                result = self.engine.get_suggestions("Built things", 'description', 'experience')
        self.assertEqual(result, [])

    def test_global_suggestions(self):
        messages = [s.message for s in self.engine.get_global_suggestions(Resume())]
        self.assertIn("No Experience Listed", messages)

    def test_calculate_score(self):
        score = self.engine.calculate_score(make_resume())

        self.assertTrue(0 <= score.overall_score <= 100)
        self.assertEqual(len(score.breakdown), 5)

    def test_score_errors_return_zero(self):
        with patch.object(self.engine.weighted_scorer, 'score', side_effect=ValueError("bad")):
            with self.assertLogs('resume_engine.engine', level='ERROR'):
                score = self.engine.calculate_score(make_resume())
        self.assertEqual(score.overall_score, 0)
        self.assertEqual(score.breakdown, [])

    def test_calculate_verdict(self):
        job = JobContext(domain=RoleDomain.FULLSTACK, required_skills=['React', 'Node.js'])
        result = self.engine.calculate_verdict(make_resume(), job)

        self.assertEqual(result.jd, 100)
        self.assertIn(result.verdict, list(Verdict))

    def test_verdict_errors_return_fail(self):
        with patch.object(self.engine.verdict_scorer, 'score', side_effect=KeyError('ats')):
            with self.assertLogs('resume_engine.engine', level='ERROR'):
                result = self.engine.calculate_verdict(make_resume())
        self.assertEqual((result.final, result.verdict), (0, Verdict.FAIL))

    def test_advisor_calls(self):
        reframe = self.engine.generate_reframe("I was responsible for the website")
        self.assertEqual(reframe.reframed, "Led the website")

        tips = self.engine.get_contextual_tips(Resume(), JobContext(domain=RoleDomain.FRONTEND))
        self.assertTrue(tips)

        with patch.object(self.engine.advisor, 'generate_ai_suggestions', side_effect=RuntimeError("x")):
            with self.assertLogs('resume_engine.engine', level='ERROR'):
                self.assertEqual(self.engine.generate_ai_suggestions(Resume(), 'summary', 'text'), [])

    def test_reframe_errors_return_original_text(self):
        with patch.object(self.engine.advisor, 'generate_reframe', side_effect=RuntimeError("x")):
            with self.assertLogs('resume_engine.engine', level='ERROR'):
                reframe = self.engine.generate_reframe("Worked on the website")

        self.assertEqual(reframe.original, "Worked on the website")
        self.assertEqual(reframe.reframed, "Worked on the website")
        self.assertEqual(reframe.improvements, [])

    def test_reframe_without_text(self):
        with self.assertLogs('resume_engine.engine', level='ERROR'):
            reframe = self.engine.generate_reframe(None)
        self.assertEqual((reframe.original, reframe.reframed, reframe.improvements), ('', '', []))

    def test_score_feedback(self):
        self.assertEqual(self.engine.get_score_feedback(90).level, 'excellent')


class ConfiguredEngineTests(unittest.TestCase):
    def test_experience_level_drives_accessors(self):
        engine = RuleEngine(config=EngineConfig(experience_level='entryLevel'))
        engine.initialize('web-developer')

        self.assertEqual(engine.get_required_skills()[0].skill, "HTML")

    def test_verdict_overrides(self):
        config = EngineConfig(verdict_weights={'ats': 1.0}, red_flag_penalty_cap=0)
        engine = RuleEngine(config=config)
        engine.initialize('web-developer')

        result = engine.calculate_verdict(make_resume())
        self.assertEqual(result.final, result.ats)


if __name__ == '__main__':
    unittest.main()
