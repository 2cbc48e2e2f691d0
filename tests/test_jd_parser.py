import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_engine.jd_parser import JobDescriptionParser  # noqa: E402
from resume_engine.models import RoleDomain  # noqa: E402

JD_TEXT = (
    "Senior Frontend Developer\n"
    "About us: we build tools for teams.\n"
    "Requirements:\n"
    "- 5+ years of experience with React and TypeScript\n"
    "- Strong CSS skills\n"
    "Nice to have: Docker, GraphQL\n"
)


class JobDescriptionParserTests(unittest.TestCase):
    def setUp(self):
        self.parser = JobDescriptionParser()

    def test_parse(self):
        job = self.parser.parse(JD_TEXT)

        self.assertEqual(job.position, "Senior Frontend Developer")
        self.assertEqual(job.domain, RoleDomain.FRONTEND)
        self.assertEqual(job.experience_years, 5)
        self.assertEqual(job.required_skills, ['CSS', 'TypeScript', 'React'])
        self.assertEqual(job.preferred_skills, ['Docker'])
        self.assertEqual(job.job_description, JD_TEXT)

    def test_given_title_drives_role(self):
        job = self.parser.parse(JD_TEXT, title="Platform Engineer")

        self.assertEqual(job.position, "Platform Engineer")
        self.assertEqual(job.domain, RoleDomain.DEVOPS)

    def test_markdown_title(self):
        self.assertEqual(self.parser.extract_title("## Backend Engineer\nWe ship APIs"), "Backend Engineer")
        self.assertEqual(self.parser.extract_title("**Cloud Engineer**"), "Cloud Engineer")

    def test_skips_boilerplate_lines(self):
        text = "About the company\nRequirements:\nData Analyst"
        self.assertEqual(self.parser.extract_title(text), "Data Analyst")

    def test_unknown_position(self):
        self.assertEqual(self.parser.extract_title(""), "Unknown Position")
        self.assertEqual(self.parser.parse("").domain, RoleDomain.OTHER)

    def test_experience_years(self):
        self.assertEqual(self.parser.extract_experience_years("Minimum 3 years in backend work"), 3)
        self.assertEqual(self.parser.extract_experience_years("at least 7 yrs"), 7)
        self.assertEqual(self.parser.extract_experience_years("experience of 2 years"), 2)
        self.assertIsNone(self.parser.extract_experience_years("Great team, great pay"))

    def test_everything_required_without_marker(self):
        required, preferred = self.parser.extract_skills("We use Python, Django and Redis")

        self.assertEqual(preferred, [])
        for skill in ('Python', 'Django', 'Redis'):
            self.assertIn(skill, required)


if __name__ == '__main__':
    unittest.main()
