import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_engine.models import JobContext, Resume, RoleDomain  # noqa: E402
from tests.helpers import make_resume  # noqa: E402


class ResumeModelTests(unittest.TestCase):
    def test_from_dict_reads_editor_camel_case(self):
        resume = Resume.from_dict({
            'personalInfo': {'fullName': 'Ana Lima', 'email': 'ana@example.com', 'website': 'ana.dev'},
            'experiences': [{'company': 'Globex', 'position': 'Dev', 'startDate': '2021-02',
                             'achievements': ['Shipped v2']}],
            'education': [{'institution': 'MIT', 'degree': 'BSc', 'field': 'CS'}],
            'skills': [{'category': 'Languages', 'skills': ['Python', 'Go']}],
            'volunteerWork': [{'organization': 'Code Club', 'role': 'Mentor'}],
        })

        self.assertEqual(resume.personal_info.full_name, 'Ana Lima')
        self.assertEqual(resume.personal_info.portfolio, 'ana.dev')
        self.assertEqual(resume.experiences[0].start_date, '2021-02')
        self.assertEqual(resume.experiences[0].achievements, ['Shipped v2'])
        self.assertEqual(resume.education[0].field_of_study, 'CS')
        self.assertEqual(resume.skills[0].skills, ['Python', 'Go'])
        self.assertEqual(resume.volunteer_work[0].role, 'Mentor')

    def test_missing_sections_become_empty(self):
        resume = Resume.from_dict({})

        self.assertEqual(resume.experiences, [])
        self.assertEqual(resume.personal_info.email, '')
        self.assertIsNone(resume.personal_info.linkedin)
        self.assertEqual(resume.template, 'modern')

    def test_json_round_trip_keeps_content(self):
        original = make_resume()
        restored = Resume.from_json(original.to_json())

        self.assertEqual(restored.personal_info.email, original.personal_info.email)
        self.assertEqual(restored.experiences[0].description, original.experiences[0].description)
        self.assertEqual(restored.projects[0].technologies, original.projects[0].technologies)

    def test_repr_names_candidate(self):
        self.assertIn('Jane Doe', repr(make_resume()))


class JobContextTests(unittest.TestCase):
    def test_unknown_domain_falls_back_to_other(self):
        context = JobContext.from_dict({'domain': 'marketing', 'position': 'Growth Lead'})
        self.assertEqual(context.domain, RoleDomain.OTHER)
        self.assertEqual(context.position, 'Growth Lead')

    def test_experience_years_parsing(self):
        self.assertEqual(JobContext.from_dict({'experienceYears': '5'}).experience_years, 5)
        self.assertIsNone(JobContext.from_dict({'experienceYears': 'many'}).experience_years)
        self.assertIsNone(JobContext.from_dict({}).experience_years)

    def test_to_dict_uses_camel_case(self):
        context = JobContext(domain=RoleDomain.BACKEND, required_skills=['Go'])
        data = context.to_dict()

        self.assertEqual(data['domain'], 'backend')
        self.assertEqual(data['requiredSkills'], ['Go'])


if __name__ == '__main__':
    unittest.main()
