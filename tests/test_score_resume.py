import json
import sys
import tempfile
import unittest
from contextlib import redirect_stdout
from io import StringIO
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))
if str(PROJECT_ROOT / 'scripts') not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT / 'scripts'))

import score_resume  # noqa: E402
from tests.helpers import make_resume  # noqa: E402
from tests.test_jd_parser import JD_TEXT  # noqa: E402


def run_main(*argv):
    """Run the CLI, returning (exit code, stdout)"""
    out = StringIO()
    code = None
    with patch.object(sys, 'argv', ['score_resume.py', *argv]), redirect_stdout(out):
        try:
            score_resume.main()
        except SystemExit as e:
            code = e.code
    return code, out.getvalue()


class ScoreResumeScriptTests(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmp.name)
        self.resume_path = self.dir / 'resume.json'
        self.resume_path.write_text(make_resume().to_json(), encoding='utf-8')

    def tearDown(self):
        self.tmp.cleanup()

    def test_load_helpers(self):
        jd_path = self.dir / 'jd.txt'
        jd_path.write_text(JD_TEXT, encoding='utf-8')

        resume = score_resume.load_resume(str(self.resume_path))
        job = score_resume.load_job_description(str(jd_path))

        self.assertEqual(resume.personal_info.email, "jane.doe@example.com")
        self.assertEqual(job.position, "Senior Frontend Developer")

        with self.assertRaises(FileNotFoundError):
            score_resume.load_resume(str(self.dir / 'missing.json'))

    def test_list_domains(self):
        code, output = run_main('--list-domains')

        self.assertEqual(code, 0)
        self.assertIn('web-developer', output.split())

    def test_score_with_output(self):
        output_path = self.dir / 'out' / 'report.json'
        code, output = run_main('--resume', str(self.resume_path), '--strategy', 'both',
                                '--output', str(output_path))

        self.assertEqual(code, 0)
        self.assertIn("RESUME REPORT - web-developer", output)
        self.assertIn("Overall ATS Score:", output)
        self.assertIn("Verdict:", output)

        report = json.loads(output_path.read_text(encoding='utf-8'))
        self.assertEqual(report['domain'], 'web-developer')
        self.assertIn('overallScore', report['score'])
        self.assertIn(report['verdict']['verdict'], ('pass', 'borderline', 'fail'))

    def test_unknown_domain_exits_one(self):
        code, _ = run_main('--resume', str(self.resume_path), '--domain', 'astronaut')
        self.assertEqual(code, 1)

    def test_missing_resume_exits_two(self):
        with patch('traceback.print_exc'):
            code, _ = run_main('--resume', str(self.dir / 'missing.json'))
        self.assertEqual(code, 2)


if __name__ == '__main__':
    unittest.main()
