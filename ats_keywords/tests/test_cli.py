"""
Unit tests for the command-line entry point.
"""

import io
import json
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock

from ats_keywords.__main__ import main


JOB_DESCRIPTION = "Job Title: Senior Platform Engineer\n\nRequired:\nKubernetes, Docker, Python.\n\nNice to Have:\nRust."
RESUME = "Platform engineer running Kubernetes and Docker. Automated tooling in Python."


class TestCommandLine(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.jd_path = self._write("jd.txt", JOB_DESCRIPTION)
        self.resume_path = self._write("resume.txt", RESUME)

    def tearDown(self):
        self.tmp.cleanup()

    def _write(self, name, text):
        path = os.path.join(self.tmp.name, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
        return path

    def _run(self, *args):
        out = io.StringIO()
        with redirect_stdout(out):
            code = main([self.jd_path, self.resume_path, "--log-level", "WARNING", *args])
        return code, json.loads(out.getvalue())

    def test_keyword_analysis_output(self):
        code, payload = self._run("--count", "10")
        self.assertEqual(code, 0)
        self.assertEqual(len(payload["extracted_keywords"]["all"]), 10)
        self.assertIn("kubernetes", payload["match_result"]["matched"])
        self.assertIn("rust", payload["match_result"]["missing"])
        self.assertEqual(payload["extracted_keywords"]["keyword_priorities"]["rust"], "niceToHave")

    def test_score_output(self):
        code, payload = self._run("--score")
        self.assertEqual(code, 0)
        self.assertGreater(payload["total"], 0)
        self.assertIn("breakdown", payload)
        self.assertIn("assessment", payload)

    def test_unreadable_file_exits_with_usage_error(self):
        missing = os.path.join(self.tmp.name, "missing.txt")
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main([missing, self.resume_path])
        self.assertEqual(ctx.exception.code, 2)

    def _assert_usage_error(self, argv):
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main(argv)
        self.assertEqual(ctx.exception.code, 2)

    def test_unknown_log_level_exits_with_usage_error(self):
        self._assert_usage_error([self.jd_path, self.resume_path, "--log-level", "chatty"])

    def test_unknown_log_level_in_environment_exits_with_usage_error(self):
        with mock.patch.dict(os.environ, {"ATS_LOG_LEVEL": "chatty"}):
            self._assert_usage_error([self.jd_path, self.resume_path])

    def test_count_with_score_rejected(self):
        self._assert_usage_error([self.jd_path, self.resume_path, "--score", "--count", "10"])


if __name__ == "__main__":
    unittest.main()
