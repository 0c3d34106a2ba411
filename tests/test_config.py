import logging
import os
import unittest
from unittest.mock import patch

from interview_metrics.config import DEFAULT_NGRAM_ORDER, LOG_FILE, OUTPUT_DIR, get_config


class GetConfigTests(unittest.TestCase):
    def test_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            config = get_config()
        self.assertEqual(config.ngram_order, DEFAULT_NGRAM_ORDER)
        self.assertEqual(config.report_format, "json")
        self.assertEqual(config.output_dir, OUTPUT_DIR)
        self.assertEqual(config.log_file, LOG_FILE)
        self.assertEqual(config.log_level_value, logging.WARNING)

    def test_environment_overrides(self) -> None:
        env = {
            "INTERVIEW_METRICS_NGRAM_ORDER": "2",
            "INTERVIEW_METRICS_REPORT_FORMAT": "TEXT",
            "INTERVIEW_METRICS_OUTPUT_DIR": "/tmp/reports",
            "INTERVIEW_METRICS_LOG_FILE": "/tmp/reports/run.log",
            "INTERVIEW_METRICS_LOG_LEVEL": "debug",
        }
        with patch.dict(os.environ, env, clear=True):
            config = get_config()
        self.assertEqual(config.ngram_order, 2)
        self.assertEqual(config.report_format, "text")
        self.assertEqual(config.output_dir, "/tmp/reports")
        self.assertEqual(config.log_file, "/tmp/reports/run.log")
        self.assertEqual(config.log_level, "DEBUG")
        self.assertEqual(config.log_level_value, logging.DEBUG)

    def test_invalid_values_raise(self) -> None:
        invalid = [
            {"INTERVIEW_METRICS_NGRAM_ORDER": "three"},
            {"INTERVIEW_METRICS_NGRAM_ORDER": "0"},
            {"INTERVIEW_METRICS_REPORT_FORMAT": "xml"},
            {"INTERVIEW_METRICS_LOG_LEVEL": "LOUD"},
        ]
        for env in invalid:
            with patch.dict(os.environ, env, clear=True):
                with self.assertRaises(ValueError, msg=str(env)):
                    get_config()


if __name__ == "__main__":
    unittest.main()
