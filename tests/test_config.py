"""
Unit tests for environment-driven settings.
"""
import logging
import unittest
from unittest.mock import patch

import config
import logger as logger_module
from logger import logger


class TestConfig(unittest.TestCase):

    @patch.dict("os.environ", {}, clear=True)
    def test_defaults(self):
        self.assertEqual(config.get_exam_title(), config.DEFAULT_EXAM_TITLE)
        self.assertEqual(config.get_log_level(), "INFO")
        self.assertFalse(config.strict_answers_enabled())
        self.assertTrue(config.sidebar_enabled())

    @patch.dict("os.environ", {"EXAM_TITLE": "  Mock Exam  ", "EXAM_LOG_LEVEL": "debug"}, clear=True)
    def test_overrides(self):
        self.assertEqual(config.get_exam_title(), "Mock Exam")
        self.assertEqual(config.get_log_level(), "DEBUG")

    def test_flag_values(self):
        for raw, expected in (("1", True), ("TRUE", True), (" on ", True), ("no", False), ("Off", False)):
            with patch.dict("os.environ", {"EXAM_STRICT_ANSWERS": raw}):
                self.assertEqual(config.strict_answers_enabled(), expected, raw)

    @patch.dict("os.environ", {"EXAM_SHOW_SIDEBAR": "maybe"})
    def test_unrecognised_flag_keeps_default(self):
        self.assertTrue(config.sidebar_enabled())


class TestLogger(unittest.TestCase):

    def test_single_stdout_handler(self):
        # pytest attaches its own capture handlers, which are StreamHandler subclasses
        stream_handlers = [h for h in logger.handlers if type(h) is logging.StreamHandler]
        self.assertEqual(logger.name, "practice_exam")
        self.assertEqual(stream_handlers, [logger_module.handler])
        self.assertFalse(logger.propagate)

    def test_child_loggers_share_handler(self):
        child = logger.getChild("controller")
        self.assertIs(child.parent, logger)
        self.assertIn(logger_module.handler, logger.handlers)


if __name__ == '__main__':
    unittest.main()
