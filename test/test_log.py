"""Tests for logger configuration."""

import logging
import sys
import tempfile
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from MultiSearch.utils.log import configure_logging, engine_log, log, resolve_level


class TestConfigureLogging(unittest.TestCase):
    def tearDown(self) -> None:
        for handler in log.handlers:
            handler.close()
        log.handlers.clear()

    def _console_filter(self):
        configure_logging(level="INFO", engine_level="DEBUG")
        return log.handlers[0].filters[0]

    def _record(self, name: str, level: int) -> logging.LogRecord:
        return logging.LogRecord(name, level, __file__, 1, "msg", None, None)

    def test_engine_and_command_thresholds_are_separate(self) -> None:
        console = self._console_filter()
        self.assertTrue(console.filter(self._record(engine_log.name, logging.DEBUG)))
        self.assertFalse(console.filter(self._record(log.name, logging.DEBUG)))
        self.assertTrue(console.filter(self._record(log.name, logging.INFO)))

    def test_engine_is_quiet_by_default(self) -> None:
        configure_logging(level="DEBUG")
        console = log.handlers[0].filters[0]
        self.assertFalse(console.filter(self._record(engine_log.name, logging.INFO)))
        self.assertTrue(console.filter(self._record(engine_log.name, logging.WARNING)))
        self.assertTrue(console.filter(self._record(log.name, logging.DEBUG)))

    def test_file_logging(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = configure_logging(action="filter", log_to_file=True, log_dir=tmp)
            self.assertIsNotNone(path)
            self.assertEqual(path.parent, Path(tmp) / "filter")
            engine_log.debug("scan")
            for handler in log.handlers:
                handler.flush()
            self.assertIn("[DEBG] engine: scan", path.read_text(encoding="utf-8"))
            for handler in log.handlers:
                handler.close()

    def test_no_file_without_action(self) -> None:
        self.assertIsNone(configure_logging(log_to_file=True))

    def test_resolve_level(self) -> None:
        self.assertEqual(resolve_level("debug"), logging.DEBUG)
        self.assertEqual(resolve_level(None), logging.INFO)
        self.assertEqual(resolve_level("LOUD", logging.ERROR), logging.ERROR)


if __name__ == "__main__":
    unittest.main()
