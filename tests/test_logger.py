"""Tests for logger construction, debug-run pruning and settings-driven levels.

Covers: ft.common.logger
"""

import logging
import os
import shutil
import tempfile
import time
import unittest
from pathlib import Path


class TestLogger(unittest.TestCase):
    """Each test builds its own uniquely named logger inside a temp log_dir."""

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self.log_dir = Path(self.tmpdir)
        self.name = f"focustimer_test_{self._testMethodName}"

    def tearDown(self):
        logger = logging.getLogger(self.name)
        for h in list(logger.handlers):
            logger.removeHandler(h)
            h.close()
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def test_creates_expected_files(self):
        from ft.common.logger import get_logger
        logger = get_logger(self.name, log_dir=self.log_dir)
        logger.info("hello")
        self.assertTrue((self.log_dir / f"{self.name}.log").exists())
        self.assertTrue((self.log_dir / "latest.log").exists())
        self.assertEqual(len(list((self.log_dir / "debug").glob(f"{self.name}_*.log"))), 1)
        self.assertFalse(logger.propagate)

    def test_repeated_get_logger_does_not_duplicate_handlers(self):
        from ft.common.logger import get_logger
        logger = get_logger(self.name, log_dir=self.log_dir)
        names = sorted(h.get_name() for h in logger.handlers)
        again = get_logger(self.name, log_dir=self.log_dir)
        self.assertIs(again, logger)
        self.assertEqual(sorted(h.get_name() for h in again.handlers), names)
        self.assertEqual(len(names), 3)

    def test_prune_keeps_newest_runs(self):
        from ft.common.logger import prune_debug_runs
        debug_dir = self.log_dir / "debug"
        debug_dir.mkdir()
        now = time.time()
        paths = []
        for i in range(5):
            p = debug_dir / f"{self.name}_run{i}.log"
            p.write_text("x")
            os.utime(p, (now - 100 * (5 - i), now - 100 * (5 - i)))
            paths.append(p)
        # Unrelated files in the folder are left alone
        other = debug_dir / "notes.txt"
        other.write_text("keep me")

        removed = prune_debug_runs(debug_dir, self.name, keep=2)
        self.assertEqual(sorted(removed), sorted(paths[:3]))
        self.assertEqual(sorted(debug_dir.glob(f"{self.name}_*.log")), sorted(paths[3:]))
        self.assertTrue(other.exists())

    def test_get_logger_prunes_old_runs(self):
        from ft.common.logger import get_logger
        debug_dir = self.log_dir / "debug"
        debug_dir.mkdir()
        old = time.time() - 10_000
        for i in range(4):
            p = debug_dir / f"{self.name}_old{i}.log"
            p.write_text("x")
            os.utime(p, (old + i, old + i))
        get_logger(self.name, log_dir=self.log_dir, keep_debug_runs=2)
        remaining = list(debug_dir.glob(f"{self.name}_*.log"))
        self.assertEqual(len(remaining), 2)
        self.assertIn(debug_dir / f"{self.name}_old3.log", remaining)

    def test_apply_log_settings_level_and_console(self):
        from ft.common.logger import apply_log_settings, get_logger
        logger = get_logger(self.name, log_dir=self.log_dir)
        apply_log_settings({"log_level": "WARNING", "log_to_console": True}, logger)
        by_name = {h.get_name(): h for h in logger.handlers}
        self.assertIn(f"{self.name}:console", by_name)
        self.assertEqual(by_name[f"{self.name}:latest"].level, logging.WARNING)
        self.assertEqual(by_name[f"{self.name}:console"].level, logging.WARNING)
        # The per-run debug log ignores the setting
        self.assertEqual(by_name[f"{self.name}:debug_run"].level, logging.DEBUG)

        # Applying twice doesn't stack console handlers; turning it off removes it
        apply_log_settings({"log_level": "WARNING", "log_to_console": True}, logger)
        self.assertEqual(sum(1 for h in logger.handlers if h.get_name().endswith(":console")), 1)
        apply_log_settings({"log_level": "INFO", "log_to_console": False}, logger)
        self.assertFalse(any(h.get_name().endswith(":console") for h in logger.handlers))


if __name__ == "__main__":
    unittest.main()
