#!/usr/bin/env python3
"""
Unit tests for core/log_utils.py
"""

import os
import sys
import unittest

# Add parent directory to path to import module
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from clippy_clippy.core.log_utils import resolve_log_level, truncate_large_value


class TestLogUtils(unittest.TestCase):
    """Test cases for logging helpers"""

    def test_truncate_long_string(self):
        value = "x" * 250
        truncated = truncate_large_value(value, max_str_len=10)

        self.assertTrue(truncated.startswith("x" * 10 + "..."))
        self.assertIn("250 chars total", truncated)

    def test_short_and_non_string_values_unchanged(self):
        self.assertEqual(truncate_large_value("short"), "short")
        self.assertEqual(truncate_large_value(42), 42)

    def test_verbosity_levels(self):
        self.assertEqual(resolve_log_level(0, env_level=""), "WARNING")
        self.assertEqual(resolve_log_level(1, env_level=""), "INFO")
        self.assertEqual(resolve_log_level(2, env_level=""), "DEBUG")
        self.assertEqual(resolve_log_level(5, env_level=""), "DEBUG")

    def test_environment_level_wins(self):
        self.assertEqual(resolve_log_level(0, env_level=" debug "), "DEBUG")
        self.assertEqual(resolve_log_level(2, env_level="error"), "ERROR")

    def test_unknown_environment_level_falls_back(self):
        self.assertEqual(resolve_log_level(2, env_level="verbose"), "WARNING")


if __name__ == "__main__":
    unittest.main()
