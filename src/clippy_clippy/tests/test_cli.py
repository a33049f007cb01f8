#!/usr/bin/env python3
"""
Unit tests for cli/cli.py
"""

import json
import os
import sys
import unittest
from unittest.mock import patch

from typer.testing import CliRunner

# Add parent directory to path to import module
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from clippy_clippy import __version__
from clippy_clippy.cli.cli import app
from clippy_clippy.core.config import ClippyConfig
from clippy_clippy.core.errors import ClipboardAccessError, ConfigError, ConfigNotReady, TransportError
from clippy_clippy.core.schemas import Usage
from clippy_clippy.core.types import ExtractionOutcome


class TestCli(unittest.TestCase):
    """Test cases for the clippy-clippy command"""

    def setUp(self):
        self.runner = CliRunner()
        self.config = ClippyConfig(api_url="http://localhost/v1/chat/completions", api_token="sk-test")

        patchers = [
            patch("clippy_clippy.cli.cli.configure_logging"),
            patch("clippy_clippy.cli.cli.load_config", return_value=self.config),
            patch("clippy_clippy.cli.cli.extract_clipboard_text"),
        ]
        mocks = [p.start() for p in patchers]
        for p in patchers:
            self.addCleanup(p.stop)
        self.configure_logging, self.load_config, self.extract = mocks

    def test_prints_text(self):
        self.extract.return_value = ExtractionOutcome.extracted("HELLO\nWORLD")

        result = self.runner.invoke(app, [])

        self.assertEqual(result.exit_code, 0)
        self.assertIn("HELLO\nWORLD", result.stdout)
        self.extract.assert_called_once_with(self.config, markdown=False)

    def test_markdown_flag(self):
        self.extract.return_value = ExtractionOutcome.extracted("| a |")

        result = self.runner.invoke(app, ["-m"])

        self.assertEqual(result.exit_code, 0)
        self.extract.assert_called_once_with(self.config, markdown=True)

    def test_no_image(self):
        self.extract.return_value = ExtractionOutcome.no_image()

        result = self.runner.invoke(app, [])

        self.assertEqual(result.exit_code, 0)
        self.assertIn("No image found in the clipboard", result.output)

    def test_empty_image(self):
        self.extract.return_value = ExtractionOutcome.empty_image()

        result = self.runner.invoke(app, [])

        self.assertEqual(result.exit_code, 0)
        self.assertIn("Clipboard image data is empty", result.output)

    def test_failure_exit_code(self):
        self.extract.return_value = ExtractionOutcome.failure(TransportError("connection refused"))

        result = self.runner.invoke(app, [])

        self.assertEqual(result.exit_code, 1)
        self.assertIn("connection refused", result.output)

    def test_unexpected_exception(self):
        self.extract.side_effect = RuntimeError("boom")

        result = self.runner.invoke(app, [])

        self.assertEqual(result.exit_code, 1)
        self.assertIn("boom", result.output)

    def test_json_output(self):
        usage = Usage(prompt_tokens=10, completion_tokens=2, total_tokens=12)
        self.extract.return_value = ExtractionOutcome.extracted("HELLO", finish_reason="stop", usage=usage)

        result = self.runner.invoke(app, ["--json"])

        self.assertEqual(result.exit_code, 0)
        data = json.loads(result.stdout)
        self.assertTrue(data["success"])
        self.assertEqual(data["data"]["kind"], "text")
        self.assertEqual(data["data"]["text"], "HELLO")
        self.assertEqual(data["data"]["usage"]["total_tokens"], 12)

    def test_json_failure(self):
        self.extract.return_value = ExtractionOutcome.failure(TransportError("connection refused"))

        result = self.runner.invoke(app, ["--json"])

        self.assertEqual(result.exit_code, 1)
        data = json.loads(result.stdout)
        self.assertFalse(data["success"])
        self.assertEqual(data["error"], "connection refused")
        self.assertEqual(data["details"]["error_type"], "TransportError")

    def test_version(self):
        result = self.runner.invoke(app, ["--version"])

        self.assertEqual(result.exit_code, 0)
        self.assertIn(__version__, result.stdout)
        self.extract.assert_not_called()

    def test_missing_config_file(self):
        result = self.runner.invoke(app, ["--config", "/nonexistent/clippy.yaml"])

        self.assertEqual(result.exit_code, 1)
        self.load_config.assert_not_called()
        self.extract.assert_not_called()

    def test_config_not_ready(self):
        self.load_config.side_effect = ConfigNotReady(
            "Created default config file at /tmp/config.yaml. Please edit it.",
            path="/tmp/config.yaml",
        )

        result = self.runner.invoke(app, [])

        self.assertEqual(result.exit_code, 0)
        self.assertIn("Please edit it", result.output)
        self.extract.assert_not_called()

    def test_config_error(self):
        self.load_config.side_effect = ConfigError("Invalid YAML")

        result = self.runner.invoke(app, [])

        self.assertEqual(result.exit_code, 1)
        self.assertIn("Invalid YAML", result.output)
        self.extract.assert_not_called()

    def test_config_not_ready_json(self):
        self.load_config.side_effect = ConfigNotReady(
            "Created default config file at /tmp/config.yaml. Please edit it.",
            path="/tmp/config.yaml",
        )

        result = self.runner.invoke(app, ["--json"])

        self.assertEqual(result.exit_code, 0)
        data = json.loads(result.stdout)
        self.assertTrue(data["success"])
        self.assertEqual(data["data"]["kind"], "config_not_ready")
        self.assertEqual(data["data"]["path"], "/tmp/config.yaml")
        self.extract.assert_not_called()

    def test_clipboard_access_failure_prints_backend_hint(self):
        self.extract.return_value = ExtractionOutcome.failure(ClipboardAccessError("backend unavailable"))

        result = self.runner.invoke(app, [])

        self.assertEqual(result.exit_code, 1)
        self.assertIn("backend unavailable", result.output)
        self.assertIn("wl-clipboard", result.output)

    def test_unknown_log_level_in_environment(self):
        self.extract.return_value = ExtractionOutcome.extracted("HELLO")

        result = self.runner.invoke(app, [], env={"CLIPPY_LOG_LEVEL": "verbose"})

        self.assertEqual(result.exit_code, 0)
        self.assertIsNone(result.exception)
        self.configure_logging.assert_called_once_with("WARNING")


if __name__ == "__main__":
    unittest.main()
