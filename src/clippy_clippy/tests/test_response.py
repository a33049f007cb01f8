#!/usr/bin/env python3
"""
Unit tests for core/response.py
"""

import json
import os
import sys
import unittest

# Add parent directory to path to import module
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from clippy_clippy.core.errors import ApiError, HttpError, MalformedResponse, NoChoices
from clippy_clippy.core.response import (
    check_response,
    interpret_response,
    is_success_status,
    parse_completion_response,
)

BAD_KEY_BODY = '{"error":{"message":"bad key","type":"invalid_request_error"}}'


class TestResponseInterpretation(unittest.TestCase):
    """Test cases for response classification"""

    def test_error_object_at_401(self):
        with self.assertRaises(ApiError) as ctx:
            interpret_response(401, BAD_KEY_BODY)

        self.assertEqual(ctx.exception.api_message, "bad key")
        self.assertEqual(ctx.exception.kind, "invalid_request_error")
        self.assertEqual(ctx.exception.status_code, 401)
        self.assertIn("bad key", str(ctx.exception))

    def test_error_object_wins_at_200(self):
        """A success status does not hide an embedded error object"""
        body = json.dumps({
            "choices": [{"message": {"content": "ignored"}}],
            "error": {"message": "quota exceeded", "type": "insufficient_quota"},
        })
        with self.assertRaises(ApiError) as ctx:
            interpret_response(200, body)

        self.assertEqual(ctx.exception.kind, "insufficient_quota")
        self.assertIn("despite success status", str(ctx.exception))

    def test_error_object_without_type(self):
        with self.assertRaises(ApiError) as ctx:
            interpret_response(400, '{"error":{"message":"bad image"}}')

        self.assertIsNone(ctx.exception.kind)
        self.assertEqual(str(ctx.exception), "API request failed with status 400: bad image")

    def test_null_content_is_empty_text(self):
        text, response = interpret_response(200, '{"choices":[{"message":{"content":null}}]}')
        self.assertEqual(text, "")
        self.assertIsNone(response.choices[0].finish_reason)

    def test_empty_choices(self):
        with self.assertRaises(NoChoices):
            interpret_response(200, '{"choices":[]}')

    def test_missing_choices(self):
        with self.assertRaises(NoChoices):
            interpret_response(200, '{}')

    def test_non_json_error_body(self):
        with self.assertRaises(HttpError) as ctx:
            interpret_response(503, "Service Unavailable")

        self.assertEqual(ctx.exception.status_code, 503)
        self.assertEqual(ctx.exception.raw_body, "Service Unavailable")
        self.assertIn("Service Unavailable", str(ctx.exception))

    def test_json_error_body_without_error_object(self):
        """Parseable body without an error record keeps the raw text"""
        body = '{"detail": "Not Found"}'
        with self.assertRaises(HttpError) as ctx:
            interpret_response(404, body)
        self.assertEqual(ctx.exception.raw_body, body)

    def test_string_error_field_is_http_error(self):
        body = '{"error": "Unauthorized"}'
        with self.assertRaises(HttpError) as ctx:
            interpret_response(401, body)
        self.assertEqual(ctx.exception.raw_body, body)

    def test_malformed_success_body(self):
        for body in ["", "<html>ok</html>", '{"choices": "nope"}', "[1, 2]"]:
            with self.assertRaises(MalformedResponse, msg=body) as ctx:
                interpret_response(200, body)
            self.assertEqual(ctx.exception.raw_body, body)

    def test_first_choice_and_usage(self):
        body = json.dumps({
            "choices": [
                {"message": {"content": "HELLO"}, "finish_reason": "stop"},
                {"message": {"content": "second"}, "finish_reason": "length"},
            ],
            "usage": {"prompt_tokens": 10, "completion_tokens": 2, "total_tokens": 12},
            "id": "chatcmpl-123",
        })
        text, response = interpret_response(200, body)

        self.assertEqual(text, "HELLO")
        self.assertEqual(response.choices[0].finish_reason, "stop")
        self.assertEqual(response.usage.total_tokens, 12)

    def test_other_success_statuses(self):
        text, _ = interpret_response(201, '{"choices":[{"message":{"content":"ok"}}]}')
        self.assertEqual(text, "ok")
        self.assertTrue(is_success_status(299))
        self.assertFalse(is_success_status(300))
        self.assertFalse(is_success_status(199))

    def test_parse_completion_response(self):
        parsed, error = parse_completion_response(BAD_KEY_BODY)
        self.assertIsNone(error)
        self.assertEqual(parsed.choices, [])
        self.assertEqual(parsed.error.message, "bad key")

        parsed, error = parse_completion_response("not json")
        self.assertIsNone(parsed)
        self.assertTrue(error)

    def test_check_response_returns_document(self):
        response = check_response(200, '{"choices":[{"message":{"content":"x"}}]}')
        self.assertEqual(response.choices[0].message.content, "x")


if __name__ == "__main__":
    unittest.main()
