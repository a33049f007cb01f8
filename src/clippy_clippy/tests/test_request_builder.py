#!/usr/bin/env python3
"""
Unit tests for core/request_builder.py
"""

import os
import sys
import unittest

from pydantic import ValidationError as SchemaValidationError

# Add parent directory to path to import module
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from clippy_clippy.core.constants import MARKDOWN_PROMPT, PLAIN_TEXT_PROMPT
from clippy_clippy.core.request_builder import build_completion_request, select_prompt

DATA_URI = "data:image/png;base64,iVBORw0KGgo="


class TestRequestBuilder(unittest.TestCase):
    """Test cases for completion request assembly"""

    def test_select_prompt(self):
        self.assertEqual(select_prompt(True), MARKDOWN_PROMPT)
        self.assertEqual(select_prompt(False), PLAIN_TEXT_PROMPT)

    def test_markdown_prompt_wording(self):
        """Markdown prompt asks for GFM, hyphen bullets and no image markdown"""
        self.assertIn("GitHub Flavored Markdown", MARKDOWN_PROMPT)
        self.assertIn("hyphens", MARKDOWN_PROMPT)
        self.assertIn("Don't use any image related markdown", MARKDOWN_PROMPT)

    def test_payload_shape(self):
        """Serialized body matches the wire format exactly"""
        request = build_completion_request(DATA_URI, markdown=False, model="gpt-4o", max_tokens=512)

        self.assertEqual(request.to_payload(), {
            "model": "gpt-4o",
            "messages": [{
                "role": "user",
                "content": [
                    {"type": "text", "text": PLAIN_TEXT_PROMPT},
                    {"type": "image_url", "image_url": {"url": DATA_URI, "detail": "high"}},
                ],
            }],
            "max_tokens": 512,
        })

    def test_text_part_precedes_image(self):
        request = build_completion_request(DATA_URI, markdown=True, model="m", max_tokens=1)

        self.assertEqual(len(request.messages), 1)
        content = request.messages[0].content
        self.assertEqual([part.type for part in content], ["text", "image_url"])
        self.assertEqual(content[0].text, MARKDOWN_PROMPT)

    def test_max_tokens_must_be_positive(self):
        with self.assertRaises(SchemaValidationError):
            build_completion_request(DATA_URI, markdown=False, model="m", max_tokens=0)


if __name__ == "__main__":
    unittest.main()
