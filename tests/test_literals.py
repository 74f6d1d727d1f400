"""
Tests for literal decoding and character classes.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from lox.lexer.literals import (
    decode_number, decode_string, is_alpha, is_alphanumeric, is_digit
)


class TestDecodeNumber(unittest.TestCase):

    def test_integer(self):
        self.assertEqual(decode_number("42"), 42.0)
        self.assertEqual(decode_number("007"), 7.0)
        self.assertIsInstance(decode_number("1"), float)

    def test_fraction(self):
        self.assertAlmostEqual(decode_number("3.14"), 3.14)
        self.assertEqual(decode_number("0.5"), 0.5)

    def test_rejects_non_lox_numbers(self):
        for lexeme in ("", "1.", ".5", "1e3", "-1", "1_000", "abc", "1.2.3", " 1"):
            with self.subTest(lexeme=lexeme):
                with self.assertRaises(ValueError):
                    decode_number(lexeme)


class TestDecodeString(unittest.TestCase):

    def test_content_between_quotes(self):
        self.assertEqual(decode_string('"hello"'), "hello")
        self.assertEqual(decode_string('""'), "")

    def test_body_is_raw(self):
        self.assertEqual(decode_string('"a\\tb"'), "a\\tb")
        self.assertEqual(decode_string('"line1\nline2"'), "line1\nline2")

    def test_rejects_unquoted(self):
        for lexeme in ("", '"', "abc", '"abc', "abc\"", "'abc'"):
            with self.subTest(lexeme=lexeme):
                with self.assertRaises(ValueError):
                    decode_string(lexeme)


class TestCharacterClasses(unittest.TestCase):

    def test_digits_are_ascii_only(self):
        self.assertTrue(all(is_digit(c) for c in "0123456789"))
        for char in ("²", "٣", "a", ".", "\0"):
            self.assertFalse(is_digit(char))

    def test_alpha(self):
        self.assertTrue(is_alpha("a"))
        self.assertTrue(is_alpha("Z"))
        self.assertTrue(is_alpha("_"))
        self.assertFalse(is_alpha("1"))
        self.assertFalse(is_alpha("é"))
        self.assertFalse(is_alpha("\0"))

    def test_alphanumeric(self):
        self.assertTrue(is_alphanumeric("9"))
        self.assertTrue(is_alphanumeric("_"))
        self.assertFalse(is_alphanumeric("-"))


if __name__ == "__main__":
    unittest.main()
