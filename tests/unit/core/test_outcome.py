"""
Test cases for structured parse attempts.

Tests focus on the success/failure shape of ParseOutcome and on failures that
the standard decoder reports as exceptions other than JSONDecodeError.
"""

import unittest

from jsonheal.core.outcome import NESTING_TOO_DEEP, ParseOutcome, try_parse


class TestTryParse(unittest.TestCase):
    """Test try_parse success and failure reporting."""

    def test_object_success(self):
        """Test that a well-formed object parses into a container outcome."""
        outcome = try_parse('{"a": 1, "b": [true, null]}')

        self.assertTrue(outcome.ok)
        self.assertTrue(outcome.is_container)
        self.assertEqual(outcome.value, {"a": 1, "b": [True, None]})
        self.assertIsNone(outcome.position)
        self.assertEqual(outcome.reason, "")

    def test_scalar_success_is_not_container(self):
        """Test that a scalar root parses but is not a container."""
        outcome = try_parse("42")

        self.assertTrue(outcome.ok)
        self.assertFalse(outcome.is_container)
        self.assertEqual(outcome.value, 42)

    def test_null_success_is_not_container(self):
        """Test that null parses to None without counting as a container."""
        outcome = try_parse("null")

        self.assertTrue(outcome.ok)
        self.assertIsNone(outcome.value)
        self.assertFalse(outcome.is_container)

    def test_failure_reports_position_and_reason(self):
        """Test that decode failures carry the decoder position."""
        outcome = try_parse('{"a": ')

        self.assertFalse(outcome.ok)
        self.assertFalse(outcome.is_container)
        self.assertIsNone(outcome.value)
        self.assertEqual(outcome.position, 6)
        self.assertEqual(outcome.reason, "Expecting value")

    def test_empty_text_fails(self):
        """Test that empty input is a failure, not an exception."""
        outcome = try_parse("")

        self.assertFalse(outcome.ok)
        self.assertEqual(outcome.position, 0)

    def test_deep_nesting_fails_without_raising(self):
        """Test that pathological nesting is reported as a failure."""
        depth = 100000
        outcome = try_parse("[" * depth + "]" * depth)

        self.assertFalse(outcome.ok)
        self.assertEqual(outcome.reason, NESTING_TOO_DEEP)

    def test_non_standard_constants_fail(self):
        """Test that NaN and Infinity are not accepted as JSON numbers."""
        for text in ["[NaN]", '{"x": Infinity}', "[-Infinity]"]:
            with self.subTest(text=text):
                outcome = try_parse(text)

                self.assertFalse(outcome.ok)
                self.assertIn("Non-standard constant", outcome.reason)

    def test_oversized_integer_does_not_raise(self):
        """Test that huge integer literals never escape as exceptions."""
        outcome = try_parse("[" + "1" * 5000 + "]")
        self.assertIsInstance(outcome, ParseOutcome)


class TestParseOutcome(unittest.TestCase):
    """Test ParseOutcome constructors."""

    def test_success_constructor(self):
        outcome = ParseOutcome.success([1])
        self.assertTrue(outcome.ok)
        self.assertEqual(outcome.value, [1])

    def test_failure_constructor(self):
        outcome = ParseOutcome.failure(3, "Expecting ',' delimiter")
        self.assertFalse(outcome.ok)
        self.assertEqual(outcome.position, 3)
        self.assertEqual(outcome.reason, "Expecting ',' delimiter")

    def test_outcome_is_immutable(self):
        """Test that outcomes cannot be modified after creation."""
        outcome = ParseOutcome.success({})
        with self.assertRaises(AttributeError):
            outcome.ok = False  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()
