"""
Test cases for input limits and exception types.

Tests focus on rejecting oversized candidates and on the exception hierarchy
used by the raising convenience API.
"""

import unittest

from jsonheal.core.outcome import ParseOutcome
from jsonheal.security.exceptions import HealError, SecurityError, UnrecoverableError
from jsonheal.security.limits import LimitValidator
from jsonheal.utils.config import RecoveryLimits


class TestLimitValidator(unittest.TestCase):
    """Test LimitValidator input size checks."""

    def setUp(self):
        self.validator = LimitValidator(RecoveryLimits(max_input_size=1000))

    def test_input_size_validation_pass(self):
        self.validator.validate_input_size("x" * 1000)

    def test_input_size_validation_fail(self):
        with self.assertRaises(SecurityError) as cm:
            self.validator.validate_input_size("x" * 1001)

        self.assertIn("Input size 1001 exceeds limit 1000", str(cm.exception))


class TestExceptionHierarchy(unittest.TestCase):
    """Test exception types."""

    def test_hierarchy(self):
        self.assertTrue(issubclass(SecurityError, HealError))
        self.assertTrue(issubclass(UnrecoverableError, HealError))
        self.assertTrue(issubclass(UnrecoverableError, ValueError))

    def test_message_includes_failure_position(self):
        """Test that the last parse failure is folded into the message."""
        outcome = ParseOutcome.failure(7, "Expecting value")
        error = UnrecoverableError("Nothing recovered", outcome=outcome)

        self.assertEqual(str(error), "Nothing recovered: Expecting value (char 7)")
        self.assertIs(error.outcome, outcome)
        self.assertIsNone(error.result)

    def test_message_without_outcome(self):
        self.assertEqual(str(UnrecoverableError("Too big")), "Too big")


if __name__ == "__main__":
    unittest.main()
