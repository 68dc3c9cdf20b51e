"""
Input limits for jsonheal.
This module rejects candidates that are too large to recover cheaply.
"""

from ..utils.config import RecoveryLimits
from .exceptions import SecurityError


class LimitValidator:
    """Validates candidate text against recovery limits."""

    def __init__(self, limits: RecoveryLimits):
        self.limits = limits

    def validate_input_size(self, text: str) -> None:
        """Validate that input text size is within limits."""
        if len(text) > self.limits.max_input_size:
            raise SecurityError(
                f"Input size {len(text)} exceeds limit {self.limits.max_input_size}"
            )
