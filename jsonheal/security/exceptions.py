"""
Exception types for jsonheal.

Recovery itself never raises for malformed input; these exceptions exist for
callers who prefer exceptions over branching on the unrecoverable sentinel,
and for limit violations detected before any scanning starts.
"""

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from ..core.outcome import ParseOutcome


class HealError(Exception):
    """Base class for all jsonheal errors."""


class SecurityError(HealError):
    """Raised when a candidate exceeds the configured limits."""


class UnrecoverableError(HealError, ValueError):
    """Raised when no recovery phase produced a container-rooted value."""

    def __init__(
        self,
        message: str,
        outcome: Optional["ParseOutcome"] = None,
        result: Optional[Any] = None,
    ):
        self.outcome = outcome
        self.result = result
        if outcome is not None and not outcome.ok:
            message = f"{message}: {outcome.reason} (char {outcome.position})"
        super().__init__(message)
