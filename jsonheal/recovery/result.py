"""
Recovery results for jsonheal.

This module defines what a recovery call hands back: the recovered value or
the unrecoverable sentinel, plus the phase that produced it and how much work
it took.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from ..core.outcome import ParseOutcome
from ..security.exceptions import UnrecoverableError


class RecoveryPhase(Enum):
    """Phase of the recovery algorithm that produced a value."""

    DIRECT = "direct"  # Candidate parsed as-is
    BALANCED = "balanced"  # Closing tokens appended
    TRIMMED = "trimmed"  # Trailing characters removed, then balanced


class Unrecoverable:
    """Marker type for a candidate that yielded no structured value."""

    _instance: Optional["Unrecoverable"] = None

    def __new__(cls) -> "Unrecoverable":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNRECOVERABLE"

    def __reduce__(self) -> str:
        return "UNRECOVERABLE"


UNRECOVERABLE = Unrecoverable()


@dataclass
class RecoveryStats:
    """Work done by a single recovery call."""

    parse_attempts: int = 0
    trimmed_chars: int = 0
    appended: str = ""


@dataclass
class RecoveryResult:
    """Result of a recovery call with diagnostics."""

    value: Any = UNRECOVERABLE
    phase: Optional[RecoveryPhase] = None
    stats: RecoveryStats = field(default_factory=RecoveryStats)
    last_outcome: Optional[ParseOutcome] = None
    reason: str = ""

    @property
    def ok(self) -> bool:
        """Whether a structured value was recovered."""
        return self.phase is not None

    @property
    def unrecoverable(self) -> bool:
        return not self.ok

    def unwrap(self) -> Any:
        """Return the recovered value, raising UnrecoverableError otherwise."""
        if self.ok:
            return self.value
        raise UnrecoverableError(
            self.reason or "No structured value could be recovered",
            outcome=self.last_outcome,
            result=self,
        )
