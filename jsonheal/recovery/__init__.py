"""
jsonheal Recovery Results.

This module provides the result types returned by recovery calls.
"""

from .result import (
    UNRECOVERABLE,
    RecoveryPhase,
    RecoveryResult,
    RecoveryStats,
    Unrecoverable,
)

__all__ = [
    "UNRECOVERABLE",
    "Unrecoverable",
    "RecoveryPhase",
    "RecoveryResult",
    "RecoveryStats",
]
