"""
jsonheal - recover structured JSON from truncated or malformed LLM output.

Output captured from an LLM-driving process is supposed to be a single JSON
object or array, but it is often cut off mid-value or left with unclosed
brackets. jsonheal gets back the largest structure it can reach by appending
missing closers and trimming the broken tail, and tells you plainly when
nothing is recoverable.

Quick Start:
    from jsonheal import recover, UNRECOVERABLE

    data = recover('{"a": [1, 2')          # {'a': [1, 2]}
    if recover('42') is UNRECOVERABLE:      # bare scalars are rejected
        ...

    # Diagnostics
    from jsonheal import recover_detailed
    result = recover_detailed('{"a": 1, "b": "cut off')
    result.value, result.phase, result.stats.trimmed_chars

    # Exceptions instead of a sentinel
    import jsonheal
    data = jsonheal.loads(output)           # raises UnrecoverableError

    # Dig the document out of markdown and prose first
    from jsonheal import RecoveryConfig
    data = recover(chatty_output, RecoveryConfig.lenient())
"""

from .core.outcome import ParseOutcome, try_parse
from .core.recoverer import StructureRecoverer, loads, recover, recover_detailed
from .core.scanner import balance, scan_structure
from .recovery.result import (
    UNRECOVERABLE,
    RecoveryPhase,
    RecoveryResult,
    RecoveryStats,
    Unrecoverable,
)
from .security.exceptions import HealError, SecurityError, UnrecoverableError
from .utils.config import PreprocessingConfig, RecoveryConfig, RecoveryLimits

__version__ = "0.1.0"
__author__ = "jsonheal contributors"

__all__ = [
    # Recovery functions
    "recover", "recover_detailed", "loads", "StructureRecoverer",
    # Building blocks
    "try_parse", "ParseOutcome", "scan_structure", "balance",
    # Results
    "UNRECOVERABLE", "Unrecoverable", "RecoveryPhase", "RecoveryResult", "RecoveryStats",
    # Configuration classes
    "RecoveryConfig", "RecoveryLimits", "PreprocessingConfig",
    # Exception classes
    "HealError", "UnrecoverableError", "SecurityError",
]
