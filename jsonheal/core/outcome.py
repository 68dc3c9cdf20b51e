"""
Structured parse attempts.

A single attempt to decode text as JSON either succeeds with a value or fails
at a position for a reason. Callers branch on ``ok`` and never need to inspect
decoder message text.
"""

import json
from dataclasses import dataclass
from typing import Any, Optional

NESTING_TOO_DEEP = "maximum nesting depth exceeded"


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"Non-standard constant {name}")


@dataclass(frozen=True)
class ParseOutcome:
    """Result of one parse attempt."""

    ok: bool
    value: Any = None
    position: Optional[int] = None
    reason: str = ""

    @property
    def is_container(self) -> bool:
        """True when the attempt succeeded with an object or array root."""
        return self.ok and isinstance(self.value, (dict, list))

    @classmethod
    def success(cls, value: Any) -> "ParseOutcome":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, position: int, reason: str) -> "ParseOutcome":
        return cls(ok=False, position=position, reason=reason)


def try_parse(text: str) -> ParseOutcome:
    """
    Attempt to decode text with the standard JSON decoder.

    Args:
        text: Text to decode

    Returns:
        ParseOutcome describing the value or where decoding stopped
    """
    try:
        value = json.loads(text, parse_constant=_reject_constant)
        return ParseOutcome.success(value)
    except json.JSONDecodeError as e:
        return ParseOutcome.failure(e.pos, e.msg)
    except ValueError as e:
        # Rejected constants and integer literals beyond the digit limit
        return ParseOutcome.failure(0, str(e))
    except RecursionError:
        return ParseOutcome.failure(0, NESTING_TOO_DEEP)
