"""
Structure recovery for jsonheal - heal truncated or malformed LLM output.

The recoverer tries three phases in order and returns the first
container-rooted value it reaches:

1. parse the candidate as-is;
2. append the closing tokens that balance every open object and array;
3. drop one trailing character at a time, re-balancing after each cut.

It never rewrites interior characters. Apart from the optional extraction
steps, the only edits are appended closers and removed trailing characters.
"""

import json
import logging
from typing import Any, Optional, Union

from ..preprocessing.pipeline import PreprocessingPipeline
from ..recovery.result import (
    UNRECOVERABLE,
    RecoveryPhase,
    RecoveryResult,
    RecoveryStats,
)
from ..security.exceptions import SecurityError
from ..security.limits import LimitValidator
from ..utils.config import RecoveryConfig
from .outcome import ParseOutcome, try_parse
from .scanner import PrefixClosings

Candidate = Union[str, bytes, bytearray]

JSON_WHITESPACE = " \t\n\r"


class StructureRecoverer:
    """
    Recovers a structured JSON value from candidate text.

    Instances hold configuration only; every call works on its own local
    copy of the text, so one recoverer can be shared across threads.
    """

    def __init__(self, config: Optional[RecoveryConfig] = None):
        self.config = config or RecoveryConfig()
        self.validator = LimitValidator(self.config.limits)
        self.pipeline = PreprocessingPipeline.create_default_pipeline()
        self.logger = self.config.logger or logging.getLogger(__name__)

    def recover(self, candidate: Candidate) -> RecoveryResult:
        """
        Recover a structured value, returning detailed results.

        Args:
            candidate: Raw text captured from the generating process

        Returns:
            RecoveryResult with the value (or UNRECOVERABLE) and diagnostics
        """
        text = self._coerce_text(candidate)
        stats = RecoveryStats()

        try:
            self.validator.validate_input_size(text)
        except SecurityError as e:
            self.logger.warning("Skipping recovery: %s", e)
            return RecoveryResult(stats=stats, reason=str(e))

        if self.config.preprocessing.enabled:
            text = self.pipeline.process(text, self.config.preprocessing)

        outcome = self._attempt(text, stats)
        if self._accepts(outcome):
            return RecoveryResult(outcome.value, RecoveryPhase.DIRECT, stats, outcome)

        self.logger.debug("Direct parse rejected: %s", outcome.reason or "scalar root")

        # Balancing and trimming never change the root kind
        if not self.config.allow_scalar_root and not self._has_container_start(text):
            return RecoveryResult(
                stats=stats,
                last_outcome=outcome,
                reason="Candidate root is not an object or array",
            )

        closings = PrefixClosings(text)
        outcome = self._attempt_prefix(text, len(text), closings, stats)
        if self._accepts(outcome):
            self.logger.debug("Recovered by appending %r", stats.appended)
            return RecoveryResult(outcome.value, RecoveryPhase.BALANCED, stats, outcome)

        for length in range(len(text) - 1, -1, -1):
            stats.trimmed_chars = len(text) - length
            outcome = self._attempt_prefix(text, length, closings, stats)
            if self._accepts(outcome):
                self.logger.debug(
                    "Recovered after trimming %d chars and appending %r",
                    stats.trimmed_chars,
                    stats.appended,
                )
                return RecoveryResult(
                    outcome.value, RecoveryPhase.TRIMMED, stats, outcome
                )

        self.logger.debug(
            "Unrecoverable after %d parse attempts", stats.parse_attempts
        )
        stats.appended = ""
        return RecoveryResult(
            stats=stats,
            last_outcome=outcome,
            reason="No structured value could be recovered",
        )

    def _accepts(self, outcome: ParseOutcome) -> bool:
        if self.config.allow_scalar_root:
            return outcome.ok
        return outcome.is_container

    @staticmethod
    def _has_container_start(text: str) -> bool:
        return text.lstrip(JSON_WHITESPACE)[:1] in ("{", "[")

    def _attempt(self, text: str, stats: RecoveryStats) -> ParseOutcome:
        stats.parse_attempts += 1
        return try_parse(text)

    def _attempt_prefix(
        self, text: str, length: int, closings: PrefixClosings, stats: RecoveryStats
    ) -> ParseOutcome:
        stats.appended = closings.closing_sequence(length)
        return self._attempt(text[:length] + stats.appended, stats)

    @staticmethod
    def _coerce_text(candidate: Candidate) -> str:
        if isinstance(candidate, str):
            return candidate
        if isinstance(candidate, (bytes, bytearray)):
            data = bytes(candidate)
            return data.decode(json.detect_encoding(data), errors="replace")
        raise TypeError(
            f"the candidate must be str, bytes or bytearray, "
            f"not {candidate.__class__.__name__}"
        )


def recover_detailed(
    candidate: Candidate, config: Optional[RecoveryConfig] = None
) -> RecoveryResult:
    """
    Recover a structured value and report how it was obtained.

    Args:
        candidate: Raw text captured from the generating process
        config: Optional recovery configuration

    Returns:
        RecoveryResult with value, phase, stats and the last parse outcome
    """
    return StructureRecoverer(config).recover(candidate)


def recover(candidate: Candidate, config: Optional[RecoveryConfig] = None) -> Any:
    """
    Recover a structured value from candidate text.

    Never raises for malformed input. The caller branches on the result::

        value = recover(output)
        if value is UNRECOVERABLE:
            ...

    Args:
        candidate: Raw text captured from the generating process
        config: Optional recovery configuration

    Returns:
        The recovered dict or list, or UNRECOVERABLE
    """
    result = recover_detailed(candidate, config)
    return result.value if result.ok else UNRECOVERABLE


def loads(candidate: Candidate, config: Optional[RecoveryConfig] = None) -> Any:
    """
    Recover a structured value, raising when nothing can be recovered.

    Args:
        candidate: Raw text captured from the generating process
        config: Optional recovery configuration

    Returns:
        The recovered dict or list

    Raises:
        UnrecoverableError: If no phase produced a container-rooted value
    """
    return recover_detailed(candidate, config).unwrap()
