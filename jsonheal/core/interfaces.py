"""
Core interfaces for the recovery system.

This module defines the contracts that pluggable components implement.
"""

from typing import Any, Protocol


class PreprocessingStep(Protocol):
    """Protocol for preprocessing steps in the preprocessing pipeline."""

    def process(self, text: str, config: Any) -> str:
        """Process the input text according to this preprocessing step."""
        ...

    def should_apply(self, config: Any) -> bool:
        """Determine if this step should be applied given the configuration."""
        ...
