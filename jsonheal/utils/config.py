"""
Configuration and limits for jsonheal recovery.

This module defines the limits and configuration options that shape how
candidate text is recovered.
"""

import logging
from dataclasses import dataclass, field, fields
from typing import Optional


@dataclass
class RecoveryLimits:
    """Limits that bound the work a single recovery call may do."""

    max_input_size: int = 10 * 1024 * 1024

    def __post_init__(self) -> None:
        if self.max_input_size <= 0:
            raise ValueError("max_input_size must be positive")


@dataclass
class PreprocessingConfig:
    """Granular control over the optional extraction steps."""

    extract_from_markdown: bool = False
    extract_first_json: bool = False

    @property
    def enabled(self) -> bool:
        """Whether any preprocessing step is switched on."""
        return self.extract_from_markdown or self.extract_first_json

    @classmethod
    def strict(cls) -> "PreprocessingConfig":
        """Create a configuration with every extraction step disabled."""
        return cls()

    @classmethod
    def lenient(cls) -> "PreprocessingConfig":
        """Create a configuration that digs JSON out of markdown and prose."""
        return cls(extract_from_markdown=True, extract_first_json=True)

    @classmethod
    def from_features(cls, enabled_features: set[str]) -> "PreprocessingConfig":
        """Create configuration from a set of enabled feature names."""
        known = {f.name for f in fields(cls)}
        return cls(**{name: True for name in enabled_features if name in known})


@dataclass
class RecoveryConfig:
    """Configuration options for jsonheal recovery."""

    limits: RecoveryLimits = field(default_factory=RecoveryLimits)
    preprocessing: PreprocessingConfig = field(default_factory=PreprocessingConfig)
    allow_scalar_root: bool = False
    logger: Optional[logging.Logger] = None

    @classmethod
    def default(cls) -> "RecoveryConfig":
        """Create the default configuration: container roots, no extraction."""
        return cls()

    @classmethod
    def lenient(cls) -> "RecoveryConfig":
        """Create a configuration that also extracts JSON from surrounding text."""
        return cls(preprocessing=PreprocessingConfig.lenient())

    @property
    def max_input_size(self) -> int:
        """Maximum candidate size in characters."""
        return self.limits.max_input_size

