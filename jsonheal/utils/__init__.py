"""
jsonheal Configuration.

This module provides the configuration dataclasses for recovery calls.
"""

from .config import PreprocessingConfig, RecoveryConfig, RecoveryLimits

__all__ = ["PreprocessingConfig", "RecoveryConfig", "RecoveryLimits"]
