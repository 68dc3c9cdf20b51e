"""
Base classes for preprocessing steps.

Each step is switched on by one boolean field of PreprocessingConfig, named by
the step's ``config_flag``.
"""

from ..utils.config import PreprocessingConfig


class PreprocessingStepBase:
    """Base class for extraction steps keyed on a configuration flag."""

    config_flag = ""

    def should_apply(self, config: PreprocessingConfig) -> bool:
        """Apply when the step's configuration flag is set."""
        return bool(self.config_flag) and bool(getattr(config, self.config_flag, False))

    def process(self, text: str, config: PreprocessingConfig) -> str:
        """Process the text. Must be implemented by subclasses."""
        raise NotImplementedError("Subclasses must implement process()")
