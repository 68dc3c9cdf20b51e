"""
Preprocessing pipeline for composable extraction steps.

This module implements the pipeline pattern so extraction steps can be
switched on and off through configuration.
"""

from typing import Optional

from ..core.interfaces import PreprocessingStep
from ..utils.config import PreprocessingConfig
from .extractors import ContentExtractor, MarkdownExtractor


class PreprocessingPipeline:
    """Manages a sequence of preprocessing steps applied to candidate text."""

    def __init__(self, steps: Optional[list[PreprocessingStep]] = None):
        self.steps = steps or []

    def add_step(self, step: PreprocessingStep) -> None:
        """Add a preprocessing step to the pipeline."""
        self.steps.append(step)

    def process(self, text: str, config: Optional[PreprocessingConfig] = None) -> str:
        """Apply all applicable preprocessing steps to the text."""
        if config is None:
            config = PreprocessingConfig()

        result = text
        for step in self.steps:
            if step.should_apply(config):
                result = step.process(result, config)
        return result

    @classmethod
    def create_default_pipeline(cls) -> "PreprocessingPipeline":
        """Create the standard pipeline: markdown fence first, then prose."""
        pipeline = cls()
        pipeline.add_step(MarkdownExtractor())
        pipeline.add_step(ContentExtractor())
        return pipeline
