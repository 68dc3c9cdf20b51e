"""
Candidate preprocessing module.

This module provides optional extraction steps that cut LLM output down to the
JSON-like document before recovery runs.
"""

from .base import PreprocessingStepBase
from .extractors import ContentExtractor, MarkdownExtractor
from .pipeline import PreprocessingPipeline

__all__ = [
    "PreprocessingPipeline",
    "PreprocessingStepBase",
    "MarkdownExtractor",
    "ContentExtractor",
]
