"""
Content extraction preprocessing steps.

LLM output often wraps the JSON document in a markdown code fence or in
conversational prose. These steps cut the candidate down to the part that
looks like the document. They only ever drop text; they never add any.
"""

import re

from ..core.scanner import ScanState
from ..utils.config import PreprocessingConfig
from .base import PreprocessingStepBase

# The info string runs to the end of the opening line; a bare json tag may
# also share the line with the body
FENCE_PATTERN = re.compile(
    r"```(?:[^\n`{\[]*\n|(?:json|javascript|js)[ \t]*)?(.*?)(?:\n?```|\Z)",
    re.DOTALL | re.IGNORECASE,
)


class MarkdownExtractor(PreprocessingStepBase):
    """Extracts JSON from the first markdown code fence."""

    config_flag = "extract_from_markdown"

    def process(self, text: str, config: PreprocessingConfig) -> str:
        return self.extract_from_code_block(text)

    @staticmethod
    def extract_from_code_block(text: str) -> str:
        """
        Return the body of the first fenced code block.

        An unterminated fence yields everything after the opening marker,
        which is what truncated output usually looks like.
        """
        match = FENCE_PATTERN.search(text)
        if match:
            return match.group(1).strip()
        return text


class ContentExtractor(PreprocessingStepBase):
    """Drops prose around the first JSON-like structure."""

    config_flag = "extract_first_json"

    def process(self, text: str, config: PreprocessingConfig) -> str:
        return self.extract_first_json(text)

    @staticmethod
    def extract_first_json(text: str) -> str:
        """Extract the first JSON-like structure from text."""
        start_pos = -1
        for i, char in enumerate(text):
            if char in "{[":
                start_pos = i
                break

        if start_pos == -1:
            return text

        state = ScanState()
        for i in range(start_pos, len(text)):
            if state.step(text[i]) and state.balanced:
                return text[start_pos : i + 1]

        # Structure never closed; keep the tail for the recoverer
        return text[start_pos:]
