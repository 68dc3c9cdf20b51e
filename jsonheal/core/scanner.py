"""
String-aware structural scanner.

Walks candidate text once, tracking which objects and arrays are still open
so that the exact closing tokens needed to balance the text can be appended.
"""

from dataclasses import dataclass, field
from typing import Optional

CLOSERS = {"{": "}", "[": "]"}

# Persistent stack node: (closer, node below it)
StackNode = Optional[tuple[str, "StackNode"]]


@dataclass
class ScanState:
    """Structural state at the end of a scan."""

    stack: list[str] = field(default_factory=list)
    in_string: bool = False
    escaped: bool = False

    @property
    def depth(self) -> int:
        """Number of structures still open."""
        return len(self.stack)

    @property
    def balanced(self) -> bool:
        return not self.stack

    def closing_sequence(self) -> str:
        """Closing tokens needed to balance the text, innermost first."""
        return "".join(reversed(self.stack))

    def step(self, char: str) -> bool:
        """
        Advance the state by one character.

        Returns:
            True if the character closed an open object or array
        """
        if self.escaped:
            self.escaped = False
            return False

        if self.in_string:
            if char == "\\":
                self.escaped = True
            elif char == '"':
                self.in_string = False
            return False

        if char == '"':
            self.in_string = True
        elif char in CLOSERS:
            self.stack.append(CLOSERS[char])
        elif self.stack and char == self.stack[-1]:
            self.stack.pop()
            return True
        return False


def scan_structure(text: str) -> ScanState:
    """
    Scan text left to right and record unclosed objects and arrays.

    Brackets inside double-quoted strings are ignored, and backslash escapes
    inside strings are honoured. A closer matching the innermost open
    structure closes it; any other closer is left for the parser to reject.

    Args:
        text: Candidate text

    Returns:
        ScanState with the outstanding closing obligations
    """
    state = ScanState()
    for char in text:
        state.step(char)
    return state


def balance(text: str) -> str:
    """Append the closing tokens that balance every open object and array."""
    return text + scan_structure(text).closing_sequence()


class PrefixClosings:
    """
    Closing sequences for every prefix of a text, computed in one pass.

    The scan of ``text[:k]`` is a prefix of the scan of ``text``, so each
    prefix's open structures are recorded as a node in a shared persistent
    stack instead of rescanning after every trim.
    """

    def __init__(self, text: str):
        state = ScanState()
        node: StackNode = None
        self._nodes: list[StackNode] = [node]

        for char in text:
            depth = state.depth
            state.step(char)
            if state.depth > depth:
                node = (state.stack[-1], node)
            elif state.depth < depth and node is not None:
                node = node[1]
            self._nodes.append(node)

    def __len__(self) -> int:
        return len(self._nodes) - 1

    def closing_sequence(self, length: int) -> str:
        """Closing tokens that balance ``text[:length]``, innermost first."""
        closers = []
        node = self._nodes[length]
        while node is not None:
            closers.append(node[0])
            node = node[1]
        return "".join(closers)
