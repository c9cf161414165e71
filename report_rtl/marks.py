"""Unicode directional formatting characters."""

from __future__ import annotations

from enum import Enum

# Left-To-Right Mark
LRM = "\u200e"
# Right-To-Left Mark
RLM = "\u200f"
# Left-To-Right Embedding
LRE = "\u202a"
# Right-To-Left Embedding
RLE = "\u202b"
# Pop Directional Formatting
PDF = "\u202c"
# Left-To-Right Override
LRO = "\u202d"
# Right-To-Left Override
RLO = "\u202e"


class DirectionalMark(str, Enum):
    """Named directional marks, in code point order."""

    LRM = "\u200e"
    RLM = "\u200f"
    LRE = "\u202a"
    RLE = "\u202b"
    PDF = "\u202c"
    LRO = "\u202d"
    RLO = "\u202e"

    @property
    def code_point(self) -> str:
        return f"U+{ord(self.value):04X}"


ALL_MARKS = frozenset(mark.value for mark in DirectionalMark)

__all__ = ["LRM", "RLM", "LRE", "RLE", "PDF", "LRO", "RLO", "DirectionalMark", "ALL_MARKS"]
