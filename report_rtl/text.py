"""Directional wrapping of report text."""

from __future__ import annotations

from typing import Optional

from .marks import ALL_MARKS, PDF, RLE, RLM

_SUFFIX = PDF + RLM


def fix_direction(text: Optional[str]) -> Optional[str]:
    """
    Wrap text in a right-to-left embedding.

    The embedding sets an RTL base direction for the content, PDF closes it and
    the trailing RLM pulls whatever follows the text back to RTL. Blank input
    (None, empty or whitespace only) is returned unchanged.

    Args:
        text: Text to wrap

    Returns:
        ``RLE + text + PDF + RLM`` or the blank input as is
    """
    if text is None or not text.strip():
        return text
    return RLE + text + _SUFFIX


def is_wrapped(text: Optional[str]) -> bool:
    """Check whether text already carries the embedding produced by fix_direction."""
    if not text:
        return False
    return text.startswith(RLE) and text.endswith(_SUFFIX) and len(text) > len(_SUFFIX)


def ensure_direction(text: Optional[str]) -> Optional[str]:
    """Like fix_direction, but leaves already wrapped text alone."""
    if is_wrapped(text):
        return text
    return fix_direction(text)


def strip_direction(text: Optional[str]) -> Optional[str]:
    """Remove every directional mark from text."""
    if not text:
        return text
    return "".join(ch for ch in text if ch not in ALL_MARKS)


def escape_marks(text: Optional[str]) -> str:
    """Render directional marks as \\uXXXX escapes for display."""
    if text is None:
        return ""
    return "".join(f"\\u{ord(ch):04X}" if ch in ALL_MARKS else ch for ch in text)
