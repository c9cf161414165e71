"""Static vs. data-bound text classification."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from .contracts import BindingLike

DEFAULT_TEXT_PROPERTY = "Text"


class TextSource(str, Enum):
    STATIC = "static"
    DYNAMIC = "dynamic"


def find_text_binding(element: Any, property_name: str = DEFAULT_TEXT_PROPERTY) -> Optional[BindingLike]:
    """
    Find the binding that drives an element's text.

    Bindings on other properties are ignored, as are malformed bindings
    without a property name or data member.

    Args:
        element: Label or table cell
        property_name: Bound property that carries the displayed text

    Returns:
        The first matching binding, or None
    """
    for binding in getattr(element, "bindings", None) or ():
        if getattr(binding, "property_name", None) != property_name:
            continue
        if not getattr(binding, "data_member", None):
            continue
        return binding
    return None


def classify(element: Any, property_name: str = DEFAULT_TEXT_PROPERTY) -> TextSource:
    """Return DYNAMIC when the element's text comes from a binding, STATIC otherwise."""
    if find_text_binding(element, property_name) is None:
        return TextSource.STATIC
    return TextSource.DYNAMIC
