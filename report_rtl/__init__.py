"""
report-rtl: right-to-left text direction fixes for report templates.

Wrap every label and table cell of a report, sub-reports included, in
directional marks before it is rendered:
    fix_rtl_text(report)
    report.render()
"""

__version__ = "0.1.0"

from .core.fixer import RTLTextFixer, fix_rtl_text
from .marks import ALL_MARKS, LRE, LRM, LRO, PDF, RLE, RLM, RLO, DirectionalMark
from .settings import FixerSettings
from .text import ensure_direction, fix_direction, is_wrapped, strip_direction

__all__ = [
    "ALL_MARKS",
    "DirectionalMark",
    "FixerSettings",
    "LRE",
    "LRM",
    "LRO",
    "PDF",
    "RLE",
    "RLM",
    "RLO",
    "RTLTextFixer",
    "ensure_direction",
    "fix_direction",
    "fix_rtl_text",
    "is_wrapped",
    "strip_direction",
]
