"""Unit tests for directional marks and text wrapping."""

import pytest

from report_rtl.marks import ALL_MARKS, LRE, LRM, LRO, PDF, RLE, RLM, RLO, DirectionalMark
from report_rtl.text import ensure_direction, escape_marks, fix_direction, is_wrapped, strip_direction


@pytest.mark.unit
class TestMarks:
    def test_code_points(self):
        assert LRM == "\u200E"
        assert RLM == "\u200F"
        assert LRE == "\u202A"
        assert RLE == "\u202B"
        assert PDF == "\u202C"
        assert LRO == "\u202D"
        assert RLO == "\u202E"

    def test_enum_matches_constants(self):
        assert DirectionalMark.RLE.value == RLE
        assert DirectionalMark.RLM.code_point == "U+200F"
        assert len(ALL_MARKS) == 7


@pytest.mark.unit
class TestFixDirection:
    @pytest.mark.parametrize("text", ["", " ", "   ", "\t", "\n \t"])
    def test_blank_is_unchanged(self, text):
        assert fix_direction(text) == text

    def test_none_is_unchanged(self):
        assert fix_direction(None) is None

    def test_wraps_text(self):
        assert fix_direction("Hello") == "\u202BHello\u202C\u200F"

    def test_wraps_rtl_text(self):
        assert fix_direction("سلام") == RLE + "سلام" + PDF + RLM

    def test_keeps_surrounding_whitespace(self):
        assert fix_direction(" a ") == RLE + " a " + PDF + RLM

    def test_wraps_unconditionally(self):
        once = fix_direction("x")
        assert fix_direction(once) == RLE + once + PDF + RLM


@pytest.mark.unit
class TestWrappedHelpers:
    def test_is_wrapped(self):
        assert is_wrapped(fix_direction("Price"))
        assert not is_wrapped("Price")
        assert not is_wrapped("")
        assert not is_wrapped(None)
        assert not is_wrapped(RLE + "Price")

    def test_ensure_direction_does_not_compound(self):
        once = ensure_direction("Price")
        assert once == "\u202BPrice\u202C\u200F"
        assert ensure_direction(once) == once

    def test_ensure_direction_blank(self):
        assert ensure_direction("  ") == "  "

    def test_strip_direction(self):
        assert strip_direction(fix_direction("Total")) == "Total"
        assert strip_direction(LRM + "a" + RLO) == "a"
        assert strip_direction("") == ""

    def test_escape_marks(self):
        assert escape_marks(fix_direction("A")) == "\\u202BA\\u202C\\u200F"
        assert escape_marks(None) == ""
