"""Tests for MarkupBuffer."""

from __future__ import annotations

import pytest
from markupsafe import Markup, escape

from safebuilder.buffer import MarkupBuffer


class TestMarkupBuffer:
    """Tests for the append-only markup accumulator."""

    def test_append_structural(self) -> None:
        buf = MarkupBuffer()
        buf.append("<p>").append("</p>")
        assert buf.build() == "<p></p>"

    def test_append_skips_empty(self) -> None:
        buf = MarkupBuffer()
        buf.append("")
        assert buf.length == 0
        assert not buf

    def test_length_counts_characters(self) -> None:
        buf = MarkupBuffer()
        buf.append("<div>").append("abc")
        assert buf.length == 8
        assert len(buf) == 8

    def test_append_safe_escapes_raw(self) -> None:
        buf = MarkupBuffer()
        buf.append_safe("a < b")
        assert buf.build() == "a &lt; b"

    def test_append_safe_keeps_markup(self) -> None:
        buf = MarkupBuffer()
        buf.append_safe(Markup("<em>x</em>"))
        assert buf.build() == "<em>x</em>"

    def test_append_safe_attribute_context(self) -> None:
        buf = MarkupBuffer()
        buf.append_safe('"quoted"', "attribute")
        assert buf.build() == "&#34;quoted&#34;"

    def test_append_safe_unknown_context(self) -> None:
        with pytest.raises(ValueError):
            MarkupBuffer().append_safe("x", "script")

    def test_replace_tail(self) -> None:
        buf = MarkupBuffer()
        buf.append("<br").append(">")
        buf.replace_tail(">", "/>")
        assert buf.build() == "<br/>"
        assert buf.length == 5

    def test_replace_tail_mismatch(self) -> None:
        buf = MarkupBuffer()
        buf.append("<br>x")
        with pytest.raises(ValueError):
            buf.replace_tail(">", "/>")

    def test_replace_tail_empty(self) -> None:
        with pytest.raises(ValueError):
            MarkupBuffer().replace_tail(">", "/>")

    def test_build_is_markup(self) -> None:
        buf = MarkupBuffer()
        buf.append("<b>")
        result = buf.build()
        assert isinstance(result, Markup)
        # Marked safe: escaping it again is a no-op
        assert escape(result) == "<b>"

    def test_html_protocol(self) -> None:
        buf = MarkupBuffer()
        buf.append("<i>")
        assert escape(buf) == "<i>"
        assert str(buf) == "<i>"

    def test_equality(self) -> None:
        a = MarkupBuffer().append("<x/>")
        b = MarkupBuffer().append("<x").append("/>")
        assert a == b
        assert a == "<x/>"
        assert a != 3

    def test_clear(self) -> None:
        buf = MarkupBuffer().append("abc")
        buf.clear()
        assert buf.build() == ""
        assert buf.length == 0

    def test_repr(self) -> None:
        assert repr(MarkupBuffer().append("<a>")) == "MarkupBuffer('<a>')"
