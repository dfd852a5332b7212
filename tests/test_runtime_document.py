"""Tests for the mirrored editor document."""

from __future__ import annotations

from bnflexengine.diagnostics import DiagnosticFormatter
from bnflexengine.enums import HighlightGroup
from bnflexengine.runtime import CompletionIndex, Document
from bnflexengine.syntax import BNFParser


class TestDocumentLines:
    """Line storage and editor-style updates."""

    def test_initial_lines(self) -> None:
        doc = Document([b"<a> ::= <b>", b""])

        assert doc.line_count() == 2
        assert doc.get(0) == b"<a> ::= <b>"
        assert doc.get(2) is None
        assert doc.get(-1) is None

    def test_replace_whole_buffer(self) -> None:
        doc = Document([b"old"])

        assert doc.update([b"a", b"b"], 0, -1) == (0, 2)
        assert doc.lines == (b"a", b"b")

    def test_replace_range(self) -> None:
        doc = Document([b"0", b"1", b"2", b"3"])

        assert doc.update([b"x"], 1, 3) == (1, 2)
        assert doc.lines == (b"0", b"x", b"3")

    def test_insert_lines(self) -> None:
        doc = Document([b"0", b"1"])

        assert doc.update([b"new", b"newer"], 1, 1) == (1, 3)
        assert doc.lines == (b"0", b"new", b"newer", b"1")

    def test_delete_lines(self) -> None:
        doc = Document([b"0", b"1", b"2"])

        assert doc.update([], 0, 2) == (0, 0)
        assert doc.lines == (b"2",)

    def test_out_of_range_is_clamped(self) -> None:
        doc = Document([b"0"])

        assert doc.update([b"1"], 5, 9) == (1, 2)
        assert doc.lines == (b"0", b"1")


class TestDocumentHighlight:
    """Per-line highlighting and diagnostics."""

    def test_strict_and_degraded_lines(self) -> None:
        doc = Document([b"<a> ::= <b>", b'<b> ::= "x'])

        first, second = doc.highlight()

        assert first.line == 0
        assert first.diagnostic is None
        assert [r.group for r in first.ranges] == [
            HighlightGroup.IDENTIFIER,
            HighlightGroup.OPERATOR,
            HighlightGroup.IDENTIFIER,
        ]
        assert second.diagnostic == "parsing error: terminal is expected at position 9"
        assert second.diagnostic_group == HighlightGroup.ERROR
        assert len(second.ranges) == 2

    def test_degraded_line_detail(self) -> None:
        doc = Document([b"<a> ::= <b>", b'<b> ::= "x'])

        first, second = doc.highlight()

        assert first.detail is None
        assert second.detail == "UNTERMINATED_LITERAL: Unterminated literal at position 8"

    def test_custom_formatter_quotes_line(self) -> None:
        doc = Document([b'<b> ::= "x'], formatter=DiagnosticFormatter())

        (result,) = doc.highlight()

        assert result.detail is not None
        assert result.detail.splitlines()[3:5] == ['   | <b> ::= "x', "   |         ^"]

    def test_highlight_subrange(self) -> None:
        doc = Document([b"<a> ::= <b>", b"<c> ::= <d>", b"<e> ::= <f>"])

        results = doc.highlight(1, 2)

        assert [r.line for r in results] == [1]

    def test_highlight_clamps_range(self) -> None:
        doc = Document([b"<a> ::= <b>"])

        assert [r.line for r in doc.highlight(-3, 10)] == [0]

    def test_only_strict_lines_feed_index(self) -> None:
        index = CompletionIndex()
        doc = Document([b"<a> ::= <b>", b"<c> ::= <b", b""], index=index)

        doc.highlight()

        assert doc.index is index
        assert index.snapshot() == {"a": 1, "b": 1}

    def test_shared_index_across_documents(self) -> None:
        index = CompletionIndex()
        Document([b"<a> ::= <b>"], index=index).highlight()
        Document([b"<c> ::= <b>"], index=index).highlight()

        assert index.count("b") == 2

    def test_custom_parser(self) -> None:
        doc = Document([b'<a> ::= "long"'], parser=BNFParser(max_line_size=4))

        (result,) = doc.highlight()

        assert result.diagnostic is not None


class TestDocumentCompletion:
    """Symbol prefixes and completion at a cursor column."""

    def test_prefix_inside_symbol(self) -> None:
        doc = Document([b"<a> ::= <fir"])

        assert doc.symbol_prefix_at(0, 12) == "fir"
        assert doc.symbol_prefix_at(0, 10) == "f"

    def test_prefix_right_after_bracket(self) -> None:
        doc = Document([b"<a> ::= <"])

        assert doc.symbol_prefix_at(0, 9) == ""

    def test_no_prefix_outside_symbol(self) -> None:
        doc = Document([b'<a> ::= "fir'])

        assert doc.symbol_prefix_at(0, 12) is None
        assert doc.symbol_prefix_at(5, 0) is None

    def test_negative_column_has_no_prefix(self) -> None:
        doc = Document([b"<a> ::= <fir"])

        assert doc.symbol_prefix_at(0, -1) is None
        assert doc.complete_at(0, -5) == ()

    def test_prefix_uses_character_columns(self) -> None:
        doc = Document(['"ä" <na'.encode()])

        assert doc.symbol_prefix_at(0, 7) == "na"

    def test_complete_at(self) -> None:
        doc = Document([b"<first-name> ::= <first> <last>", b"<x> ::= <fi"])
        doc.highlight()

        assert doc.complete_at(1, 11) == ("first", "first-name")
        assert doc.complete_at(1, 11, limit=1) == ("first",)
        assert doc.complete_at(1, 2) == ()
