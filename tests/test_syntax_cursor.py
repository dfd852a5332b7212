"""Tests for cursor infrastructure.

Validates the immutable byte cursor and the parse result/failure records.
"""

from __future__ import annotations

import pytest

from bnflexengine.diagnostics import PositionedError, UnexpectedByteError
from bnflexengine.diagnostics.templates import ErrorTemplate
from bnflexengine.syntax.cursor import Cursor, ParseFailure, ParseResult

# ============================================================================
# CURSOR BASIC TESTS
# ============================================================================


class TestCursorBasic:
    """Test basic cursor functionality."""

    def test_create_cursor(self) -> None:
        """Create cursor at position 0."""
        cursor = Cursor(b"<a>", 0)

        assert cursor.source == b"<a>"
        assert cursor.pos == 0
        assert not cursor.is_eof

    def test_current_is_byte_value(self) -> None:
        """current returns the byte as an int."""
        assert Cursor(b"<a>", 1).current == ord("a")

    def test_cursor_immutability(self) -> None:
        """Cursor is immutable (frozen dataclass)."""
        cursor = Cursor(b"<a>", 0)

        with pytest.raises(AttributeError):
            cursor.pos = 2  # type: ignore[misc]


# ============================================================================
# EOF DETECTION
# ============================================================================


class TestCursorEOF:
    """Test EOF detection."""

    def test_is_eof_true_at_end(self) -> None:
        assert Cursor(b"ab", 2).is_eof

    def test_is_eof_true_for_empty_source(self) -> None:
        assert Cursor(b"", 0).is_eof

    def test_current_at_eof_raises(self) -> None:
        """current raises EOFError instead of returning a sentinel."""
        with pytest.raises(EOFError, match="Unexpected end of input"):
            _ = Cursor(b"", 0).current


# ============================================================================
# NAVIGATION
# ============================================================================


class TestCursorNavigation:
    """Test advance, peek and slicing."""

    def test_advance_returns_new_cursor(self) -> None:
        cursor = Cursor(b"abc", 0)
        advanced = cursor.advance()

        assert advanced.pos == 1
        assert cursor.pos == 0

    def test_advance_clamps_to_eof(self) -> None:
        assert Cursor(b"abc", 2).advance(10).pos == 3

    def test_peek_with_offset(self) -> None:
        cursor = Cursor(b"::=", 0)

        assert cursor.peek() == ord(":")
        assert cursor.peek(2) == ord("=")

    def test_peek_beyond_eof_returns_none(self) -> None:
        assert Cursor(b"::", 0).peek(2) is None

    def test_slice_to(self) -> None:
        assert Cursor(b'"January"', 1).slice_to(8) == b"January"


# ============================================================================
# PARSE RESULT AND FAILURE
# ============================================================================


class TestParseRecords:
    """Test ParseResult and ParseFailure."""

    def test_parse_result_holds_value_and_cursor(self) -> None:
        cursor = Cursor(b"|", 0)
        result = ParseResult(b"|", cursor.advance())

        assert result.value == b"|"
        assert result.cursor.is_eof

    def test_failure_to_error(self) -> None:
        """ParseFailure converts to a PositionedError with the same data."""
        cause = UnexpectedByteError(ErrorTemplate.unexpected_byte(ord("x"), 4))
        failure = ParseFailure(cause, 4, "non-terminal")

        error = failure.to_error()

        assert isinstance(error, PositionedError)
        assert error.cause is cause
        assert error.position == 4
        assert error.construct == "non-terminal"
        assert str(error) == "Unexpected byte 'x' at position 4"
