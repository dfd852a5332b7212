"""Tests for byte/character column conversion."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from bnflexengine.syntax.position import byte_offset, column_offset


class TestColumnOffset:
    """Byte offset -> character column."""

    def test_ascii_is_identity(self) -> None:
        assert column_offset(b"<a> ::= <b>", 8) == 8

    def test_after_multibyte_character(self) -> None:
        line = '"ä" <b>'.encode()

        assert column_offset(line, 5) == 4

    def test_clamps_past_end(self) -> None:
        assert column_offset("世".encode(), 99) == 1

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError, match="Position must be >= 0"):
            column_offset(b"abc", -1)

    def test_invalid_utf8_counts_lead_bytes(self) -> None:
        assert column_offset(b"\xff\xfe<a>", 2) == 2


class TestByteOffset:
    """Character column -> byte offset."""

    def test_ascii_is_identity(self) -> None:
        assert byte_offset(b"<a> ::= <b>", 4) == 4

    def test_after_multibyte_character(self) -> None:
        assert byte_offset("世界<a>".encode(), 2) == 6

    def test_past_end_returns_length(self) -> None:
        assert byte_offset(b"abc", 10) == 3

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError, match="Column must be >= 0"):
            byte_offset(b"abc", -1)

    @given(st.text(max_size=40), st.integers(min_value=0, max_value=45))
    def test_inverse_of_column_offset(self, text: str, column: int) -> None:
        line = text.encode("utf-8", "surrogatepass")
        column = min(column, len(text))

        assert column_offset(line, byte_offset(line, column)) == column
