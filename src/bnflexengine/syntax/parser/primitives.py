"""Primitive parsing utilities for the BNF line parser.

Byte-class predicates and the scanners shared by the strict parser and the
permissive tokenizer: literals, non-terminals, comments and the two
operators.

Error Context:
    Scanners return None on failure. When given a ParseContext they also
    record why and where they gave up via ``context.fail()``; the strict
    parser turns the furthest recorded failure into a PositionedError.
    The tokenizer passes no context and only cares about success.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bnflexengine.constants import (
    COMMENT_MARKER,
    DEFINITION_SYMBOL,
    DISJUNCTION_SYMBOL,
    LINE_END_BYTES,
)
from bnflexengine.diagnostics import UnexpectedByteError, UnexpectedEndOfInputError
from bnflexengine.diagnostics.templates import ErrorTemplate
from bnflexengine.syntax.ast import Comment, NonTerminal, Position, Terminal, Token
from bnflexengine.syntax.cursor import Cursor, ParseResult

if TYPE_CHECKING:
    from .rules import ParseContext

__all__ = [
    "fail_at",
    "is_digit",
    "is_eol",
    "is_hyphen",
    "is_left_angle",
    "is_letter",
    "is_literal_char",
    "is_quote",
    "is_right_angle",
    "is_rule_char",
    "is_vertical_bar",
    "is_whitespace",
    "scan_comment",
    "scan_definition_symbol",
    "scan_disjunction",
    "scan_literal",
    "scan_non_terminal",
    "skip_whitespace",
]

_DOUBLE_QUOTE = 0x22
_SINGLE_QUOTE = 0x27
_HYPHEN = 0x2D
_LEFT_ANGLE = 0x3C
_RIGHT_ANGLE = 0x3E
_VERTICAL_BAR = DISJUNCTION_SYMBOL[0]
_SPACE = 0x20
_SEMICOLON = COMMENT_MARKER[0]


# ============================================================================
# BYTE PREDICATES
# ============================================================================
# ASCII only: bytes >= 0x80 are never letters or digits, so multi-byte UTF-8
# sequences can appear in literals and comments but not in symbol names.


def is_letter(byte: int) -> bool:
    """[A-Za-z]"""
    return 0x41 <= byte <= 0x5A or 0x61 <= byte <= 0x7A


def is_digit(byte: int) -> bool:
    """[0-9]"""
    return 0x30 <= byte <= 0x39


def is_hyphen(byte: int) -> bool:
    return byte == _HYPHEN


def is_quote(byte: int) -> bool:
    """Either literal delimiter: ``"`` or ``'``."""
    return byte in (_DOUBLE_QUOTE, _SINGLE_QUOTE)


def is_left_angle(byte: int) -> bool:
    return byte == _LEFT_ANGLE


def is_right_angle(byte: int) -> bool:
    return byte == _RIGHT_ANGLE


def is_vertical_bar(byte: int) -> bool:
    return byte == _VERTICAL_BAR


def is_whitespace(byte: int) -> bool:
    """Only the ASCII space separates BNF tokens."""
    return byte == _SPACE


def is_eol(byte: int) -> bool:
    """Line terminators: LF, CR and NUL."""
    return byte in LINE_END_BYTES


def is_rule_char(byte: int) -> bool:
    """Bytes allowed after the first letter of a non-terminal name."""
    return is_letter(byte) or is_digit(byte) or is_hyphen(byte)


def is_literal_char(byte: int, quote: int) -> bool:
    """Bytes allowed inside a literal closed by ``quote``.

    The other quote character is allowed unescaped: ``"it's"`` and
    ``'say "hi"'`` are both single literals.
    """
    return byte != quote and not is_eol(byte)


# ============================================================================
# FAILURE RECORDING
# ============================================================================


def fail_at(cursor: Cursor, construct: str, context: ParseContext | None) -> None:
    """Record that ``construct`` was expected at the cursor.

    The cause is UnexpectedEndOfInputError at end of line, otherwise
    UnexpectedByteError naming the byte found. No-op without a context.
    """
    if context is None:
        return
    if cursor.is_eof:
        cause: UnexpectedByteError | UnexpectedEndOfInputError = UnexpectedEndOfInputError(
            ErrorTemplate.unexpected_eof(cursor.pos)
        )
    else:
        cause = UnexpectedByteError(ErrorTemplate.unexpected_byte(cursor.current, cursor.pos))
    context.fail(cause, cursor.pos, construct)


# ============================================================================
# SCANNERS
# ============================================================================


def skip_whitespace(cursor: Cursor) -> Cursor:
    """Skip ws := (' ')*. Never fails.

    Example:
        >>> skip_whitespace(Cursor(b"   <a>", 0)).pos
        3
    """
    while not cursor.is_eof and is_whitespace(cursor.current):
        cursor = cursor.advance()
    return cursor


def scan_literal(
    cursor: Cursor, context: ParseContext | None = None
) -> ParseResult[Terminal] | None:
    """Parse literal: '"' (byte-except-'"')* '"' | "'" (byte-except-"'")* "'"

    The Terminal's name is the content without quotes; its position covers
    the quotes.

    Examples:
        "January" -> Terminal(b"January", Position(0, 9))
        'it"s'    -> Terminal(b'it"s', Position(0, 6))

    Failure:
        A literal that is opened but never closed on this line is reported
        at the offset of its opening quote, so the editor can point at the
        literal rather than at the end of the line.
    """
    start = cursor.pos
    if cursor.is_eof or not is_quote(cursor.current):
        fail_at(cursor, "terminal", context)
        return None

    quote = cursor.current
    cursor = cursor.advance()
    body = cursor
    while not cursor.is_eof and is_literal_char(cursor.current, quote):
        cursor = cursor.advance()

    if cursor.is_eof or cursor.current != quote:
        if context is not None:
            cause = UnexpectedEndOfInputError(ErrorTemplate.unterminated_literal(quote, start))
            context.fail(cause, start, "terminal")
        return None

    name = body.slice_to(cursor.pos)
    cursor = cursor.advance()
    return ParseResult(Terminal(name, Position(start, cursor.pos)), cursor)


def scan_non_terminal(
    cursor: Cursor, context: ParseContext | None = None
) -> ParseResult[NonTerminal] | None:
    """Parse nonTerminal: '<' letter (letter | digit | '-')* '>'

    The NonTerminal's name excludes the angle brackets; its position covers
    them.

    Examples:
        <month>      -> NonTerminal(b"month", Position(0, 7))
        <first-name> -> NonTerminal(b"first-name", Position(0, 12))
    """
    start = cursor.pos
    if cursor.is_eof or not is_left_angle(cursor.current):
        fail_at(cursor, "non-terminal", context)
        return None

    cursor = cursor.advance()
    if cursor.is_eof or not is_letter(cursor.current):
        fail_at(cursor, "non-terminal", context)
        return None

    name_start = cursor
    while not cursor.is_eof and is_rule_char(cursor.current):
        cursor = cursor.advance()

    if cursor.is_eof or not is_right_angle(cursor.current):
        fail_at(cursor, "non-terminal", context)
        return None

    name = name_start.slice_to(cursor.pos)
    cursor = cursor.advance()
    return ParseResult(NonTerminal(name, Position(start, cursor.pos)), cursor)


def scan_comment(
    cursor: Cursor, context: ParseContext | None = None
) -> ParseResult[Comment] | None:
    """Parse comment: ';' (byte-except-EOL)*

    The comment's name includes the marker.
    """
    if cursor.is_eof or cursor.current != _SEMICOLON:
        fail_at(cursor, "comment", context)
        return None

    start = cursor
    cursor = cursor.advance()
    while not cursor.is_eof and not is_eol(cursor.current):
        cursor = cursor.advance()

    comment = Comment(start.slice_to(cursor.pos), Position(start.pos, cursor.pos))
    return ParseResult(comment, cursor)


def scan_definition_symbol(
    cursor: Cursor, context: ParseContext | None = None
) -> ParseResult[Token] | None:
    """Parse the definition symbol "::=".

    On a partial match the failure is recorded at the first byte that
    differs.
    """
    start = cursor.pos
    for offset, expected in enumerate(DEFINITION_SYMBOL):
        if cursor.peek(offset) != expected:
            fail_at(cursor.advance(offset), DEFINITION_SYMBOL.decode(), context)
            return None

    cursor = cursor.advance(len(DEFINITION_SYMBOL))
    return ParseResult(Token(DEFINITION_SYMBOL, Position(start, cursor.pos)), cursor)


def scan_disjunction(
    cursor: Cursor, context: ParseContext | None = None
) -> ParseResult[Token] | None:
    """Parse the disjunction symbol "|"."""
    start = cursor.pos
    if cursor.is_eof or not is_vertical_bar(cursor.current):
        fail_at(cursor, DISJUNCTION_SYMBOL.decode(), context)
        return None
    cursor = cursor.advance()
    return ParseResult(Token(DISJUNCTION_SYMBOL, Position(start, cursor.pos)), cursor)
