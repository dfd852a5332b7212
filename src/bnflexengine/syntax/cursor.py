"""Immutable cursor infrastructure for type-safe parsing.

Implements the immutable cursor pattern over a single line of bytes.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Backtracking is free: keep the cursor from before the attempt

Positions:
    Offsets are absolute byte offsets into the line buffer, never relative
    to an enclosing token. Editors that address buffers by byte column can
    use them directly.

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from dataclasses import dataclass

from bnflexengine.diagnostics import BNFError, PositionedError
from bnflexengine.diagnostics.templates import ErrorTemplate

__all__ = ["Cursor", "ParseFailure", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable byte position tracker over one line.

    Example:
        >>> cursor = Cursor(b"<a>", 0)
        >>> cursor.current  # Type: int (a byte, never None)
        60
        >>> cursor.advance().current
        97
        >>> cursor.pos  # Original unchanged (immutability)
        0
        >>> Cursor(b"hi", 2).is_eof
        True
    """

    source: bytes
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of line.

        Use this in while loops: `while not cursor.is_eof:`
        """
        return self.pos >= len(self.source)

    @property
    def current(self) -> int:
        """Get current byte.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> int | None:
        """Peek at byte with offset without advancing.

        Returns None ONLY when peeking beyond EOF.
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped to EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> bytes:
        """Extract source slice from current position to end_pos (exclusive)."""
        return self.source[self.pos : end_pos]


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Type Parameters:
        T: The type of the parsed value

    Pattern:
        Every grammar rule has signature:
            def parse_foo(cursor: Cursor, context: ParseContext) -> ParseResult[Foo] | None

    Example:
        >>> cursor = Cursor(b"|", 0)
        >>> result = ParseResult(b"|", cursor.advance())
        >>> result.cursor.is_eof
        True
    """

    value: T
    cursor: Cursor


@dataclass(frozen=True, slots=True)
class ParseFailure:
    """Why and where a grammar rule gave up.

    Rules return None on failure and record one of these on the parse
    context. Only the outermost caller turns it into an exception.

    Attributes:
        cause: Lexical error (unexpected byte, end of input, line size)
        position: Absolute byte offset of the failure
        construct: Grammar construct being parsed (e.g. "non-terminal")
    """

    cause: BNFError
    position: int
    construct: str

    def to_error(self) -> PositionedError:
        """Convert to the exception raised by the strict parser."""
        return PositionedError(self.cause, self.position, self.construct)
