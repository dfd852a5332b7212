"""Core BNF line parser implementation.

This module provides the StrictParser, which turns one line into a
:class:`~bnflexengine.syntax.ast.Statement` or raises, and the BNFParser
dispatcher, which never raises and falls back to the permissive tokenizer.

Architecture:
    The strict parser uses an immutable cursor pattern
    (:class:`~bnflexengine.syntax.cursor.Cursor`) over the line bytes. Each
    grammar rule (in :mod:`~bnflexengine.syntax.parser.rules`) returns either
    a :class:`~bnflexengine.syntax.cursor.ParseResult` or None, recording the
    reason for failure on a per-call ParseContext.

Modes:
    - :class:`~bnflexengine.syntax.ast.StrictAST` - the line matched the grammar
    - :class:`~bnflexengine.syntax.ast.DegradedAST` - it did not; tokens are
      best effort and the strict error is kept as the diagnostic

Security:
    Includes a configurable line size limit. Oversized lines are degraded
    instead of failing the caller.

See Also:
    - :mod:`bnflexengine.syntax.ast` - All AST node type definitions
    - :mod:`bnflexengine.syntax.parser.tokenizer` - Permissive fallback
"""

import logging

from bnflexengine.constants import MAX_LINE_SIZE
from bnflexengine.diagnostics import (
    DescriptiveError,
    InternalParserError,
    LineTooLongError,
    PositionedError,
)
from bnflexengine.diagnostics.templates import ErrorTemplate
from bnflexengine.syntax.ast import AST, DegradedAST, Statement, StrictAST
from bnflexengine.syntax.cursor import Cursor
from bnflexengine.syntax.parser.rules import ParseContext, parse_statement
from bnflexengine.syntax.parser.tokenizer import tokenize

__all__ = ["BNFParser", "StrictParser"]

logger = logging.getLogger(__name__)


class StrictParser:
    """Grammar-aware BNF line parser.

    Design:
    - Immutable cursor prevents infinite loops (no manual guards needed)
    - Backtracking is a matter of keeping the cursor from before an attempt
    - Stateless between calls: every call owns a fresh ParseContext

    Attributes:
        max_line_size: Maximum line size in bytes (default: 64 KiB)
    """

    __slots__ = ("_max_line_size",)

    def __init__(
        self,
        *,
        max_line_size: int | None = None,
    ) -> None:
        """Initialize parser with an optional size limit.

        Args:
            max_line_size: Maximum line size in bytes (default: 64 KiB).
                           Set to 0 to disable the limit (not recommended).
        """
        self._max_line_size = max_line_size if max_line_size is not None else MAX_LINE_SIZE

    @property
    def max_line_size(self) -> int:
        """Maximum allowed line size in bytes."""
        return self._max_line_size

    def parse_statement(self, line: bytes) -> Statement:
        """Parse one line into a Statement.

        Args:
            line: Line bytes, optionally ending in LF or CRLF

        Returns:
            The parsed statement (empty for a blank line)

        Raises:
            PositionedError: The line does not match the grammar. ``position``
                is the byte offset of the furthest failure, ``cause`` the
                lexical error found there.

        Example:
            >>> statement = StrictParser().parse_statement(b'<a> ::= "x"')
            >>> statement.rule.left().name
            b'a'
        """
        if self._max_line_size > 0 and len(line) > self._max_line_size:
            cause = LineTooLongError(ErrorTemplate.line_too_long(len(line), self._max_line_size))
            raise PositionedError(cause, 0, "line")

        context = ParseContext()
        result = parse_statement(Cursor(line, 0), context)
        if result is None:
            assert context.failure is not None  # Type narrowing: a rule failed
            raise context.failure.to_error()
        return result.value


class BNFParser:
    """Line parser that always returns an AST.

    Tries the strict parser first. If it raises, the line is tokenized
    instead and the error is attached to the degraded AST, so the caller can
    still highlight something and show what is wrong.

    Thread Safety:
        Stateless; one instance may be shared between threads.
    """

    __slots__ = ("_strict",)

    def __init__(
        self,
        *,
        max_line_size: int | None = None,
    ) -> None:
        """Initialize parser.

        Args:
            max_line_size: Passed to the StrictParser
        """
        self._strict = StrictParser(max_line_size=max_line_size)

    @property
    def strict(self) -> StrictParser:
        """The underlying strict parser."""
        return self._strict

    def parse(self, line: bytes | str) -> AST:
        """Parse one line.

        Never raises. Strings are encoded as UTF-8 first; lone surrogates
        are passed through so no string is rejected.

        Args:
            line: Line content

        Returns:
            StrictAST on success, DegradedAST (with diagnostic) otherwise

        Example:
            >>> ast = BNFParser().parse('<month> ::= "January" | "February"')
            >>> ast.is_strict, ast.rule_count()
            (True, 1)
            >>> BNFParser().parse('<a> ::= "oops').diagnostic().describe()
            'terminal is expected at position 9'
        """
        data = line.encode("utf-8", "surrogatepass") if isinstance(line, str) else line
        try:
            statement = self._strict.parse_statement(data)
        except PositionedError as e:
            logger.debug("Strict parse failed, tokenizing instead: %s", e)
            return self._degrade(data, DescriptiveError.from_positioned(e))
        except Exception as e:  # noqa: BLE001 - internal faults degrade the line
            logger.error("Internal fault while parsing line %r", data[:80], exc_info=True)
            fault = InternalParserError(ErrorTemplate.internal_fault(type(e).__name__, str(e)))
            return self._degrade(data, DescriptiveError.from_positioned(PositionedError(fault, 0)))

        if statement.is_empty:
            return StrictAST(statements=())
        return StrictAST(statements=(statement,))

    @staticmethod
    def _degrade(line: bytes, error: DescriptiveError) -> DegradedAST:
        """Build the fallback AST for a line the strict parser rejected."""
        tokens = tokenize(line)
        groups = (tokens,) if tokens else ()
        return DegradedAST(groups=groups, error=error)
