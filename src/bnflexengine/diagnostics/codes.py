"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        2000-2999: Limit errors (size guards)
        3000-3999: Syntax errors (strict parser failures)
        6000-6999: Internal errors (faults caught at the entry point)
    """

    # Limit errors (2000-2999)
    LINE_TOO_LONG = 2020

    # Syntax errors (3000-3999)
    UNEXPECTED_EOF = 3001
    UNEXPECTED_BYTE = 3002
    UNTERMINATED_LITERAL = 3003
    EXPECTED_CONSTRUCT = 3004

    # Internal errors (6000-6999)
    INTERNAL_PARSER_FAULT = 6001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location of a diagnostic within one line.

    Note:
        Offsets are byte offsets into the line buffer. Column is the
        1-indexed byte column, which is what editors addressing buffers
        by byte (Vim, Neovim) display.

    Attributes:
        start: Starting byte offset (0-indexed)
        end: Ending byte offset (exclusive)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or column
                is less than 1 (columns are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)

    @classmethod
    def at(cls, position: int) -> "SourceSpan":
        """Zero-width span at a byte offset."""
        return cls(start=position, end=position, column=position + 1)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools (editor plugins, linters).

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None when not tied to a byte offset)
        hint: Suggestion for fixing the error
        expected: Grammar construct the parser expected at span
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    expected: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping.

        Example output:
            error[UNTERMINATED_LITERAL]: Unterminated literal
              --> column 9
              = expected: terminal
              = help: Close the literal with a matching '"'

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
