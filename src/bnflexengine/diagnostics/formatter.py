"""Diagnostic rendering for editors and tools.

A parse diagnostic is shown in up to three places: beside the line as
virtual text (SIMPLE), in a hover or message window that quotes the line
and marks the failure with a caret (RUST), and to external tooling (JSON).
Python 3.13+. Zero external dependencies.
"""

import json
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Multi-line, compiler style, optional source excerpt
    SIMPLE = "simple"  # Single line (editor virtual text)
    JSON = "json"  # One JSON object for tooling integration


def _char_column(source: bytes, offset: int) -> int:
    """Number of UTF-8 characters before a byte offset."""
    return sum(1 for byte in source[:offset] if byte & 0xC0 != 0x80)


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Render Diagnostic objects as text.

    Attributes:
        output_format: Output style (rust, simple, json)
        max_message_length: Cut messages and hints longer than this and end
            them in "..."; 0 keeps them whole

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(ErrorTemplate.unterminated_literal(34, 8)))
        UNTERMINATED_LITERAL: Unterminated literal
    """

    output_format: OutputFormat = OutputFormat.RUST
    max_message_length: int = 0

    def format(self, diagnostic: Diagnostic, source: bytes | None = None) -> str:
        """Render one diagnostic.

        Args:
            diagnostic: Diagnostic to render
            source: Line the diagnostic points into. RUST output quotes it
                with a caret under the failure; other formats ignore it.

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic, source)
            case OutputFormat.SIMPLE:
                return f"{diagnostic.code.name}: {self._cut(diagnostic.message)}"
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def _format_rust(self, diagnostic: Diagnostic, source: bytes | None) -> str:
        """Format diagnostic in compiler style.

        Example output:
            error[UNTERMINATED_LITERAL]: Unterminated literal at position 8
              --> column 9
               |
               | <a> ::= "x
               |         ^
              = expected: terminal
              = help: Close the literal with a matching '"'
        """
        parts = [f"{diagnostic.severity}[{diagnostic.code.name}]: {self._cut(diagnostic.message)}"]

        span = diagnostic.span
        if span is not None:
            parts.append(f"  --> column {span.column}")
            if source is not None:
                text = source.rstrip(b"\r\n").decode("utf-8", errors="replace")
                caret = " " * _char_column(source, span.start) + "^"
                parts.extend(["   |", f"   | {text}", f"   | {caret}"])

        if diagnostic.expected:
            parts.append(f"  = expected: {diagnostic.expected}")
        if diagnostic.hint:
            parts.append(f"  = help: {self._cut(diagnostic.hint)}")

        return "\n".join(parts)

    def _format_json(self, diagnostic: Diagnostic) -> str:
        data: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._cut(diagnostic.message),
            "severity": diagnostic.severity,
        }
        if diagnostic.span is not None:
            data |= {
                "start": diagnostic.span.start,
                "end": diagnostic.span.end,
                "column": diagnostic.span.column,
            }
        if diagnostic.expected:
            data["expected"] = diagnostic.expected
        if diagnostic.hint:
            data["hint"] = self._cut(diagnostic.hint)
        return json.dumps(data, ensure_ascii=False)

    def _cut(self, text: str) -> str:
        if 0 < self.max_message_length < len(text):
            return text[: self.max_message_length] + "..."
        return text
