"""Mirrored editor buffer with per-line highlighting.

A Document keeps the lines of one buffer as bytes, applies the line-range
replacements an editor reports on each change, and re-highlights only the
lines that changed. Successfully parsed lines feed the completion index.

Python 3.13+.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from bnflexengine.diagnostics import DiagnosticFormatter, OutputFormat
from bnflexengine.enums import HighlightGroup
from bnflexengine.runtime.completion import CompletionIndex
from bnflexengine.runtime.highlighter import HighlightRange, highlight_line
from bnflexengine.syntax.parser import BNFParser
from bnflexengine.syntax.parser.primitives import is_left_angle, is_rule_char
from bnflexengine.syntax.position import byte_offset

__all__ = ["Document", "LineHighlight"]

logger = logging.getLogger(__name__)

# Prefix of the virtual text shown next to a line the strict parser rejected.
_DIAGNOSTIC_PREFIX = "parsing error: "


@dataclass(frozen=True, slots=True)
class LineHighlight:
    """Highlighting result for one buffer line.

    Attributes:
        line: 0-based line number
        ranges: Highlight ranges in source order
        diagnostic: Text to show beside the line, or None if it parsed
        detail: The diagnostic rendered by the document formatter, for a
            hover or message window (None if the line parsed)
    """

    line: int
    ranges: tuple[HighlightRange, ...]
    diagnostic: str | None = None
    detail: str | None = None

    @property
    def diagnostic_group(self) -> HighlightGroup:
        """Group for rendering the diagnostic text."""
        return HighlightGroup.ERROR


class Document:
    """Mirrored content of an editor buffer.

    Thread Safety:
        NOT thread-safe; one Document per buffer, driven by the thread that
        receives that buffer's change events. The CompletionIndex it feeds
        may be shared.

    Example:
        >>> doc = Document([b'<a> ::= <b>', b'<b> ::= "x'])
        >>> first, second = doc.highlight()
        >>> second.diagnostic
        'parsing error: terminal is expected at position 9'
    """

    __slots__ = ("_formatter", "_index", "_lines", "_parser")

    def __init__(
        self,
        lines: Iterable[bytes] = (),
        *,
        index: CompletionIndex | None = None,
        parser: BNFParser | None = None,
        formatter: DiagnosticFormatter | None = None,
    ) -> None:
        """Initialize document.

        Args:
            lines: Initial buffer lines (without line terminators)
            index: Completion index to feed (a private one if None)
            parser: Parser to use (default limits if None)
            formatter: Renders LineHighlight.detail (single-line if None)
        """
        self._lines: list[bytes] = list(lines)
        self._index = index if index is not None else CompletionIndex()
        self._parser = parser if parser is not None else BNFParser()
        self._formatter = (
            formatter
            if formatter is not None
            else DiagnosticFormatter(output_format=OutputFormat.SIMPLE, max_message_length=120)
        )

    @property
    def index(self) -> CompletionIndex:
        """Completion index fed by this document."""
        return self._index

    @property
    def lines(self) -> tuple[bytes, ...]:
        return tuple(self._lines)

    def get(self, line: int) -> bytes | None:
        """Line content, or None if out of range."""
        if 0 <= line < len(self._lines):
            return self._lines[line]
        return None

    def line_count(self) -> int:
        return len(self._lines)

    def update(self, lines: Iterable[bytes], first: int, last: int) -> tuple[int, int]:
        """Replace lines ``first`` to ``last`` (exclusive) with ``lines``.

        Follows editor change events: ``last == -1`` replaces the whole
        buffer. Bounds are clamped to the current document.

        Returns:
            (first, end) range of lines that now hold the new content
        """
        new_lines = list(lines)
        if last == -1:
            self._lines = new_lines
            return 0, len(new_lines)

        first = max(0, min(first, len(self._lines)))
        last = max(first, min(last, len(self._lines)))
        self._lines[first:last] = new_lines
        logger.debug("Replaced lines %d..%d with %d lines", first, last, len(new_lines))
        return first, first + len(new_lines)

    def highlight(self, first: int = 0, last: int | None = None) -> tuple[LineHighlight, ...]:
        """Parse and highlight lines ``first`` to ``last`` (exclusive).

        Strictly parsed lines are recorded in the completion index. Lines
        that fail carry their diagnostic text and best-effort ranges.
        """
        first = max(first, 0)
        last = len(self._lines) if last is None else min(last, len(self._lines))
        logger.debug("Highlighting lines %d..%d", first, last)

        results: list[LineHighlight] = []
        for number in range(first, last):
            ast = self._parser.parse(self._lines[number])
            ranges = highlight_line(ast, number)
            error = ast.diagnostic()
            if error is None:
                self._index.update_from(ast)
                results.append(LineHighlight(number, ranges))
                continue

            detail = None
            if error.diagnostic is not None:
                detail = self._formatter.format(error.diagnostic, self._lines[number])
            results.append(
                LineHighlight(number, ranges, _DIAGNOSTIC_PREFIX + error.describe(), detail)
            )
        return tuple(results)

    def symbol_prefix_at(self, line: int, column: int) -> str | None:
        """Partial non-terminal name typed before a character column.

        Returns the text between the nearest ``<`` and the cursor when it
        consists of rule characters only, which is what completion should
        match against. None when the cursor is not inside a symbol, or when
        the line or column is out of range.

        Example:
            >>> Document([b"<a> ::= <fir"]).symbol_prefix_at(0, 12)
            'fir'
        """
        content = self.get(line)
        if content is None or column < 0:
            return None
        end = byte_offset(content, column)
        start = end
        while start > 0 and is_rule_char(content[start - 1]):
            start -= 1
        if start == 0 or not is_left_angle(content[start - 1]):
            return None
        return content[start:end].decode("utf-8", errors="replace")

    def complete_at(self, line: int, column: int, limit: int | None = None) -> tuple[str, ...]:
        """Completion candidates for the symbol being typed at a column."""
        prefix = self.symbol_prefix_at(line, column)
        if prefix is None:
            return ()
        if limit is None:
            return self._index.complete(prefix)
        return self._index.complete(prefix, limit)
