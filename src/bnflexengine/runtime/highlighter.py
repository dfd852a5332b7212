"""Highlight ranges for parsed lines.

Maps node kinds to editor highlight groups:

    NonTerminal                                  -> Identifier
    Terminal                                     -> String
    AssignmentExpression, AlternativeExpression  -> Operator (the ::= or | token)
    Comment                                      -> Comment

Statements and concatenation links carry no text of their own and are not
highlighted. Degraded ASTs are highlighted the same way from their tokens,
so a line being edited keeps its colors.

Ranges use the byte offsets stored in the AST; Neovim addresses highlight
columns in bytes, so no conversion is needed there.
"""

import logging
from dataclasses import dataclass

from bnflexengine.enums import HighlightGroup
from bnflexengine.syntax.ast import (
    AST,
    AlternativeExpression,
    AssignmentExpression,
    Comment,
    CompoundExpression,
    Node,
    NonTerminal,
    Statement,
    Terminal,
)

__all__ = ["HighlightRange", "group_of", "highlight_line"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class HighlightRange:
    """One highlighted byte range of one buffer line.

    Attributes:
        line: 0-based line number in the buffer
        begin: Starting byte offset (inclusive)
        end: Ending byte offset (exclusive)
        group: Highlight group name
    """

    line: int
    begin: int
    end: int
    group: HighlightGroup


def group_of(node: Node) -> HighlightGroup | None:
    """Highlight group of a node, or None if it is not highlighted."""
    match node:
        case NonTerminal():
            return HighlightGroup.IDENTIFIER
        case Terminal():
            return HighlightGroup.STRING
        case AssignmentExpression() | AlternativeExpression():
            return HighlightGroup.OPERATOR
        case Comment():
            return HighlightGroup.COMMENT
        case Statement() | CompoundExpression():
            return None
        case _:
            logger.warning("Visiting unexpected node: %s", type(node).__name__)
            return None


def highlight_line(ast: AST, line: int) -> tuple[HighlightRange, ...]:
    """Collect highlight ranges of one parsed line, in source order.

    Args:
        ast: Parse result of the line
        line: Buffer line number to tag the ranges with

    Example:
        >>> from bnflexengine.syntax import parse
        >>> [str(r.group) for r in highlight_line(parse('<a> ::= "x"'), 0)]
        ['Identifier', 'Operator', 'String']
    """
    ranges: list[HighlightRange] = []

    def emit(node: Node) -> None:
        group = group_of(node)
        if group is not None and node.end > node.begin:
            ranges.append(HighlightRange(line, node.begin, node.end, group))

    ast.traverse(emit)
    return tuple(ranges)
