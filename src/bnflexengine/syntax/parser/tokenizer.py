"""Permissive BNF tokenizer.

Fallback for lines the strict parser rejects. Scans left to right and, at
each position, tries in priority order:

    1. disjunction symbol  "|"
    2. definition symbol   "::="
    3. atom                literal or non-terminal
    4. comment             ";" to end of line

If nothing matches, it skips one byte and tries again. It never fails:
empty input, a lone byte or arbitrary binary data all produce a (possibly
empty) token sequence.

Operators are emitted as childless AlternativeExpression and
AssignmentExpression nodes so consumers can tell them apart by node kind,
the same way they do for strict ASTs.
"""

from bnflexengine.syntax.ast import (
    AlternativeExpression,
    AssignmentExpression,
    Node,
)
from bnflexengine.syntax.cursor import Cursor
from bnflexengine.syntax.parser.primitives import (
    is_left_angle,
    is_quote,
    scan_comment,
    scan_definition_symbol,
    scan_disjunction,
    scan_literal,
    scan_non_terminal,
)

__all__ = ["tokenize"]


def _scan_token(cursor: Cursor) -> tuple[Node, Cursor] | None:
    """Recognize one token at the cursor, or None."""
    bar = scan_disjunction(cursor)
    if bar is not None:
        return AlternativeExpression(bar.value.name, bar.value.position), bar.cursor

    definition = scan_definition_symbol(cursor)
    if definition is not None:
        token = definition.value
        return AssignmentExpression(token.name, token.position), definition.cursor

    byte = cursor.current
    atom = None
    if is_quote(byte):
        atom = scan_literal(cursor)
    elif is_left_angle(byte):
        atom = scan_non_terminal(cursor)
    if atom is not None:
        return atom.value, atom.cursor

    comment = scan_comment(cursor)
    if comment is not None:
        return comment.value, comment.cursor

    return None


def tokenize(line: bytes) -> tuple[Node, ...]:
    """Split a line into whatever tokens can be recognized.

    Args:
        line: Raw line bytes (any content)

    Returns:
        Tokens in source order, with absolute positions into ``line``

    Example:
        >>> [str(node.kind) for node in tokenize(b'<a> ::= "oops')]
        ['non_terminal', 'assignment']
    """
    tokens: list[Node] = []
    cursor = Cursor(line, 0)
    while not cursor.is_eof:
        scanned = _scan_token(cursor)
        if scanned is None:
            cursor = cursor.advance()
            continue
        token, cursor = scanned
        tokens.append(token)
    return tuple(tokens)
