"""Grammar rules for the strict BNF line parser.

One line of input, parsed top-down with one function per production:

    statement   := ws? rule? ws? comment? lineEnd
    rule        := nonTerminal ws? "::=" ws? expression
    expression  := list (ws? "|" ws? list)*
    list        := atom (ws atom)*
    atom        := literal | nonTerminal
    lineEnd     := ws? EOL* <end of buffer>

Backtracking:
    Every optional continuation is attempted from a saved cursor. The
    cursor is immutable, so "restoring" means returning the result built
    before the attempt together with the cursor it ended at. Required
    sub-productions return None and the failure propagates to the caller.

Lookahead Patterns:
    - `"` or `'` starts a literal
    - `<` starts a non-terminal
    - `;` starts a comment

Stack Usage:
    No rule calls itself. Lists and alternations are collected in loops and
    folded into right-nested nodes afterwards, so a line with thousands of
    `|` arms parses in constant stack depth.
"""

from dataclasses import dataclass

from bnflexengine.diagnostics import BNFError
from bnflexengine.syntax.ast import (
    AlternativeExpression,
    AssignmentExpression,
    CompoundExpression,
    NonTerminal,
    Position,
    Statement,
    Terminal,
    Token,
)
from bnflexengine.syntax.cursor import Cursor, ParseFailure, ParseResult
from bnflexengine.syntax.parser.primitives import (
    fail_at,
    is_eol,
    is_left_angle,
    is_quote,
    scan_comment,
    scan_definition_symbol,
    scan_disjunction,
    scan_literal,
    scan_non_terminal,
    skip_whitespace,
)

__all__ = [
    "ParseContext",
    "parse_atom",
    "parse_expression",
    "parse_line_end",
    "parse_list",
    "parse_rule",
    "parse_statement",
]

type Atom = Terminal | NonTerminal
type ListNode = CompoundExpression | Atom
type ExpressionNode = AlternativeExpression | ListNode


@dataclass(slots=True)
class ParseContext:
    """Explicit context for one strict parse.

    Replaces thread-local state with explicit parameter passing: each call
    to the strict parser owns a fresh context, so lines can be parsed from
    several threads at once.

    Attributes:
        failure: Furthest failure recorded so far (None while none)
    """

    failure: ParseFailure | None = None

    def fail(self, cause: BNFError, position: int, construct: str) -> None:
        """Record a failure, keeping the one furthest into the line.

        Optional constructs that end early also record failures; the
        furthest one is where the line actually stopped making sense. On a
        tie the most recent failure wins, since it comes from the production
        that enclosed the others.
        """
        if self.failure is None or position >= self.failure.position:
            self.failure = ParseFailure(cause, position, construct)


# =============================================================================
# Expression Parsing
# =============================================================================


def parse_atom(cursor: Cursor, context: ParseContext) -> ParseResult[Atom] | None:
    """Parse atom: literal | nonTerminal"""
    if not cursor.is_eof:
        if is_quote(cursor.current):
            return scan_literal(cursor, context)
        if is_left_angle(cursor.current):
            return scan_non_terminal(cursor, context)
    fail_at(cursor, "terminal or non-terminal", context)
    return None


def _chain_compound(atoms: list[Atom]) -> ListNode:
    """Thread atoms into right-nested CompoundExpressions.

    The last atom is uplifted into the chain unwrapped; a single atom is
    returned as is. Each link's position spans from its atom to the end of
    the list.
    """
    node: ListNode = atoms[-1]
    for atom in reversed(atoms[:-1]):
        node = CompoundExpression(
            name=b"",
            position=Position(atom.begin, node.end),
            left_child=atom,
            right_child=node,
        )
    return node


def parse_list(cursor: Cursor, context: ParseContext) -> ParseResult[ListNode] | None:
    """Parse list: atom (ws atom)*

    Greedy. When an atom after the first fails, the list ends before the
    whitespace that preceded it.

    Examples:
        <b> <c>     -> CompoundExpression(<b>, <c>)
        "x"         -> Terminal("x")
    """
    first = parse_atom(cursor, context)
    if first is None:
        return None

    atoms: list[Atom] = [first.value]
    cursor = first.cursor
    while True:
        result = parse_atom(skip_whitespace(cursor), context)
        if result is None:
            break
        atoms.append(result.value)
        cursor = result.cursor

    return ParseResult(_chain_compound(atoms), cursor)


def _chain_alternatives(arms: list[ListNode], bars: list[Token]) -> ExpressionNode:
    """Thread arms into right-nested AlternativeExpressions.

    ``bars[i]`` is the ``|`` between ``arms[i]`` and ``arms[i + 1]``; each
    link takes that token's name and position. A single arm is returned as is.
    """
    node: ExpressionNode = arms[-1]
    for arm, bar in zip(reversed(arms[:-1]), reversed(bars), strict=True):
        node = AlternativeExpression(
            name=bar.name,
            position=bar.position,
            left_child=arm,
            right_child=node,
        )
    return node


def parse_expression(
    cursor: Cursor, context: ParseContext
) -> ParseResult[ExpressionNode] | None:
    """Parse expression: list (ws? "|" ws? list)*

    Iterative. When a bar is not followed by a list, the expression ends
    with the last complete arm and the cursor goes back to where it ended.

    Examples:
        "January" | "February" -> AlternativeExpression("January", "February")
        <a> | <b> |            -> AlternativeExpression(<a>, <b>), stops before " |"
    """
    head = parse_list(cursor, context)
    if head is None:
        return None

    arms: list[ListNode] = [head.value]
    bars: list[Token] = []
    cursor = head.cursor
    while True:
        bar = scan_disjunction(skip_whitespace(cursor), context)
        if bar is None:
            break
        arm = parse_list(skip_whitespace(bar.cursor), context)
        if arm is None:
            break
        bars.append(bar.value)
        arms.append(arm.value)
        cursor = arm.cursor

    return ParseResult(_chain_alternatives(arms, bars), cursor)


# =============================================================================
# Statement Parsing
# =============================================================================


def parse_rule(cursor: Cursor, context: ParseContext) -> ParseResult[AssignmentExpression] | None:
    """Parse rule: nonTerminal ws? "::=" ws? expression

    Example:
        <a> ::= <b> -> AssignmentExpression(<a>, <b>)
    """
    name = scan_non_terminal(cursor, context)
    if name is None:
        return None

    definition = scan_definition_symbol(skip_whitespace(name.cursor), context)
    if definition is None:
        return None

    body = parse_expression(skip_whitespace(definition.cursor), context)
    if body is None:
        return None

    rule = AssignmentExpression(
        name=definition.value.name,
        position=definition.value.position,
        left_child=name.value,
        right_child=body.value,
    )
    return ParseResult(rule, body.cursor)


def parse_line_end(cursor: Cursor, context: ParseContext) -> ParseResult[None] | None:
    """Parse lineEnd: ws? EOL* followed by the end of the buffer.

    Trailing spaces and a trailing newline (LF, CRLF) are tolerated.
    """
    cursor = skip_whitespace(cursor)
    while not cursor.is_eof and is_eol(cursor.current):
        cursor = cursor.advance()
    if not cursor.is_eof:
        fail_at(cursor, "end of line", context)
        return None
    return ParseResult(None, cursor)


def parse_statement(cursor: Cursor, context: ParseContext) -> ParseResult[Statement] | None:
    """Parse statement: ws? rule? ws? comment? lineEnd

    A blank line is a valid statement with neither rule nor comment.

    Examples:
        <a> ::= "x" ; note -> Statement(rule=..., comment=Comment("; note"))
        ; note             -> Statement(rule=None, comment=Comment("; note"))
        (empty)            -> Statement(rule=None, comment=None)
    """
    start = cursor.pos
    cursor = skip_whitespace(cursor)

    rule = parse_rule(cursor, context)
    if rule is not None:
        cursor = rule.cursor

    comment = scan_comment(skip_whitespace(cursor), context)
    if comment is not None:
        cursor = comment.cursor

    end = parse_line_end(cursor, context)
    if end is None:
        return None

    statement = Statement(
        rule=rule.value if rule is not None else None,
        comment=comment.value if comment is not None else None,
        position=Position(start, end.cursor.pos),
    )
    return ParseResult(statement, end.cursor)
