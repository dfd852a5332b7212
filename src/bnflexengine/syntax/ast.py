"""BNF AST (Abstract Syntax Tree) node definitions.

Every node is a binary tree node: it exposes exactly two navigable
children through ``left()`` and ``right()`` (None when absent). Constructs
of variable arity (alternation, concatenation) are encoded as right-threaded
chains of binary nodes; the last element of a chain is stored directly as
the right child instead of being wrapped, so a one-element chain collapses
to the bare element.

Shapes:
    Statement              left: AssignmentExpression | None   right: Comment | None
    AssignmentExpression   left: NonTerminal                   right: rule body
    AlternativeExpression  left: CompoundExpression | atom     right: next arm
    CompoundExpression     left: atom                          right: next element
    Terminal, NonTerminal, Comment are leaves.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import ClassVar, TypeIs

from bnflexengine.diagnostics import DescriptiveError
from bnflexengine.enums import NodeKind, ParseMode

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Base types
    "Position",
    "Token",
    # Leaves
    "Terminal",
    "NonTerminal",
    "Comment",
    # Expressions
    "Expression",
    "AssignmentExpression",
    "AlternativeExpression",
    "CompoundExpression",
    # Line root
    "Statement",
    # Parse results
    "StrictAST",
    "DegradedAST",
    # Type aliases
    "Node",
    "AST",
    "VisitorFunc",
]

# ============================================================================
# BASE TYPES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Position:
    """Byte range of a node within its line.

    Offsets are absolute to the start of the line buffer, not relative to
    a parent token.

    Attributes:
        begin: Starting byte offset (inclusive)
        end: Ending byte offset (exclusive)

    Example:
        Source: b'<a> ::= "x"'
        NonTerminal <a>: Position(begin=0, end=3)
        Terminal "x":    Position(begin=8, end=11)
    """

    begin: int
    end: int

    def __post_init__(self) -> None:
        """Validate position invariants."""
        if self.begin < 0:
            msg = f"Position begin must be >= 0, got {self.begin}"
            raise ValueError(msg)
        if self.end < self.begin:
            msg = f"Position end ({self.end}) must be >= begin ({self.begin})"
            raise ValueError(msg)

    def __len__(self) -> int:
        return self.end - self.begin


@dataclass(frozen=True, slots=True)
class Token:
    """Named byte range. Never owns children on its own.

    Attributes:
        name: Token bytes (literal content, symbol name or operator)
        position: Where the token sits in the line
    """

    name: bytes
    position: Position

    @property
    def begin(self) -> int:
        return self.position.begin

    @property
    def end(self) -> int:
        return self.position.end

    @property
    def text(self) -> str:
        """Name decoded as UTF-8 (invalid bytes replaced)."""
        return self.name.decode("utf-8", errors="replace")


# ============================================================================
# LEAVES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Terminal(Token):
    """Quoted literal. ``name`` is the content without quotes."""

    kind: ClassVar[NodeKind] = NodeKind.TERMINAL

    def left(self) -> None:
        return None

    def right(self) -> None:
        return None

    @staticmethod
    def guard(node: object) -> TypeIs["Terminal"]:
        """Type guard for Terminal."""
        return isinstance(node, Terminal)


@dataclass(frozen=True, slots=True)
class NonTerminal(Token):
    """Grammar symbol. ``name`` is the symbol without angle brackets."""

    kind: ClassVar[NodeKind] = NodeKind.NON_TERMINAL

    def left(self) -> None:
        return None

    def right(self) -> None:
        return None

    @staticmethod
    def guard(node: object) -> TypeIs["NonTerminal"]:
        """Type guard for NonTerminal (used by the completion index)."""
        return isinstance(node, NonTerminal)


@dataclass(frozen=True, slots=True)
class Comment(Token):
    """Comment from the ``;`` marker to end of line, marker included."""

    kind: ClassVar[NodeKind] = NodeKind.COMMENT

    def left(self) -> None:
        return None

    def right(self) -> None:
        return None


# ============================================================================
# EXPRESSIONS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Expression(Token):
    """Binary expression: operator token plus two children.

    ``name`` and ``position`` describe the connecting operator (``::=`` or
    ``|``). Concatenation has no operator; its token covers the elements it
    joins and has an empty name.

    Note:
        The generated ``__eq__``, ``__hash__`` and ``__repr__`` recurse down
        the right-nested chain, one frame per link. A line with thousands of
        arms or atoms parses fine but can exceed the recursion limit there;
        compare such lines through :meth:`StrictAST.traverse` instead.
    """

    left_child: "Node | None" = None
    right_child: "Node | None" = None

    def left(self) -> "Node | None":
        return self.left_child

    def right(self) -> "Node | None":
        return self.right_child


@dataclass(frozen=True, slots=True)
class AssignmentExpression(Expression):
    """Rule definition.

    The left child is always the NonTerminal being defined. The right child
    is one of AlternativeExpression, CompoundExpression, NonTerminal, or
    Terminal.
    """

    kind: ClassVar[NodeKind] = NodeKind.ASSIGNMENT


@dataclass(frozen=True, slots=True)
class AlternativeExpression(Expression):
    """One arm of a disjunction.

    The left child is a CompoundExpression, Terminal, or NonTerminal. The
    right child is the next AlternativeExpression, or the last arm itself.
    """

    kind: ClassVar[NodeKind] = NodeKind.ALTERNATIVE


@dataclass(frozen=True, slots=True)
class CompoundExpression(Expression):
    """One element of a concatenation, LISP cons style.

    The left child is a Terminal or NonTerminal. The right child is the next
    CompoundExpression, or the last element itself.
    """

    kind: ClassVar[NodeKind] = NodeKind.COMPOUND


# ============================================================================
# LINE ROOT
# ============================================================================


@dataclass(frozen=True, slots=True)
class Statement:
    """Root of one parsed line.

    Blank lines produce a statement with neither rule nor comment.

    Attributes:
        rule: The production rule, if the line defines one
        comment: Trailing (or sole) comment, if any
        position: Bytes consumed by the statement
    """

    rule: AssignmentExpression | None = None
    comment: Comment | None = None
    position: Position = Position(0, 0)

    kind: ClassVar[NodeKind] = NodeKind.STATEMENT

    def left(self) -> AssignmentExpression | None:
        return self.rule

    def right(self) -> Comment | None:
        return self.comment

    @property
    def begin(self) -> int:
        return self.position.begin

    @property
    def end(self) -> int:
        return self.position.end

    @property
    def is_empty(self) -> bool:
        """True for a blank line (nothing but whitespace)."""
        return self.rule is None and self.comment is None


# ============================================================================
# PARSE RESULTS
# ============================================================================


@dataclass(frozen=True, slots=True)
class StrictAST:
    """Result of a successful strict parse.

    Attributes:
        statements: Parsed statements; empty for a blank line
    """

    statements: tuple[Statement, ...]

    mode: ClassVar[ParseMode] = ParseMode.STRICT

    @property
    def is_strict(self) -> bool:
        return True

    def rule_count(self) -> int:
        """Number of parsed statements."""
        return len(self.statements)

    def diagnostic(self) -> None:
        """Strict parses carry no diagnostic."""
        return None

    def traverse[R](self, visit: "VisitorFunc[R]") -> tuple[int, R | None]:
        """Walk every statement in order.

        See :func:`bnflexengine.syntax.visitor.traverse_all`.
        """
        from .visitor import traverse_all  # noqa: PLC0415 - circular

        return traverse_all(self.statements, visit)


@dataclass(frozen=True, slots=True)
class DegradedAST:
    """Best-effort tokens produced after the strict parser failed.

    Attributes:
        groups: Per-line token sequences (empty lines produce no group)
        error: Why the strict parse failed
    """

    groups: tuple[tuple["Node", ...], ...]
    error: DescriptiveError | None = None

    mode: ClassVar[ParseMode] = ParseMode.DEGRADED

    @property
    def is_strict(self) -> bool:
        return False

    @property
    def tokens(self) -> tuple["Node", ...]:
        """All tokens of all groups, flattened in order."""
        return tuple(token for group in self.groups for token in group)

    def rule_count(self) -> int:
        """Number of recognized token groups."""
        return len(self.groups)

    def diagnostic(self) -> DescriptiveError | None:
        """The strict parser's error, kept for display."""
        return self.error

    def traverse[R](self, visit: "VisitorFunc[R]") -> tuple[int, R | None]:
        """Visit every token in order.

        See :func:`bnflexengine.syntax.visitor.traverse_all`.
        """
        from .visitor import traverse_all  # noqa: PLC0415 - circular

        return traverse_all(self.tokens, visit)


# ============================================================================
# TYPE ALIASES
# ============================================================================

type Node = (
    Terminal
    | NonTerminal
    | Comment
    | Statement
    | AssignmentExpression
    | AlternativeExpression
    | CompoundExpression
)

type AST = StrictAST | DegradedAST

# Visitor callback: return None to continue, anything else stops the walk.
type VisitorFunc[R] = Callable[[Node], R | None]
