"""Enumerations for BNFLexEngine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class NodeKind(StrEnum):
    """Kind tag of an AST node.

    StrEnum provides automatic string conversion: str(NodeKind.TERMINAL) == "terminal"
    """

    TERMINAL = "terminal"
    """Quoted literal: "January" or 'x'"""

    NON_TERMINAL = "non_terminal"
    """Grammar symbol: <month>"""

    COMMENT = "comment"
    """Comment to end of line: ; note"""

    STATEMENT = "statement"
    """Root of one parsed line"""

    ASSIGNMENT = "assignment"
    """Rule definition: <lhs> ::= rhs"""

    ALTERNATIVE = "alternative"
    """One arm of a disjunction: a | b"""

    COMPOUND = "compound"
    """One element of a concatenation: a b"""


class ParseMode(StrEnum):
    """How an AST was produced.

    StrEnum provides automatic string conversion: str(ParseMode.STRICT) == "strict"
    """

    STRICT = "strict"
    """Grammar-aware parse succeeded; the AST holds statements"""

    DEGRADED = "degraded"
    """Strict parse failed; the AST holds best-effort tokens"""


class HighlightGroup(StrEnum):
    """Editor highlight group assigned to a node kind.

    Values follow the standard Vim highlight group names.
    """

    IDENTIFIER = "Identifier"
    STRING = "String"
    OPERATOR = "Operator"
    COMMENT = "Comment"
    ERROR = "Error"


__all__ = [
    "HighlightGroup",
    "NodeKind",
    "ParseMode",
]
