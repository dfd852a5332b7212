"""BNF syntax parsing package.

Provides the line parser, AST definitions and traversal.
Separate from runtime so tools that only need ASTs do not pull in the
document and completion layers.

Python 3.13+.
"""

from .ast import (
    AST,
    AlternativeExpression,
    AssignmentExpression,
    Comment,
    CompoundExpression,
    DegradedAST,
    Expression,
    Node,
    NonTerminal,
    Position,
    Statement,
    StrictAST,
    Terminal,
    Token,
)
from .cursor import Cursor, ParseFailure, ParseResult
from .parser import BNFParser, StrictParser, tokenize
from .position import byte_offset, column_offset
from .visitor import ASTVisitor, traverse, traverse_all

__all__ = [
    "AST",
    "ASTVisitor",
    "AlternativeExpression",
    "AssignmentExpression",
    "BNFParser",
    "Comment",
    "CompoundExpression",
    "Cursor",
    "DegradedAST",
    "Expression",
    "Node",
    "NonTerminal",
    "ParseFailure",
    "ParseResult",
    "Position",
    "Statement",
    "StrictAST",
    "StrictParser",
    "Terminal",
    "Token",
    "byte_offset",
    "column_offset",
    "parse",
    "tokenize",
    "traverse",
    "traverse_all",
]

_DEFAULT_PARSER = BNFParser()


def parse(line: bytes | str) -> AST:
    """Parse one BNF line into an AST.

    Convenience function for BNFParser().parse() with default limits.
    Never raises.

    Args:
        line: Line content

    Returns:
        StrictAST or DegradedAST

    Example:
        >>> from bnflexengine.syntax import parse
        >>> ast = parse("<a> ::= <b> <c>")
        >>> ast.statements[0].rule.left().text
        'a'
    """
    return _DEFAULT_PARSER.parse(line)
