"""Hypothesis strategies for BNFLexEngine property-based testing.

Strategies are organized by domain:

- bnf: BNF line syntax (symbols, literals, expressions, whole lines)

Usage:
    from tests.strategies import bnf_lines, bnf_rules
    from tests.strategies.bnf import bnf_symbol_names, bnf_literals

Event-Emitting Strategies:
    bnf_rules and bnf_lines emit hypothesis.event() calls describing the
    shape of each generated line (alternatives, trailing comment).
"""

from .bnf import (
    # Constants
    BNF_SYMBOL_FIRST_CHARS,
    BNF_SYMBOL_REST_CHARS,
    # Strategies
    bnf_atoms,
    bnf_comments,
    bnf_expressions,
    bnf_lines,
    bnf_literals,
    bnf_non_terminals,
    bnf_rules,
    bnf_symbol_names,
    bnf_whitespace,
)

__all__ = [
    "BNF_SYMBOL_FIRST_CHARS",
    "BNF_SYMBOL_REST_CHARS",
    "bnf_atoms",
    "bnf_comments",
    "bnf_expressions",
    "bnf_lines",
    "bnf_literals",
    "bnf_non_terminals",
    "bnf_rules",
    "bnf_symbol_names",
    "bnf_whitespace",
]
