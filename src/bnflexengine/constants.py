"""Shared constants for BNFLexEngine.

This module provides centralized configuration constants used across
syntax and runtime packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Input limits: Bound on the size of a single line
- Lexical constants: Operator spellings and character classes of BNF

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "MAX_LINE_SIZE",
    # Lexical constants
    "DEFINITION_SYMBOL",
    "DISJUNCTION_SYMBOL",
    "COMMENT_MARKER",
    "LINE_END_BYTES",
    # Completion
    "DEFAULT_COMPLETION_LIMIT",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum size of a single line in bytes (64 KiB).
# Longer lines skip the strict parser and are only tokenized.
MAX_LINE_SIZE: int = 64 * 1024

# ============================================================================
# LEXICAL CONSTANTS
# ============================================================================

DEFINITION_SYMBOL: bytes = b"::="
DISJUNCTION_SYMBOL: bytes = b"|"
COMMENT_MARKER: bytes = b";"

# Bytes that terminate a line (comment bodies stop here).
LINE_END_BYTES: frozenset[int] = frozenset(b"\n\r\x00")

# ============================================================================
# COMPLETION
# ============================================================================

# Default number of candidates returned by CompletionIndex.complete().
DEFAULT_COMPLETION_LIMIT: int = 20
