"""BNFLexEngine - line-oriented BNF parsing for editor highlighting and completion.

Parses one line of Backus-Naur Form at a time, as a live editor buffer
changes. A strict recursive-descent parser builds a binary AST; when a line
does not parse, a permissive tokenizer still classifies what it can and the
strict error is kept for display. Parsing never raises.

Public API:
    parse - Parse one line to a StrictAST or DegradedAST
    BNFParser - Line parser with configurable limits
    traverse - In-order walk over an AST node
    CompletionIndex - Non-terminal usage counts for completion
    Document - Mirrored buffer with per-line highlighting

Exceptions:
    BNFError - Base exception class
    PositionedError - Strict parse failure at a byte offset
    DescriptiveError - Positioned error with a display phrase

Submodules:
    bnflexengine.syntax.ast - AST node types (Statement, AssignmentExpression, etc.)
    bnflexengine.syntax.parser - Strict parser, tokenizer and grammar rules
    bnflexengine.diagnostics - Error types, codes and formatting
    bnflexengine.runtime - Highlighting, documents and the completion index
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import BNFError, DescriptiveError, PositionedError
from .runtime import CompletionIndex, Document
from .syntax import BNFParser, parse, traverse

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("bnflexengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BNFError",
    "BNFParser",
    "CompletionIndex",
    "DescriptiveError",
    "Document",
    "PositionedError",
    "__version__",
    "parse",
    "traverse",
]
