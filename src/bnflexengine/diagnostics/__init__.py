"""Diagnostic system for BNF errors.

Provides structured error diagnostics with codes, spans and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    BNFError,
    DescriptiveError,
    InternalParserError,
    LineTooLongError,
    PositionedError,
    UnexpectedByteError,
    UnexpectedEndOfInputError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "BNFError",
    "DescriptiveError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "InternalParserError",
    "LineTooLongError",
    "OutputFormat",
    "PositionedError",
    "SourceSpan",
    "UnexpectedByteError",
    "UnexpectedEndOfInputError",
]
