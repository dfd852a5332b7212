"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate", "describe_byte"]

# Bytes in this range are shown as characters, everything else in hex.
_PRINTABLE_FIRST = 0x21
_PRINTABLE_LAST = 0x7E


def describe_byte(byte: int) -> str:
    """Render a byte for an error message.

    Example:
        >>> describe_byte(ord("x"))
        "'x'"
        >>> describe_byte(0x20)
        'space'
        >>> describe_byte(0xFF)
        '0xff'
    """
    if byte == 0x20:
        return "space"
    if _PRINTABLE_FIRST <= byte <= _PRINTABLE_LAST:
        return repr(chr(byte))
    return f"0x{byte:02x}"


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # =========================================================================
    # SYNTAX ERRORS (3000-3999)
    # =========================================================================

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Unexpected end of line.

        Args:
            position: The byte offset where the line ended

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = "Unexpected end of input"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            span=SourceSpan.at(position),
            hint="The line ends before the construct is complete",
        )

    @staticmethod
    def unexpected_byte(byte: int, position: int) -> Diagnostic:
        """Byte does not match any expected lexical class.

        Args:
            byte: The offending byte
            position: Its byte offset

        Returns:
            Diagnostic for UNEXPECTED_BYTE
        """
        msg = f"Unexpected byte {describe_byte(byte)}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_BYTE,
            message=msg,
            span=SourceSpan(start=position, end=position + 1, column=position + 1),
        )

    @staticmethod
    def unterminated_literal(quote: int, position: int) -> Diagnostic:
        """Literal opened but never closed.

        Args:
            quote: The opening quote byte
            position: Offset of the opening quote

        Returns:
            Diagnostic for UNTERMINATED_LITERAL
        """
        return Diagnostic(
            code=DiagnosticCode.UNTERMINATED_LITERAL,
            message="Unterminated literal",
            span=SourceSpan.at(position),
            hint=f"Close the literal with a matching {describe_byte(quote)}",
            expected="terminal",
        )

    @staticmethod
    def positioned(
        cause: Diagnostic | None, message: str, position: int, construct: str | None = None
    ) -> Diagnostic:
        """Wrap a lexical failure with the offset it occurred at.

        Args:
            cause: Diagnostic of the wrapped error, if it has one
            message: Message of the wrapped error
            position: Byte offset of the failure
            construct: Grammar construct that was being parsed

        Returns:
            Diagnostic carrying the cause's code and a positioned message
        """
        code = cause.code if cause is not None else DiagnosticCode.UNEXPECTED_BYTE
        hint = cause.hint if cause is not None else None
        return Diagnostic(
            code=code,
            message=f"{message} at position {position}",
            span=SourceSpan.at(position),
            hint=hint,
            expected=construct,
        )

    @staticmethod
    def expected_construct(construct: str, position: int) -> Diagnostic:
        """Human-readable phrase naming what the parser expected.

        Positions are shown 1-indexed, like editor columns.

        Args:
            construct: Grammar construct name (e.g. "non-terminal")
            position: 0-indexed byte offset

        Returns:
            Diagnostic for EXPECTED_CONSTRUCT
        """
        msg = f"{construct} is expected at position {position + 1}"
        return Diagnostic(
            code=DiagnosticCode.EXPECTED_CONSTRUCT,
            message=msg,
            span=SourceSpan.at(position),
            expected=construct,
        )

    # =========================================================================
    # LIMIT ERRORS (2000-2999)
    # =========================================================================

    @staticmethod
    def line_too_long(size: int, limit: int) -> Diagnostic:
        """Line exceeds the configured size limit.

        Args:
            size: Actual line size in bytes
            limit: Configured maximum

        Returns:
            Diagnostic for LINE_TOO_LONG
        """
        msg = f"Line size ({size:,} bytes) exceeds maximum ({limit:,} bytes)"
        return Diagnostic(
            code=DiagnosticCode.LINE_TOO_LONG,
            message=msg,
            hint="Configure max_line_size in BNFParser constructor to increase limit",
        )

    # =========================================================================
    # INTERNAL ERRORS (6000-6999)
    # =========================================================================

    @staticmethod
    def internal_fault(exc_type: str, detail: str) -> Diagnostic:
        """Unexpected exception raised while parsing a line.

        Args:
            exc_type: Name of the exception type
            detail: Exception message

        Returns:
            Diagnostic for INTERNAL_PARSER_FAULT
        """
        msg = f"Internal parser fault ({exc_type}): {detail}"
        return Diagnostic(
            code=DiagnosticCode.INTERNAL_PARSER_FAULT,
            message=msg,
            hint="The line was tokenized instead; please report this input",
        )
