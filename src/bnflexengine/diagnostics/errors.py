"""BNF exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Taxonomy:
    UnexpectedByteError        - byte does not match the expected class
    UnexpectedEndOfInputError  - line ended while more input was required
    PositionedError            - wraps either of the above with its offset
    DescriptiveError           - wraps a PositionedError with a phrase naming
                                 the expected construct, for display only

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic
from .templates import ErrorTemplate

__all__ = [
    "BNFError",
    "DescriptiveError",
    "InternalParserError",
    "LineTooLongError",
    "PositionedError",
    "UnexpectedByteError",
    "UnexpectedEndOfInputError",
]


class BNFError(Exception):
    """Base exception for all BNF errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize BNFError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class UnexpectedByteError(BNFError):
    """Current byte does not match any expected lexical class."""


class UnexpectedEndOfInputError(BNFError):
    """Line ended while more input was required.

    Inside optional trailing constructs the same condition simply means
    "nothing more here"; only a required production turns it into a failure.
    """


class LineTooLongError(BNFError):
    """Line exceeds the parser's configured size limit."""


class InternalParserError(BNFError):
    """An unexpected exception escaped the strict parser.

    Never raised to callers: the dispatcher converts it into a diagnostic
    of a degraded AST.
    """


class PositionedError(BNFError):
    """Lexical error tied to the byte offset where it occurred.

    Attributes:
        cause: The wrapped lexical error
        position: Absolute byte offset into the line
        construct: Grammar construct that was being parsed
    """

    def __init__(self, cause: BNFError, position: int, construct: str = "statement") -> None:
        """Initialize PositionedError.

        Args:
            cause: The wrapped lexical error
            position: Absolute byte offset into the line
            construct: Grammar construct that was being parsed
        """
        super().__init__(
            ErrorTemplate.positioned(cause.diagnostic, str(cause), position, construct)
        )
        self.cause = cause
        self.position = position
        self.construct = construct


class DescriptiveError(BNFError):
    """PositionedError with a human-readable phrase for diagnostics display.

    ``str(error)`` is the positioned message; ``describe()`` names the
    construct the parser expected, e.g. "non-terminal is expected at
    position 9".

    Attributes:
        base: The wrapped positioned error
        description: Name of the expected construct
    """

    def __init__(self, base: PositionedError, description: str) -> None:
        """Initialize DescriptiveError.

        Args:
            base: The wrapped positioned error
            description: Name of the expected construct
        """
        super().__init__(str(base))
        self.diagnostic = base.diagnostic
        self.base = base
        self.description = description

    @classmethod
    def from_positioned(cls, error: PositionedError) -> "DescriptiveError":
        """Describe a positioned error by the construct it was parsing."""
        return cls(error, error.construct)

    @property
    def position(self) -> int:
        """Byte offset of the wrapped error."""
        return self.base.position

    @property
    def cause(self) -> BNFError:
        """Innermost lexical error."""
        return self.base.cause

    def describe(self) -> str:
        """Phrase naming the expected construct and its 1-indexed position."""
        return ErrorTemplate.expected_construct(self.description, self.position).message
