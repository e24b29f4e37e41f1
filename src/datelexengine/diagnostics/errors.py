"""DateLexEngine exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information. Each
concrete error also derives from the builtin exception a caller would
naturally catch (TypeError, LookupError, KeyError, ValueError).

Python 3.12+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "DateLexError",
    "InvalidArgumentTypeError",
    "LocaleTableError",
    "UnknownFormatError",
    "UnknownLocaleError",
    "UnknownTokenError",
]


class DateLexError(Exception):
    """Base exception for all DateLexEngine errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize DateLexError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0]) if self.args else ""


class InvalidArgumentTypeError(DateLexError, TypeError):
    """Argument of the wrong shape passed across the public boundary.

    Raised for non-string templates, date inputs that are neither a date
    value, a finite epoch number nor a parseable ISO 8601 string, and
    malformed names or named-format specs.
    """


class UnknownLocaleError(DateLexError, LookupError):
    """Language code with no usable locale data.

    Raised when a per-language named format has neither the current nor the
    fallback language, when a table is requested for an unregistered code,
    and when CLDR has no data for a code.
    """


class UnknownFormatError(DateLexError, KeyError):
    """Named format is not registered."""


class UnknownTokenError(DateLexError, KeyError):
    """Token name outside the fixed vocabulary passed to the resolver."""


class LocaleTableError(DateLexError, ValueError):
    """Malformed locale table fragment.

    Examples:
    - Unknown field name
    - Month array without exactly 12 entries
    - Non-string entry in a name array
    """
