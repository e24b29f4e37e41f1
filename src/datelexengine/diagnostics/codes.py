"""Diagnostic codes and data structures.

Defines error codes and the diagnostic record carried by every DateLexEngine
exception.
Python 3.12+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Argument errors (wrong types, unparseable dates)
        2000-2999: Lookup errors (languages, named formats, tokens)
        3000-3999: Locale data errors (malformed locale tables)
    """

    # Argument errors (1000-1999)
    TEMPLATE_NOT_STRING = 1001
    DATE_TYPE_INVALID = 1002
    DATE_VALUE_INVALID = 1003
    LANGUAGE_CODE_INVALID = 1004
    FORMAT_NAME_INVALID = 1005
    FORMAT_SPEC_INVALID = 1006
    FORMAT_LANGUAGE_DUPLICATE = 1007

    # Lookup errors (2000-2999)
    LANGUAGE_NOT_FOUND = 2001
    TEMPLATE_LANGUAGE_MISSING = 2002
    FORMAT_NOT_FOUND = 2003
    TOKEN_UNKNOWN = 2004
    CLDR_LOCALE_UNKNOWN = 2005

    # Locale data errors (3000-3999)
    TABLE_FIELD_UNKNOWN = 3001
    TABLE_FIELD_LENGTH = 3002
    TABLE_FIELD_TYPE = 3003
    TABLE_FRAGMENT_TYPE = 3004


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Provides rich error information for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        operation: Public operation where the error occurred
        argument_name: Argument name that caused the error
        expected_type: Expected type for the argument
        received_type: Actual type received
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    operation: str | None = None
    argument_name: str | None = None
    expected_type: str | None = None
    received_type: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[DATE_TYPE_INVALID]: format_date() expected a date value, got dict
              = operation: format_date
              = argument: value
              = expected: datetime | date | int | float | str | None
              = received: dict
              = help: Pass a datetime, epoch milliseconds or an ISO 8601 string

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
