"""Diagnostic system for DateLexEngine errors.

Provides structured error diagnostics with codes, hints, and argument
metadata.

Python 3.12+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    DateLexError,
    InvalidArgumentTypeError,
    LocaleTableError,
    UnknownFormatError,
    UnknownLocaleError,
    UnknownTokenError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "DateLexError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "InvalidArgumentTypeError",
    "LocaleTableError",
    "OutputFormat",
    "UnknownFormatError",
    "UnknownLocaleError",
    "UnknownTokenError",
]
