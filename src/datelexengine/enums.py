"""Enumerations for DateLexEngine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.12+.
"""

from enum import StrEnum


class SegmentKind(StrEnum):
    """Kind of template segment produced by the tokenizer.

    StrEnum provides automatic string conversion: str(SegmentKind.TOKEN) == "token"
    """

    TOKEN = "token"
    """Recognized vocabulary spelling: YYYY, MM, hh, ..."""

    LITERAL = "literal"
    """Text copied verbatim to the output: "-", " at ", ..."""


class TemplateKind(StrEnum):
    """Kind of named format entry.

    StrEnum provides automatic string conversion: str(TemplateKind.FIXED) == "fixed"
    """

    FIXED = "fixed"
    """One template used for every language."""

    PER_LANGUAGE = "per_language"
    """Template selected by the current language code."""


__all__ = [
    "SegmentKind",
    "TemplateKind",
]
