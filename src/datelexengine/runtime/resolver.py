"""Token value resolution.

resolve() maps one vocabulary token to its text for a Moment and a locale
table. Numeric tokens depend only on the Moment; name-bearing tokens
(MMMM, MMM, DDD, DD, D, A, a) consult the table.

Pure functions, no shared state. Thread-safe.

Python 3.12+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Final

from datelexengine.diagnostics import ErrorTemplate, UnknownTokenError

if TYPE_CHECKING:
    from .locale_table import LocaleNaming
    from .moment import Moment

__all__ = ["format_utc_offset", "resolve", "to_twelve_hour"]

type _TokenRule = Callable[[Moment, LocaleNaming], str]


def to_twelve_hour(hour: int) -> int:
    """Convert hour 0-23 to the 12-hour clock: 0 -> 12, 13 -> 1, 12 -> 12."""
    return ((hour + 11) % 12) + 1


def format_utc_offset(offset_minutes: int, *, separator: str = "") -> str:
    """Render a UTC offset as sign, 2-digit hours, separator, 2-digit minutes.

    Examples:
        >>> format_utc_offset(60)
        '+0100'
        >>> format_utc_offset(-330, separator=":")
        '-05:30'
        >>> format_utc_offset(0, separator=":")
        '+00:00'
    """
    sign = "-" if offset_minutes < 0 else "+"
    hours, minutes = divmod(abs(offset_minutes), 60)
    return f"{sign}{hours:02d}{separator}{minutes:02d}"


# Token -> rule. Every spelling in TOKEN_VOCABULARY has exactly one entry.
_RULES: Final[dict[str, _TokenRule]] = {
    # Year
    "YYYY": lambda m, _: f"{m.year:04d}",
    "YY": lambda m, _: f"{m.year % 100:02d}",
    # Month
    "MMMM": lambda m, t: t.month_name(m),
    "MMM": lambda m, t: t.month_name_short(m),
    "MM": lambda m, _: f"{m.month + 1:02d}",
    "M": lambda m, _: str(m.month + 1),
    # Weekday names
    "DDD": lambda m, t: t.weekday_names[m.weekday],
    "DD": lambda m, t: t.weekday_names_short[m.weekday],
    "D": lambda m, t: t.weekday_names_min[m.weekday],
    # Day of month
    "dd": lambda m, _: f"{m.day:02d}",
    "d": lambda m, _: str(m.day),
    # Hour
    "HH": lambda m, _: f"{m.hour:02d}",
    "H": lambda m, _: str(m.hour),
    "hh": lambda m, _: f"{to_twelve_hour(m.hour):02d}",
    "h": lambda m, _: str(to_twelve_hour(m.hour)),
    # Minute, second, millisecond
    "mm": lambda m, _: f"{m.minute:02d}",
    "m": lambda m, _: str(m.minute),
    "ss": lambda m, _: f"{m.second:02d}",
    "s": lambda m, _: str(m.second),
    "ff": lambda m, _: f"{m.millisecond:03d}",
    "f": lambda m, _: str(m.millisecond),
    # Meridiem
    "A": lambda m, t: t.meridiem(m.hour, False),
    "a": lambda m, t: t.meridiem(m.hour, True),
    # UTC offset
    "ZZ": lambda m, _: format_utc_offset(m.utc_offset_minutes),
    "Z": lambda m, _: format_utc_offset(m.utc_offset_minutes, separator=":"),
}


def resolve(token: str, moment: Moment, table: LocaleNaming) -> str:
    """Compute the substitution text for one token.

    Args:
        token: Vocabulary spelling, e.g. "YYYY" or "hh"
        moment: Normalized date fields
        table: Locale naming data for name-bearing tokens

    Returns:
        Substitution text

    Raises:
        UnknownTokenError: If token is not in the vocabulary
    """
    try:
        rule = _RULES[token]
    except KeyError:
        raise UnknownTokenError(ErrorTemplate.token_unknown(token)) from None
    return rule(moment, table)
