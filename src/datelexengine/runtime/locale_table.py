"""Locale naming tables.

A LocaleTable bundles the display strings one language needs to render
name-bearing tokens: month names (full and short), weekday names (full,
short, min) and the two meridiem designators.

Name lookup goes through three methods, month_name(), month_name_short() and
meridiem(). The defaults index the arrays; languages with irregular forms
(genitive month names, period-of-day meridiems, ...) subclass LocaleTable and
override the method instead of registering loose callbacks:

    >>> class PolishTable(LocaleTable):
    ...     def month_name(self, moment: Moment) -> str:
    ...         return POLISH_GENITIVE[moment.month]

Tables are immutable. merged() returns an updated copy of the same class,
which is how LocaleContext applies partial fragments.

Python 3.12+. Uses Babel for CLDR-seeded tables (from_cldr).
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Final, Protocol

from babel import UnknownLocaleError as BabelUnknownLocaleError

from datelexengine.diagnostics import (
    ErrorTemplate,
    InvalidArgumentTypeError,
    LocaleTableError,
    UnknownLocaleError,
)
from datelexengine.locale_utils import get_babel_locale

if TYPE_CHECKING:
    from .moment import Moment

__all__ = [
    "ENGLISH",
    "LocaleFragment",
    "LocaleNaming",
    "LocaleTable",
]

logger = logging.getLogger(__name__)

# Required entry count per array field
_FIELD_LENGTHS: Final[dict[str, int]] = {
    "month_names": 12,
    "month_names_short": 12,
    "weekday_names": 7,
    "weekday_names_short": 7,
    "weekday_names_min": 7,
    "meridiems": 2,
}

# camelCase spellings accepted in fragments, mapped to field names
_FIELD_ALIASES: Final[dict[str, str]] = {
    "months": "month_names",
    "monthNames": "month_names",
    "monthsShort": "month_names_short",
    "monthNamesShort": "month_names_short",
    "weekdays": "weekday_names",
    "weekdayNames": "weekday_names",
    "weekdaysShort": "weekday_names_short",
    "weekdayNamesShort": "weekday_names_short",
    "weekdaysMin": "weekday_names_min",
    "weekdayNamesMin": "weekday_names_min",
}

# Babel's weekday dicts are keyed 0 = Monday; tables are 0 = Sunday
_CLDR_WEEKDAY_ORDER: Final[tuple[int, ...]] = (6, 0, 1, 2, 3, 4, 5)


class LocaleNaming(Protocol):
    """Capability the resolver needs for name-bearing tokens."""

    weekday_names: tuple[str, ...]
    weekday_names_short: tuple[str, ...]
    weekday_names_min: tuple[str, ...]

    def month_name(self, moment: Moment) -> str: ...

    def month_name_short(self, moment: Moment) -> str: ...

    def meridiem(self, hour: int, lowercase: bool) -> str: ...


@dataclass(frozen=True, slots=True)
class LocaleTable:
    """Immutable naming data for one language.

    Attributes:
        month_names: 12 full month names, index 0 = January
        month_names_short: 12 abbreviated month names
        weekday_names: 7 full weekday names, index 0 = Sunday
        weekday_names_short: 7 abbreviated weekday names
        weekday_names_min: 7 minimal weekday names
        meridiems: Designators for hours 0-11 and 12-23, upper case

    Raises:
        LocaleTableError: If an array has the wrong length or holds non-strings
    """

    FIELDS: ClassVar[tuple[str, ...]] = tuple(_FIELD_LENGTHS)

    month_names: tuple[str, ...]
    month_names_short: tuple[str, ...]
    weekday_names: tuple[str, ...]
    weekday_names_short: tuple[str, ...]
    weekday_names_min: tuple[str, ...]
    meridiems: tuple[str, ...] = ("AM", "PM")

    def __post_init__(self) -> None:
        """Validate array lengths and freeze sequences into tuples."""
        for name, expected in _FIELD_LENGTHS.items():
            value = getattr(self, name)
            if isinstance(value, str) or not isinstance(value, Sequence):
                raise LocaleTableError(ErrorTemplate.table_field_type(name, value))
            if not all(isinstance(item, str) for item in value):
                raise LocaleTableError(ErrorTemplate.table_field_type(name, value))
            if len(value) != expected:
                raise LocaleTableError(
                    ErrorTemplate.table_field_length(name, expected, len(value))
                )
            object.__setattr__(self, name, tuple(value))

    def month_name(self, moment: Moment) -> str:
        """Full month name for the moment (MMMM)."""
        return self.month_names[moment.month]

    def month_name_short(self, moment: Moment) -> str:
        """Abbreviated month name for the moment (MMM)."""
        return self.month_names_short[moment.month]

    def meridiem(self, hour: int, lowercase: bool) -> str:
        """Meridiem designator for an hour 0-23 (A / a).

        Hours 0-11 select the first designator, 12-23 the second.
        """
        designator = self.meridiems[1] if hour > 11 else self.meridiems[0]
        return designator.lower() if lowercase else designator

    def merged(self, fragment: LocaleFragment) -> LocaleTable:
        """Return a copy with the fields in fragment replaced.

        A complete LocaleTable passed as fragment is returned unchanged; it
        replaces rather than merges. Mapping keys may be field names or
        their camelCase aliases (months, monthsShort, weekdays, weekdaysShort,
        weekdaysMin).

        Args:
            fragment: Partial table as a mapping, or a complete LocaleTable

        Returns:
            New table of the same class as self (or fragment itself)

        Raises:
            LocaleTableError: For unknown field names or invalid arrays
            InvalidArgumentTypeError: If fragment is neither a mapping nor a
                LocaleTable
        """
        if isinstance(fragment, LocaleTable):
            return fragment
        if not isinstance(fragment, Mapping):
            raise InvalidArgumentTypeError(ErrorTemplate.table_fragment_type(fragment))

        changes: dict[str, Any] = {}
        for key, value in fragment.items():
            field_name = _FIELD_ALIASES.get(key, key)
            if field_name not in _FIELD_LENGTHS:
                raise LocaleTableError(ErrorTemplate.table_field_unknown(key, self.FIELDS))
            changes[field_name] = value

        if not changes:
            return self
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_cldr(cls, locale_code: str) -> LocaleTable:
        """Build a table from Babel's CLDR data.

        Uses the "format" context: wide month and weekday names for the
        full forms, abbreviated for short forms, and the CLDR "short"
        weekday width for the minimal form. Locales without abbreviated
        day periods keep the English AM/PM designators.

        Examples:
            >>> LocaleTable.from_cldr("fr").month_names[0]
            'janvier'

        Args:
            locale_code: BCP 47 or POSIX locale code

        Returns:
            LocaleTable instance of cls

        Raises:
            UnknownLocaleError: If Babel has no data for the locale
        """
        try:
            locale = get_babel_locale(locale_code)
        except (BabelUnknownLocaleError, ValueError) as e:
            raise UnknownLocaleError(
                ErrorTemplate.cldr_locale_unknown(locale_code, str(e))
            ) from e

        months = locale.months["format"]
        days = locale.days["format"]
        min_days = days["short"] if "short" in days else days["abbreviated"]
        periods = locale.day_periods.get("format", {}).get("abbreviated", {})

        meridiems: tuple[str, ...] = ENGLISH.meridiems
        if "am" in periods and "pm" in periods:
            meridiems = (str(periods["am"]), str(periods["pm"]))
        else:
            logger.debug("Locale %s has no CLDR am/pm designators", locale_code)

        return cls(
            month_names=tuple(str(months["wide"][m]) for m in range(1, 13)),
            month_names_short=tuple(str(months["abbreviated"][m]) for m in range(1, 13)),
            weekday_names=tuple(str(days["wide"][d]) for d in _CLDR_WEEKDAY_ORDER),
            weekday_names_short=tuple(str(days["abbreviated"][d]) for d in _CLDR_WEEKDAY_ORDER),
            weekday_names_min=tuple(str(min_days[d]) for d in _CLDR_WEEKDAY_ORDER),
            meridiems=meridiems,
        )


type LocaleFragment = Mapping[str, Sequence[str]] | LocaleTable


ENGLISH: Final[LocaleTable] = LocaleTable(
    month_names=(
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
    month_names_short=(
        "Jan", "Feb", "Mar", "Apr", "May", "Jun",
        "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
    ),
    weekday_names=(
        "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
    ),
    weekday_names_short=("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"),
    weekday_names_min=("Su", "Mo", "Tu", "We", "Th", "Fr", "Sa"),
    meridiems=("AM", "PM"),
)  # fmt: skip
