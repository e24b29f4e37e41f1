"""Date input coercion.

Every formatting call normalizes its date argument into a Moment: the
wall-clock fields the resolver reads, plus the UTC offset in minutes.

Accepted inputs:
    - None: the current instant in the host's local time
    - datetime: aware values keep their own offset; naive values are wall-clock
      local time and take the host's local offset at that instant
    - date: midnight of that day, local time
    - int / float: epoch milliseconds (bool is rejected)
    - str: ISO 8601, parsed with datetime.fromisoformat()

Python 3.12+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta

from datelexengine.diagnostics import ErrorTemplate, InvalidArgumentTypeError

__all__ = ["DateInput", "Moment", "coerce_moment"]

logger = logging.getLogger(__name__)

type DateInput = datetime | date | int | float | str | None

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_MINUTE = timedelta(minutes=1)


@dataclass(frozen=True, slots=True)
class Moment:
    """Normalized wall-clock fields of one date value.

    Attributes:
        year: Calendar year
        month: Month index, 0 = January
        day: Day of month, 1-31
        weekday: Day of week index, 0 = Sunday
        hour: Hour, 0-23
        minute: Minute, 0-59
        second: Second, 0-59
        millisecond: Millisecond, 0-999
        utc_offset_minutes: Local time minus UTC, positive east of Greenwich
    """

    year: int
    month: int
    day: int
    weekday: int
    hour: int
    minute: int
    second: int
    millisecond: int
    utc_offset_minutes: int

    @classmethod
    def from_datetime(cls, value: datetime) -> Moment:
        """Build a Moment from a datetime.

        Naive datetimes are interpreted as local time. If the host cannot
        compute a local offset for the value (far outside the platform's
        time_t range), the offset is taken as zero.
        """
        offset = value.utcoffset()
        if offset is None:
            try:
                offset = value.astimezone().utcoffset()
            except (OverflowError, OSError, ValueError) as e:
                logger.debug("No local UTC offset for %s: %s; using +00:00", value, e)
                offset = None

        return cls(
            year=value.year,
            month=value.month - 1,
            day=value.day,
            weekday=value.isoweekday() % 7,
            hour=value.hour,
            minute=value.minute,
            second=value.second,
            millisecond=value.microsecond // 1000,
            utc_offset_minutes=int(offset / _ONE_MINUTE) if offset is not None else 0,
        )


def _from_epoch_millis(value: int | float, operation: str) -> datetime:
    try:
        # isfinite() converts to float; ints past float range overflow here
        finite = math.isfinite(value)
    except OverflowError:
        finite = True
    if not finite:
        raise InvalidArgumentTypeError(
            ErrorTemplate.date_value_invalid(operation, value, "not a finite number")
        )
    try:
        # timedelta arithmetic keeps integer milliseconds exact
        return (_EPOCH + timedelta(milliseconds=math.trunc(value))).astimezone()
    except (OverflowError, OSError, ValueError) as e:
        raise InvalidArgumentTypeError(
            ErrorTemplate.date_value_invalid(operation, value, str(e))
        ) from e


def _from_iso_string(value: str, operation: str) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except ValueError as e:
        raise InvalidArgumentTypeError(
            ErrorTemplate.date_value_invalid(operation, value, "not ISO 8601 format")
        ) from e


def coerce_moment(value: DateInput = None, *, operation: str = "format_date") -> Moment:
    """Normalize any accepted date input into a Moment.

    Examples:
        >>> coerce_moment(datetime(2022, 1, 1, 12, 34, 56, 789000, tzinfo=UTC))
        Moment(year=2022, month=0, day=1, weekday=6, hour=12, minute=34,
               second=56, millisecond=789, utc_offset_minutes=0)

        >>> coerce_moment({})
        Traceback (most recent call last):
            ...
        InvalidArgumentTypeError: format_date() expected a date value, got dict

    Args:
        value: Date input (see module docstring)
        operation: Public operation name used in error diagnostics

    Returns:
        Moment for the value

    Raises:
        InvalidArgumentTypeError: For unsupported types, non-finite or
            out-of-range numbers, and strings that are not ISO 8601
    """
    match value:
        case None:
            dt_value = datetime.now().astimezone()
        case datetime():
            dt_value = value
        case date():
            dt_value = datetime.combine(value, time.min)
        case bool():
            raise InvalidArgumentTypeError(ErrorTemplate.date_type_invalid(operation, value))
        case int() | float():
            dt_value = _from_epoch_millis(value, operation)
        case str():
            dt_value = _from_iso_string(value, operation)
        case _:
            raise InvalidArgumentTypeError(ErrorTemplate.date_type_invalid(operation, value))

    return Moment.from_datetime(dt_value)
