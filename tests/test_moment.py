"""Tests for date input coercion into Moment."""

from __future__ import annotations

import math
from datetime import UTC, date, datetime, timedelta, timezone

import pytest
from hypothesis import given

from datelexengine.diagnostics import DiagnosticCode, InvalidArgumentTypeError
from datelexengine.runtime import Moment, coerce_moment
from tests.strategies import UTC_PLUS_ONE, aware_datetimes


class TestDatetimeInput:
    """datetime values."""

    def test_aware_datetime_fields(self) -> None:
        value = datetime(2022, 1, 1, 12, 34, 56, 789_000, tzinfo=UTC_PLUS_ONE)
        assert coerce_moment(value) == Moment(
            year=2022,
            month=0,
            day=1,
            weekday=6,
            hour=12,
            minute=34,
            second=56,
            millisecond=789,
            utc_offset_minutes=60,
        )

    def test_negative_offset(self) -> None:
        value = datetime(2022, 6, 1, tzinfo=timezone(-timedelta(hours=5, minutes=30)))
        assert coerce_moment(value).utc_offset_minutes == -330

    def test_naive_datetime_keeps_wall_clock(self) -> None:
        value = datetime(2022, 1, 1, 12, 34, 56)
        moment = coerce_moment(value)
        assert (moment.hour, moment.minute, moment.second) == (12, 34, 56)
        local_offset = value.astimezone().utcoffset()
        assert local_offset is not None
        assert moment.utc_offset_minutes == int(local_offset.total_seconds() // 60)

    def test_sunday_is_weekday_zero(self) -> None:
        assert coerce_moment(datetime(2022, 1, 2, tzinfo=UTC)).weekday == 0

    @given(aware_datetimes())
    def test_fields_match_datetime(self, value: datetime) -> None:
        moment = coerce_moment(value)
        assert moment.year == value.year
        assert moment.month == value.month - 1
        assert moment.day == value.day
        assert moment.weekday == value.isoweekday() % 7
        assert moment.millisecond == value.microsecond // 1000
        offset = value.utcoffset()
        assert offset is not None
        assert moment.utc_offset_minutes * 60 == offset.total_seconds()


class TestOtherInputs:
    """date, numeric, string and omitted inputs."""

    def test_date_is_midnight(self) -> None:
        moment = coerce_moment(date(2022, 1, 1))
        assert (moment.year, moment.month, moment.day) == (2022, 0, 1)
        assert (moment.hour, moment.minute, moment.second, moment.millisecond) == (0, 0, 0, 0)

    def test_epoch_millis_matches_local_time(self) -> None:
        millis = 1_640_999_696_789
        expected = datetime.fromtimestamp(millis // 1000, tz=UTC).astimezone()
        moment = coerce_moment(millis)
        assert moment.millisecond == 789
        assert (moment.year, moment.hour, moment.minute, moment.second) == (
            expected.year,
            expected.hour,
            expected.minute,
            expected.second,
        )

    def test_float_millis_truncated(self) -> None:
        assert coerce_moment(1.9).millisecond == 1

    def test_iso_string(self) -> None:
        moment = coerce_moment("2022-01-01T12:34:56.789+01:00")
        assert (moment.hour, moment.millisecond, moment.utc_offset_minutes) == (12, 789, 60)

    def test_iso_date_string(self) -> None:
        moment = coerce_moment("2022-03-15")
        assert (moment.year, moment.month, moment.day) == (2022, 2, 15)

    def test_omitted_is_now(self) -> None:
        before = datetime.now().astimezone() - timedelta(seconds=1)
        moment = coerce_moment()
        after = datetime.now().astimezone() + timedelta(seconds=1)
        assert before.year <= moment.year <= after.year
        assert 0 <= moment.hour <= 23


class TestInvalidInputs:
    """Inputs that must raise InvalidArgumentTypeError (a TypeError)."""

    @pytest.mark.parametrize("value", [{}, [], object(), b"2022-01-01", True, False])
    def test_unsupported_types(self, value: object) -> None:
        with pytest.raises(InvalidArgumentTypeError) as exc_info:
            coerce_moment(value)  # type: ignore[arg-type]
        assert isinstance(exc_info.value, TypeError)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.DATE_TYPE_INVALID

    @pytest.mark.parametrize(
        "value", [math.nan, math.inf, -math.inf, 10**20, 10**400, -(10**400)]
    )
    def test_invalid_numbers(self, value: float) -> None:
        with pytest.raises(InvalidArgumentTypeError) as exc_info:
            coerce_moment(value)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.DATE_VALUE_INVALID

    def test_number_too_long_to_print(self) -> None:
        with pytest.raises(InvalidArgumentTypeError, match="too large to display"):
            coerce_moment(10**5000)

    @pytest.mark.parametrize("value", ["", "not a date", "2022-13-01", "01/02/2022"])
    def test_unparseable_strings(self, value: str) -> None:
        with pytest.raises(InvalidArgumentTypeError, match="invalid date"):
            coerce_moment(value)

    def test_operation_named_in_message(self) -> None:
        with pytest.raises(InvalidArgumentTypeError, match=r"MY_FORMAT\(\) expected a date value"):
            coerce_moment({}, operation="MY_FORMAT")
