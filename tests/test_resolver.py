"""Tests for per-token value resolution.

Reference moment: Saturday 2022-01-01 14:22:17.000 at UTC+01:00.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from datelexengine.diagnostics import UnknownTokenError
from datelexengine.runtime import ENGLISH, LocaleTable, format_utc_offset, resolve, to_twelve_hour
from datelexengine.syntax import TOKEN_VOCABULARY
from tests.strategies import make_moment

REFERENCE = make_moment()


class TestResolveReferenceMoment:
    """Every token against the reference moment with the English table."""

    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("YYYY", "2022"),
            ("YY", "22"),
            ("MMMM", "January"),
            ("MMM", "Jan"),
            ("MM", "01"),
            ("M", "1"),
            ("DDD", "Saturday"),
            ("DD", "Sat"),
            ("D", "Sa"),
            ("dd", "01"),
            ("d", "1"),
            ("HH", "14"),
            ("H", "14"),
            ("hh", "02"),
            ("h", "2"),
            ("mm", "22"),
            ("m", "22"),
            ("ss", "17"),
            ("s", "17"),
            ("ff", "000"),
            ("f", "0"),
            ("A", "PM"),
            ("a", "pm"),
            ("ZZ", "+0100"),
            ("Z", "+01:00"),
        ],
    )
    def test_token(self, token: str, expected: str) -> None:
        assert resolve(token, REFERENCE, ENGLISH) == expected

    def test_vocabulary_fully_covered(self) -> None:
        for token in TOKEN_VOCABULARY:
            assert isinstance(resolve(token, REFERENCE, ENGLISH), str)


class TestPaddingRules:
    """Zero padding of numeric fields."""

    def test_short_year_keeps_leading_zero(self) -> None:
        assert resolve("YY", make_moment(year=2005), ENGLISH) == "05"

    def test_small_year_padded_to_four(self) -> None:
        assert resolve("YYYY", make_moment(year=987), ENGLISH) == "0987"

    def test_millisecond_padding(self) -> None:
        moment = make_moment(millisecond=7)
        assert resolve("ff", moment, ENGLISH) == "007"
        assert resolve("f", moment, ENGLISH) == "7"

    def test_millisecond_not_divided(self) -> None:
        moment = make_moment(millisecond=789)
        assert resolve("ff", moment, ENGLISH) == "789"
        assert resolve("f", moment, ENGLISH) == "789"

    @given(st.integers(min_value=0, max_value=23))
    def test_hour_padding(self, hour: int) -> None:
        padded = resolve("HH", make_moment(hour=hour), ENGLISH)
        assert padded == (f"0{hour}" if hour < 10 else str(hour))
        assert resolve("H", make_moment(hour=hour), ENGLISH) == str(hour)


class TestTwelveHourClock:
    """12-hour conversion and meridiem boundaries."""

    @pytest.mark.parametrize(("hour", "expected"), [(0, "12"), (12, "12"), (13, "01"), (23, "11")])
    def test_wrap(self, hour: int, expected: str) -> None:
        assert resolve("hh", make_moment(hour=hour), ENGLISH) == expected

    @given(st.integers(min_value=0, max_value=23))
    def test_twelve_hour_range(self, hour: int) -> None:
        converted = to_twelve_hour(hour)
        assert 1 <= converted <= 12
        assert converted % 12 == hour % 12

    def test_meridiem_boundary(self) -> None:
        assert resolve("A", make_moment(hour=11), ENGLISH) == "AM"
        assert resolve("a", make_moment(hour=11), ENGLISH) == "am"
        assert resolve("A", make_moment(hour=12), ENGLISH) == "PM"
        assert resolve("a", make_moment(hour=12), ENGLISH) == "pm"

    @given(st.integers(min_value=0, max_value=23))
    def test_meridiem_matches_half_of_day(self, hour: int) -> None:
        expected = "PM" if hour >= 12 else "AM"
        event(expected)
        assert resolve("A", make_moment(hour=hour), ENGLISH) == expected


class TestUtcOffset:
    """Offset rendering."""

    @pytest.mark.parametrize(
        ("minutes", "compact", "colon"),
        [
            (60, "+0100", "+01:00"),
            (0, "+0000", "+00:00"),
            (-330, "-0530", "-05:30"),
            (345, "+0545", "+05:45"),
            (-720, "-1200", "-12:00"),
        ],
    )
    def test_offsets(self, minutes: int, compact: str, colon: str) -> None:
        moment = make_moment(utc_offset_minutes=minutes)
        assert resolve("ZZ", moment, ENGLISH) == compact
        assert resolve("Z", moment, ENGLISH) == colon

    @given(st.integers(min_value=-24 * 60 + 1, max_value=24 * 60 - 1))
    def test_offset_round_trips_to_minutes(self, minutes: int) -> None:
        text = format_utc_offset(minutes)
        sign = -1 if text[0] == "-" else 1
        assert sign * (int(text[1:3]) * 60 + int(text[3:5])) == minutes


class TestLocaleDependentTokens:
    """Name-bearing tokens consult the table's methods."""

    def test_overridden_month_name(self) -> None:
        class GenitiveTable(LocaleTable):
            def month_name(self, moment):  # type: ignore[no-untyped-def]
                return ("stycznia", "lutego")[moment.month]

        table = GenitiveTable(
            month_names=ENGLISH.month_names,
            month_names_short=ENGLISH.month_names_short,
            weekday_names=ENGLISH.weekday_names,
            weekday_names_short=ENGLISH.weekday_names_short,
            weekday_names_min=ENGLISH.weekday_names_min,
        )
        assert resolve("MMMM", make_moment(month=1), table) == "lutego"
        assert resolve("MMM", make_moment(month=1), table) == "Feb"

    def test_custom_meridiems(self) -> None:
        table = ENGLISH.merged({"meridiems": ["VORM.", "NACHM."]})
        assert resolve("A", make_moment(hour=9), table) == "VORM."
        assert resolve("a", make_moment(hour=21), table) == "nachm."


class TestUnknownToken:
    """Names outside the vocabulary."""

    @pytest.mark.parametrize("token", ["YYY", "x", "", "Q"])
    def test_raises(self, token: str) -> None:
        with pytest.raises(UnknownTokenError) as exc_info:
            resolve(token, REFERENCE, ENGLISH)
        assert isinstance(exc_info.value, KeyError)
        assert f"Unknown format token '{token}'" in str(exc_info.value)
