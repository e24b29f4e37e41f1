"""Tests for locale code normalization and cached Babel lookup."""

from __future__ import annotations

import pytest
from babel import Locale
from babel import UnknownLocaleError as BabelUnknownLocaleError
from hypothesis import given
from hypothesis import strategies as st

from datelexengine.locale_utils import get_babel_locale, normalize_locale


@pytest.mark.parametrize(
    ("code", "expected"),
    [("en-US", "en_US"), ("pt_BR", "pt_BR"), (" fr ", "fr"), ("zh-Hant-TW", "zh_Hant_TW")],
)
def test_normalize_locale(code: str, expected: str) -> None:
    assert normalize_locale(code) == expected


@given(st.text(max_size=20))
def test_normalize_idempotent(code: str) -> None:
    once = normalize_locale(code)
    assert normalize_locale(once) == once
    assert "-" not in once


def test_get_babel_locale_cached() -> None:
    first = get_babel_locale("de-DE")
    assert isinstance(first, Locale)
    assert first is get_babel_locale("de-DE")
    assert str(first) == "de_DE"


def test_get_babel_locale_unknown() -> None:
    with pytest.raises(BabelUnknownLocaleError):
        get_babel_locale("xx")
