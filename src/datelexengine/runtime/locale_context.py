"""Locale registry with a current-language pointer.

LocaleContext maps language codes to LocaleTable instances and tracks which
language formatting calls use. Each DateFormatter owns one LocaleContext, so
independent formatters never observe each other's language switches; the
module-level API shares one default instance.

Architecture:
    - Tables are immutable; mutations swap dictionary entries under the
      write lock
    - snapshot() returns the current (code, table) pair under one read lock,
      so a formatting call never mixes one language's code with another's table
    - Language codes are normalized at the boundary (en-US -> en_US)

Python 3.12+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from datelexengine.constants import DEFAULT_LANGUAGE, FALLBACK_LANGUAGE
from datelexengine.diagnostics import (
    ErrorTemplate,
    InvalidArgumentTypeError,
    UnknownLocaleError,
)
from datelexengine.locale_utils import normalize_locale

from .locale_table import ENGLISH, LocaleFragment, LocaleTable
from .rwlock import RWLock

__all__ = ["LocaleContext"]

logger = logging.getLogger(__name__)


def _checked_code(code: object) -> str:
    """Normalize a language code, rejecting non-strings and blanks."""
    if not isinstance(code, str):
        raise InvalidArgumentTypeError(ErrorTemplate.language_code_invalid(code))
    normalized = normalize_locale(code)
    if not normalized:
        raise InvalidArgumentTypeError(ErrorTemplate.language_code_invalid(code))
    return normalized


class LocaleContext:
    """Registry of locale tables plus the current language.

    Examples:
        >>> ctx = LocaleContext()
        >>> ctx.lang()
        'en'
        >>> ctx.lang("fr", {"months": FRENCH_MONTHS})
        'fr'
        >>> ctx.table().month_names[0]
        'Janvier'
        >>> ctx.lang("en")
        'en'

    Unknown languages:
        lang(code) for a code with no table registers a copy of the English
        table under that code, logs a warning, and switches to it. Later
        lang(code, fragment) calls populate the copy field by field.

    Thread Safety:
        All methods are thread-safe. Reads share an RWLock; define() and
        lang() with arguments take it exclusively.
    """

    __slots__ = ("_current", "_lock", "_tables")

    def __init__(
        self,
        *,
        default_language: str = DEFAULT_LANGUAGE,
        tables: Mapping[str, LocaleFragment] | None = None,
    ) -> None:
        """Initialize the registry with the built-in English table.

        Args:
            default_language: Language selected initially
            tables: Extra tables (or fragments merged over English) to
                register up front
        """
        self._lock = RWLock()
        self._tables: dict[str, LocaleTable] = {FALLBACK_LANGUAGE: ENGLISH}

        for code, fragment in (tables or {}).items():
            normalized = _checked_code(code)
            self._tables[normalized] = self._tables.get(normalized, ENGLISH).merged(fragment)

        current = _checked_code(default_language)
        if current not in self._tables:
            logger.warning(
                "Default language '%s' has no locale table; using English names",
                current,
            )
            self._tables[current] = ENGLISH
        self._current = current

    def __repr__(self) -> str:
        return f"LocaleContext(current={self.current!r}, languages={self.languages()!r})"

    def __contains__(self, code: object) -> bool:
        if not isinstance(code, str):
            return False
        with self._lock.read():
            return normalize_locale(code) in self._tables

    @property
    def current(self) -> str:
        """Current language code."""
        with self._lock.read():
            return self._current

    def languages(self) -> tuple[str, ...]:
        """Registered language codes in registration order."""
        with self._lock.read():
            return tuple(self._tables)

    def table(self, code: str | None = None) -> LocaleTable:
        """Get the table for a language.

        Args:
            code: Language code; None means the current language

        Returns:
            Registered LocaleTable

        Raises:
            UnknownLocaleError: If no table is registered for code
            InvalidArgumentTypeError: If code is not a string
        """
        with self._lock.read():
            key = self._current if code is None else _checked_code(code)
            try:
                return self._tables[key]
            except KeyError:
                raise UnknownLocaleError(ErrorTemplate.language_not_found(key)) from None

    def snapshot(self) -> tuple[str, LocaleTable]:
        """Return the current language and its table as one consistent pair."""
        with self._lock.read():
            return self._current, self._tables[self._current]

    def define(self, code: str, fragment: LocaleFragment) -> LocaleTable:
        """Merge a fragment into a language's table without switching to it.

        A language with no table starts from a copy of the English table.

        Args:
            code: Language code
            fragment: Mapping of field names to arrays, or a complete LocaleTable

        Returns:
            The stored table after merging

        Raises:
            InvalidArgumentTypeError: If code is not a string, or fragment is
                neither a mapping nor a LocaleTable
            LocaleTableError: If fragment is malformed
        """
        key = _checked_code(code)
        with self._lock.write():
            return self._define_locked(key, fragment)

    def _define_locked(self, key: str, fragment: LocaleFragment) -> LocaleTable:
        base = self._tables.get(key, ENGLISH)
        merged = base.merged(fragment)
        self._tables[key] = merged
        logger.debug("Locale table for '%s' updated", key)
        return merged

    def lang(self, code: str | None = None, fragment: LocaleFragment | None = None) -> str:
        """Get, switch, or define-and-switch the current language.

        - lang() returns the current code.
        - lang(code) switches to code. An unknown code is registered with a
          copy of the English table and a warning is logged.
        - lang(code, fragment) merges fragment into code's table (creating it
          from English if absent) and switches to code.

        Args:
            code: Language code to switch to
            fragment: Partial or complete table to merge before switching

        Returns:
            The current language code after the call

        Raises:
            InvalidArgumentTypeError: If code is not a string, fragment is not a
                mapping or LocaleTable, or a fragment is given without a code
            LocaleTableError: If fragment is malformed
        """
        if code is None:
            if fragment is not None:
                raise InvalidArgumentTypeError(ErrorTemplate.language_code_invalid(code))
            return self.current

        key = _checked_code(code)
        with self._lock.write():
            if fragment is not None:
                self._define_locked(key, fragment)
            elif key not in self._tables:
                logger.warning(
                    "Unknown language '%s': no locale table registered; "
                    "using English names until populated",
                    key,
                )
                self._tables[key] = ENGLISH

            if key != self._current:
                logger.debug("Current language switched from '%s' to '%s'", self._current, key)
            self._current = key
            return key
