"""Locale code utilities.

Centralizes language code normalization used throughout the codebase so
registry keys and CLDR lookups agree on one spelling.

Python 3.12+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    All language codes are normalized at the system boundary with this
    function, then used as-is for registry keys.

    Args:
        locale_code: BCP-47 or POSIX locale code (e.g., "en-US", "pt_BR", "fr")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR", "fr")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("fr")  # Already normalized
        'fr'
    """
    return locale_code.strip().replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))
