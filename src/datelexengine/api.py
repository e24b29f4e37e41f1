"""Module-level convenience API backed by one process-wide DateFormatter.

Every function here delegates to default_formatter(). Code that needs
isolated language state (tests, multi-tenant servers) should construct its
own DateFormatter instead.

Python 3.12+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .runtime import BoundFormatter, DateFormatter

if TYPE_CHECKING:
    from .runtime import DateInput, LocaleFragment

__all__ = [
    "default_formatter",
    "format_date",
    "formatters",
    "get_formatter",
    "lang",
    "no_conflict",
    "register",
    "set_default_formatter",
]

_default: DateFormatter = DateFormatter()


def default_formatter() -> DateFormatter:
    """Return the process-wide DateFormatter."""
    return _default


def set_default_formatter(formatter: DateFormatter) -> DateFormatter:
    """Replace the process-wide DateFormatter and return the previous one."""
    global _default  # noqa: PLW0603
    previous, _default = _default, formatter
    return previous


def format_date(template: str, value: DateInput = None) -> str:
    """Render template for a date in the current language.

    Example:
        >>> format_date("YYYY-MM-dd HH:mm:ss", datetime(2022, 1, 1, 12, 34, 56))
        '2022-01-01 12:34:56'
    """
    return _default.format(template, value)


def lang(code: str | None = None, fragment: LocaleFragment | None = None) -> str:
    """Get, switch, or define-and-switch the current language."""
    return _default.lang(code, fragment)


def register(name: str, spec: Any) -> BoundFormatter:
    """Register a named format on the default formatter."""
    return _default.register(name, spec)


def formatters() -> tuple[str, ...]:
    """Names registered on the default formatter, in registration order."""
    return _default.formatters()


def get_formatter(name: str) -> BoundFormatter:
    """Formatter bound to a name registered on the default formatter."""
    return _default.get_formatter(name)


def no_conflict() -> DateFormatter:
    """Restore the binding replaced by default_formatter().install(); return the formatter."""
    return _default.no_conflict()
