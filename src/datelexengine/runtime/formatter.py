"""DateFormatter - main API for template-based date formatting.

Python 3.12+. External dependency: Babel (CLDR locale data, via LocaleTable.from_cldr).
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import TYPE_CHECKING, Any

from datelexengine.constants import EXPORT_NAME
from datelexengine.diagnostics import ErrorTemplate, InvalidArgumentTypeError
from datelexengine.syntax import LiteralSegment, TokenSegment, tokenize

from .locale_context import LocaleContext
from .moment import DateInput, Moment, coerce_moment
from .named_formats import FormatRegistry, NamedFormat, select_template
from .resolver import resolve

if TYPE_CHECKING:
    from .locale_table import LocaleFragment, LocaleNaming

__all__ = ["BoundFormatter", "DateFormatter"]

logger = logging.getLogger(__name__)

_MISSING: Any = object()


def render(template: str, moment: Moment, table: LocaleNaming) -> str:
    """Tokenize template and substitute every token for moment."""
    parts: list[str] = []
    for segment in tokenize(template):
        match segment:
            case TokenSegment(name=name):
                parts.append(resolve(name, moment, table))
            case LiteralSegment(text=text):
                parts.append(text)
    return "".join(parts)


class BoundFormatter:
    """Callable returned by DateFormatter.register().

    The named entry is looked up on every call, so re-registering the name or
    switching languages is visible to formatters created earlier.

    Example:
        >>> iso_day = formatter.register("ISO_DAY", "YYYY-MM-dd")
        >>> iso_day(datetime(2022, 1, 1))
        '2022-01-01'
    """

    __slots__ = ("_owner", "name")

    def __init__(self, owner: DateFormatter, name: str) -> None:
        self._owner = owner
        self.name = name

    def __call__(self, value: DateInput = None) -> str:
        return self._owner.format_named(self.name, value)

    def __repr__(self) -> str:
        return f"BoundFormatter(name={self.name!r})"


class DateFormatter:
    """Locale-aware template formatter.

    Owns a LocaleContext (language tables and current language) and a
    FormatRegistry (named templates). Formatters built without arguments are
    fully independent of each other.

    Examples:
        >>> formatter = DateFormatter()
        >>> dt = datetime(2022, 1, 1, 12, 34, 56, 789000)
        >>> formatter.format("YYYY-MM-dd HH:mm:ss.ff", dt)
        '2022-01-01 12:34:56.789'
        >>> formatter.format("DDD, MMMM d", dt)
        'Saturday, January 1'
        >>> formatter("hh:mm A", dt)
        '12:34 PM'

    Thread Safety:
        format() takes one consistent (language, table) snapshot per call.
        lang() and register() are serialized by the registries' locks.
    """

    __slots__ = ("_installed", "context", "registry")

    def __init__(
        self,
        context: LocaleContext | None = None,
        registry: FormatRegistry | None = None,
    ) -> None:
        """Initialize formatter.

        Args:
            context: Locale registry to use (default: new LocaleContext)
            registry: Named format registry to use (default: new FormatRegistry)
        """
        self.context = context if context is not None else LocaleContext()
        self.registry = registry if registry is not None else FormatRegistry()
        # (namespace, name, previous value or _MISSING) from install()
        self._installed: tuple[MutableMapping[str, Any], str, Any] | None = None

    def __repr__(self) -> str:
        return f"DateFormatter(lang={self.context.current!r}, formatters={len(self.registry)})"

    def format(self, template: str, value: DateInput = None) -> str:  # noqa: A003
        """Render template for a date using the current language.

        Args:
            template: Format template, e.g. "YYYY-MM-dd HH:mm"
            value: datetime, date, epoch milliseconds, ISO 8601 string, or
                None for now

        Returns:
            Rendered string

        Raises:
            InvalidArgumentTypeError: If template is not a string or value is
                not an accepted date input
        """
        if not isinstance(template, str):
            raise InvalidArgumentTypeError(ErrorTemplate.template_not_string("format", template))
        moment = coerce_moment(value, operation="format")
        _, table = self.context.snapshot()
        return render(template, moment, table)

    __call__ = format

    def lang(self, code: str | None = None, fragment: LocaleFragment | None = None) -> str:
        """Get or switch the current language; see LocaleContext.lang()."""
        return self.context.lang(code, fragment)

    def register(self, name: str, spec: str | NamedFormat | Any) -> BoundFormatter:
        """Register a named format and return a formatter bound to it.

        Args:
            name: Format name; re-registering replaces the entry
            spec: Template string or mapping of language code to template

        Returns:
            BoundFormatter for name

        Raises:
            InvalidArgumentTypeError: If name or spec is malformed
        """
        self.registry.register(name, spec)
        return BoundFormatter(self, name)

    def unregister(self, name: str) -> None:
        """Remove a named format; formatters bound to it then raise UnknownFormatError."""
        self.registry.unregister(name)

    def formatters(self) -> tuple[str, ...]:
        """Registered named format names, in registration order."""
        return self.registry.names()

    def get_formatter(self, name: str) -> BoundFormatter:
        """Get a formatter bound to an already registered name.

        Raises:
            UnknownFormatError: If name is not registered
        """
        self.registry.get(name)
        return BoundFormatter(self, name)

    def format_named(self, name: str, value: DateInput = None) -> str:
        """Render the named format for a date using the current language.

        Raises:
            UnknownFormatError: If name is not registered
            UnknownLocaleError: If a per-language format covers neither the
                current nor the fallback language
            InvalidArgumentTypeError: If value is not an accepted date input
        """
        entry = self.registry.get(name)
        moment = coerce_moment(value, operation=name)
        language, table = self.context.snapshot()
        return render(select_template(name, entry, language), moment, table)

    def install(self, namespace: MutableMapping[str, Any], name: str = EXPORT_NAME) -> None:
        """Bind this formatter into namespace under name, remembering the old value.

        A formatter is installed in one place at a time. Installing again at
        the same (namespace, name) keeps the binding saved the first time;
        installing elsewhere first restores the previous location.

        Args:
            namespace: Target mapping, e.g. a module's globals() or vars(builtins)
            name: Attribute name to bind
        """
        if self._installed is not None:
            installed_namespace, installed_name, _ = self._installed
            if installed_namespace is namespace and installed_name == name:
                namespace[name] = self
                return
            self.no_conflict()
        self._installed = (namespace, name, namespace.get(name, _MISSING))
        namespace[name] = self

    def no_conflict(self) -> DateFormatter:
        """Restore whatever install() replaced and return this formatter.

        Does nothing to any namespace if install() was never called.
        """
        if self._installed is not None:
            namespace, name, previous = self._installed
            if previous is _MISSING:
                namespace.pop(name, None)
            else:
                namespace[name] = previous
            self._installed = None
            logger.debug("Restored previous binding for '%s'", name)
        return self
