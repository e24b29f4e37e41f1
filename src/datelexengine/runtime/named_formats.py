"""Named, reusable format templates.

A named format is either one template for every language (FixedTemplate) or
a template per language code (PerLanguageTemplate). FormatRegistry stores
them by name in registration order.

Per-language selection:
    1. Template for the current language, if defined
    2. Otherwise the template for FALLBACK_LANGUAGE ("en"), if defined
    3. Otherwise UnknownLocaleError

Python 3.12+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from datelexengine.constants import FALLBACK_LANGUAGE
from datelexengine.diagnostics import (
    ErrorTemplate,
    InvalidArgumentTypeError,
    UnknownFormatError,
    UnknownLocaleError,
)
from datelexengine.enums import TemplateKind
from datelexengine.locale_utils import normalize_locale

from .rwlock import RWLock

__all__ = [
    "FixedTemplate",
    "FormatRegistry",
    "NamedFormat",
    "PerLanguageTemplate",
    "as_named_format",
    "select_template",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FixedTemplate:
    """One template used regardless of the current language."""

    template: str

    @property
    def kind(self) -> TemplateKind:
        return TemplateKind.FIXED


@dataclass(frozen=True, slots=True)
class PerLanguageTemplate:
    """Templates keyed by normalized language code.

    Attributes:
        templates: Read-only mapping of language code to template

    Raises:
        InvalidArgumentTypeError: If a code or template is not a string, or
            two codes normalize to the same language ("fr-CA" and "fr_CA")
    """

    templates: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate and normalize keys, then freeze the mapping."""
        normalized: dict[str, str] = {}
        spellings: dict[str, str] = {}
        for code, tmpl in self.templates.items():
            if not isinstance(code, str) or not isinstance(tmpl, str):
                raise InvalidArgumentTypeError(ErrorTemplate.template_entry_invalid(code, tmpl))
            key = normalize_locale(code)
            if key in normalized:
                raise InvalidArgumentTypeError(
                    ErrorTemplate.template_language_duplicate(key, (spellings[key], code))
                )
            normalized[key] = tmpl
            spellings[key] = code
        object.__setattr__(self, "templates", MappingProxyType(normalized))

    @property
    def kind(self) -> TemplateKind:
        return TemplateKind.PER_LANGUAGE

    @property
    def languages(self) -> tuple[str, ...]:
        return tuple(self.templates)


type NamedFormat = FixedTemplate | PerLanguageTemplate


def as_named_format(name: str, spec: object) -> NamedFormat:
    """Coerce a register() spec into a NamedFormat.

    Args:
        name: Format name, used in diagnostics
        spec: Template string, mapping of language code to template string,
            or an existing FixedTemplate / PerLanguageTemplate

    Returns:
        NamedFormat variant

    Raises:
        InvalidArgumentTypeError: If spec has any other shape, or a mapping
            has non-string keys or values
    """
    match spec:
        case FixedTemplate() | PerLanguageTemplate():
            return spec
        case str():
            return FixedTemplate(spec)
        case Mapping() if all(
            isinstance(code, str) and isinstance(tmpl, str) for code, tmpl in spec.items()
        ):
            return PerLanguageTemplate(dict(spec))
        case _:
            raise InvalidArgumentTypeError(ErrorTemplate.format_spec_invalid(name, spec))


def select_template(name: str, entry: NamedFormat, language: str) -> str:
    """Pick the template of a named format for a language.

    Args:
        name: Format name, used in diagnostics
        entry: Stored named format
        language: Normalized current language code

    Returns:
        Template string

    Raises:
        UnknownLocaleError: If a per-language entry has neither language
            nor FALLBACK_LANGUAGE
    """
    match entry:
        case FixedTemplate(template=template):
            return template
        case PerLanguageTemplate(templates=templates):
            if language in templates:
                return templates[language]
            if FALLBACK_LANGUAGE in templates:
                logger.debug(
                    "Format '%s' has no '%s' template; using '%s'",
                    name,
                    language,
                    FALLBACK_LANGUAGE,
                )
                return templates[FALLBACK_LANGUAGE]
            raise UnknownLocaleError(
                ErrorTemplate.template_language_missing(
                    name, language, FALLBACK_LANGUAGE, templates
                )
            )


class FormatRegistry:
    """Ordered, thread-safe store of named formats.

    Re-registering a name replaces its entry but keeps its original position,
    so names() never contains duplicates.
    """

    __slots__ = ("_entries", "_lock")

    def __init__(self) -> None:
        self._lock = RWLock()
        self._entries: dict[str, NamedFormat] = {}

    def __contains__(self, name: object) -> bool:
        with self._lock.read():
            return name in self._entries

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._entries)

    def register(self, name: str, spec: object) -> NamedFormat:
        """Store spec under name, replacing any previous entry.

        Raises:
            InvalidArgumentTypeError: If name is not a string or spec is malformed
        """
        if not isinstance(name, str):
            raise InvalidArgumentTypeError(ErrorTemplate.format_name_invalid(name))
        entry = as_named_format(name, spec)
        with self._lock.write():
            if name in self._entries:
                logger.debug("Named format '%s' overwritten", name)
            self._entries[name] = entry
        return entry

    def unregister(self, name: str) -> None:
        """Remove a named format.

        Raises:
            UnknownFormatError: If name is not registered
        """
        with self._lock.write():
            try:
                del self._entries[name]
            except KeyError:
                raise UnknownFormatError(ErrorTemplate.format_not_found(name)) from None

    def get(self, name: str) -> NamedFormat:
        """Get the entry stored under name.

        Raises:
            UnknownFormatError: If name is not registered
        """
        with self._lock.read():
            try:
                return self._entries[name]
            except KeyError:
                raise UnknownFormatError(ErrorTemplate.format_not_found(name)) from None

    def names(self) -> tuple[str, ...]:
        """Registered names in registration order."""
        with self._lock.read():
            return tuple(self._entries)
