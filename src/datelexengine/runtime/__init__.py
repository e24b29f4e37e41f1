"""DateLexEngine runtime package.

Provides locale tables, the locale registry, token resolution, named formats,
and the DateFormatter API. Depends on the syntax package for tokenization.

Python 3.12+.
"""

from .formatter import BoundFormatter, DateFormatter
from .locale_context import LocaleContext
from .locale_table import ENGLISH, LocaleFragment, LocaleNaming, LocaleTable
from .moment import DateInput, Moment, coerce_moment
from .named_formats import (
    FixedTemplate,
    FormatRegistry,
    NamedFormat,
    PerLanguageTemplate,
    as_named_format,
    select_template,
)
from .resolver import format_utc_offset, resolve, to_twelve_hour
from .rwlock import RWLock

__all__ = [
    "ENGLISH",
    "BoundFormatter",
    "DateFormatter",
    "DateInput",
    "FixedTemplate",
    "FormatRegistry",
    "LocaleContext",
    "LocaleFragment",
    "LocaleNaming",
    "LocaleTable",
    "Moment",
    "NamedFormat",
    "PerLanguageTemplate",
    "RWLock",
    "as_named_format",
    "coerce_moment",
    "format_utc_offset",
    "resolve",
    "select_template",
    "to_twelve_hour",
]
