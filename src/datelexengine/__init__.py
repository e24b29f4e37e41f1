"""DateLexEngine - locale-aware, template-based date formatting.

Renders templates such as "YYYY-MM-dd hh:mm A" by substituting a fixed
vocabulary of tokens with values from a date and from the current
language's naming table. Named formats may vary per language.

Public API:
    format_date - Render a template with the default formatter
    lang - Get or switch the default formatter's language
    register - Register a named format, returning a bound formatter
    formatters - Names of registered formats
    get_formatter - Bound formatter for a registered name
    no_conflict - Restore a namespace binding replaced by install()
    DateFormatter - Independent formatter (own languages and named formats)
    LocaleContext - Language table registry with current-language pointer
    LocaleTable - Naming data for one language (ENGLISH is built in)
    tokenize - Split a template into token and literal segments

Exceptions:
    DateLexError - Base exception class
    InvalidArgumentTypeError - Wrong template/date/name/spec types (TypeError)
    UnknownLocaleError - Missing language data (LookupError)
    UnknownFormatError - Unregistered named format (KeyError)
    LocaleTableError - Malformed locale table fragment (ValueError)

Submodules:
    datelexengine.syntax - Token vocabulary and tokenizer
    datelexengine.runtime - Locale tables, registries, resolver, DateFormatter
    datelexengine.diagnostics - Error types and diagnostic codes
"""

from .api import (
    default_formatter,
    format_date,
    formatters,
    get_formatter,
    lang,
    no_conflict,
    register,
    set_default_formatter,
)
from .diagnostics import (
    DateLexError,
    InvalidArgumentTypeError,
    LocaleTableError,
    UnknownFormatError,
    UnknownLocaleError,
    UnknownTokenError,
)
from .runtime import (
    ENGLISH,
    BoundFormatter,
    DateFormatter,
    FixedTemplate,
    LocaleContext,
    LocaleTable,
    PerLanguageTemplate,
)
from .syntax import tokenize

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("datelexengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ENGLISH",
    "BoundFormatter",
    "DateFormatter",
    "DateLexError",
    "FixedTemplate",
    "InvalidArgumentTypeError",
    "LocaleContext",
    "LocaleTable",
    "LocaleTableError",
    "PerLanguageTemplate",
    "UnknownFormatError",
    "UnknownLocaleError",
    "UnknownTokenError",
    "__version__",
    "default_formatter",
    "format_date",
    "formatters",
    "get_formatter",
    "lang",
    "no_conflict",
    "register",
    "set_default_formatter",
    "tokenize",
]
