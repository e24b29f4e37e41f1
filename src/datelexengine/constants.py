"""Shared constants for DateLexEngine.

Centralized configuration constants used across the syntax and runtime
packages. Placing them here avoids circular imports and provides a single
source of truth.

Constants are grouped by domain:
- Language defaults: Initial and fallback language codes
- Cache limits: Memory bounds for memoized tokenization
- Hosting: Name under which the default formatter is installed

Python 3.12+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Language defaults
    "DEFAULT_LANGUAGE",
    "FALLBACK_LANGUAGE",
    # Cache limits
    "MAX_TEMPLATE_CACHE_SIZE",
    # Hosting
    "EXPORT_NAME",
]

# ============================================================================
# LANGUAGE DEFAULTS
# ============================================================================

# Language selected by a freshly constructed LocaleContext.
DEFAULT_LANGUAGE: str = "en"

# Language consulted when a per-language named format has no template for the
# current language. Also the base copied into tables for unknown languages.
FALLBACK_LANGUAGE: str = "en"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum number of distinct templates whose segment tuples are memoized.
MAX_TEMPLATE_CACHE_SIZE: int = 512

# ============================================================================
# HOSTING
# ============================================================================

# Attribute name used by DateFormatter.install() when none is given.
EXPORT_NAME: str = "datelexengine"
