"""Pytest configuration for DateLexEngine test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Process-wide state:
The module-level API (format_date, lang, register, ...) shares one default
DateFormatter. The autouse fixture below swaps in a fresh one per test so
language switches and registrations never leak between tests.
"""

from __future__ import annotations

import os
from collections.abc import Iterator

import pytest
from hypothesis import Phase, Verbosity, settings

from datelexengine import DateFormatter, set_default_formatter
from datelexengine.syntax import clear_tokenize_cache

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture(autouse=True)
def fresh_default_formatter() -> Iterator[DateFormatter]:
    """Give every test its own process-wide default formatter."""
    fresh = DateFormatter()
    previous = set_default_formatter(fresh)
    try:
        yield fresh
    finally:
        set_default_formatter(previous)


@pytest.fixture
def formatter() -> DateFormatter:
    """Independent formatter, not shared with the module-level API."""
    return DateFormatter()


@pytest.fixture
def empty_tokenize_cache() -> Iterator[None]:
    """Start and finish with an empty tokenize() memo."""
    clear_tokenize_cache()
    yield
    clear_tokenize_cache()
