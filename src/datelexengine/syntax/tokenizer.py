"""Format template tokenizer.

Splits a template such as ``"YYYY-MM-dd HH:mm"`` into token and literal
segments. There is no quoting or escaping: any occurrence of a vocabulary
spelling is a token.

Matching is greedy longest-match against a fixed, case-sensitive vocabulary,
so ``MMMM`` is one full-month token rather than ``MM`` + ``MM`` and ``YYYY`` is
never split into two ``YY`` tokens. Characters that start no token are
gathered into a single literal run.

Thread-safe. Results are memoized per template string.

Python 3.12+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Final

from datelexengine.constants import MAX_TEMPLATE_CACHE_SIZE
from datelexengine.diagnostics import ErrorTemplate, InvalidArgumentTypeError
from datelexengine.enums import SegmentKind

__all__ = [
    "TOKEN_VOCABULARY",
    "LiteralSegment",
    "Segment",
    "TokenSegment",
    "clear_tokenize_cache",
    "tokenize",
]

# ruff: noqa: ERA001 - Documentation table is not commented-out code
#
# Token    | Field
# ---------|-------------------------------------------
# YYYY/YY  | year, 4 digits / last 2 digits
# MMMM/MMM | month name, full / short
# MM/M     | month number, padded / unpadded
# DDD/DD/D | weekday name, full / short / min
# dd/d     | day of month, padded / unpadded
# HH/H     | hour 0-23, padded / unpadded
# hh/h     | hour 1-12, padded / unpadded
# mm/m     | minute
# ss/s     | second
# ff/f     | millisecond, padded to 3 / unpadded
# A/a      | meridiem, upper / lower case
# ZZ/Z     | UTC offset, +HHMM / +HH:MM
TOKEN_VOCABULARY: Final[frozenset[str]] = frozenset(
    {
        "YYYY", "YY",
        "MMMM", "MMM", "MM", "M",
        "DDD", "DD", "D",
        "dd", "d",
        "HH", "H",
        "hh", "h",
        "mm", "m",
        "ss", "s",
        "ff", "f",
        "A", "a",
        "ZZ", "Z",
    }
)  # fmt: skip


def _index_vocabulary(vocabulary: frozenset[str]) -> dict[str, tuple[str, ...]]:
    """Group spellings by first character, longest first within each group."""
    index: dict[str, list[str]] = {}
    for spelling in vocabulary:
        index.setdefault(spelling[0], []).append(spelling)
    return {
        char: tuple(sorted(spellings, key=len, reverse=True))
        for char, spellings in index.items()
    }


_CANDIDATES_BY_FIRST_CHAR: Final[dict[str, tuple[str, ...]]] = _index_vocabulary(
    TOKEN_VOCABULARY
)


@dataclass(frozen=True, slots=True)
class TokenSegment:
    """Occurrence of a vocabulary spelling in a template."""

    name: str

    @property
    def kind(self) -> SegmentKind:
        return SegmentKind.TOKEN


@dataclass(frozen=True, slots=True)
class LiteralSegment:
    """Run of template text copied verbatim to the output."""

    text: str

    @property
    def kind(self) -> SegmentKind:
        return SegmentKind.LITERAL


type Segment = TokenSegment | LiteralSegment


def _match_token(template: str, position: int) -> str | None:
    """Return the longest vocabulary spelling starting at position, if any."""
    for spelling in _CANDIDATES_BY_FIRST_CHAR.get(template[position], ()):
        if template.startswith(spelling, position):
            return spelling
    return None


@lru_cache(maxsize=MAX_TEMPLATE_CACHE_SIZE)
def _tokenize_cached(template: str) -> tuple[Segment, ...]:
    segments: list[Segment] = []
    literal_start = 0
    i = 0
    n = len(template)

    while i < n:
        spelling = _match_token(template, i)
        if spelling is None:
            i += 1
            continue

        # Flush the literal run that precedes this token
        if literal_start < i:
            segments.append(LiteralSegment(template[literal_start:i]))
        segments.append(TokenSegment(spelling))
        i += len(spelling)
        literal_start = i

    if literal_start < n:
        segments.append(LiteralSegment(template[literal_start:]))

    return tuple(segments)


def tokenize(template: str) -> tuple[Segment, ...]:
    """Split a format template into token and literal segments.

    Examples:
        >>> tokenize("YYYY-MM-dd")
        (TokenSegment(name='YYYY'), LiteralSegment(text='-'), TokenSegment(name='MM'),
         LiteralSegment(text='-'), TokenSegment(name='dd'))

        >>> tokenize("MMMM")
        (TokenSegment(name='MMMM'),)

        >>> tokenize("YYY")  # no 3-letter year token
        (TokenSegment(name='YY'), LiteralSegment(text='Y'))

    Args:
        template: Format template

    Returns:
        Segments in template order. Concatenating token names and literal
        texts reproduces the template exactly.

    Raises:
        InvalidArgumentTypeError: If template is not a string
    """
    if not isinstance(template, str):
        raise InvalidArgumentTypeError(ErrorTemplate.template_not_string("tokenize", template))
    return _tokenize_cached(template)


def clear_tokenize_cache() -> None:
    """Drop all memoized tokenization results."""
    _tokenize_cached.cache_clear()
