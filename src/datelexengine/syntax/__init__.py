"""Template syntax: token vocabulary and tokenizer.

Python 3.12+. Zero external dependencies.
"""

from .tokenizer import (
    TOKEN_VOCABULARY,
    LiteralSegment,
    Segment,
    TokenSegment,
    clear_tokenize_cache,
    tokenize,
)

__all__ = [
    "TOKEN_VOCABULARY",
    "LiteralSegment",
    "Segment",
    "TokenSegment",
    "clear_tokenize_cache",
    "tokenize",
]
