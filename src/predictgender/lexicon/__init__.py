"""Weighted lexicon storage."""

from .store import (
    BUNDLED_LEXICON_PATH,
    GENDER_CATEGORY,
    INTERCEPTS,
    ConfigurationError,
    Lexicon,
    bundled_lexicon,
    load_lexicon,
)

__all__ = [
    "BUNDLED_LEXICON_PATH",
    "GENDER_CATEGORY",
    "INTERCEPTS",
    "ConfigurationError",
    "Lexicon",
    "bundled_lexicon",
    "load_lexicon",
]
