"""Text normalization, tokenization and locale helpers."""

from .spelling import has_british_spellings, translate_british
from .normalize import expand_ngrams, normalize_text, normalize_whitespace, tokenize_text

__all__ = [
    "expand_ngrams",
    "has_british_spellings",
    "normalize_text",
    "normalize_whitespace",
    "tokenize_text",
    "translate_british",
]
