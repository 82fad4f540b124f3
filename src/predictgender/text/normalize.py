"""Normalization, tokenization and n-gram expansion for lexicon matching."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
import re

from nltk import ngrams
from razdel import tokenize


DEFAULT_NGRAM_ORDERS = (2, 3)

_WHITESPACE_RE = re.compile(r"\s+")

# Tokens razdel would split apart: hearts, emoticons and contractions.
_KEEP_WHOLE_RE = re.compile(
    r"""
    </?3+(?!\d)
    | (?<!\w)[<>]?[:;=][\-o^']?[)\](\[dp/\\|}{@*o](?!\w)
    | (?<!\w)[)\](\[/\\|}{@][\-o^']?[:;=][<>]?(?!\w)
    | \b\w+(?:'\w+)+
    """,
    re.UNICODE | re.VERBOSE,
)


def normalize_whitespace(text: str) -> str:
    """Collapse repeated whitespace and trim boundaries."""

    return _WHITESPACE_RE.sub(" ", text).strip()


def normalize_text(text: str) -> str:
    """Lowercase and trim the whole input once, before tokenization."""

    return normalize_whitespace(text.lower())


def tokenize_text(text: str) -> list[str]:
    """Split text into word, punctuation and emoticon tokens.

    Contractions (``don't``), hearts (``<3``) and emoticons (``:)``, ``;-p``)
    stay whole; everything between them goes through razdel. Apostrophes are
    folded to ``'`` so ``don’t`` and ``don't`` match the same lexicon entry.
    """
    text = text.replace("’", "'")
    tokens: list[str] = []
    position = 0
    for match in _KEEP_WHOLE_RE.finditer(text):
        tokens.extend(_razdel_tokens(text[position : match.start()]))
        tokens.append(match.group(0))
        position = match.end()
    tokens.extend(_razdel_tokens(text[position:]))
    return tokens


def _razdel_tokens(chunk: str) -> list[str]:
    return [value for value in (token.text.strip() for token in tokenize(chunk)) if value]


def expand_ngrams(tokens: Sequence[str], orders: Iterable[int] = DEFAULT_NGRAM_ORDERS) -> list[str]:
    """Return *tokens* followed by space-joined n-grams of each order."""

    expanded = list(tokens)
    for order in orders:
        if order < 2:
            raise ValueError("n-gram order must be >= 2")
        expanded.extend(" ".join(gram) for gram in ngrams(tokens, order))
    return expanded

