"""British to American spelling normalization.

The gender lexicon was built from American-spelling text, so British input
is mapped word-by-word before tokenization.  Only call this on text that
has already been lowercased by :func:`normalize_text`.
"""

from __future__ import annotations

from functools import lru_cache
import json
from pathlib import Path
import re
from types import MappingProxyType
from typing import Mapping


_SPELLINGS_PATH = Path(__file__).parent / "data" / "british_american.json"

_WORD_RE = re.compile(r"\b[a-z]+\b")


@lru_cache(maxsize=1)
def load_spelling_map() -> Mapping[str, str]:
    raw = json.loads(_SPELLINGS_PATH.read_text(encoding="utf-8"))
    return MappingProxyType({str(k).lower(): str(v).lower() for k, v in raw.items()})


def has_british_spellings(text: str) -> bool:
    """Return True if *text* contains any word with a known American form."""
    spellings = load_spelling_map()
    return any(match.group(0) in spellings for match in _WORD_RE.finditer(text))


def translate_british(text: str) -> str:
    """Replace British spellings with American ones, leaving everything else intact."""
    spellings = load_spelling_map()
    return _WORD_RE.sub(lambda match: spellings.get(match.group(0), match.group(0)), text)
