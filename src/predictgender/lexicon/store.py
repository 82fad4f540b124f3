"""Immutable weighted lexicon loaded once from a JSON asset."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import lru_cache
import json
import logging
import math
from pathlib import Path
from types import MappingProxyType


logger = logging.getLogger(__name__)

GENDER_CATEGORY = "GENDER"
BUNDLED_LEXICON_PATH = Path(__file__).parent / "data" / "gender_sample.json"

# Model biases from the source regression, added after weighted summation.
INTERCEPTS: Mapping[str, float] = MappingProxyType({GENDER_CATEGORY: -0.06724152})


class ConfigurationError(ValueError):
    """A required collaborator (lexicon, tokenizer) is missing or unusable."""


def _freeze_terms(category: str, terms: object) -> Mapping[str, float]:
    if not isinstance(terms, Mapping):
        raise ConfigurationError(f"Lexicon category {category!r} must map terms to weights")

    frozen: dict[str, float] = {}
    for term, weight in terms.items():
        key = str(term).strip().lower()
        if not key:
            continue
        try:
            value = float(weight)
        except (TypeError, ValueError) as error:
            raise ConfigurationError(f"Non-numeric weight for {category}/{term!r}: {weight!r}") from error
        if not math.isfinite(value):
            raise ConfigurationError(f"Non-finite weight for {category}/{term!r}")
        frozen[key] = value
    return MappingProxyType(frozen)


@dataclass(frozen=True, slots=True)
class Lexicon:
    """Read-only ``category -> term -> weight`` table plus per-category intercepts."""

    categories: Mapping[str, Mapping[str, float]]
    intercepts: Mapping[str, float] = field(default_factory=lambda: INTERCEPTS)

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Mapping[str, float]],
        *,
        intercepts: Mapping[str, float] | None = None,
    ) -> "Lexicon":
        if not isinstance(data, Mapping) or not data:
            raise ConfigurationError("Lexicon must be a non-empty mapping of categories")

        categories = {
            str(category).strip().upper(): _freeze_terms(str(category), terms)
            for category, terms in data.items()
        }
        source = INTERCEPTS if intercepts is None else intercepts
        frozen_intercepts = {str(k).strip().upper(): float(v) for k, v in source.items()}
        return cls(
            categories=MappingProxyType(categories),
            intercepts=MappingProxyType(frozen_intercepts),
        )

    def terms(self, category: str) -> Mapping[str, float]:
        try:
            return self.categories[category.upper()]
        except KeyError:
            raise ConfigurationError(f"Lexicon has no category {category!r}") from None

    def intercept(self, category: str) -> float:
        return float(self.intercepts.get(category.upper(), 0.0))

    def __contains__(self, category: object) -> bool:
        return isinstance(category, str) and category.upper() in self.categories

    def __len__(self) -> int:
        return sum(len(terms) for terms in self.categories.values())


def load_lexicon(path: str | Path, *, intercepts: Mapping[str, float] | None = None) -> Lexicon:
    """Read a ``{category: {term: weight}}`` JSON file into a :class:`Lexicon`.

    Any failure to read or parse the file is a fatal configuration error.
    """
    lexicon_path = Path(path)
    if not lexicon_path.is_file():
        raise ConfigurationError(f"Lexicon not found: {lexicon_path}")

    try:
        data = json.loads(lexicon_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as error:
        raise ConfigurationError(f"Lexicon could not be read: {lexicon_path} ({error})") from error

    lexicon = Lexicon.from_mapping(data, intercepts=intercepts)
    logger.info(
        "Loaded lexicon %s: %d categories, %d terms",
        lexicon_path,
        len(lexicon.categories),
        len(lexicon),
    )
    return lexicon


@lru_cache(maxsize=1)
def bundled_lexicon() -> Lexicon:
    """Return the lexicon shipped with the package; loaded on first use.

    The bundled file is a small illustrative subset with sample weights, not
    the full WWBP gender lexicon, so a warning is logged when it is loaded.
    """
    logger.warning(
        "Using the bundled sample lexicon %s; its weights are illustrative. "
        "Set PREDICTGENDER_LEXICON_PATH to the full WWBP gender lexicon for real predictions.",
        BUNDLED_LEXICON_PATH.name,
    )
    return load_lexicon(BUNDLED_LEXICON_PATH)
