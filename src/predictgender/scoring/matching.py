"""Join a token multiset against lexicon terms."""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
import math

from predictgender.lexicon.store import Lexicon


@dataclass(frozen=True, slots=True)
class MatchRecord:
    """One lexicon term found in the token sequence."""

    term: str
    frequency: int
    weight: float
    lexical_value: float

    @property
    def total(self) -> float:
        return self.frequency * self.weight

    def to_list(self) -> list[str | int | float]:
        return [self.term, self.frequency, self.weight, self.lexical_value]

    def to_dict(self) -> dict[str, str | int | float]:
        return {
            "term": self.term,
            "frequency": self.frequency,
            "weight": self.weight,
            "lexical_value": self.lexical_value,
            "total": self.total,
        }


@dataclass(frozen=True, slots=True)
class WeightBounds:
    """Exclusive ``(minimum, maximum)`` window a term weight must fall inside."""

    minimum: float = -math.inf
    maximum: float = math.inf

    def __post_init__(self) -> None:
        if self.minimum > self.maximum:
            raise ValueError("minimum weight cannot exceed maximum weight")

    def admits(self, weight: float) -> bool:
        return self.minimum < weight < self.maximum


UNBOUNDED = WeightBounds()


def round_weight(value: float, places: int | None) -> float:
    if places is None:
        return value
    return round(value, places)


def find_matches(
    tokens: Sequence[str],
    terms: Mapping[str, float],
    *,
    wordcount: int,
    bounds: WeightBounds = UNBOUNDED,
    places: int | None = None,
) -> list[MatchRecord]:
    """Return a record for every lexicon term that occurs in *tokens*.

    Records follow lexicon iteration order.  Weights are rounded before the
    threshold check so filtering and scoring see the same value.
    """
    if not tokens:
        return []

    counts = Counter(tokens)
    matches: list[MatchRecord] = []
    for term, raw_weight in terms.items():
        frequency = counts.get(term, 0)
        if frequency == 0:
            continue

        weight = round_weight(raw_weight, places)
        if not bounds.admits(weight):
            continue

        lexical_value = (frequency / wordcount) * weight if wordcount > 0 else 0.0
        matches.append(
            MatchRecord(
                term=term,
                frequency=frequency,
                weight=weight,
                lexical_value=lexical_value,
            )
        )
    return matches


def match_categories(
    tokens: Sequence[str],
    lexicon: Lexicon,
    *,
    wordcount: int,
    bounds: WeightBounds = UNBOUNDED,
    places: int | None = None,
) -> dict[str, list[MatchRecord]]:
    """Run :func:`find_matches` for every category in *lexicon*."""

    return {
        category: find_matches(tokens, terms, wordcount=wordcount, bounds=bounds, places=places)
        for category, terms in lexicon.categories.items()
    }
