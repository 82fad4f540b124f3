"""Map category scores to labels and requested output shapes."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from predictgender.scoring.matching import MatchRecord


MALE = "Male"
FEMALE = "Female"
UNKNOWN = "Unknown"


class OutputMode(str, Enum):
    GENDER = "gender"
    NUMBER = "number"
    LEX = "lex"
    MATCHES = "matches"
    FULL = "full"


class SortKey(str, Enum):
    LEX = "lex"
    WEIGHT = "weight"
    FREQUENCY = "freq"
    TOTAL = "total"


_SORT_KEYS = {
    SortKey.LEX: lambda match: match.lexical_value,
    SortKey.WEIGHT: lambda match: match.weight,
    SortKey.FREQUENCY: lambda match: match.frequency,
    SortKey.TOTAL: lambda match: match.total,
}


def gender_label(score: float | None) -> str:
    if score is None or score == 0:
        return UNKNOWN
    return MALE if score < 0 else FEMALE


def gender_number(score: float | None) -> int:
    if score is None or score == 0:
        return 0
    return -1 if score < 0 else 1


def sort_matches(matches: Sequence[MatchRecord], sort_by: SortKey = SortKey.LEX) -> list[MatchRecord]:
    """Ascending by *sort_by*; equal keys keep their original order."""

    return sorted(matches, key=_SORT_KEYS[sort_by])


@dataclass(frozen=True, slots=True)
class PredictionResult:
    """Composite output carrying the label, code, score and matches together."""

    gender: str
    number: int
    lex: float
    matches: tuple[MatchRecord, ...] = field(default_factory=tuple)

    @classmethod
    def from_score(
        cls,
        score: float,
        matches: Sequence[MatchRecord] = (),
        *,
        sort_by: SortKey = SortKey.LEX,
    ) -> "PredictionResult":
        return cls(
            gender=gender_label(score),
            number=gender_number(score),
            lex=score,
            matches=tuple(sort_matches(matches, sort_by)),
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "gender": self.gender,
            "number": self.number,
            "lex": self.lex,
            "matches": [match.to_list() for match in self.matches],
        }


def format_result(
    score: float,
    matches: Sequence[MatchRecord],
    *,
    output: OutputMode = OutputMode.GENDER,
    sort_by: SortKey = SortKey.LEX,
) -> str | int | float | list[list[str | int | float]] | PredictionResult:
    if output is OutputMode.GENDER:
        return gender_label(score)
    if output is OutputMode.NUMBER:
        return gender_number(score)
    if output is OutputMode.LEX:
        return score
    if output is OutputMode.MATCHES:
        return [match.to_list() for match in sort_matches(matches, sort_by)]
    return PredictionResult.from_score(score, matches, sort_by=sort_by)
