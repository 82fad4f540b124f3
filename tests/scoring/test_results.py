from __future__ import annotations

import pytest

from predictgender.scoring.matching import MatchRecord
from predictgender.scoring.results import (
    FEMALE,
    MALE,
    UNKNOWN,
    OutputMode,
    PredictionResult,
    SortKey,
    format_result,
    gender_label,
    gender_number,
    sort_matches,
)


def _record(term: str, frequency: int, weight: float, wordcount: int = 10) -> MatchRecord:
    return MatchRecord(
        term=term,
        frequency=frequency,
        weight=weight,
        lexical_value=(frequency / wordcount) * weight,
    )


MATCHES = [
    _record("alpha", 3, 0.5),
    _record("beta", 1, -2.0),
    _record("gamma", 3, -0.1),
    _record("delta", 2, 1.0),
]


@pytest.mark.parametrize(
    ("score", "label", "number"),
    [
        (-0.0001, MALE, -1),
        (-12.5, MALE, -1),
        (0.0, UNKNOWN, 0),
        (-0.0, UNKNOWN, 0),
        (0.0001, FEMALE, 1),
        (3.0, FEMALE, 1),
        (None, UNKNOWN, 0),
    ],
)
def test_sign_contract(score: float | None, label: str, number: int) -> None:
    assert gender_label(score) == label
    assert gender_number(score) == number


def test_sort_by_frequency_is_ascending_and_stable() -> None:
    ordered = sort_matches(MATCHES, SortKey.FREQUENCY)
    assert [m.term for m in ordered] == ["beta", "delta", "alpha", "gamma"]


def test_sort_by_weight() -> None:
    ordered = sort_matches(MATCHES, SortKey.WEIGHT)
    assert [m.term for m in ordered] == ["beta", "gamma", "alpha", "delta"]


def test_sort_by_lexical_value_is_default() -> None:
    ordered = sort_matches(MATCHES)
    assert [m.term for m in ordered] == ["beta", "gamma", "alpha", "delta"]


def test_sort_by_total() -> None:
    ordered = sort_matches(MATCHES, SortKey.TOTAL)
    assert [m.term for m in ordered] == ["beta", "gamma", "alpha", "delta"]
    assert [m.total for m in ordered] == pytest.approx([-2.0, -0.3, 1.5, 2.0])


def test_sort_does_not_mutate_input() -> None:
    original = list(MATCHES)
    sort_matches(MATCHES, SortKey.FREQUENCY)
    assert MATCHES == original


def test_format_result_modes() -> None:
    assert format_result(-1.5, MATCHES, output=OutputMode.GENDER) == MALE
    assert format_result(-1.5, MATCHES, output=OutputMode.NUMBER) == -1
    assert format_result(-1.5, MATCHES, output=OutputMode.LEX) == -1.5

    rows = format_result(-1.5, MATCHES, output=OutputMode.MATCHES, sort_by=SortKey.FREQUENCY)
    assert [row[0] for row in rows] == ["beta", "delta", "alpha", "gamma"]
    assert rows[0] == ["beta", 1, -2.0, pytest.approx(-0.2)]


def test_full_output_bundles_everything() -> None:
    result = format_result(0.75, MATCHES, output=OutputMode.FULL, sort_by=SortKey.WEIGHT)

    assert isinstance(result, PredictionResult)
    assert result.gender == FEMALE
    assert result.number == 1
    assert result.lex == 0.75
    assert [m.term for m in result.matches] == ["beta", "gamma", "alpha", "delta"]

    payload = result.to_dict()
    assert payload["gender"] == FEMALE
    assert payload["matches"][0][0] == "beta"


def test_neutral_formatting_for_empty_input() -> None:
    assert format_result(0.0, [], output=OutputMode.GENDER) == UNKNOWN
    assert format_result(0.0, [], output=OutputMode.NUMBER) == 0
    assert format_result(0.0, [], output=OutputMode.MATCHES) == []
    assert format_result(0.0, [], output=OutputMode.FULL) == PredictionResult(UNKNOWN, 0, 0.0, ())
