"""Reduce match records into a single category score."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from predictgender.scoring.matching import MatchRecord


class Encoding(str, Enum):
    FREQUENCY = "freq"
    BINARY = "binary"
    PERCENT = "percent"


def calculate_lex(
    matches: Sequence[MatchRecord],
    *,
    wordcount: int,
    intercept: float = 0.0,
    encoding: Encoding = Encoding.FREQUENCY,
    places: int | None = None,
    token_count: int | None = None,
) -> float:
    """Return the lexical value for one category.

    ``freq``:    sum((frequency / wordcount) * weight) + intercept
    ``binary``:  sum(weight) + intercept
    ``percent``: sum(frequency) / token_count, no intercept

    A zero word count yields ``0.0`` for every encoding.  ``token_count``
    defaults to *wordcount* and should be the length of the sequence the
    matches were drawn from, so ``percent`` stays within ``[0, 1]``.
    """
    if wordcount <= 0:
        return 0.0

    if encoding is Encoding.PERCENT:
        denominator = wordcount if token_count is None else token_count
        if denominator <= 0:
            return 0.0
        lex = sum(match.frequency for match in matches) / denominator
    elif encoding is Encoding.BINARY:
        lex = sum(match.weight for match in matches) + intercept
    else:
        lex = sum((match.frequency / wordcount) * match.weight for match in matches) + intercept

    if places is not None:
        lex = round(lex, places)
    return lex
