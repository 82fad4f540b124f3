"""Match engine, lexical scorer and result formatting."""

from .lexical import Encoding, calculate_lex
from .matching import MatchRecord, WeightBounds, find_matches, match_categories
from .results import (
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

__all__ = [
    "Encoding",
    "FEMALE",
    "MALE",
    "MatchRecord",
    "OutputMode",
    "PredictionResult",
    "SortKey",
    "UNKNOWN",
    "WeightBounds",
    "calculate_lex",
    "find_matches",
    "format_result",
    "gender_label",
    "gender_number",
    "match_categories",
    "sort_matches",
]
