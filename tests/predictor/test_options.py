from __future__ import annotations

import logging
import math

import pytest

from predictgender.options import Locale, PredictionOptions, resolve_options
from predictgender.scoring.lexical import Encoding
from predictgender.scoring.matching import UNBOUNDED
from predictgender.scoring.results import OutputMode, SortKey


def test_defaults() -> None:
    options = PredictionOptions.from_mapping(None)

    assert options == PredictionOptions()
    assert options.output is OutputMode.GENDER
    assert options.encoding is Encoding.FREQUENCY
    assert options.ngrams is True
    assert options.wc_grams is False
    assert options.sort_by is SortKey.LEX
    assert options.places is None
    assert options.locale is Locale.US
    assert options.no_int is False
    assert options.logs == 3
    assert options.bounds is UNBOUNDED


def test_camel_case_and_alias_keys_are_accepted() -> None:
    options = PredictionOptions.from_mapping(
        {
            "return": "lex",
            "encoding": "binary",
            "nGrams": False,
            "wcGrams": True,
            "sortBy": "freq",
            "min": -3,
            "max": "3",
            "places": 2,
            "locale": "gb",
            "noInt": True,
            "logs": 1,
        }
    )

    assert options == PredictionOptions(
        output=OutputMode.LEX,
        encoding=Encoding.BINARY,
        ngrams=False,
        wc_grams=True,
        sort_by=SortKey.FREQUENCY,
        minimum=-3.0,
        maximum=3.0,
        places=2,
        locale=Locale.GB,
        no_int=True,
        logs=1,
    )
    assert options.bounds.minimum == -3.0
    assert options.bounds.maximum == 3.0


def test_frequency_spellings_map_to_same_members() -> None:
    options = PredictionOptions.from_mapping({"encoding": "frequency", "sort_by": "Frequency"})
    assert options.encoding is Encoding.FREQUENCY
    assert options.sort_by is SortKey.FREQUENCY


def test_one_sided_bound_stays_open_on_the_other_side() -> None:
    bounds = PredictionOptions.from_mapping({"min": 0}).bounds
    assert bounds.minimum == 0.0
    assert math.isinf(bounds.maximum)


def test_unrecognized_output_falls_back_with_warning(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="predictgender.options"):
        options = PredictionOptions.from_mapping({"output": "horoscope"})

    assert options.output is OutputMode.GENDER
    assert "horoscope" in caplog.text


def test_unrecognized_sort_key_falls_back() -> None:
    options = PredictionOptions.from_mapping({"sortBy": "alphabet"})
    assert options.sort_by is SortKey.LEX


def test_non_numeric_bounds_are_ignored(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="predictgender.options"):
        options = PredictionOptions.from_mapping({"min": "low", "max": True})

    assert options.minimum is None
    assert options.maximum is None
    assert "low" in caplog.text


def test_inverted_bounds_are_ignored() -> None:
    options = PredictionOptions.from_mapping({"min": 5, "max": 1})
    assert options.bounds is UNBOUNDED


@pytest.mark.parametrize("places", [-1, 1.5, "two", True])
def test_invalid_places_disable_rounding(places: object) -> None:
    assert PredictionOptions.from_mapping({"places": places}).places is None


def test_logs_zero_silences_fallback_warnings(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="predictgender.options"):
        options = PredictionOptions.from_mapping({"output": "horoscope", "logs": 0})

    assert options.output is OutputMode.GENDER
    assert caplog.records == []


def test_logs_above_range_is_clamped() -> None:
    assert PredictionOptions.from_mapping({"logs": 9}).logs == 3


def test_unknown_option_keys_are_ignored(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="predictgender.options"):
        options = PredictionOptions.from_mapping({"colour": "blue"})

    assert options == PredictionOptions()
    assert "colour" in caplog.text


def test_none_values_keep_defaults() -> None:
    assert PredictionOptions.from_mapping({"min": None, "places": None}) == PredictionOptions()


def test_resolve_options_passes_records_through() -> None:
    options = PredictionOptions(output=OutputMode.LEX)
    assert resolve_options(options) is options
    assert resolve_options({"output": "number"}).output is OutputMode.NUMBER


def test_direct_construction_maps_strings_to_members() -> None:
    options = PredictionOptions(encoding="binary", output="lex", sort_by="frequency", locale="gb")  # type: ignore[arg-type]

    assert options.encoding is Encoding.BINARY
    assert options.output is OutputMode.LEX
    assert options.sort_by is SortKey.FREQUENCY
    assert options.locale is Locale.GB
    assert options == PredictionOptions.from_mapping(
        {"encoding": "binary", "output": "lex", "sortBy": "frequency", "locale": "gb"}
    )


def test_direct_construction_drops_inverted_bounds(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="predictgender.options"):
        options = PredictionOptions(minimum=3.0, maximum=-3.0)

    assert options.minimum is None
    assert options.maximum is None
    assert options.bounds is UNBOUNDED
    assert "exceeds max" in caplog.text


def test_direct_construction_falls_back_on_invalid_values() -> None:
    options = PredictionOptions(
        output="horoscope",  # type: ignore[arg-type]
        places=-2,
        minimum="low",  # type: ignore[arg-type]
        ngrams="maybe",  # type: ignore[arg-type]
        logs=7,
    )

    assert options.output is OutputMode.GENDER
    assert options.places is None
    assert options.minimum is None
    assert options.ngrams is True
    assert options.logs == 3
