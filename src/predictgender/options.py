"""Per-call prediction options, validated once at the boundary.

Invalid values never abort a prediction: each one falls back to its
documented default and a warning is logged when ``logs >= 2``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
import logging
import math

from predictgender.scoring.lexical import Encoding
from predictgender.scoring.matching import UNBOUNDED, WeightBounds
from predictgender.scoring.results import OutputMode, SortKey


logger = logging.getLogger(__name__)

LOGS_WARNINGS = 2
LOGS_ALL = 3


class Locale(str, Enum):
    US = "US"
    GB = "GB"


# Accepted spellings for each field, camelCase included.
_ALIASES: dict[str, str] = {
    "output": "output",
    "return": "output",
    "encoding": "encoding",
    "ngrams": "ngrams",
    "nGrams": "ngrams",
    "n_grams": "ngrams",
    "wcGrams": "wc_grams",
    "wc_grams": "wc_grams",
    "sortBy": "sort_by",
    "sort_by": "sort_by",
    "min": "minimum",
    "minimum": "minimum",
    "max": "maximum",
    "maximum": "maximum",
    "places": "places",
    "locale": "locale",
    "noInt": "no_int",
    "no_int": "no_int",
    "logs": "logs",
}

_ENCODING_ALIASES = {"frequency": Encoding.FREQUENCY}
_SORT_ALIASES = {"frequency": SortKey.FREQUENCY}
_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})
_FALSE_STRINGS = frozenset({"0", "false", "no", "off"})


def _parse_enum(enum_cls, raw: object, default, *, name: str, aliases=None, problems: list[str]):
    if isinstance(raw, enum_cls):
        return raw
    value = str(raw).strip()
    for candidate in (value, value.lower(), value.upper()):
        try:
            return enum_cls(candidate)
        except ValueError:
            pass
    if aliases and value.lower() in aliases:
        return aliases[value.lower()]
    problems.append(f"Unrecognized {name} {raw!r}, using {default.value!r}")
    return default


def _parse_bool(raw: object, default: bool, *, name: str, problems: list[str]) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, (int, float)):
        return bool(raw)
    if isinstance(raw, str):
        value = raw.strip().lower()
        if value in _TRUE_STRINGS:
            return True
        if value in _FALSE_STRINGS:
            return False
    problems.append(f"Invalid {name} {raw!r}, using {default!r}")
    return default


def _parse_bound(raw: object, *, name: str, problems: list[str]) -> float | None:
    if raw is None:
        return None
    if isinstance(raw, bool):
        problems.append(f"Non-numeric {name} {raw!r}, ignoring bound")
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        problems.append(f"Non-numeric {name} {raw!r}, ignoring bound")
        return None
    if math.isnan(value):
        problems.append(f"Non-numeric {name} {raw!r}, ignoring bound")
        return None
    return value


def _parse_non_negative_int(raw: object, *, name: str, problems: list[str]) -> int | None:
    if raw is None:
        return None
    if isinstance(raw, bool) or (isinstance(raw, float) and not raw.is_integer()):
        problems.append(f"Invalid {name} {raw!r}, ignoring")
        return None
    try:
        value = int(raw)
    except (TypeError, ValueError):
        problems.append(f"Invalid {name} {raw!r}, ignoring")
        return None
    if value < 0:
        problems.append(f"Invalid {name} {raw!r}, ignoring")
        return None
    return value


@dataclass(frozen=True, slots=True)
class PredictionOptions:
    """Explicit option record with documented defaults.

    Every instance is normalized on construction, whether built directly or
    through :meth:`from_mapping`: strings become enum members, numbers are
    coerced, and invalid values fall back to their defaults with a warning.
    """

    output: OutputMode = OutputMode.GENDER
    encoding: Encoding = Encoding.FREQUENCY
    ngrams: bool = True
    wc_grams: bool = False
    sort_by: SortKey = SortKey.LEX
    minimum: float | None = None
    maximum: float | None = None
    places: int | None = None
    locale: Locale = Locale.US
    no_int: bool = False
    logs: int = LOGS_ALL

    def __post_init__(self) -> None:
        problems: list[str] = []
        logs = _parse_non_negative_int(self.logs, name="logs", problems=problems)
        minimum = _parse_bound(self.minimum, name="min", problems=problems)
        maximum = _parse_bound(self.maximum, name="max", problems=problems)
        if minimum is not None and maximum is not None and minimum > maximum:
            problems.append(f"min {minimum!r} exceeds max {maximum!r}, ignoring both bounds")
            minimum = maximum = None

        normalized = {
            "output": _parse_enum(OutputMode, self.output, OutputMode.GENDER, name="output", problems=problems),
            "encoding": _parse_enum(
                Encoding,
                self.encoding,
                Encoding.FREQUENCY,
                name="encoding",
                aliases=_ENCODING_ALIASES,
                problems=problems,
            ),
            "ngrams": _parse_bool(self.ngrams, True, name="ngrams", problems=problems),
            "wc_grams": _parse_bool(self.wc_grams, False, name="wcGrams", problems=problems),
            "sort_by": _parse_enum(
                SortKey,
                self.sort_by,
                SortKey.LEX,
                name="sortBy",
                aliases=_SORT_ALIASES,
                problems=problems,
            ),
            "minimum": minimum,
            "maximum": maximum,
            "places": _parse_non_negative_int(self.places, name="places", problems=problems),
            "locale": _parse_enum(Locale, self.locale, Locale.US, name="locale", problems=problems),
            "no_int": _parse_bool(self.no_int, False, name="noInt", problems=problems),
            "logs": LOGS_ALL if logs is None else min(logs, LOGS_ALL),
        }
        for name, value in normalized.items():
            object.__setattr__(self, name, value)
        for problem in problems:
            self.warn(problem)

    @property
    def bounds(self) -> WeightBounds:
        if self.minimum is None and self.maximum is None:
            return UNBOUNDED
        return WeightBounds(
            minimum=-math.inf if self.minimum is None else self.minimum,
            maximum=math.inf if self.maximum is None else self.maximum,
        )

    @classmethod
    def from_mapping(cls, options: Mapping[str, object] | None = None) -> "PredictionOptions":
        """Build options from a loosely-typed mapping such as parsed JSON."""
        if options is None:
            return cls()

        unknown: list[str] = []
        fields: dict[str, object] = {}
        for key, raw in options.items():
            name = _ALIASES.get(str(key))
            if name is None:
                unknown.append(str(key))
                continue
            if raw is None:
                continue
            fields[name] = raw

        result = cls(**fields)
        for key in unknown:
            result.warn("Ignoring unknown option %r", key)
        return result

    def warn(self, message: str, *args: object) -> None:
        if self.logs >= LOGS_WARNINGS:
            logger.warning(message, *args)

    def debug(self, message: str, *args: object) -> None:
        if self.logs >= LOGS_ALL:
            logger.debug(message, *args)


def resolve_options(options: PredictionOptions | Mapping[str, object] | None) -> PredictionOptions:
    if isinstance(options, PredictionOptions):
        return options
    return PredictionOptions.from_mapping(options)
