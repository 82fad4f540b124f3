"""Runtime configuration for the predictor and CLI."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from pathlib import Path
from typing import Mapping

from predictgender.lexicon.store import BUNDLED_LEXICON_PATH, GENDER_CATEGORY


DEFAULT_LOG_LEVEL = "WARNING"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class PredictorSettings:
    """Validated process-level settings: where the lexicon lives and how loud to log."""

    lexicon_path: Path = BUNDLED_LEXICON_PATH
    category: str = GENDER_CATEGORY
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def log_level_number(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "PredictorSettings":
        source: Mapping[str, str] = os.environ if environ is None else environ

        lexicon_path_raw = source.get("PREDICTGENDER_LEXICON_PATH", str(BUNDLED_LEXICON_PATH)).strip()
        if not lexicon_path_raw:
            raise ValueError("PREDICTGENDER_LEXICON_PATH cannot be empty")

        category = source.get("PREDICTGENDER_CATEGORY", GENDER_CATEGORY).strip().upper()
        if not category:
            raise ValueError("PREDICTGENDER_CATEGORY cannot be empty")

        log_level = source.get("PREDICTGENDER_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
        if log_level not in _LOG_LEVELS:
            allowed = ", ".join(_LOG_LEVELS)
            raise ValueError(f"PREDICTGENDER_LOG_LEVEL must be one of: {allowed}")

        return cls(lexicon_path=Path(lexicon_path_raw), category=category, log_level=log_level)
