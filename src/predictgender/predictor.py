"""Gender prediction pipeline: normalize, tokenize, match, score, format."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from functools import lru_cache

from predictgender.config import PredictorSettings
from predictgender.lexicon.store import (
    BUNDLED_LEXICON_PATH,
    GENDER_CATEGORY,
    ConfigurationError,
    Lexicon,
    bundled_lexicon,
    load_lexicon,
)
from predictgender.options import Locale, PredictionOptions, resolve_options
from predictgender.scoring.lexical import calculate_lex
from predictgender.scoring.matching import MatchRecord, find_matches, match_categories
from predictgender.scoring.results import PredictionResult, format_result
from predictgender.text.spelling import has_british_spellings, translate_british
from predictgender.text.normalize import expand_ngrams, normalize_text, tokenize_text

Tokenizer = Callable[[str], Sequence[str]]
PredictionOutput = str | int | float | list[list[str | int | float]] | PredictionResult


@dataclass(frozen=True, slots=True)
class PreparedTokens:
    """Tokens ready for matching and the word count used to scale frequencies."""

    tokens: list[str]
    wordcount: int


class GenderPredictor:
    """Score texts against one immutable lexicon.

    Construct once and share freely; :meth:`predict` keeps no state between
    calls.
    """

    def __init__(
        self,
        lexicon: Lexicon | None,
        *,
        tokenizer: Tokenizer | None = tokenize_text,
        category: str = GENDER_CATEGORY,
    ) -> None:
        if lexicon is None:
            raise ConfigurationError("A lexicon is required to build a predictor")
        if tokenizer is None or not callable(tokenizer):
            raise ConfigurationError("A callable tokenizer is required to build a predictor")

        self._lexicon = lexicon
        self._tokenizer = tokenizer
        self._category = category.upper()
        # Fail at construction rather than on the first call.
        self._lexicon.terms(self._category)

    @classmethod
    def from_settings(cls, settings: PredictorSettings) -> "GenderPredictor":
        if settings.lexicon_path.resolve() == BUNDLED_LEXICON_PATH.resolve():
            lexicon = bundled_lexicon()
        else:
            lexicon = load_lexicon(settings.lexicon_path)
        return cls(lexicon, category=settings.category)

    @property
    def lexicon(self) -> Lexicon:
        return self._lexicon

    @property
    def category(self) -> str:
        return self._category

    def prepare(self, text: object, options: PredictionOptions) -> PreparedTokens | None:
        """Turn raw input into match candidates, or ``None`` when nothing is scorable."""

        coerced = _coerce_text(text, options)
        if coerced is None:
            return None

        normalized = normalize_text(coerced)
        if options.locale is Locale.GB and has_british_spellings(normalized):
            normalized = translate_british(normalized)

        tokens = list(self._tokenizer(normalized))
        if not tokens:
            options.debug("No tokens produced from %d characters of input", len(coerced))
            return None

        wordcount = len(tokens)
        if options.ngrams:
            tokens = expand_ngrams(tokens)
        if options.wc_grams:
            wordcount = len(tokens)
        return PreparedTokens(tokens=tokens, wordcount=wordcount)

    def matches(
        self,
        text: object,
        options: PredictionOptions | Mapping[str, object] | None = None,
    ) -> list[MatchRecord]:
        resolved = resolve_options(options)
        prepared = self.prepare(text, resolved)
        if prepared is None:
            return []
        return self._find(prepared, resolved)

    def predict(
        self,
        text: object,
        options: PredictionOptions | Mapping[str, object] | None = None,
    ) -> PredictionOutput:
        """Predict the author's gender in the shape selected by ``options.output``.

        Missing, empty or untokenizable input yields the neutral result for
        the chosen output mode (``"Unknown"``, ``0``, ``0.0``, ``[]``).
        """
        resolved = resolve_options(options)
        prepared = self.prepare(text, resolved)
        if prepared is None:
            return format_result(0.0, [], output=resolved.output, sort_by=resolved.sort_by)

        matches = self._find(prepared, resolved)
        lex = calculate_lex(
            matches,
            wordcount=prepared.wordcount,
            intercept=self._intercept(self._category, resolved),
            encoding=resolved.encoding,
            places=resolved.places,
            token_count=len(prepared.tokens),
        )
        resolved.debug(
            "Scored %s: %d tokens, wordcount=%d, %d matches, lex=%r",
            self._category,
            len(prepared.tokens),
            prepared.wordcount,
            len(matches),
            lex,
        )
        return format_result(lex, matches, output=resolved.output, sort_by=resolved.sort_by)

    def score_categories(
        self,
        text: object,
        options: PredictionOptions | Mapping[str, object] | None = None,
    ) -> dict[str, float]:
        """Return the lexical value of every lexicon category for *text*."""

        resolved = resolve_options(options)
        prepared = self.prepare(text, resolved)
        if prepared is None:
            return {category: 0.0 for category in self._lexicon.categories}

        per_category = match_categories(
            prepared.tokens,
            self._lexicon,
            wordcount=prepared.wordcount,
            bounds=resolved.bounds,
            places=resolved.places,
        )
        return {
            category: calculate_lex(
                matches,
                wordcount=prepared.wordcount,
                intercept=self._intercept(category, resolved),
                encoding=resolved.encoding,
                places=resolved.places,
                token_count=len(prepared.tokens),
            )
            for category, matches in per_category.items()
        }

    def _find(self, prepared: PreparedTokens, options: PredictionOptions) -> list[MatchRecord]:
        return find_matches(
            prepared.tokens,
            self._lexicon.terms(self._category),
            wordcount=prepared.wordcount,
            bounds=options.bounds,
            places=options.places,
        )

    def _intercept(self, category: str, options: PredictionOptions) -> float:
        if options.no_int:
            return 0.0
        return self._lexicon.intercept(category)


def _coerce_text(text: object, options: PredictionOptions) -> str | None:
    if text is None:
        return None
    if isinstance(text, str):
        return text
    if isinstance(text, (bytes, bytearray)):
        return bytes(text).decode("utf-8", errors="replace")
    if isinstance(text, (int, float)) and not isinstance(text, bool):
        return str(text)
    options.warn("Unsupported input type %s, returning neutral result", type(text).__name__)
    return None


@lru_cache(maxsize=1)
def default_predictor() -> GenderPredictor:
    """Shared predictor over the bundled lexicon."""
    return GenderPredictor(bundled_lexicon())


def predict_gender(
    text: object,
    options: PredictionOptions | Mapping[str, object] | None = None,
) -> PredictionOutput:
    """Predict with the bundled lexicon; see :meth:`GenderPredictor.predict`.

    The bundled lexicon is a small sample with illustrative weights. Build a
    :class:`GenderPredictor` over the full WWBP gender lexicon (or set
    ``PREDICTGENDER_LEXICON_PATH`` for the CLI) for meaningful predictions.
    """
    return default_predictor().predict(text, options)
