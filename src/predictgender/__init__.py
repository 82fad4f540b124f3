"""Predict the gender of a text's author from a weighted psycholinguistic lexicon."""

from .config import PredictorSettings
from .lexicon import ConfigurationError, Lexicon, bundled_lexicon, load_lexicon
from .options import Locale, PredictionOptions
from .predictor import GenderPredictor, default_predictor, predict_gender
from .scoring import Encoding, MatchRecord, OutputMode, PredictionResult, SortKey

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "Encoding",
    "GenderPredictor",
    "Lexicon",
    "Locale",
    "MatchRecord",
    "OutputMode",
    "PredictionOptions",
    "PredictionResult",
    "PredictorSettings",
    "SortKey",
    "bundled_lexicon",
    "default_predictor",
    "load_lexicon",
    "predict_gender",
    "__version__",
]
