"""CLI entrypoint for predicting the gender of a text's author."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys

from dotenv import load_dotenv

load_dotenv()

from predictgender.config import PredictorSettings
from predictgender.options import PredictionOptions
from predictgender.predictor import GenderPredictor
from predictgender.scoring.results import PredictionResult


logger = logging.getLogger(__name__)


def _read_text(args: argparse.Namespace) -> str:
    if args.text is not None:
        return args.text
    if args.file is not None:
        return Path(args.file).read_text(encoding="utf-8")
    return sys.stdin.read()


def _options_payload(options: PredictionOptions) -> dict[str, object]:
    return {
        "output": options.output.value,
        "encoding": options.encoding.value,
        "ngrams": options.ngrams,
        "wc_grams": options.wc_grams,
        "sort_by": options.sort_by.value,
        "min": options.minimum,
        "max": options.maximum,
        "places": options.places,
        "locale": options.locale.value,
        "no_int": options.no_int,
        "logs": options.logs,
    }


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Predict the gender of a text's author from a weighted lexicon")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--text", default=None, help="Text to score")
    source.add_argument("--file", default=None, help="UTF-8 file to score (stdin when neither is given)")
    parser.add_argument("--lexicon-path", default=None, help="Lexicon JSON path (overrides PREDICTGENDER_LEXICON_PATH)")
    parser.add_argument("--output", default="gender", help="gender, number, lex, matches or full")
    parser.add_argument("--encoding", default="freq", help="freq, binary or percent")
    parser.add_argument("--sort-by", default="lex", help="Match ordering: lex, weight, freq or total")
    parser.add_argument("--min", type=float, default=None, help="Exclusive lower weight bound")
    parser.add_argument("--max", type=float, default=None, help="Exclusive upper weight bound")
    parser.add_argument("--places", type=int, default=None, help="Round weights and score to N decimal places")
    parser.add_argument("--locale", default="US", help="US or GB (GB input is translated to US spelling)")
    parser.add_argument("--no-ngrams", action="store_true", help="Match unigrams only")
    parser.add_argument("--wc-grams", action="store_true", help="Include n-grams in the word count")
    parser.add_argument("--no-int", action="store_true", help="Do not add the model intercept")
    parser.add_argument("--logs", type=int, default=3, help="Diagnostic verbosity 0-3")
    args = parser.parse_args(argv)

    try:
        settings = PredictorSettings.from_env()
        if args.lexicon_path:
            settings = PredictorSettings(
                lexicon_path=Path(args.lexicon_path),
                category=settings.category,
                log_level=settings.log_level,
            )
    except ValueError as error:
        print(json.dumps({"error": str(error)}, ensure_ascii=True, indent=2))
        return 2

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=settings.log_level_number,
    )

    try:
        predictor = GenderPredictor.from_settings(settings)
    except ValueError as error:
        logger.error("Configuration error: %s", error)
        print(json.dumps({"error": str(error)}, ensure_ascii=True, indent=2))
        return 2

    options = PredictionOptions.from_mapping(
        {
            "output": args.output,
            "encoding": args.encoding,
            "sortBy": args.sort_by,
            "min": args.min,
            "max": args.max,
            "places": args.places,
            "locale": args.locale,
            "nGrams": not args.no_ngrams,
            "wcGrams": args.wc_grams,
            "noInt": args.no_int,
            "logs": args.logs,
        }
    )

    try:
        text = _read_text(args)
    except (OSError, UnicodeDecodeError) as error:
        logger.error("Could not read input: %s", error)
        print(json.dumps({"error": f"Could not read input: {error}"}, ensure_ascii=True, indent=2))
        return 2

    result = predictor.predict(text, options)
    if isinstance(result, PredictionResult):
        result = result.to_dict()

    payload = {
        "text_length": len(text),
        "category": predictor.category,
        "options": _options_payload(options),
        "result": result,
    }
    print(json.dumps(payload, ensure_ascii=True, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
