"""Command-line entry point: ``python -m pron_core audio.wav --reference "..."``."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .analysis import AnalysisConfig
from .prosody import ProsodyConfig
from .asr import StaticRecognizer
from .config import load_settings
from .errors import PreconditionViolation, UnknownProviderError, UpstreamUnavailable
from .logging_config import configure_logging
from .models import to_dict
from .pipeline import (
    build_resolver,
    evaluate_all,
    evaluate_detailed,
    evaluate_pronunciation,
    evaluate_prosody,
    prepare_audio,
)

logger = logging.getLogger("pron_core")

EXIT_PRECONDITION = 2
EXIT_UPSTREAM = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pron_core", description="Score pronunciation and prosody of a recording."
    )
    parser.add_argument("audio", help="Path to the recording (WAV, or any format with --normalize)")
    parser.add_argument("--reference", default="", help="Reference text the speaker read")
    parser.add_argument("--language", default=None, help="Language tag (default from PRON_LANGUAGE)")
    parser.add_argument("--provider", default=None, help="Recognizer name (default from PRON_ASR_PROVIDER)")
    parser.add_argument("--words-json", default=None, help="Replay a saved recognizer response instead of calling ASR")
    parser.add_argument(
        "--mode",
        choices=["detailed", "prosody", "pronunciation", "all"],
        default="all",
    )
    parser.add_argument("--normalize", action="store_true", help="Convert the input with ffmpeg first")
    parser.add_argument("--env-file", default=None, help="Path to a .env file")
    parser.add_argument("--log-level", default=None)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings(args.env_file)
    configure_logging(args.log_level or settings.log_level)
    language = args.language or settings.language_code

    try:
        if args.words_json:
            recognizer = StaticRecognizer.from_json(args.words_json)
        else:
            recognizer = build_resolver(settings).resolve(args.provider or settings.asr_provider)

        wav_bytes = prepare_audio(Path(args.audio).read_bytes(), settings, normalize=args.normalize)
        analysis_config = AnalysisConfig(min_pause_sec=settings.pause_threshold)
        prosody_config = ProsodyConfig(pause_threshold_sec=settings.pause_threshold)

        if args.mode == "detailed":
            result = evaluate_detailed(wav_bytes, args.reference, recognizer, language, analysis_config)
        elif args.mode == "prosody":
            result = evaluate_prosody(
                wav_bytes,
                recognizer,
                args.reference,
                language,
                config=prosody_config,
                target_sample_rate=settings.sample_rate,
            )
        elif args.mode == "pronunciation":
            result = evaluate_pronunciation(wav_bytes, args.reference, recognizer, language)
        else:
            result = evaluate_all(
                wav_bytes,
                args.reference,
                recognizer,
                language,
                analysis_config=analysis_config,
                prosody_config=prosody_config,
                target_sample_rate=settings.sample_rate,
            )
    except (PreconditionViolation, UnknownProviderError, OSError) as e:
        logger.error("Rejected input: %s", e)
        return EXIT_PRECONDITION
    except UpstreamUnavailable as e:
        logger.error("Upstream unavailable: %s", e)
        return EXIT_UPSTREAM

    json.dump(to_dict(result), sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
