"""Runtime settings loaded from the environment (and an optional .env file).

Algorithm thresholds live in ``analysis/rules.py`` and ``prosody/rules.py``;
this module only covers deployment concerns such as which recognizer to use.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .analysis.rules import MIN_PAUSE_SEC
from .media.normalizer import TARGET_SAMPLE_RATE

DEFAULT_PROVIDER = "http"
DEFAULT_LANGUAGE = "en-US"


@dataclass(frozen=True)
class Settings:
    asr_provider: str = DEFAULT_PROVIDER
    asr_service_url: Optional[str] = None
    asr_timeout: float = 60.0
    ffmpeg_binary: str = "ffmpeg"
    ffmpeg_timeout: float = 120.0
    sample_rate: int = TARGET_SAMPLE_RATE
    language_code: str = DEFAULT_LANGUAGE
    log_level: str = "INFO"
    pause_threshold: float = MIN_PAUSE_SEC


def load_settings(env_file: Optional[str] = None) -> Settings:
    """Read PRON_* variables; unset variables keep their defaults."""
    load_dotenv(env_file)
    return Settings(
        asr_provider=os.getenv("PRON_ASR_PROVIDER", DEFAULT_PROVIDER),
        asr_service_url=os.getenv("PRON_ASR_SERVICE_URL") or None,
        asr_timeout=float(os.getenv("PRON_ASR_TIMEOUT", "60")),
        ffmpeg_binary=os.getenv("PRON_FFMPEG_BINARY", "ffmpeg"),
        ffmpeg_timeout=float(os.getenv("PRON_FFMPEG_TIMEOUT", "120")),
        sample_rate=int(os.getenv("PRON_SAMPLE_RATE", str(TARGET_SAMPLE_RATE))),
        language_code=os.getenv("PRON_LANGUAGE", DEFAULT_LANGUAGE),
        log_level=os.getenv("PRON_LOG_LEVEL", "INFO").upper(),
        pause_threshold=float(os.getenv("PRON_PAUSE_THRESHOLD", str(MIN_PAUSE_SEC))),
    )
