"""Recognizer backed by an external (Dockerized) ASR HTTP service."""
from __future__ import annotations

import logging
from typing import Optional

import requests

from pron_core.errors import ProviderNotConfigured, TransientUpstreamError
from pron_core.models.words import RecognizedSpeech

from .base import Recognizer, parse_word_entries

logger = logging.getLogger(__name__)


class HttpRecognizer(Recognizer):
    """POSTs the WAV as multipart ``file`` and reads ``{"text", "word_timestamps"}``."""

    provider_names = ["http", "service", "docker"]

    def __init__(self, service_url: Optional[str], timeout: float = 60.0) -> None:
        self.service_url = service_url
        self.timeout = timeout

    def is_available(self) -> bool:
        return bool(self.service_url)

    def transcribe(self, wav_bytes: bytes, language_code: str) -> RecognizedSpeech:
        if not self.service_url:
            raise ProviderNotConfigured("http", "ASR service URL is not configured")

        files = {"file": ("audio.wav", wav_bytes, "audio/wav")}
        try:
            response = requests.post(
                self.service_url,
                files=files,
                data={"language": language_code},
                timeout=self.timeout,
            )
            response.raise_for_status()
            result = response.json()
        except requests.exceptions.ConnectionError as e:
            raise TransientUpstreamError(
                "http", f"could not connect to ASR service at {self.service_url}"
            ) from e
        except requests.exceptions.Timeout as e:
            raise TransientUpstreamError("http", f"ASR service timed out after {self.timeout}s") from e
        except requests.exceptions.RequestException as e:
            raise TransientUpstreamError("http", f"ASR request failed: {e}") from e
        except ValueError as e:
            raise TransientUpstreamError("http", "ASR service returned invalid JSON") from e

        try:
            words = parse_word_entries(result.get("word_timestamps") or [])
            transcript = (result.get("text") or "").strip()
        except (TypeError, ValueError, AttributeError) as e:
            # includes PreconditionViolation for negative or inverted timings
            raise TransientUpstreamError("http", f"malformed ASR response: {e}") from e

        logger.info("ASR service returned %d words", len(words))
        return RecognizedSpeech(transcript=transcript, words=words)
