"""Recognizer interface implemented by every ASR backend."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List

from pron_core.models.words import PhonemeEvaluation, RecognizedSpeech, WordHypothesis


class Recognizer(ABC):
    """An ASR backend turning normalized 16 kHz mono WAV into time-stamped words."""

    #: Names (aliases) this backend is registered under; matched case-insensitively.
    provider_names: List[str] = []

    @abstractmethod
    def is_available(self) -> bool:
        """True when the backend is configured and can serve requests."""

    @abstractmethod
    def transcribe(self, wav_bytes: bytes, language_code: str) -> RecognizedSpeech:
        """Transcribe audio.

        Raises:
            ProviderNotConfigured: If the backend is not configured
            TransientUpstreamError: If the backend failed for this request
        """


def parse_word_entries(entries: Iterable[Dict[str, Any]]) -> List[WordHypothesis]:
    """Build WordHypothesis objects from ASR JSON word entries.

    Handles both formats seen from ASR services:
      Old: {"word": "...", "start": ..., "end": ...}
      New: {"value": "...", "start": ..., "end": ...}
    Confidence is read from "confidence" (or "evaluation"), defaulting to 1.0.
    """
    words: List[WordHypothesis] = []
    for w in entries:
        raw_word = w.get("word") or w.get("value") or ""
        if not raw_word.strip():
            continue
        phonemes = None
        if w.get("phonemes"):
            phonemes = [
                PhonemeEvaluation(
                    phoneme=p.get("phoneme", ""),
                    evaluation=float(p.get("evaluation", p.get("confidence", 0.0))),
                    start=p.get("start"),
                    end=p.get("end"),
                )
                for p in w["phonemes"]
            ]
        words.append(
            WordHypothesis(
                word=raw_word.strip(),
                start=float(w.get("start", 0.0)),
                end=float(w.get("end", 0.0)),
                evaluation=float(w.get("confidence", w.get("evaluation", 1.0))),
                phonemes=phonemes,
            )
        )
    return words
