"""Recognizer that replays a fixed recognition result."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Optional, Sequence

from pron_core.errors import PreconditionViolation
from pron_core.models.words import RecognizedSpeech, WordHypothesis

from .base import Recognizer, parse_word_entries


class StaticRecognizer(Recognizer):
    """Returns the same words for every request (offline replays, tests)."""

    provider_names = ["static", "replay"]

    def __init__(self, words: Sequence[WordHypothesis], transcript: Optional[str] = None) -> None:
        self.words = list(words)
        self.transcript = transcript if transcript is not None else " ".join(w.word for w in self.words)

    @classmethod
    def from_json(cls, path: str) -> "StaticRecognizer":
        """Load a saved ASR response: ``{"text": ..., "word_timestamps": [...]}`` or a bare list.

        Raises:
            OSError: If the file cannot be read
            PreconditionViolation: If the file is not a usable ASR response
        """
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
            if isinstance(data, list):
                return cls(parse_word_entries(data))
            return cls(parse_word_entries(data.get("word_timestamps") or []), data.get("text"))
        except (TypeError, ValueError, AttributeError) as e:
            raise PreconditionViolation(f"invalid recognizer output in {path}: {e}") from e

    def is_available(self) -> bool:
        return True

    def transcribe(self, wav_bytes: bytes, language_code: str) -> RecognizedSpeech:
        return RecognizedSpeech(transcript=self.transcript, words=list(self.words))
