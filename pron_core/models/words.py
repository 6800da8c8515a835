"""Recognizer output consumed by every evaluation component."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from pron_core.errors import PreconditionViolation


@dataclass(frozen=True)
class PhonemeEvaluation:
    """Phoneme-level result reported by some recognizers.

    Attributes:
        phoneme: Phone label (e.g. "AH", "B")
        evaluation: Recognizer confidence for the phone
        start: Start timestamp in seconds (or None)
        end: End timestamp in seconds (or None)
    """
    phoneme: str
    evaluation: float
    start: Optional[float] = None
    end: Optional[float] = None


@dataclass(frozen=True)
class WordHypothesis:
    """One recognized word with its timing and confidence.

    Attributes:
        word: Word text as emitted by the recognizer
        start: Start timestamp in seconds
        end: End timestamp in seconds (>= start)
        evaluation: Confidence/evaluation value, usually 0-1 but not clamped
        phonemes: Optional phoneme breakdown
    """
    word: str
    start: float
    end: float
    evaluation: float = 1.0
    phonemes: Optional[List[PhonemeEvaluation]] = None

    def __post_init__(self) -> None:
        if self.word is None:
            raise PreconditionViolation("word text must not be None")
        if self.start < 0 or self.end < 0:
            raise PreconditionViolation(
                f"negative timing for {self.word!r}: start={self.start}, end={self.end}"
            )
        if self.end < self.start:
            raise PreconditionViolation(
                f"end before start for {self.word!r}: start={self.start}, end={self.end}"
            )

    @property
    def duration(self) -> float:
        return max(0.0, self.end - self.start)


@dataclass(frozen=True)
class RecognizedSpeech:
    """Transcript plus time-stamped words returned by a recognizer."""
    transcript: str
    words: List[WordHypothesis] = field(default_factory=list)
