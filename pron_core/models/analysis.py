"""Result model of the detailed (WER + timing) analysis."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .alignment_step import ErrorType
from .words import PhonemeEvaluation


@dataclass(frozen=True)
class Pause:
    """Silence between two consecutively recognized words."""
    start: float
    end: float
    duration: float
    preceding_word: Optional[str]
    following_word: Optional[str]


@dataclass(frozen=True)
class WordAnalysis:
    """Per-step word result; hypothesis fields are None for deletions."""
    index: int
    expected: Optional[str]
    actual: Optional[str]
    error_type: ErrorType
    start: Optional[float] = None
    end: Optional[float] = None
    duration: Optional[float] = None
    evaluation: Optional[float] = None
    phonemes: Optional[List[PhonemeEvaluation]] = None


@dataclass(frozen=True)
class DetailedAnalysis:
    """Aggregate result of aligning a hypothesis against the reference text.

    ``wer`` may exceed 1.0 when insertions dominate. The duration fields are
    None when the recognizer returned no words.
    """
    reference_text: str
    transcript: str
    wer: float
    substitutions: int
    insertions: int
    deletions: int
    total_duration: Optional[float]
    speech_rate_wpm: Optional[float]
    average_word_duration: Optional[float]
    pauses: List[Pause] = field(default_factory=list)
    words: List[WordAnalysis] = field(default_factory=list)
