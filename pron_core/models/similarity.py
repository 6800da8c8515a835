"""Result model of the whole-utterance similarity score."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class WordDetail:
    """Recognized word compared positionally against the reference.

    Attributes:
        word: Recognized word
        confidence: Recognizer confidence for the word
        is_correct: Whether the word equals the reference word at the same index
        expected_word: Reference word at the same index, or None past the reference end
    """
    word: str
    confidence: float
    is_correct: bool
    expected_word: Optional[str]


@dataclass(frozen=True)
class PronunciationScore:
    score: float
    transcribed_text: str
    word_details: List[WordDetail] = field(default_factory=list)
