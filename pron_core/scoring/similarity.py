"""Whole-utterance pronunciation score from text similarity and ASR confidence."""
from __future__ import annotations

from typing import List, Sequence, Tuple

import Levenshtein

from pron_core.errors import PreconditionViolation
from pron_core.models.similarity import PronunciationScore, WordDetail

SIMILARITY_WEIGHT = 0.7
CONFIDENCE_WEIGHT = 0.3


def levenshtein_distance(a: str, b: str) -> int:
    """Character edit distance (unit costs)."""
    return Levenshtein.distance(a, b)


def text_similarity(actual: str, expected: str) -> float:
    """Normalized similarity, 1 - distance / max(len); case-insensitive.

    Two empty strings are identical (1.0).
    """
    a, b = actual.lower(), expected.lower()
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - levenshtein_distance(a, b) / longest


def confidence_score(confidences: Sequence[float]) -> float:
    """Mean recognizer confidence; 0.0 when no words were recognized."""
    if not confidences:
        return 0.0
    return sum(confidences) / len(confidences)


def extract_word_details(
    word_confidences: Sequence[Tuple[str, float]], reference_text: str
) -> List[WordDetail]:
    """Compare each recognized word with the reference word at the same index.

    Words past the end of the reference have no expected counterpart and are
    marked incorrect.
    """
    reference_words = reference_text.lower().split()
    details: List[WordDetail] = []
    for index, (word, confidence) in enumerate(word_confidences):
        expected = reference_words[index] if index < len(reference_words) else None
        details.append(
            WordDetail(
                word=word,
                confidence=confidence,
                is_correct=expected is not None and expected == word.lower(),
                expected_word=expected,
            )
        )
    return details


def score_similarity(
    hypothesis_text: str,
    reference_text: str,
    word_confidences: Sequence[Tuple[str, float]],
) -> PronunciationScore:
    """Blend text similarity (70%) with mean word confidence (30%), clamped to [0, 1].

    Args:
        hypothesis_text: Recognizer transcript
        reference_text: Expected text
        word_confidences: ``(word, confidence)`` pairs in recognition order

    Returns:
        PronunciationScore with the blended score and positional word details

    Raises:
        PreconditionViolation: If any argument is None
    """
    if hypothesis_text is None or reference_text is None or word_confidences is None:
        raise PreconditionViolation("similarity inputs must not be None")

    transcript = hypothesis_text.strip()
    similarity = text_similarity(transcript, reference_text)
    confidence = confidence_score([c for _, c in word_confidences])
    # confidences are not guaranteed to lie in [0, 1]
    score = min(1.0, max(0.0, similarity * SIMILARITY_WEIGHT + confidence * CONFIDENCE_WEIGHT))

    return PronunciationScore(
        score=score,
        transcribed_text=transcript,
        word_details=extract_word_details(word_confidences, reference_text),
    )
