"""Text-similarity pronunciation scoring."""
from .similarity import (
    confidence_score,
    extract_word_details,
    levenshtein_distance,
    score_similarity,
    text_similarity,
)

__all__ = [
    "confidence_score",
    "extract_word_details",
    "levenshtein_distance",
    "score_similarity",
    "text_similarity",
]
