"""Duration and speech-rate statistics over recognized words."""
from __future__ import annotations

from typing import Optional, Sequence, Tuple

from pron_core.models.words import WordHypothesis


def compute_durations(
    words: Sequence[WordHypothesis],
) -> Tuple[Optional[float], Optional[float], Optional[float]]:
    """Calculate total duration, speech rate and average word duration.

    Args:
        words: Recognized words in recognition order

    Returns:
        Tuple of (total_duration, words_per_minute, average_word_duration).
        All three are None when there are no words; words_per_minute is
        also None for a zero-length span.
    """
    if not words:
        return None, None, None

    total = max(0.0, words[-1].end - words[0].start)
    wpm = len(words) / (total / 60.0) if total > 0 else None
    avg = sum(w.duration for w in words) / len(words)
    return total, wpm, avg
