"""Pause detection between consecutively recognized words."""
from __future__ import annotations

from typing import List, Sequence

from pron_core.models.analysis import Pause
from pron_core.models.words import WordHypothesis

from .rules import MIN_PAUSE_SEC


def detect_pauses(
    words: Sequence[WordHypothesis], min_pause_sec: float = MIN_PAUSE_SEC
) -> List[Pause]:
    """Report every gap of at least ``min_pause_sec`` between adjacent words.

    Words are taken in recognition order, not alignment order.

    Args:
        words: Recognized words with timestamps
        min_pause_sec: Minimum gap reported as a pause (default: 0.2)

    Returns:
        Pauses in chronological order, each bordered by the two words around it
    """
    pauses: List[Pause] = []
    for current, nxt in zip(words, words[1:]):
        gap = nxt.start - current.end
        if gap >= min_pause_sec:
            pauses.append(
                Pause(
                    start=current.end,
                    end=nxt.start,
                    duration=gap,
                    preceding_word=current.word,
                    following_word=nxt.word,
                )
            )
    return pauses
