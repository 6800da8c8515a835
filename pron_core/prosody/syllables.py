"""Syllable estimation and word timing enrichment."""
from __future__ import annotations

from typing import List, Sequence

from pron_core.models.prosody import WordTiming
from pron_core.models.words import WordHypothesis

from .rules import SYLLABLE_VOWELS


def estimate_syllable_count(word: str) -> int:
    """Estimate syllables by counting vowel groups.

    A trailing silent "e" is discounted when more than one group was found.
    Every word counts as at least one syllable.

    Example: "quick" -> 1, "table" -> 1, "beautiful" -> 3
    """
    lowered = word.lower()
    count = 0
    previous_was_vowel = False
    for char in lowered:
        is_vowel = char in SYLLABLE_VOWELS
        if is_vowel and not previous_was_vowel:
            count += 1
        previous_was_vowel = is_vowel

    if lowered.endswith("e") and count > 1:
        count -= 1
    return max(1, count)


def build_word_timings(words: Sequence[WordHypothesis]) -> List[WordTiming]:
    """Word timings with syllable estimates; stress is left for the scorer."""
    return [
        WordTiming(
            word=w.word,
            start=w.start,
            end=w.end,
            syllable_count=estimate_syllable_count(w.word),
            stressed=False,
        )
        for w in words
    ]
