"""Pacing: speech rate against an optimal words-per-minute band."""
from __future__ import annotations

from typing import Tuple

from pron_core.models.prosody import PacingMetrics, ProsodyFeatures

from ..rules import FAST_WPM_FACTOR, OPTIMAL_WPM_MAX, OPTIMAL_WPM_MIN, SLOW_WPM_FACTOR


def pacing_score_for_wpm(
    wpm: float, optimal_min: float = OPTIMAL_WPM_MIN, optimal_max: float = OPTIMAL_WPM_MAX
) -> float:
    if wpm < optimal_min * SLOW_WPM_FACTOR:
        return 0.4  # too slow
    if wpm < optimal_min:
        return 0.7
    if wpm <= optimal_max:
        return 1.0
    if wpm <= optimal_max * FAST_WPM_FACTOR:
        return 0.8
    return 0.5  # too fast


def score_pacing(
    features: ProsodyFeatures,
    optimal_min: float = OPTIMAL_WPM_MIN,
    optimal_max: float = OPTIMAL_WPM_MAX,
) -> Tuple[float, PacingMetrics]:
    words = features.word_timings
    duration = features.duration
    if not words or duration <= 0.0:
        return 0.0, PacingMetrics(0.0, 0.0, 0.0, 0.0, "No speech detected")

    syllables_per_second = sum(w.syllable_count for w in words) / duration
    wpm = len(words) / duration * 60.0

    if wpm < optimal_min:
        interpretation = "Speech is too slow, try to speak more fluently"
    elif wpm <= optimal_max:
        interpretation = "Appropriate speech rate"
    else:
        interpretation = "Speech is too fast, slow down for clarity"

    return pacing_score_for_wpm(wpm, optimal_min, optimal_max), PacingMetrics(
        syllables_per_second=syllables_per_second,
        words_per_minute=wpm,
        optimal_range_min=optimal_min,
        optimal_range_max=optimal_max,
        interpretation=interpretation,
    )
