"""Rhythm: regularity of syllable timing."""
from __future__ import annotations

from typing import Tuple

from pron_core.models.prosody import ProsodyFeatures, RhythmMetrics

from ..rules import EXPECTED_RHYTHM_CV, RHYTHM_IRREGULAR_CV, RHYTHM_REGULAR_CV
from ..stats import summarize


def rhythm_score_for_cv(cv: float) -> float:
    """Penalize both mechanically regular and irregular syllable timing."""
    if cv < RHYTHM_REGULAR_CV:
        return 0.6  # robotic
    if cv <= RHYTHM_IRREGULAR_CV:
        return 1.0 - abs(cv - EXPECTED_RHYTHM_CV) / EXPECTED_RHYTHM_CV
    return max(0.3, 1.0 - (cv - RHYTHM_IRREGULAR_CV) / RHYTHM_IRREGULAR_CV)


def score_rhythm(features: ProsodyFeatures) -> Tuple[float, RhythmMetrics]:
    """Score the coefficient of variation of per-word syllable durations.

    The CV itself is reported as the isochrony index (lower = more regular).
    """
    words = features.word_timings
    if not words:
        return 0.0, RhythmMetrics(0.0, 0.0, 0.0, "No speech detected")

    syllable_durations = [w.duration / w.syllable_count for w in words if w.syllable_count > 0]
    if not syllable_durations:
        return 0.5, RhythmMetrics(0.0, 0.0, 0.5, "Insufficient data for rhythm analysis")

    stats = summarize(syllable_durations)
    cv = stats.cv

    if cv < RHYTHM_REGULAR_CV:
        interpretation = "Speech rhythm is too regular, sounds robotic"
    elif cv <= RHYTHM_IRREGULAR_CV:
        interpretation = "Natural rhythm with appropriate variation"
    else:
        interpretation = "Irregular rhythm, consider more consistent pacing"

    return rhythm_score_for_cv(cv), RhythmMetrics(
        syllable_timing_variance=stats.variance,
        expected_variance=EXPECTED_RHYTHM_CV,
        isochrony_index=cv,
        interpretation=interpretation,
    )
