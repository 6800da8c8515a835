"""Stress: energy peaks within words relative to the utterance mean."""
from __future__ import annotations

from typing import Tuple

from pron_core.models.prosody import ProsodyFeatures, StressMetrics

from ..rules import (
    EXPECTED_STRESS_RATIO,
    STRESS_ENERGY_FACTOR,
    STRESS_RATIO_FLAT,
    STRESS_RATIO_MAX,
)


def score_stress(
    features: ProsodyFeatures,
    energy_factor: float = STRESS_ENERGY_FACTOR,
    expected_ratio: float = EXPECTED_STRESS_RATIO,
) -> Tuple[float, StressMetrics]:
    """Score how many words carry an energy peak above the utterance mean.

    A word is stressed when its loudest frame exceeds ``energy_factor``
    times the mean frame energy of the whole utterance. The threshold is
    computed once, so stress is decided here rather than during extraction.

    Args:
        features: Extracted prosody features
        energy_factor: Peak-to-mean ratio marking a stressed word (default: 1.3)
        expected_ratio: Share of words expected to be stressed (default: 0.65)

    Returns:
        Tuple of (score, metrics); 0.5 when words or energy are missing
    """
    words = features.word_timings
    contour = features.energy_contour
    if not words or not contour:
        return 0.5, StressMetrics(0, 0, 0.5, 1.0, "Insufficient data for stress analysis")

    energies = [p.energy for p in contour]
    threshold = (sum(energies) / len(energies)) * energy_factor

    stressed = 0
    for word in words:
        peak = max(
            (p.energy for p in contour if word.start <= p.time <= word.end),
            default=0.0,
        )
        if peak > threshold:
            stressed += 1

    expected = int(len(words) * expected_ratio)
    lo, hi = min(energies), max(energies)
    contrast = hi / lo if lo > 0 else 1.0
    accuracy = min(1.0, 1.0 - abs(stressed - expected) / expected) if expected > 0 else 0.0

    ratio = stressed / len(words)
    if ratio < STRESS_RATIO_FLAT:
        score = 0.5
        interpretation = "Too little stress variation, emphasize important words"
    elif ratio <= STRESS_RATIO_MAX:
        score = 1.0
        interpretation = "Good stress patterns with appropriate emphasis"
    else:
        score = 0.7
        interpretation = "Overly stressed, relax pronunciation"

    return score, StressMetrics(
        stressed_syllable_count=stressed,
        expected_stress_count=expected,
        stress_placement_accuracy=accuracy,
        energy_contrast_ratio=contrast,
        interpretation=interpretation,
    )
