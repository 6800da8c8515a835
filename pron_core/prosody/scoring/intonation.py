"""Intonation: pitch range, variation and contour smoothness."""
from __future__ import annotations

from typing import Sequence, Tuple

from pron_core.models.prosody import IntonationMetrics, PitchPoint, ProsodyFeatures

from ..rules import (
    INTONATION_RANGE_WEIGHT,
    INTONATION_SMOOTHNESS_WEIGHT,
    INTONATION_VARIATION_WEIGHT,
    PITCH_CV_FLAT,
    PITCH_CV_NATURAL_MAX,
    PITCH_RANGE_ABOVE,
    PITCH_RANGE_SCORES,
    SMOOTHNESS_DELTA_HZ,
)
from ..stats import summarize


def contour_smoothness(pitches: Sequence[PitchPoint]) -> float:
    """1.0 for a flat contour, falling to 0.0 as the mean frame-to-frame jump nears 50 Hz."""
    if len(pitches) < 2:
        return 1.0
    deltas = [abs(b.frequency_hz - a.frequency_hz) for a, b in zip(pitches, pitches[1:])]
    mean_delta = sum(deltas) / len(deltas)
    return max(0.0, 1.0 - mean_delta / SMOOTHNESS_DELTA_HZ)


def range_score(pitch_range: float) -> float:
    if pitch_range < PITCH_RANGE_SCORES[0][0]:
        return PITCH_RANGE_SCORES[0][1]  # monotone
    for upper, score in PITCH_RANGE_SCORES[1:]:
        if pitch_range <= upper:
            return score
    return PITCH_RANGE_ABOVE  # overly dramatic


def variation_score(cv: float) -> float:
    if cv < PITCH_CV_FLAT:
        return 0.3
    if cv <= PITCH_CV_NATURAL_MAX:
        return 1.0
    return 0.7


def score_intonation(features: ProsodyFeatures) -> Tuple[float, IntonationMetrics]:
    voiced = [p for p in features.pitch_contour if p.voiced and p.frequency_hz > 0]
    if not voiced:
        return 0.0, IntonationMetrics(0.0, 0.0, 0.0, 0.0, "No voiced speech detected")

    stats = summarize(p.frequency_hz for p in voiced)
    pitch_range = stats.maximum - stats.minimum
    smoothness = contour_smoothness(voiced)

    score = (
        range_score(pitch_range) * INTONATION_RANGE_WEIGHT
        + variation_score(stats.cv) * INTONATION_VARIATION_WEIGHT
        + smoothness * INTONATION_SMOOTHNESS_WEIGHT
    )

    if pitch_range < 30.0:
        interpretation = "Monotone intonation, add more pitch variation"
    elif pitch_range <= 80.0:
        interpretation = "Good pitch variation and natural intonation"
    else:
        interpretation = "Very wide pitch range, may sound exaggerated"

    return score, IntonationMetrics(
        pitch_range_hz=pitch_range,
        pitch_variation_coefficient=stats.cv,
        mean_pitch_hz=stats.mean,
        contour_smoothness=smoothness,
        interpretation=interpretation,
    )
