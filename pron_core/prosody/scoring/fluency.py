"""Fluency: pause frequency, pause length and filled pauses."""
from __future__ import annotations

from typing import Tuple

from pron_core.models.prosody import FluencyMetrics, ProsodyFeatures

from ..rules import (
    FLUENCY_DURATION_WEIGHT,
    FLUENCY_FILLED_WEIGHT,
    FLUENCY_FREQUENCY_WEIGHT,
    LONG_PAUSE_THRESHOLD_SEC,
)


def _frequency_score(pauses_per_minute: float) -> float:
    if pauses_per_minute < 5.0:
        return 1.0
    if pauses_per_minute <= 15.0:
        return 0.9
    if pauses_per_minute <= 30.0:
        return 0.7
    return 0.5


def _duration_score(average_pause: float) -> float:
    if average_pause < 0.3:
        return 1.0
    if average_pause <= 0.6:
        return 0.8
    return 0.6


def _filled_score(filled: int, total: int) -> float:
    if filled == 0:
        return 1.0
    if filled <= total * 0.2:
        return 0.8
    return 0.6


def score_fluency(
    features: ProsodyFeatures, long_pause_threshold: float = LONG_PAUSE_THRESHOLD_SEC
) -> Tuple[float, FluencyMetrics]:
    pauses = features.pause_regions
    duration = features.duration

    count = len(pauses)
    long_count = sum(1 for p in pauses if p.duration > long_pause_threshold)
    filled_count = sum(1 for p in pauses if p.filled)
    average = sum(p.duration for p in pauses) / count if count else 0.0
    rate = count / duration * 60.0 if duration > 0 else 0.0

    score = (
        _frequency_score(rate) * FLUENCY_FREQUENCY_WEIGHT
        + _duration_score(average) * FLUENCY_DURATION_WEIGHT
        + _filled_score(filled_count, count) * FLUENCY_FILLED_WEIGHT
    )

    if rate < 10.0 and filled_count == 0:
        interpretation = "Excellent fluency with smooth delivery"
    elif rate < 20.0:
        interpretation = "Good fluency with natural pauses"
    else:
        interpretation = "Choppy delivery with frequent pauses, practice for smoother speech"

    return score, FluencyMetrics(
        pause_count=count,
        long_pause_count=long_count,
        filled_pause_count=filled_count,
        average_pause_duration=average,
        disfluency_rate=rate,
        interpretation=interpretation,
    )
