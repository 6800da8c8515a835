"""Immutable configuration for feature extraction and prosody scoring."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet

from . import rules


@dataclass(frozen=True)
class ProsodyConfig:
    """Thresholds passed explicitly into extraction and scoring.

    Defaults come from :mod:`pron_core.prosody.rules`. ``stress_energy_factor``
    and ``expected_stress_ratio`` in particular are uncalibrated and are the
    usual candidates for tuning.
    """
    frame_size_ms: float = rules.FRAME_SIZE_MS
    pitch_min_hz: float = rules.PITCH_MIN_HZ
    pitch_max_hz: float = rules.PITCH_MAX_HZ
    voicing_energy_floor: float = rules.VOICING_ENERGY_FLOOR
    voicing_correlation_ratio: float = rules.VOICING_CORRELATION_RATIO
    pause_threshold_sec: float = rules.PAUSE_THRESHOLD_SEC
    filled_pause_words: FrozenSet[str] = field(default=rules.FILLED_PAUSE_WORDS)
    long_pause_threshold_sec: float = rules.LONG_PAUSE_THRESHOLD_SEC
    stress_energy_factor: float = rules.STRESS_ENERGY_FACTOR
    expected_stress_ratio: float = rules.EXPECTED_STRESS_RATIO
    optimal_wpm_min: float = rules.OPTIMAL_WPM_MIN
    optimal_wpm_max: float = rules.OPTIMAL_WPM_MAX
    rhythm_weight: float = rules.RHYTHM_WEIGHT
    intonation_weight: float = rules.INTONATION_WEIGHT
    stress_weight: float = rules.STRESS_WEIGHT
    pacing_weight: float = rules.PACING_WEIGHT
    fluency_weight: float = rules.FLUENCY_WEIGHT
