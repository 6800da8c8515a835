"""Autocorrelation pitch tracking.

This is an approximate tracker: one autocorrelation peak per 10 ms frame and a
fixed energy/correlation voicing rule. It is not YIN or ESPS grade and will
produce octave errors on breathy or noisy speech.
"""
from __future__ import annotations

from typing import List, Tuple

import numpy as np

from pron_core.models.prosody import PitchPoint

from .framing import iter_frames
from .rules import (
    PITCH_MAX_HZ,
    PITCH_MIN_HZ,
    VOICING_CORRELATION_RATIO,
    VOICING_ENERGY_FLOOR,
)


def estimate_pitch(
    frame: np.ndarray,
    sample_rate: int,
    pitch_min_hz: float = PITCH_MIN_HZ,
    pitch_max_hz: float = PITCH_MAX_HZ,
    energy_floor: float = VOICING_ENERGY_FLOOR,
    correlation_ratio: float = VOICING_CORRELATION_RATIO,
) -> Tuple[float, bool]:
    """Estimate the pitch of a single frame.

    Searches lags corresponding to [pitch_min_hz, pitch_max_hz] for the
    highest autocorrelation. The frame is voiced when its energy exceeds
    ``energy_floor`` and the peak exceeds ``correlation_ratio`` times that
    energy.

    Returns:
        Tuple of (pitch_hz, voiced); pitch is 0.0 for unvoiced frames
    """
    min_lag = int(sample_rate / pitch_max_hz)
    max_lag = min(int(sample_rate / pitch_min_hz), len(frame) - 1)

    energy = float(np.dot(frame, frame))
    best_lag = min_lag
    peak = 0.0
    if max_lag >= min_lag:
        # full autocorrelation, non-negative lags only
        acf = np.correlate(frame, frame, mode="full")[len(frame) - 1 :]
        window = acf[min_lag : max_lag + 1]
        idx = int(np.argmax(window))
        if window[idx] > 0.0:
            peak = float(window[idx])
            best_lag = min_lag + idx

    voiced = energy > energy_floor and peak > correlation_ratio * energy
    pitch = sample_rate / best_lag if voiced and best_lag > 0 else 0.0
    return pitch, voiced


def extract_pitch_contour(
    samples: np.ndarray,
    sample_rate: int,
    frame_size: int,
    pitch_min_hz: float = PITCH_MIN_HZ,
    pitch_max_hz: float = PITCH_MAX_HZ,
    energy_floor: float = VOICING_ENERGY_FLOOR,
    correlation_ratio: float = VOICING_CORRELATION_RATIO,
) -> List[PitchPoint]:
    """Pitch estimate for every analysis frame, timestamped at the frame start."""
    points: List[PitchPoint] = []
    for start, frame in iter_frames(samples, frame_size):
        pitch, voiced = estimate_pitch(
            frame, sample_rate, pitch_min_hz, pitch_max_hz, energy_floor, correlation_ratio
        )
        points.append(PitchPoint(time=start / sample_rate, frequency_hz=pitch, voiced=voiced))
    return points
