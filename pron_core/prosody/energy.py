"""Short-time energy contour."""
from __future__ import annotations

from typing import List

import numpy as np

from pron_core.models.prosody import EnergyPoint

from .framing import iter_frames


def extract_energy_contour(
    samples: np.ndarray, sample_rate: int, frame_size: int
) -> List[EnergyPoint]:
    """RMS amplitude of every analysis frame, timestamped at the frame start."""
    return [
        EnergyPoint(time=start / sample_rate, energy=float(np.sqrt(np.mean(frame**2))))
        for start, frame in iter_frames(samples, frame_size)
    ]
