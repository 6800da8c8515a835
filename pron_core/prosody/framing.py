"""Frame layout shared by the pitch and energy contours."""
from __future__ import annotations

from typing import Iterator, Tuple

import numpy as np


def frame_size_for(sample_rate: int, frame_size_ms: float) -> int:
    return max(2, int(sample_rate * frame_size_ms / 1000.0))


def iter_frames(samples: np.ndarray, frame_size: int) -> Iterator[Tuple[int, np.ndarray]]:
    """Yield ``(start_index, frame)`` with a hop of half a frame.

    A frame is only emitted while ``start + frame_size < len(samples)``, so a
    trailing frame that would end exactly at the buffer end is skipped.
    """
    hop = max(1, frame_size // 2)
    start = 0
    while start + frame_size < len(samples):
        yield start, samples[start : start + frame_size]
        start += hop
