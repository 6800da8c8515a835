"""One-pass summary statistics."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class RunningStats:
    count: int
    mean: float
    variance: float
    minimum: float
    maximum: float

    @property
    def std(self) -> float:
        return math.sqrt(self.variance)

    @property
    def cv(self) -> float:
        """Coefficient of variation; 0.0 when the mean is not positive."""
        return self.std / self.mean if self.mean > 0 else 0.0


def summarize(values: Iterable[float]) -> RunningStats:
    """Mean, population variance, min and max from a single pass.

    Uses a sum / sum-of-squares accumulator; the variance is clamped at 0 to
    absorb floating-point cancellation.
    """
    count = 0
    total = 0.0
    total_sq = 0.0
    lo = math.inf
    hi = -math.inf
    for v in values:
        count += 1
        total += v
        total_sq += v * v
        if v < lo:
            lo = v
        if v > hi:
            hi = v
    if count == 0:
        return RunningStats(0, 0.0, 0.0, 0.0, 0.0)
    mean = total / count
    variance = max(0.0, total_sq / count - mean * mean)
    return RunningStats(count, mean, variance, lo, hi)
