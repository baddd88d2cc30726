"""Aggregates upload durations into summary statistics."""
import logging
import math
from typing import List, Optional

import numpy as np

from .models import StatisticsSnapshot


# Configure logging
logger = logging.getLogger(__name__)


def throughput(size_bytes: int, duration_ms: float) -> float:
    """
    Throughput reported next to each duration.

    Computed as ``size / (duration_ms * 1000.0)`` and labelled Mbps to stay
    comparable with earlier reports. This is not the textbook megabit rate
    (``size * 8 / seconds / 1e6``), which would be 8x larger.
    """
    if math.isnan(duration_ms):
        return math.nan
    if duration_ms == 0:
        return math.inf
    return size_bytes / (duration_ms * 1000.0)


class StatisticsAggregator:
    """Collects measured durations and computes mean, percentiles, min and max."""

    def __init__(self):
        self._samples: List[float] = []

    def add_sample(self, duration_millis: float) -> None:
        self._samples.append(float(duration_millis))

    @property
    def count(self) -> int:
        return len(self._samples)

    @property
    def samples(self) -> List[float]:
        return list(self._samples)

    def mean(self) -> float:
        if not self._samples:
            return math.nan
        return float(np.mean(self._samples))

    def percentile(self, p: float) -> float:
        """
        Linear-interpolated percentile of the collected durations.

        Args:
            p: Percentile between 0 and 100.

        Returns:
            The percentile, or NaN when no sample was added.
        """
        if not 0 <= p <= 100:
            raise ValueError(f"Percentile must be within [0, 100], got {p}")
        if not self._samples:
            return math.nan
        return float(np.percentile(self._samples, p))

    def min(self) -> float:
        if not self._samples:
            return math.nan
        return float(np.min(self._samples))

    def max(self) -> float:
        if not self._samples:
            return math.nan
        return float(np.max(self._samples))

    def snapshot(self) -> Optional[StatisticsSnapshot]:
        """Freeze the current aggregates; None when there is nothing to summarize."""
        if not self._samples:
            logger.warning("No measured runs to summarize")
            return None
        return StatisticsSnapshot(
            mean=self.mean(),
            p50=self.percentile(50),
            min=self.min(),
            max=self.max(),
            count=self.count,
        )
