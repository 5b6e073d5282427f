"""Moving average, exponential smoothing and anomaly detection for one series.

All arithmetic runs in single precision (float32) with left-to-right
accumulation, so results carry the same rounding as a running-sum
implementation rather than a freshly recomputed mean per window.
"""
from __future__ import annotations

import logging
from typing import Iterable, List

import numpy as np

from config.anomaly import ANOMALY_METHODS, DEFAULT_METHOD, DEFAULT_THRESHOLD
from tsanalysis.core.errors import InvalidArgument

logger = logging.getLogger(__name__)


def _running_total(values: np.ndarray) -> np.ndarray:
    """Sequential float32 prefix sums (no pairwise summation)."""
    return np.add.accumulate(values, dtype=np.float32)


class SeriesAnalyzer:
    """Read-only analyzer over an ordered sequence of samples."""

    def __init__(self, data: Iterable[float]) -> None:
        items = list(data)
        # numpy would otherwise parse numeric strings
        if any(isinstance(item, (str, bytes)) for item in items):
            raise InvalidArgument("Input data must be numeric")
        try:
            values = np.array(items, dtype=np.float32)
        except (TypeError, ValueError) as exc:
            raise InvalidArgument("Input data must be numeric") from exc

        if values.size == 0:
            raise InvalidArgument("Input data cannot be empty")
        if values.ndim != 1:
            raise InvalidArgument("Input data must be one-dimensional")

        values.flags.writeable = False
        self._data = values

    def __len__(self) -> int:
        return len(self._data)

    def get_samples(self) -> List[float]:
        """Return a copy of the stored samples."""
        return self._data.tolist()

    def moving_average(self, window: int) -> List[float]:
        """
        Simple moving average over a sliding window.

        Args:
            window: Number of consecutive samples per average, 1 <= window <= len

        Returns:
            len - window + 1 averages; element i covers samples[i:i + window]
        """
        if isinstance(window, bool) or not isinstance(window, (int, np.integer)):
            raise InvalidArgument("Window size must be an integer")
        if window <= 0:
            raise InvalidArgument("Window size must be positive")
        if window > len(self._data):
            raise InvalidArgument("Window size cannot exceed data length")

        data = self._data
        n = len(data)
        with np.errstate(over="ignore", invalid="ignore"):
            first = _running_total(data[:window])[-1]
            # sum_i = sum_{i-1} + (data[i + window - 1] - data[i - 1])
            steps = data[window:] - data[:n - window]
            sums = _running_total(np.concatenate((np.array([first], dtype=np.float32), steps)))
            averages = sums / np.float32(window)
        return averages.tolist()

    def exponential_smoothing(self, alpha: float) -> List[float]:
        """
        Exponentially smoothed series.

        smoothed[0] = data[0]
        smoothed[t] = alpha * data[t] + (1 - alpha) * smoothed[t - 1]

        Args:
            alpha: Smoothing factor in [0, 1]; 1.0 returns the input unchanged

        Returns:
            Smoothed values, same length as the input
        """
        if not 0.0 <= alpha <= 1.0:
            raise InvalidArgument("Alpha must be between 0 and 1")

        data = self._data
        a = np.float32(alpha)
        keep = np.float32(1.0) - a
        smoothed = np.empty_like(data)
        smoothed[0] = prev = data[0]
        with np.errstate(over="ignore", invalid="ignore"):
            for t in range(1, len(data)):
                prev = a * data[t] + keep * prev
                smoothed[t] = prev
        return smoothed.tolist()

    def detect_anomalies(
        self,
        method: str = DEFAULT_METHOD,
        threshold: float = DEFAULT_THRESHOLD,
    ) -> List[bool]:
        """
        Flag anomalous samples.

        Args:
            method: "zscore" (distance from the mean in population std units)
                or "iqr" (outside [Q1 - t*IQR, Q3 + t*IQR])
            threshold: Z-score cutoff or IQR multiplier, not range-checked

        Returns:
            One flag per sample in original order, True marks an anomaly
        """
        if method not in ANOMALY_METHODS:
            raise InvalidArgument("Invalid anomaly detection method")

        with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
            if method == "zscore":
                flags = self._zscore_flags(np.float32(threshold))
            else:
                flags = self._iqr_flags(np.float32(threshold))

        logger.debug("%s flagged %d of %d samples", method, int(flags.sum()), len(flags))
        return flags.tolist()

    def _zscore_flags(self, threshold: np.float32) -> np.ndarray:
        data = self._data
        count = np.float32(len(data))
        mean = _running_total(data)[-1] / count
        mean_sq = _running_total(data * data)[-1] / count
        # Constant input gives std_dev == 0; IEEE division applies (0/0 is NaN, never flagged)
        std_dev = np.sqrt(mean_sq - mean * mean)
        logger.debug("zscore mean=%s std_dev=%s", mean, std_dev)
        return np.abs(data - mean) / std_dev > threshold

    def _iqr_flags(self, threshold: np.float32) -> np.ndarray:
        data = self._data
        ordered = np.sort(data)
        n = len(ordered)
        q1 = ordered[n // 4]
        q3 = ordered[3 * n // 4]
        iqr = q3 - q1
        lower = q1 - threshold * iqr
        upper = q3 + threshold * iqr
        logger.debug("iqr q1=%s q3=%s bounds=[%s, %s]", q1, q3, lower, upper)
        return (data < lower) | (data > upper)


__all__ = ["SeriesAnalyzer"]
