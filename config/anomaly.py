"""Anomaly detection configuration."""
from dataclasses import dataclass
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from tsanalysis.features.series_analyzer import SeriesAnalyzer

ANOMALY_METHODS = ("zscore", "iqr")
DEFAULT_METHOD = "zscore"
DEFAULT_THRESHOLD = 3.0


@dataclass(frozen=True)
class AnomalyConfig:
    """Method and threshold for a detect_anomalies call."""
    method: str = DEFAULT_METHOD        # "zscore" or "iqr"
    threshold: float = DEFAULT_THRESHOLD  # z-score cutoff, or IQR multiplier

    def apply(self, analyzer: "SeriesAnalyzer") -> List[bool]:
        """Run anomaly detection on the analyzer with these settings."""
        return analyzer.detect_anomalies(self.method, self.threshold)
