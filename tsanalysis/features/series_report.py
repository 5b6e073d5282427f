"""Tabular view of a series with its moving average, smoothing and anomaly flags."""
from __future__ import annotations

from typing import Any, Dict

import numpy as np
import pandas as pd

from config.anomaly import DEFAULT_METHOD, DEFAULT_THRESHOLD
from tsanalysis.core.errors import InvalidArgument
from tsanalysis.features.series_analyzer import SeriesAnalyzer


def analyzer_from_series(series: pd.Series) -> SeriesAnalyzer:
    """Build an analyzer from a pandas Series, skipping missing values."""
    try:
        values = pd.to_numeric(series.dropna(), errors="raise")
    except (TypeError, ValueError) as exc:
        raise InvalidArgument("Input data must be numeric") from exc
    return SeriesAnalyzer(values.astype(float).tolist())


def build_report(
    analyzer: SeriesAnalyzer,
    window: int,
    alpha: float,
    method: str = DEFAULT_METHOD,
    threshold: float = DEFAULT_THRESHOLD,
) -> pd.DataFrame:
    """
    Run every analysis on the series and line the results up per sample.

    Args:
        analyzer: Series to analyze
        window: Moving average window
        alpha: Exponential smoothing factor
        method: Anomaly detection method ("zscore" or "iqr")
        threshold: Anomaly threshold for the chosen method

    Returns:
        DataFrame with columns sample, moving_average, smoothed, anomaly.
        moving_average is aligned to the last sample of each window, so the
        first window - 1 rows are NaN.
    """
    samples = analyzer.get_samples()
    averages = analyzer.moving_average(window)
    smoothed = analyzer.exponential_smoothing(alpha)
    anomalies = analyzer.detect_anomalies(method, threshold)

    padded = [np.nan] * (window - 1) + averages
    return pd.DataFrame({
        "sample": samples,
        "moving_average": padded,
        "smoothed": smoothed,
        "anomaly": anomalies,
    })


def summarize(report: pd.DataFrame) -> Dict[str, Any]:
    """Summary statistics for a report produced by build_report."""
    flagged = report.index[report["anomaly"].to_numpy(dtype=bool)]
    return {
        "count": int(len(report)),
        "mean": float(report["sample"].mean()),
        "min": float(report["sample"].min()),
        "max": float(report["sample"].max()),
        "anomaly_count": int(len(flagged)),
        "anomaly_indices": [int(i) for i in flagged],
    }


__all__ = ["analyzer_from_series", "build_report", "summarize"]
