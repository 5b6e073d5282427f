"""Pytest configuration and fixtures."""
import logging
import random
import sys
from pathlib import Path
from typing import List
import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from tsanalysis.features.series_analyzer import SeriesAnalyzer

TSA_ENV_VARS = ("TSA_WINDOW", "TSA_ALPHA", "TSA_METHOD", "TSA_THRESHOLD", "TSA_LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep TSA_* settings out of tests unless a test sets them."""
    for name in TSA_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
    logging.getLogger("tsanalysis").handlers.clear()


@pytest.fixture
def rng():
    """Seeded random generator for randomized property checks."""
    return random.Random(20241017)


@pytest.fixture
def sample_series() -> List[float]:
    """Short increasing series."""
    return [1.0, 2.0, 3.0, 4.0, 5.0]


@pytest.fixture
def spike_series() -> List[float]:
    """Flat series with one large spike at the end."""
    return [1.0] * 19 + [100.0]


@pytest.fixture
def sample_analyzer(sample_series) -> SeriesAnalyzer:
    return SeriesAnalyzer(sample_series)


@pytest.fixture
def make_series(rng):
    """Factory for random series of a given length."""
    def _make(length: int, low: float = 0.0, high: float = 100.0) -> List[float]:
        return [rng.uniform(low, high) for _ in range(length)]
    return _make
