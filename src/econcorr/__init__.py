"""Time-series alignment and correlation analysis for FRED indicators."""

from .config import Settings, load_settings
from .core import align_series, compute_correlation, interpret, pearson_r
from .types import (
    AlignedPair,
    Confidence,
    CorrelationResult,
    Direction,
    Interpretation,
    Strength,
    TimePoint,
    TimeSeries,
)

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "load_settings",
    "align_series",
    "compute_correlation",
    "interpret",
    "pearson_r",
    "AlignedPair",
    "Confidence",
    "CorrelationResult",
    "Direction",
    "Interpretation",
    "Strength",
    "TimePoint",
    "TimeSeries",
]
