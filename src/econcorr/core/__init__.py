"""Core algorithms and data structures for econcorr."""

from .alignment import align_series
from .engine import compute_correlation, compute_correlation_pair
from .interpretation import (
    classify_strength,
    confidence_of,
    direction_of,
    interpret,
    r_squared,
)
from .pearson import PearsonSums, accumulate_sums, pearson_r

__all__ = [
    "align_series",
    "compute_correlation",
    "compute_correlation_pair",
    "classify_strength",
    "confidence_of",
    "direction_of",
    "interpret",
    "r_squared",
    "PearsonSums",
    "accumulate_sums",
    "pearson_r",
]
