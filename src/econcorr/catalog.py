"""Indicators offered for correlation analysis.

Each entry pairs a FRED series identifier with a short display name and the
topical group it is listed under.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional


@dataclass(frozen=True)
class SeriesInfo:
    id: str
    name: str
    group: str


CORRELATION_SERIES: List[SeriesInfo] = [
    SeriesInfo("CPIAUCSL", "CPI Inflation", "Prices"),
    SeriesInfo("FEDFUNDS", "Fed Funds Rate", "Rates"),
    SeriesInfo("DGS10", "10-Year Treasury", "Rates"),
    SeriesInfo("UNRATE", "Unemployment Rate", "Employment"),
    SeriesInfo("GDPC1", "Real GDP", "Growth"),
    SeriesInfo("CSUSHPISA", "Home Prices", "Housing"),
    SeriesInfo("MORTGAGE30US", "30-Year Mortgage", "Housing"),
    SeriesInfo("UMCSENT", "Consumer Sentiment", "Consumer"),
    SeriesInfo("SP500", "S&P 500", "Markets"),
    SeriesInfo("VIXCLS", "VIX Volatility", "Markets"),
    SeriesInfo("T10Y2Y", "Yield Curve (10Y-2Y)", "Rates"),
    SeriesInfo("PAYEMS", "Nonfarm Payrolls", "Employment"),
]

DEFAULT_PAIR = ("CPIAUCSL", "FEDFUNDS")
DEFAULT_YEARS = 10
TIME_RANGES = (2, 5, 10, 20)

_BY_ID: Dict[str, SeriesInfo] = {info.id: info for info in CORRELATION_SERIES}


def get_series_info(series_id: str) -> Optional[SeriesInfo]:
    """Look up ``series_id`` case-insensitively; ``None`` if not listed."""

    return _BY_ID.get(series_id.strip().upper())


def display_name(series_id: str) -> str:
    info = get_series_info(series_id)
    return info.name if info else series_id


def series_by_group() -> Dict[str, List[SeriesInfo]]:
    """Group the catalog by topic, preserving listing order."""

    groups: Dict[str, List[SeriesInfo]] = {}
    for info in CORRELATION_SERIES:
        groups.setdefault(info.group, []).append(info)
    return groups
