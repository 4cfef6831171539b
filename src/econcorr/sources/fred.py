"""Client for the FRED series observations endpoint.

Only the two calls needed for correlation analysis are implemented:
``/series/observations`` for the data points and ``/series`` for metadata.
FRED marks missing observations with ``"."``; those are dropped.
"""

from __future__ import annotations

import logging
import math
from datetime import date
from typing import Any, Dict, List, Optional

import requests

from ..catalog import display_name
from ..config import Settings
from ..types import TimePoint, TimeSeries
from ..utils.dates import subtract_years
from .base import SourceError, register_source

logger = logging.getLogger(__name__)

MISSING_VALUE = "."


def parse_observations(observations: List[Dict[str, Any]], series_id: str = "") -> List[TimePoint]:
    """Convert raw FRED observations into :class:`TimePoint` objects.

    Missing (``"."``), unparseable and non-finite values are skipped.
    """

    points: List[TimePoint] = []
    for observation in observations:
        raw = str(observation.get("value", "")).strip()
        if not raw or raw == MISSING_VALUE:
            continue
        try:
            value = float(raw)
        except ValueError:
            logger.debug("unable to parse datapoint %r for FRED series %s", raw, series_id)
            continue
        if not math.isfinite(value):
            logger.debug("skipping non-finite datapoint %r for FRED series %s", raw, series_id)
            continue
        points.append(TimePoint(str(observation["date"]), value))
    return points


class FredSource:
    """Fetch series from the FRED REST API using ``requests``."""

    name = "fred"

    def __init__(self, settings: Settings | None = None, *, today: Optional[date] = None) -> None:
        if settings is None:
            settings = Settings()
        self.settings = settings
        self.api_key = settings.fred.api_key
        self.base_url = settings.fred.base_url
        self.timeout = settings.fred.timeout
        self._today = today

    def today(self) -> date:
        return self._today or date.today()

    def _get(self, endpoint: str, params: Dict[str, Any]) -> Dict[str, Any]:
        if not self.api_key:
            raise SourceError(
                "FRED API key is not configured; set FRED_API_KEY or ECONCORR_FRED__API_KEY"
            )
        query = {"api_key": self.api_key, "file_type": "json", **params}
        url = f"{self.base_url}{endpoint}"
        logger.debug("GET %s series_id=%s", url, params.get("series_id"))
        try:
            response = requests.get(url, params=query, timeout=self.timeout)
        except requests.RequestException as exc:
            raise SourceError(f"request to FRED failed: {exc}") from exc

        try:
            data = response.json()
        except ValueError:
            data = None
        if not isinstance(data, dict):
            data = {}

        if response.status_code >= 400 or data.get("error_code") is not None:
            message = data.get("error_message") or f"HTTP {response.status_code}"
            raise SourceError(f"FRED API error for {params.get('series_id')}: {message}")
        return data

    def fetch_series(self, series_id: str, years: Optional[int] = None) -> TimeSeries:
        """Return observations of ``series_id`` in ascending date order.

        ``years`` defaults to ``analysis.default_years``; ``0`` requests the
        full history.
        """

        if years is None:
            years = self.settings.analysis.default_years
        end = self.today()
        params: Dict[str, Any] = {
            "series_id": series_id,
            "observation_end": end.isoformat(),
            "sort_order": "asc",
        }
        if years > 0:
            params["observation_start"] = subtract_years(end, years).isoformat()

        data = self._get("/series/observations", params)
        observations = data.get("observations")
        if observations is None:
            raise SourceError(f"No data found for series {series_id}")

        points = parse_observations(observations, series_id)
        logger.debug("fetched %d observations for %s", len(points), series_id)
        return TimeSeries(series_id, points, name=display_name(series_id))

    def fetch_series_info(self, series_id: str) -> Optional[Dict[str, Any]]:
        """Return FRED metadata (title, units, frequency, ...) or ``None``."""

        data = self._get("/series", {"series_id": series_id})
        seriess = data.get("seriess")
        if not seriess:
            return None
        return seriess[0]


register_source(FredSource.name, FredSource)
