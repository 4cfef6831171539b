"""Correlation engine tying alignment, Pearson and interpretation together."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from ..catalog import DEFAULT_YEARS
from ..config import Settings
from ..types import CorrelationResult
from .alignment import SeriesLike, align_series
from .interpretation import confidence_of, interpret, r_squared
from .pearson import pearson_r

if TYPE_CHECKING:  # pragma: no cover
    from ..sources import SeriesSource

logger = logging.getLogger(__name__)

DEFAULT_MIN_SAMPLE_SIZE = 3


def compute_correlation(
    series_a: SeriesLike,
    series_b: SeriesLike,
    *,
    settings: Settings | None = None,
) -> CorrelationResult:
    """Correlate two series over their common dates.

    Parameters
    ----------
    series_a, series_b:
        :class:`~econcorr.types.TimeSeries` objects or plain iterables of
        ``{date, value}`` points.  ``series_a`` drives the output order.
    settings:
        Optional :class:`~econcorr.config.Settings`; only
        ``analysis.min_sample_size`` is consulted, to decide when to warn
        about small samples.  Without it :data:`DEFAULT_MIN_SAMPLE_SIZE` is
        used and the environment is never read.

    Returns
    -------
    CorrelationResult
        Aligned pairs, the coefficient, its interpretation and the derived
        display fields.  Empty or degenerate inputs yield ``r == 0`` and the
        "No Correlation" labels instead of an error.
    """

    min_sample_size = (
        settings.analysis.min_sample_size if settings is not None else DEFAULT_MIN_SAMPLE_SIZE
    )

    pairs = align_series(series_a, series_b)
    n = len(pairs)
    r = pearson_r([p.value1 for p in pairs], [p.value2 for p in pairs])
    logger.debug("aligned %d common dates, r=%.6f", n, r)

    if n < min_sample_size:
        logger.warning(
            "only %d aligned observations; the coefficient is not meaningful below %d",
            n,
            min_sample_size,
        )

    interpretation = interpret(r)
    return CorrelationResult(
        aligned_pairs=pairs,
        r=r,
        sample_size=n,
        r_squared=r_squared(r),
        direction=interpretation.direction,
        strength=interpretation.strength,
        description=interpretation.description,
        confidence=confidence_of(r),
        insufficient_data=n < 2,
    )


def compute_correlation_pair(
    source: "SeriesSource",
    series_id_a: str,
    series_id_b: str,
    years: Optional[int] = None,
    *,
    settings: Settings | None = None,
) -> CorrelationResult:
    """Fetch two series from ``source`` and correlate them.

    ``years`` defaults to ``settings.analysis.default_years``, or to
    :data:`~econcorr.catalog.DEFAULT_YEARS` without settings.  Errors raised
    by the source propagate unchanged.
    """

    if years is None:
        years = settings.analysis.default_years if settings is not None else DEFAULT_YEARS

    logger.debug("fetching %s and %s from %s over %s years", series_id_a, series_id_b, source.name, years)
    series_a = source.fetch_series(series_id_a, years)
    series_b = source.fetch_series(series_id_b, years)
    return compute_correlation(series_a, series_b, settings=settings)
