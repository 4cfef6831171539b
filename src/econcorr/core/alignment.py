"""Utilities for aligning two indicator timelines on their common dates."""

from __future__ import annotations

from typing import Iterable, List, Union

from ..types import AlignedPair, PointLike, TimeSeries, to_point

SeriesLike = Union[TimeSeries, Iterable[PointLike]]


def _points(series: SeriesLike):
    if isinstance(series, TimeSeries):
        return series.points
    return [to_point(item) for item in series]


def align_series(series_a: SeriesLike, series_b: SeriesLike) -> List[AlignedPair]:
    """Join ``series_a`` and ``series_b`` on exact date strings.

    Parameters
    ----------
    series_a:
        Series whose order drives the output.  Points without a counterpart
        in ``series_b`` are dropped.
    series_b:
        Series used as a date lookup.  Points that only exist here are never
        visited.

    Returns
    -------
    list of AlignedPair
        One pair per date present in both series, in ``series_a`` order.
        Empty when either input is empty or no date is shared.
    """

    points_a = _points(series_a)
    points_b = _points(series_b)
    if not points_a or not points_b:
        return []

    lookup = {p.date: p.value for p in points_b}
    aligned: List[AlignedPair] = []
    for point in points_a:
        other = lookup.get(point.date)
        if other is not None:
            aligned.append(AlignedPair(point.date, point.value, other))
    return aligned
