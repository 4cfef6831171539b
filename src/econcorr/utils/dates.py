"""Utilities for parsing observation dates and trimming lookback windows."""

from __future__ import annotations

import re
from datetime import date
from typing import Optional

from ..types import TimeSeries

_DATE_RE = re.compile(r"^\s*(?P<year>\d{4})(?:-(?P<month>\d{1,2})(?:-(?P<day>\d{1,2}))?)?\s*$")


def parse_date(text: str) -> date:
    """Parse ``text`` as a calendar date.

    Accepted formats are:

    * ``YYYY-MM-DD``
    * ``YYYY-MM`` (first day of the month)
    * ``YYYY`` (first day of the year)

    Trailing time components such as ``T00:00:00`` are ignored.
    ``ValueError`` is raised on malformed input.
    """

    head = text.strip().split("T", 1)[0].split(" ", 1)[0]
    m = _DATE_RE.match(head)
    if not m:
        raise ValueError(f"Unrecognised date: {text!r}")
    year = int(m.group("year"))
    month = int(m.group("month") or 1)
    day = int(m.group("day") or 1)
    return date(year, month, day)


def subtract_years(day: date, years: int) -> date:
    """Return ``day`` moved back by ``years`` calendar years.

    February 29 falls back to February 28 in non-leap target years.
    """

    try:
        return day.replace(year=day.year - years)
    except ValueError:
        return day.replace(year=day.year - years, day=28)


def trim_to_years(
    series: TimeSeries, years: Optional[int], *, reference: Optional[date] = None
) -> TimeSeries:
    """Keep the points of ``series`` within ``years`` of ``reference``.

    ``reference`` defaults to the latest date in the series.  ``years`` of
    ``None`` or ``<= 0`` keeps every point.  Points whose date cannot be
    parsed are kept; ordering is preserved.
    """

    if not years or years <= 0 or not series.points:
        return series

    parsed = {}
    for point in series.points:
        try:
            parsed[point.date] = parse_date(point.date)
        except ValueError:
            continue
    if reference is None:
        if not parsed:
            return series
        reference = max(parsed.values())

    start = subtract_years(reference, years)
    kept = [
        p for p in series.points if p.date not in parsed or parsed[p.date] >= start
    ]
    return TimeSeries(series.series_id, kept, name=series.name)
