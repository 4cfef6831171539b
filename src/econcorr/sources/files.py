# src/econcorr/sources/files.py
"""Reader for series stored in local files.

Supports:
A) CSV with header:
   date,value          (extra columns ignored; the first column containing
                        "date" is the date, "value" or the first other
                        column is the value)

B) JSON records:
   [{"date": "2020-01-01", "value": 1.5}, ...]

C) JSON objects wrapping the records under ``data`` or ``observations``
   (FRED responses and dashboard exports), optionally naming the series via
   ``series``/``name``.

Blank values and FRED's ``"."`` missing marker are skipped.
"""

from __future__ import annotations

import csv
import json
import logging
import math
import pathlib
from typing import Any, Iterator, List, Optional, Tuple, Union

from ..catalog import display_name
from ..config import Settings
from ..types import TimePoint, TimeSeries
from ..utils.dates import trim_to_years
from .base import SeriesParseError, SourceError, register_source

logger = logging.getLogger(__name__)

_MISSING = {"", "."}


def _pick_columns(headers: List[str]) -> Tuple[int, int]:
    lower = [h.strip().lstrip("\ufeff").lower() for h in headers]
    date_idx = next((i for i, name in enumerate(lower) if "date" in name), 0)
    value_idx = next(
        (i for i, name in enumerate(lower) if name == "value" and i != date_idx),
        next((i for i in range(len(lower)) if i != date_idx), -1),
    )
    return date_idx, value_idx


def _read_csv(path: pathlib.Path) -> Iterator[TimePoint]:
    with open(path, "r", encoding="utf8", newline="") as fh:
        reader = csv.reader(fh)
        headers: Optional[List[str]] = None
        date_idx = value_idx = -1
        for lineno, row in enumerate(reader, start=1):
            if not row or not any(cell.strip() for cell in row) or row[0].lstrip().startswith("#"):
                continue
            if headers is None:
                headers = row
                date_idx, value_idx = _pick_columns(headers)
                if value_idx < 0:
                    raise SeriesParseError(
                        "CSV header must include a date and a value column",
                        path=path,
                        line=lineno,
                    )
                continue
            if max(date_idx, value_idx) >= len(row):
                raise SeriesParseError(
                    f"expected at least {max(date_idx, value_idx) + 1} columns",
                    path=path,
                    line=lineno,
                )
            date = row[date_idx].strip()
            raw = row[value_idx].strip()
            if not date:
                raise SeriesParseError("missing date", path=path, line=lineno)
            if raw in _MISSING:
                continue
            try:
                value = float(raw.replace(",", ""))
            except ValueError as exc:
                raise SeriesParseError(f"invalid value {raw!r}", path=path, line=lineno) from exc
            if not math.isfinite(value):
                raise SeriesParseError(f"non-finite value {raw!r}", path=path, line=lineno)
            yield TimePoint(date, value)


def _records_from_json(obj: Any, path: pathlib.Path) -> Tuple[List[Any], Optional[str]]:
    if isinstance(obj, list):
        return obj, None
    if isinstance(obj, dict):
        for key in ("data", "observations"):
            if isinstance(obj.get(key), list):
                name = obj.get("series") or obj.get("name")
                return obj[key], str(name) if name else None
    raise SeriesParseError(
        "JSON must be a list of records or an object with a 'data' list", path=path, line=1
    )


def _read_json(path: pathlib.Path) -> Tuple[List[TimePoint], Optional[str]]:
    with open(path, "r", encoding="utf8") as fh:
        try:
            obj = json.load(fh)
        except json.JSONDecodeError as exc:
            raise SeriesParseError(exc.msg, path=path, line=exc.lineno) from exc
    records, name = _records_from_json(obj, path)
    points: List[TimePoint] = []
    for index, record in enumerate(records):
        if not isinstance(record, dict) or "date" not in record:
            raise SeriesParseError(f"record {index} has no 'date' field", path=path, line=1)
        raw = record.get("value")
        if raw is None or (isinstance(raw, str) and raw.strip() in _MISSING):
            continue
        try:
            value = float(raw)
        except (TypeError, ValueError) as exc:
            raise SeriesParseError(
                f"invalid value {raw!r} in record {index}", path=path, line=1
            ) from exc
        if not math.isfinite(value):
            raise SeriesParseError(
                f"non-finite value {raw!r} in record {index}", path=path, line=1
            )
        points.append(TimePoint(str(record["date"]), value))
    return points, name


def read_series(path: Union[str, pathlib.Path], *, series_id: Optional[str] = None) -> TimeSeries:
    """Load a :class:`TimeSeries` from a CSV or JSON file.

    ``series_id`` defaults to the file stem.  Duplicate dates raise
    :class:`SeriesParseError`.
    """
    p = pathlib.Path(path)
    sid = series_id or p.stem
    suffix = p.suffix.lower()
    if suffix == ".csv":
        points, name = list(_read_csv(p)), None
    elif suffix == ".json":
        points, name = _read_json(p)
    else:
        raise SeriesParseError(f"unsupported series file format: {p.suffix!r}", path=p, line=0)

    try:
        return TimeSeries(sid, points, name=name or display_name(sid))
    except ValueError as exc:
        raise SeriesParseError(str(exc), path=p, line=0) from exc


class FileSource:
    """Series source reading local CSV/JSON files; ``series_id`` is a path."""

    name = "file"

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or Settings()

    def fetch_series(self, series_id: str, years: Optional[int] = None) -> TimeSeries:
        path = pathlib.Path(series_id)
        if not path.is_file():
            raise SourceError(f"series file not found: {path}")
        series = read_series(path)
        logger.debug("read %d observations from %s", len(series), path)
        return trim_to_years(series, years)


register_source(FileSource.name, FileSource)
