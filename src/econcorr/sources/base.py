"""Data source protocol, registry and shared errors."""

from __future__ import annotations

import pathlib
from typing import Callable, Dict, List, Optional, Protocol, Union, runtime_checkable

from ..config import Settings
from ..types import TimeSeries


class SourceError(RuntimeError):
    """Raised when a data source cannot supply a series."""


class SeriesParseError(ValueError):
    """Raised when a series file cannot be parsed."""

    def __init__(self, message: str, *, path: Union[str, pathlib.Path], line: int):
        self.path = str(path)
        self.line = line
        super().__init__(f"{self.path}:{self.line}: {message}")


@runtime_checkable
class SeriesSource(Protocol):
    """Protocol describing a supplier of time series.

    Sources only fetch and parse.  They do not cache, and they return the
    observations in chronological order as a :class:`~econcorr.types.TimeSeries`.
    """

    name: str

    def fetch_series(self, series_id: str, years: Optional[int] = None) -> TimeSeries:
        """Return the observations of ``series_id`` over the last ``years``
        years."""


SourceFactory = Callable[..., SeriesSource]

_registry: Dict[str, SourceFactory] = {}


def register_source(name: str, factory: SourceFactory) -> None:
    """Register ``factory`` under ``name`` in the global registry.

    ``factory`` is called with a ``settings`` keyword argument and must
    return an object implementing :class:`SeriesSource`.
    """
    if not callable(factory):
        raise TypeError("source factory must be callable")
    _registry[name] = factory


def get_source(name: str, settings: Settings | None = None) -> SeriesSource:
    """Instantiate the source registered as ``name``."""
    source = _registry[name](settings=settings)
    validate_source(source)
    return source


def available_sources() -> List[str]:
    """Return the list of registered source names."""
    return sorted(_registry)


def validate_source(source: object) -> None:
    """Validate that ``source`` satisfies the :class:`SeriesSource` protocol."""
    if not isinstance(source, SeriesSource):
        raise TypeError("Source does not implement the required protocol")
