"""Data sources supplying time series to the correlation engine."""

from importlib import import_module

from .base import (
    SeriesParseError,
    SeriesSource,
    SourceError,
    available_sources,
    get_source,
    register_source,
    validate_source,
)

# Import source modules to ensure registration
for _name in ["fred", "files"]:
    import_module(f".{_name}", __name__)

from .files import FileSource, read_series  # noqa: E402
from .fred import FredSource  # noqa: E402

__all__ = [
    "SeriesParseError",
    "SeriesSource",
    "SourceError",
    "available_sources",
    "get_source",
    "register_source",
    "validate_source",
    "FileSource",
    "FredSource",
    "read_series",
]
