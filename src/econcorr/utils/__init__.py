"""Small shared helpers."""

from .logging import get_logger
from .dates import parse_date, trim_to_years

__all__ = ["get_logger", "parse_date", "trim_to_years"]
