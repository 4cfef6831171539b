import importlib
import logging
from datetime import date

import pytest

from econcorr.types import TimePoint, TimeSeries, to_point
from econcorr.utils.dates import parse_date, subtract_years
from econcorr.utils.logging import get_logger


def test_types():
    assert to_point({"date": "2020-01-01", "value": "2"}) == TimePoint("2020-01-01", 2.0)
    assert to_point(("2020-01-01", 3)) == TimePoint("2020-01-01", 3.0)
    series = TimeSeries("X", [("2020-01", 1.0), ("2020-02", 2.0)])
    assert len(series) == 2
    assert series.label == "X"
    assert series.as_mapping() == {"2020-01": 1.0, "2020-02": 2.0}
    with pytest.raises(ValueError):
        TimeSeries("X", [("2020-01", 1.0), ("2020-01", 2.0)])


def test_parse_date():
    assert parse_date("2020-03-15") == date(2020, 3, 15)
    assert parse_date("2020-03") == date(2020, 3, 1)
    assert parse_date("2020") == date(2020, 1, 1)
    assert parse_date("2020-03-15T00:00:00Z") == date(2020, 3, 15)
    with pytest.raises(ValueError):
        parse_date("bad")
    with pytest.raises(ValueError):
        parse_date("2020-13-01")


def test_subtract_years_leap_day():
    assert subtract_years(date(2024, 2, 29), 1) == date(2023, 2, 28)
    assert subtract_years(date(2024, 2, 29), 4) == date(2020, 2, 29)


def test_logging():
    logger = get_logger("test")
    logger2 = get_logger("test", level="debug")
    assert logger is logger2
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    logger.debug("debug message")


@pytest.mark.parametrize(
    "module",
    [
        "econcorr.cli",
        "econcorr.config",
        "econcorr.core.engine",
        "econcorr.sources.base",
        "econcorr.sources.files",
        "econcorr.sources.fred",
    ],
)
def test_module_docstrings(module):
    assert importlib.import_module(module).__doc__
