import pytest

from econcorr.config import Settings
from econcorr.types import TimeSeries


def make_series(series_id, pairs, name=None):
    return TimeSeries(series_id, [{"date": d, "value": v} for d, v in pairs], name=name)


@pytest.fixture
def settings(monkeypatch):
    monkeypatch.delenv("FRED_API_KEY", raising=False)
    s = Settings()
    s.fred.api_key = "test-key"
    return s


@pytest.fixture
def monthly_a():
    return make_series("A", [("2020-01", 1.0), ("2020-02", 2.0), ("2020-03", 3.0)])


@pytest.fixture
def monthly_b():
    return make_series("B", [("2020-01", 2.0), ("2020-02", 4.0), ("2020-03", 6.0)])
