from datetime import date
from unittest import mock

import pytest
import requests

from econcorr.sources import FredSource, SourceError, get_source
from econcorr.sources.fred import parse_observations


def _response(payload, status=200):
    resp = mock.Mock()
    resp.status_code = status
    resp.json.return_value = payload
    return resp


def test_parse_observations_skips_missing():
    points = parse_observations(
        [
            {"date": "2020-01-01", "value": "1.5"},
            {"date": "2020-02-01", "value": "."},
            {"date": "2020-03-01", "value": ""},
            {"date": "2020-04-01", "value": "n/a"},
            {"date": "2020-05-01", "value": "-2"},
        ]
    )
    assert [(p.date, p.value) for p in points] == [("2020-01-01", 1.5), ("2020-05-01", -2.0)]


def test_parse_observations_skips_non_finite():
    points = parse_observations(
        [
            {"date": "2020-01-01", "value": "nan"},
            {"date": "2020-02-01", "value": "3.25"},
            {"date": "2020-03-01", "value": "inf"},
            {"date": "2020-04-01", "value": "-Infinity"},
        ],
        "UNRATE",
    )
    assert [(p.date, p.value) for p in points] == [("2020-02-01", 3.25)]


@mock.patch("requests.get")
def test_fetch_series_success(mock_get, settings):
    mock_get.return_value = _response(
        {
            "observations": [
                {"date": "2020-01-01", "value": "100.0"},
                {"date": "2020-02-01", "value": "."},
                {"date": "2020-03-01", "value": "200.0"},
            ]
        }
    )
    source = FredSource(settings, today=date(2024, 2, 29))
    series = source.fetch_series("CPIAUCSL", 10)

    assert series.series_id == "CPIAUCSL"
    assert series.name == "CPI Inflation"
    assert series.dates == ["2020-01-01", "2020-03-01"]
    assert series.values == [100.0, 200.0]

    args, kwargs = mock_get.call_args
    assert args[0] == "https://api.stlouisfed.org/fred/series/observations"
    params = kwargs["params"]
    assert params["series_id"] == "CPIAUCSL"
    assert params["api_key"] == "test-key"
    assert params["file_type"] == "json"
    assert params["sort_order"] == "asc"
    assert params["observation_start"] == "2014-02-28"
    assert params["observation_end"] == "2024-02-29"
    assert kwargs["timeout"] == settings.fred.timeout


@mock.patch("requests.get")
def test_fetch_series_full_history(mock_get, settings):
    mock_get.return_value = _response({"observations": []})
    FredSource(settings, today=date(2024, 1, 1)).fetch_series("UNRATE", 0)
    params = mock_get.call_args.kwargs["params"]
    assert "observation_start" not in params


@mock.patch("requests.get")
def test_fetch_series_default_years(mock_get, settings):
    mock_get.return_value = _response({"observations": []})
    settings.analysis.default_years = 2
    FredSource(settings, today=date(2024, 6, 15)).fetch_series("UNRATE")
    assert mock_get.call_args.kwargs["params"]["observation_start"] == "2022-06-15"


@mock.patch("requests.get")
def test_fred_error_payload(mock_get, settings):
    mock_get.return_value = _response(
        {"error_code": 400, "error_message": "Bad Request.  The series does not exist."}, status=400
    )
    with pytest.raises(SourceError, match="series does not exist"):
        FredSource(settings).fetch_series("NOPE", 5)


@mock.patch("requests.get")
def test_network_failure(mock_get, settings):
    mock_get.side_effect = requests.ConnectionError("boom")
    with pytest.raises(SourceError, match="request to FRED failed"):
        FredSource(settings).fetch_series("UNRATE", 5)


@mock.patch("requests.get")
def test_missing_observations_key(mock_get, settings):
    mock_get.return_value = _response({"seriess": []})
    with pytest.raises(SourceError, match="No data found"):
        FredSource(settings).fetch_series("UNRATE", 5)


def test_missing_api_key(settings):
    settings.fred.api_key = None
    with mock.patch("requests.get") as mock_get:
        with pytest.raises(SourceError, match="API key"):
            FredSource(settings).fetch_series("UNRATE", 5)
        mock_get.assert_not_called()


@mock.patch("requests.get")
def test_fetch_series_info(mock_get, settings):
    mock_get.return_value = _response({"seriess": [{"id": "UNRATE", "title": "Unemployment Rate"}]})
    info = FredSource(settings).fetch_series_info("UNRATE")
    assert info["title"] == "Unemployment Rate"
    assert mock_get.call_args.args[0].endswith("/series")

    mock_get.return_value = _response({"seriess": []})
    assert FredSource(settings).fetch_series_info("UNRATE") is None


def test_registered(settings):
    source = get_source("fred", settings=settings)
    assert isinstance(source, FredSource)
    assert source.api_key == "test-key"
