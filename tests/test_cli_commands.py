import json

import pytest
from typer.testing import CliRunner

from econcorr.cli import app
from econcorr.config import Settings
from econcorr.sources import register_source
from econcorr.types import TimeSeries


@pytest.fixture
def runner():
    return CliRunner()


def make_files(tmp_path):
    a = tmp_path / "CPIAUCSL.csv"
    a.write_text("date,value\n2020-01-01,1\n2020-02-01,2\n2020-03-01,3\n2020-04-01,4\n")
    b = tmp_path / "FEDFUNDS.json"
    b.write_text(
        json.dumps(
            [
                {"date": "2020-02-01", "value": 4},
                {"date": "2020-03-01", "value": 6},
                {"date": "2020-04-01", "value": 8},
                {"date": "2020-05-01", "value": 10},
            ]
        )
    )
    return a, b


class MemorySource:
    name = "memory"
    data = {
        "X": TimeSeries("X", [("2020-01", 1.0), ("2020-02", 2.0), ("2020-03", 3.0)]),
        "Y": TimeSeries("Y", [("2020-01", 3.0), ("2020-02", 2.0), ("2020-03", 1.0)]),
    }

    def __init__(self, settings=None):
        self.settings = settings

    def fetch_series(self, series_id, years=None):
        from econcorr.sources import SourceError

        if series_id not in self.data:
            raise SourceError(f"unknown series {series_id}")
        return self.data[series_id]


register_source(MemorySource.name, MemorySource)


def test_compare_files(tmp_path, runner):
    a, b = make_files(tmp_path)
    result = runner.invoke(app, ["compare", str(a), str(b)], obj=Settings())
    assert result.exit_code == 0, result.output
    assert "CPI Inflation vs Fed Funds Rate" in result.stdout
    assert "Correlation coefficient: 1.000 (Strong Positive)" in result.stdout
    assert "Data points: 3" in result.stdout
    assert "Direction: Same" in result.stdout


def test_compare_json_output(tmp_path, runner):
    a, b = make_files(tmp_path)
    result = runner.invoke(app, ["compare", str(a), str(b), "--json"], obj=Settings())
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["sampleSize"] == 3
    assert [p["date"] for p in data["alignedPairs"]] == ["2020-02-01", "2020-03-01", "2020-04-01"]
    assert data["strength"] == "Strong Positive"


def test_compare_bad_file(tmp_path, runner):
    a, _ = make_files(tmp_path)
    bad = tmp_path / "bad.csv"
    bad.write_text("date,value\n2020-01-01,oops\n")
    result = runner.invoke(app, ["compare", str(a), str(bad)], obj=Settings())
    assert result.exit_code != 0


def test_compare_rejects_nan(tmp_path, runner):
    a, b = make_files(tmp_path)
    a.write_text("date,value\n2020-02-01,nan\n2020-03-01,3\n2020-04-01,4\n")
    result = runner.invoke(app, ["compare", str(a), str(b), "--json"], obj=Settings())
    assert result.exit_code == 2
    assert "NaN" not in result.stdout


def test_correlate_with_registered_source(runner):
    result = runner.invoke(app, ["correlate", "X", "Y", "--source", "memory"], obj=Settings())
    assert result.exit_code == 0, result.output
    assert "Strong Negative" in result.stdout
    assert "Direction: Opposite" in result.stdout


def test_correlate_defaults_from_overrides(runner):
    result = runner.invoke(
        app,
        [
            "--set",
            "source.name=memory",
            "--set",
            "analysis.series_a=X",
            "--set",
            "analysis.series_b=X",
            "correlate",
            "--json",
        ],
    )
    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["r"] == pytest.approx(1.0)


def test_correlate_source_failure(runner):
    result = runner.invoke(app, ["correlate", "X", "MISSING", "--source", "memory"], obj=Settings())
    assert result.exit_code == 1


def test_correlate_unknown_source(runner):
    result = runner.invoke(app, ["correlate", "X", "Y", "--source", "nope"], obj=Settings())
    assert result.exit_code != 0


def test_unknown_override_key(runner):
    result = runner.invoke(app, ["--set", "analysis.nope=1", "catalog"])
    assert result.exit_code != 0


def test_config_file(tmp_path, runner):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("source:\n  name: memory\nanalysis:\n  series_a: Y\n  series_b: Y\n")
    result = runner.invoke(app, ["--config", str(cfg), "correlate"])
    assert result.exit_code == 0, result.output
    assert "Strong Positive" in result.stdout


def test_interpret(runner):
    result = runner.invoke(app, ["interpret", "0.8"])
    assert result.exit_code == 0
    assert "Strength: Strong Positive" in result.stdout
    assert "Confidence: High" in result.stdout

    result = runner.invoke(app, ["interpret", "--", "-0.35"])
    assert result.exit_code == 0
    assert "Strength: Weak Negative" in result.stdout
    assert "Direction: Opposite" in result.stdout

    result = runner.invoke(app, ["interpret", "1.5"])
    assert result.exit_code != 0


def test_catalog(runner):
    result = runner.invoke(app, ["catalog"])
    assert result.exit_code == 0
    assert "Rates:" in result.stdout
    assert "FEDFUNDS" in result.stdout
    assert "VIX Volatility" in result.stdout
