"""Command line interface for econcorr using Typer."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional

import json
import logging

import typer
from pydantic import ValidationError

from ._typer import bad_parameter
from .catalog import display_name, series_by_group
from .config import Settings, load_settings
from .core import compute_correlation, compute_correlation_pair, confidence_of, interpret
from .sources import SeriesParseError, SourceError, get_source
from .types import CorrelationResult
from .utils.logging import get_logger

app = typer.Typer(help="Correlation analysis for FRED economic indicators")
logger = logging.getLogger(__name__)


def _parse_override_value(raw: str) -> object:
    lower = raw.lower()
    if lower in {"true", "false"}:
        return lower == "true"
    if lower in {"null", "none"}:
        return None
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError:
        pass
    if raw.startswith("[") or raw.startswith("{"):
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            raise typer.BadParameter(f"invalid JSON override value: {raw}") from None
    return raw


def _ensure_path(settings: Settings, keys: List[str]) -> None:
    current: object = settings
    for key in keys[:-1]:
        if not hasattr(current, key):
            raise typer.BadParameter(f"unknown configuration key: {'.'.join(keys)}")
        current = getattr(current, key)
    if not hasattr(current, keys[-1]):
        raise typer.BadParameter(f"unknown configuration key: {'.'.join(keys)}")


def _apply_override(data: Dict[str, object], keys: List[str], value: object) -> None:
    target = data
    for key in keys[:-1]:
        existing = target.get(key)
        if not isinstance(existing, dict):
            existing = {}
            target[key] = existing
        target = existing
    target[keys[-1]] = value


@app.callback()
def init(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        dir_okay=False,
        file_okay=True,
        exists=False,
        help="Path to a YAML or JSON configuration file.",
    ),
    set_overrides: List[str] = typer.Option(
        [],
        "--set",
        help="Override configuration values using dotted paths, e.g. analysis.default_years=5",
    ),
) -> None:
    """Initialise the Typer context with validated settings."""

    if isinstance(ctx.obj, Settings) and config is None and not set_overrides:
        settings = ctx.obj
    else:
        if config is not None and not config.exists():
            raise typer.BadParameter(f"configuration file not found: {config}")

        try:
            settings = load_settings(config) if config else Settings()
        except (FileNotFoundError, TypeError, json.JSONDecodeError, ValidationError) as exc:
            raise typer.BadParameter(f"failed to load configuration: {exc}") from exc

    if set_overrides:
        data = settings.model_dump()
        for override in set_overrides:
            if "=" not in override:
                raise typer.BadParameter(
                    "overrides must be of the form --set section.key=value"
                )
            key, raw_value = override.split("=", 1)
            if not key:
                raise typer.BadParameter("override key cannot be empty")
            keys = key.split(".")
            _ensure_path(settings, keys)
            value = _parse_override_value(raw_value)
            _apply_override(data, keys, value)
        try:
            settings = Settings.model_validate(data)
        except ValidationError as exc:
            raise typer.BadParameter(f"invalid configuration override: {exc}") from exc

    logging.getLogger("econcorr").setLevel(settings.logging.level)
    ctx.obj = settings


def _echo_result(
    result: CorrelationResult,
    label_a: str,
    label_b: str,
    *,
    as_json: bool,
    min_sample_size: int,
) -> None:
    if as_json:
        payload = {"seriesA": label_a, "seriesB": label_b, **result.to_dict()}
        typer.echo(json.dumps(payload, indent=2))
        return

    typer.echo(f"{label_a} vs {label_b}")
    typer.echo(f"Correlation coefficient: {result.r:.3f} ({result.strength.value})")
    typer.echo(result.description)
    typer.echo(f"Data points: {result.sample_size}")
    typer.echo(f"R-squared: {result.r_squared:.3f}")
    typer.echo(f"Direction: {result.direction.value}")
    typer.echo(f"Confidence: {result.confidence.value}")
    if result.insufficient_data:
        typer.secho(
            "Warning: fewer than two common dates; no correlation could be computed",
            err=True,
        )
    elif result.sample_size < min_sample_size:
        typer.secho(
            f"Warning: only {result.sample_size} common dates; the coefficient is not meaningful",
            err=True,
        )


@app.command()
def correlate(
    ctx: typer.Context,
    series_a: Optional[str] = typer.Argument(None, help="First series id (default from config)"),
    series_b: Optional[str] = typer.Argument(None, help="Second series id (default from config)"),
    years: Optional[int] = typer.Option(None, "--years", "-y", help="Lookback window in years"),
    source: Optional[str] = typer.Option(None, "--source", "-s", help="Registered data source name"),
    as_json: bool = typer.Option(False, "--json", help="Print the full result as JSON"),
    debug: bool = typer.Option(False, "--debug", help="Show tracebacks on failure"),
) -> None:
    """Fetch two indicators and report how strongly they move together.

    Both series are pulled through the configured data source (FRED by
    default) over the same lookback window, aligned on their common dates
    and correlated.
    """

    cfg: Settings = ctx.obj
    series_a = series_a or cfg.analysis.series_a
    series_b = series_b or cfg.analysis.series_b
    if years is None:
        years = cfg.analysis.default_years
    if years < 0:
        bad_parameter("years must not be negative", param_hint="--years")

    source_name = source or cfg.source.name
    try:
        data_source = get_source(source_name, settings=cfg)
    except KeyError:
        bad_parameter(f"unknown data source: {source_name}", param_hint="--source")

    try:
        result = compute_correlation_pair(data_source, series_a, series_b, years, settings=cfg)
    except (SourceError, SeriesParseError) as exc:
        msg = f"Failed to correlate {series_a} and {series_b}: {exc}"
        if debug:
            logger.exception(msg)
            raise
        typer.secho(msg, err=True)
        raise typer.Exit(code=1)

    _echo_result(
        result,
        display_name(series_a),
        display_name(series_b),
        as_json=as_json,
        min_sample_size=cfg.analysis.min_sample_size,
    )


@app.command()
def compare(
    ctx: typer.Context,
    path_a: Path = typer.Argument(..., exists=True, file_okay=True, dir_okay=False),
    path_b: Path = typer.Argument(..., exists=True, file_okay=True, dir_okay=False),
    years: int = typer.Option(0, "--years", "-y", help="Trim to the last N years (0 keeps all)"),
    as_json: bool = typer.Option(False, "--json", help="Print the full result as JSON"),
) -> None:
    """Correlate two series stored in local CSV or JSON files."""

    cfg: Settings = ctx.obj
    files = get_source("file", settings=cfg)
    try:
        series_a = files.fetch_series(str(path_a), years)
        series_b = files.fetch_series(str(path_b), years)
    except (SourceError, SeriesParseError) as exc:
        bad_parameter(str(exc))

    result = compute_correlation(series_a, series_b, settings=cfg)
    _echo_result(
        result,
        series_a.label,
        series_b.label,
        as_json=as_json,
        min_sample_size=cfg.analysis.min_sample_size,
    )


@app.command("interpret")
def interpret_r(
    r: float = typer.Argument(..., help="Correlation coefficient in [-1, 1]"),
) -> None:
    """Describe a correlation coefficient the way the summary cards do."""

    if not -1.0 <= r <= 1.0:
        bad_parameter("coefficient must lie in [-1, 1]", param_hint="R")
    interpretation = interpret(r)
    typer.echo(f"Strength: {interpretation.strength.value}")
    typer.echo(f"Direction: {interpretation.direction.value}")
    typer.echo(f"Confidence: {confidence_of(r).value}")
    typer.echo(interpretation.description)


@app.command()
def catalog() -> None:
    """List the indicators offered for correlation analysis."""

    for group, entries in series_by_group().items():
        typer.echo(f"{group}:")
        for info in entries:
            typer.echo(f"  {info.id:<14}{info.name}")


def main() -> None:
    """Execute the Typer application."""

    get_logger("econcorr")
    app()


if __name__ == "__main__":
    main()
