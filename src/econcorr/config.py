"""Configuration utilities for econcorr.

This module defines a hierarchical configuration schema using Pydantic models.
The :class:`Settings` container groups a few specialised sub-sections such as
the FRED connection, analysis defaults, the selected data source and logging.
Instances can be populated from environment variables or from YAML/JSON files
with matching nested keys.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SectionModel(BaseModel):
    """Base model for configuration subsections that ignores unknown fields."""

    model_config = ConfigDict(extra="ignore")


# ---------------------------------------------------------------------------
# Settings schema
# ---------------------------------------------------------------------------


class FredSettings(SectionModel):
    """Connection parameters for the FRED REST API."""

    api_key: str | None = Field(default_factory=lambda: os.environ.get("FRED_API_KEY") or None)
    base_url: str = "https://api.stlouisfed.org/fred"
    timeout: float = 30.0

    @field_validator("base_url")
    @classmethod
    def _strip_slash(cls, value: str) -> str:
        return value.rstrip("/")


class AnalysisSettings(SectionModel):
    """Defaults for correlation runs."""

    default_years: int = 10
    min_sample_size: int = 3
    series_a: str = "CPIAUCSL"
    series_b: str = "FEDFUNDS"

    @field_validator("default_years", "min_sample_size")
    @classmethod
    def _non_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError("must not be negative")
        return value


class SourceSettings(SectionModel):
    """Which registered data source supplies the series."""

    name: str = "fred"


class LoggingSettings(SectionModel):
    level: str = "INFO"

    @field_validator("level", mode="before")
    @classmethod
    def _upper(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.upper()
            if not isinstance(logging.getLevelName(value), int):
                raise ValueError(f"unknown logging level: {value}")
        return value


class Settings(BaseSettings):
    """Container for all runtime configuration sections."""

    fred: FredSettings = Field(default_factory=FredSettings)
    analysis: AnalysisSettings = Field(default_factory=AnalysisSettings)
    source: SourceSettings = Field(default_factory=SourceSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_prefix="ECONCORR_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from ``ECONCORR_*`` environment variables."""

        return cls()


# ---------------------------------------------------------------------------
# Loading utilities
# ---------------------------------------------------------------------------


def load_settings(path: str | Path) -> Settings:
    """Load settings from a JSON or YAML file."""

    p = Path(path)
    text = p.read_text()
    if p.suffix.lower() in {".yaml", ".yml"}:
        data = yaml.safe_load(text) or {}
    else:
        data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError("Configuration file must define a mapping")
    return Settings.model_validate(data)
