# src/geoclass/config/settings.py
"""
Application settings (Pydantic).

Settings are loaded from `src/geoclass/config/defaults.yaml`, then optionally overridden by:
- an external YAML file via `GEOCLASS_CONFIG_PATH` (replaces the packaged defaults)
- environment variables (`GEOCLASS_LOG_LEVEL`, `GEOCLASS_LANGUAGE`, `GEOCLASS_UNIT`)

Design rule:
- Defaults that callers may want to change (unit, language, search limits) live in
  YAML; the geometry functions themselves take explicit arguments.
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, field_validator

from geoclass.core.env import load_dotenv_if_present
from geoclass.core.units import Unit


def _read_package_yaml(filename: str) -> dict[str, Any]:
    """Read a YAML file packaged inside `geoclass.config`."""
    text = resources.files("geoclass.config").joinpath(filename).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {filename}; expected a mapping.")
    return data


def _read_yaml_file(path: str | Path) -> dict[str, Any]:
    """Read a YAML file from disk and return its mapping root."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {path}; expected a mapping.")
    return data


class AppSettings(BaseModel):
    name: str = "geoclass"
    log_level: str = "INFO"
    language: Literal["en", "de"] = "en"
    orientation_form: Literal["short", "long"] = "short"

    @field_validator("language", "orientation_form", mode="before")
    @classmethod
    def _lower(cls, value: Any) -> Any:
        return value.strip().lower() if isinstance(value, str) else value


class UnitSettings(BaseModel):
    default: Unit = Unit.KILOMETER

    @field_validator("default", mode="before")
    @classmethod
    def _parse_unit(cls, value: Any) -> Unit:
        # Accept labels ("miles"), names ("nautical_mile") and legacy codes (2).
        return Unit.parse(value)


class SearchSettings(BaseModel):
    max_radius: float = Field(100, gt=0)
    max_hits: int = Field(50, ge=0)
    cell_size_deg: float = Field(1.0, gt=0, le=90)


class HttpSettings(BaseModel):
    timeout_seconds: float = Field(15, gt=0)
    user_agent: str = "geoclass/0.1.0 (+https://local)"


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    units: UnitSettings = Field(default_factory=UnitSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)
    http: HttpSettings = Field(default_factory=HttpSettings)


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay selected environment variables onto raw settings payload."""
    load_dotenv_if_present()
    data = dict(data)

    log_level = os.getenv("GEOCLASS_LOG_LEVEL")
    if log_level:
        data.setdefault("app", {})["log_level"] = log_level

    language = os.getenv("GEOCLASS_LANGUAGE")
    if language:
        data.setdefault("app", {})["language"] = language

    unit = os.getenv("GEOCLASS_UNIT")
    if unit:
        data.setdefault("units", {})["default"] = unit

    return data


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    load_dotenv_if_present()
    config_path = os.getenv("GEOCLASS_CONFIG_PATH")
    raw = _read_yaml_file(config_path) if config_path else _read_package_yaml("defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def get_logging_config() -> dict[str, Any]:
    """Load logging configuration (cached)."""
    return _read_package_yaml("logging.yaml")
