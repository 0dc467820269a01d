"""Configuration helpers for environment settings and YAML files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core import SumSquaresError

DEFAULTS: dict[str, Any] = {
    "bound": 10,
    "width": None,
    "log_level": "INFO",
}


class ConfigError(SumSquaresError):
    pass


def load_config(path: str | Path | None, overrides: dict[str, Any] | None = None) -> dict[str, Any]:
    """Read *path* as YAML and layer *overrides* on top.

    Only keys present in the file or in *overrides* are returned, so the
    remaining fields still fall back to the environment and then to
    ``DEFAULTS``.
    """

    config: dict[str, Any] = {}
    if path:
        with Path(path).open("r", encoding="utf-8") as fh:
            file_cfg = yaml.safe_load(fh) or {}
        if not isinstance(file_cfg, dict):
            raise ConfigError(f"{path}: expected a mapping at the top level")
        bad_keys = [key for key in file_cfg if not isinstance(key, str)]
        if bad_keys:
            raise ConfigError(f"{path}: keys must be strings, got {bad_keys!r}")
        unknown = sorted(set(file_cfg) - set(DEFAULTS))
        if unknown:
            raise ConfigError(f"{path}: unknown keys {', '.join(unknown)}")
        config = dict(file_cfg)
    return {**config, **(overrides or {})}


class SumSquaresSettings(BaseSettings):
    """Settings resolved from keyword arguments, the environment and ``.env``."""

    model_config = SettingsConfigDict(env_prefix="SUMSQUARES_", env_file=".env", case_sensitive=False, extra="ignore")

    bound: int = Field(default=DEFAULTS["bound"])
    width: int | None = Field(default=DEFAULTS["width"])
    log_level: str = Field(default=DEFAULTS["log_level"])

    @field_validator("width")
    @classmethod
    def _width_has_sign_bit(cls, value: int | None) -> int | None:
        if value is not None and value < 2:
            raise ValueError("width must be at least 2 bits")
        return value

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level


def load_settings(**overrides: Any) -> SumSquaresSettings:
    """Return settings with *overrides* taking precedence over the environment."""

    return SumSquaresSettings(**overrides)
