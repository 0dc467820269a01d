from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from sumsquares.config import DEFAULTS, ConfigError, load_config, load_settings


def test_defaults() -> None:
    settings = load_settings()
    assert settings.bound == DEFAULTS["bound"] == 10
    assert settings.width is None
    assert settings.log_level == "INFO"


def test_environment_and_override_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SUMSQUARES_BOUND", "7")
    monkeypatch.setenv("SUMSQUARES_WIDTH", "32")
    settings = load_settings()
    assert settings.bound == 7
    assert settings.width == 32

    settings = load_settings(bound=3)
    assert settings.bound == 3
    assert settings.width == 32


def test_dotenv_file_is_read(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("SUMSQUARES_BOUND=4\n", encoding="utf-8")
    assert load_settings().bound == 4


def test_load_config_merges_file_and_overrides(tmp_path: Path) -> None:
    path = tmp_path / "cfg.yaml"
    path.write_text("bound: 20\nwidth: 16\nlog_level: debug\n", encoding="utf-8")

    cfg = load_config(path, overrides={"bound": 5})
    assert cfg == {"bound": 5, "width": 16, "log_level": "debug"}

    settings = load_settings(**cfg)
    assert settings.log_level == "DEBUG"


def test_load_config_without_file_returns_overrides_only() -> None:
    assert load_config(None) == {}
    assert load_config(None, overrides={"width": 8}) == {"width": 8}


def test_load_config_rejects_unknown_keys(tmp_path: Path) -> None:
    path = tmp_path / "cfg.yaml"
    path.write_text("bound: 3\nprecision: high\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="precision"):
        load_config(path)


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    path = tmp_path / "cfg.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_invalid_settings() -> None:
    with pytest.raises(ValidationError):
        load_settings(width=1)
    with pytest.raises(ValidationError):
        load_settings(log_level="chatty")


def test_load_config_rejects_non_string_keys(tmp_path: Path) -> None:
    path = tmp_path / "cfg.yaml"
    path.write_text("1: 2\nfoo: 3\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="strings"):
        load_config(path)
