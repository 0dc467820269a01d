from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for name in ("SUMSQUARES_BOUND", "SUMSQUARES_WIDTH", "SUMSQUARES_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    # keep a stray .env in the invoking directory out of the settings
    monkeypatch.chdir(tmp_path)
