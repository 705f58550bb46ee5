from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def config_home(monkeypatch, tmp_path) -> Path:
    """Keep every test away from the real per-user configuration directory."""
    root = tmp_path / "config-home"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(root))
    monkeypatch.setenv("APPDATA", str(root))
    return root
