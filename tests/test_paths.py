"""Tests for settings path resolution."""

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from program_settings import paths as paths_module
from program_settings.errors import (
    DirectoryCreationFailed,
    HomeDirectoryUnavailable,
    InvalidProgramIdentifier,
    WriteError,
)
from program_settings.paths import get_user_home, resolve_path, user_config_root


def _fake_os(name: str, **env: str) -> SimpleNamespace:
    def getenv(key: str, default=None):
        return env.get(key, default)

    return SimpleNamespace(name=name, getenv=getenv)


def test_config_root_respects_xdg(monkeypatch, tmp_path):
    config_root = tmp_path / "xdg"
    monkeypatch.setattr("program_settings.paths.os", _fake_os("posix", XDG_CONFIG_HOME=str(config_root)))

    assert user_config_root() == config_root


def test_config_root_windows(monkeypatch, tmp_path):
    appdata = tmp_path / "AppData" / "Roaming"
    monkeypatch.setattr("program_settings.paths.os", _fake_os("nt", APPDATA=str(appdata)))

    assert user_config_root() == appdata


def test_config_root_falls_back_to_home(monkeypatch, tmp_path):
    monkeypatch.setattr("program_settings.paths.os", _fake_os("posix", XDG_CONFIG_HOME=""))
    monkeypatch.setattr("program_settings.paths.get_user_home", lambda: tmp_path)

    assert user_config_root() == tmp_path / ".config"


def test_config_root_windows_falls_back_to_home(monkeypatch, tmp_path):
    monkeypatch.setattr("program_settings.paths.os", _fake_os("nt"))
    monkeypatch.setattr("program_settings.paths.get_user_home", lambda: tmp_path)

    assert user_config_root() == tmp_path / "AppData" / "Roaming"


def test_config_root_without_home(monkeypatch):
    monkeypatch.setattr("program_settings.paths.os", _fake_os("posix"))
    monkeypatch.setattr("program_settings.paths.get_user_home", lambda: None)

    with pytest.raises(HomeDirectoryUnavailable):
        user_config_root()

    with pytest.raises(HomeDirectoryUnavailable):
        resolve_path("demoapp")


def test_get_user_home_when_platform_cannot_tell(monkeypatch):
    def _raise(cls):
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(Path, "home", classmethod(_raise))

    assert get_user_home() is None


def test_resolve_path_creates_program_directory(config_home):
    path = resolve_path("demoapp")

    assert path == config_home / "demoapp" / "demoapp.yaml"
    assert path.is_absolute()
    assert path.parent.is_dir()
    assert not path.exists()


def test_resolve_path_without_create(tmp_path):
    path = resolve_path("demoapp", root=tmp_path / "nested" / "root", create=False)

    assert path == tmp_path / "nested" / "root" / "demoapp" / "demoapp.yaml"
    assert not (tmp_path / "nested").exists()


def test_resolve_path_with_file_name(tmp_path):
    path = resolve_path("demoapp", file_name="window.json", root=tmp_path)

    assert path == tmp_path / "demoapp" / "window.json"


@pytest.mark.parametrize("identifier", ["", "   ", ".", "..", "a/b", "a\\b", "bad\x00name"])
def test_resolve_path_rejects_invalid_identifier(identifier, tmp_path):
    with pytest.raises(InvalidProgramIdentifier) as excinfo:
        resolve_path(identifier, root=tmp_path)

    assert isinstance(excinfo.value, ValueError)
    assert list(tmp_path.iterdir()) == []


def test_resolve_path_rejects_invalid_file_name(tmp_path):
    with pytest.raises(InvalidProgramIdentifier):
        resolve_path("demoapp", file_name="../escape.yaml", root=tmp_path)


def test_resolve_path_directory_collides_with_file(tmp_path):
    (tmp_path / "demoapp").write_text("not a directory", encoding="utf-8")

    with pytest.raises(DirectoryCreationFailed) as excinfo:
        resolve_path("demoapp", root=tmp_path)

    assert isinstance(excinfo.value, WriteError)


def test_settings_directory_uses_validated_identifier(tmp_path):
    assert paths_module.settings_directory("demoapp", root=tmp_path) == tmp_path / "demoapp"
