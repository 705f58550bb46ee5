"""Save a program's settings record to a standard per-user location and load it back."""

from .container import SettingsContainer
from .errors import (
    DeserializationError,
    DirectoryCreationFailed,
    HomeDirectoryUnavailable,
    InvalidProgramIdentifier,
    PathResolutionError,
    ReadError,
    SerializationError,
    SettingsError,
    SettingsFileNotFound,
    WriteError,
)
from .paths import get_user_home, resolve_path, user_config_root
from .store import (
    SettingsStore,
    delete_settings,
    delete_settings_file,
    load_settings,
    save_settings,
)

__all__ = [
    "DeserializationError",
    "DirectoryCreationFailed",
    "HomeDirectoryUnavailable",
    "InvalidProgramIdentifier",
    "PathResolutionError",
    "ReadError",
    "SerializationError",
    "SettingsContainer",
    "SettingsError",
    "SettingsFileNotFound",
    "SettingsStore",
    "WriteError",
    "delete_settings",
    "delete_settings_file",
    "get_user_home",
    "load_settings",
    "resolve_path",
    "save_settings",
    "user_config_root",
]
