"""Exception hierarchy raised by the settings helpers."""

from __future__ import annotations


class SettingsError(RuntimeError):
    """Base class for every failure reported by this package."""


class PathResolutionError(SettingsError):
    """Raised when the settings path cannot be determined or prepared."""


class InvalidProgramIdentifier(PathResolutionError, ValueError):
    """Raised when a program identifier or file name is not a single path component."""


class HomeDirectoryUnavailable(PathResolutionError):
    """Raised when the platform cannot report a user directory."""


class WriteError(SettingsError):
    """Raised when the settings file or its directory cannot be written."""


class DirectoryCreationFailed(PathResolutionError, WriteError):
    """Raised when the settings directory (or an ancestor) cannot be created."""


class ReadError(SettingsError):
    """Raised when an existing settings file cannot be read."""


class SettingsFileNotFound(ReadError):
    """Raised when no settings file has been saved yet."""

    def __init__(self, path) -> None:
        super().__init__(f"No settings file at {path}")
        self.path = path


class SerializationError(SettingsError):
    """Raised when a record cannot be converted to text."""


class DeserializationError(SettingsError):
    """Raised when stored text does not parse into the requested record type."""
