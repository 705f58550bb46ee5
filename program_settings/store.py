"""Save and load settings records at a well-known per-user path."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Any, Generic, TypeVar

from . import codec
from .errors import (
    DeserializationError,
    ReadError,
    SettingsFileNotFound,
    WriteError,
)
from .paths import resolve_path, settings_directory, validate_component

logger = logging.getLogger(__name__)

T = TypeVar("T")


def save_settings(
    program_identifier: str,
    record: Any,
    *,
    file_name: str | None = None,
    root: Path | None = None,
) -> None:
    """Write ``record`` to the settings file of ``program_identifier``.

    Any previous content is replaced in full. The record is encoded before the
    file is opened, so a record that cannot be serialized leaves an existing
    file untouched.
    """
    path = resolve_path(program_identifier, file_name=file_name, root=root)
    text = codec.dumps(record, fmt=codec.format_for_path(path))
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise WriteError(f"Unable to write settings file {path}: {exc}") from exc
    logger.debug("Saved settings for '%s' to %s", program_identifier, path)


def load_settings(
    program_identifier: str,
    record_type: type[T],
    *,
    file_name: str | None = None,
    root: Path | None = None,
) -> T:
    """Read the settings file of ``program_identifier`` back into ``record_type``."""
    path = resolve_path(program_identifier, file_name=file_name, root=root)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise SettingsFileNotFound(path) from exc
    except UnicodeDecodeError as exc:
        raise DeserializationError(f"Settings file {path} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise ReadError(f"Unable to read settings file {path}: {exc}") from exc

    record = codec.loads(text, record_type, fmt=codec.format_for_path(path))
    logger.debug("Loaded settings for '%s' from %s", program_identifier, path)
    return record


def delete_settings(program_identifier: str, *, root: Path | None = None) -> None:
    """Remove the whole settings directory of ``program_identifier``."""
    directory = settings_directory(program_identifier, root=root)
    try:
        shutil.rmtree(directory)
    except FileNotFoundError as exc:
        raise SettingsFileNotFound(directory) from exc
    except OSError as exc:
        raise WriteError(f"Unable to delete settings directory {directory}: {exc}") from exc
    logger.debug("Deleted settings directory %s", directory)


def delete_settings_file(
    program_identifier: str,
    *,
    file_name: str | None = None,
    root: Path | None = None,
) -> None:
    """Remove a single settings file, leaving the program directory in place."""
    path = resolve_path(program_identifier, file_name=file_name, root=root, create=False)
    try:
        path.unlink()
    except FileNotFoundError as exc:
        raise SettingsFileNotFound(path) from exc
    except OSError as exc:
        raise WriteError(f"Unable to delete settings file {path}: {exc}") from exc
    logger.debug("Deleted settings file %s", path)


class SettingsStore(Generic[T]):
    """Load and save one program's settings record."""

    def __init__(
        self,
        program_identifier: str,
        record_type: type[T],
        *,
        file_name: str | None = None,
        root: Path | None = None,
    ) -> None:
        self.program_identifier = validate_component(program_identifier)
        self.record_type = record_type
        self.file_name = (
            validate_component(file_name, label="file name") if file_name is not None else None
        )
        self.root = root

    @property
    def path(self) -> Path:
        return resolve_path(
            self.program_identifier, file_name=self.file_name, root=self.root, create=False
        )

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> T:
        return load_settings(
            self.program_identifier, self.record_type, file_name=self.file_name, root=self.root
        )

    def load_or(self, default: T) -> T:
        """Return the stored record, or ``default`` when nothing was saved yet."""
        try:
            return self.load()
        except SettingsFileNotFound:
            logger.debug("No settings saved for '%s'; using defaults.", self.program_identifier)
            return default

    def save(self, record: T) -> None:
        save_settings(self.program_identifier, record, file_name=self.file_name, root=self.root)

    def delete(self) -> None:
        delete_settings_file(self.program_identifier, file_name=self.file_name, root=self.root)
