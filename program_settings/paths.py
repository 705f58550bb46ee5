"""Resolve where a program's settings file lives."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .errors import DirectoryCreationFailed, HomeDirectoryUnavailable, InvalidProgramIdentifier

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = "yaml"

_FORBIDDEN_CHARACTERS = ("/", "\\", "\x00")


def get_user_home() -> Path | None:
    """Return the current user's home directory, or ``None`` when it is unknown."""
    try:
        home = Path.home()
    except (RuntimeError, KeyError):
        return None
    # Older interpreters hand back "~" unchanged when no home can be found.
    if str(home).startswith("~"):
        return None
    return home


def user_config_root() -> Path:
    """Return the per-user configuration directory for the host platform.

    ``%APPDATA%`` is used on Windows and ``$XDG_CONFIG_HOME`` elsewhere; when
    the variable is unset or empty the conventional location under the home
    directory is used instead.
    """
    if os.name == "nt":
        override = os.getenv("APPDATA")
        fallback = ("AppData", "Roaming")
    else:
        override = os.getenv("XDG_CONFIG_HOME")
        fallback = (".config",)

    if override:
        return Path(override).expanduser()

    home = get_user_home()
    if home is None:
        raise HomeDirectoryUnavailable("Unable to determine the current user's home directory.")
    return home.joinpath(*fallback)


def validate_component(value: str, *, label: str = "program identifier") -> str:
    """Ensure ``value`` can be used verbatim as a single file or directory name."""
    if not isinstance(value, str) or not value.strip():
        raise InvalidProgramIdentifier(f"The {label} must be a non-empty string.")
    if value in {".", ".."} or any(char in value for char in _FORBIDDEN_CHARACTERS):
        raise InvalidProgramIdentifier(f"The {label} {value!r} is not a valid file name.")
    return value


def default_file_name(program_identifier: str) -> str:
    return f"{program_identifier}.{DEFAULT_EXTENSION}"


def settings_directory(program_identifier: str, *, root: Path | None = None) -> Path:
    """Return the directory holding ``program_identifier``'s settings files."""
    validate_component(program_identifier)
    base = Path(root).expanduser() if root is not None else user_config_root()
    return base.absolute() / program_identifier


def ensure_directory(directory: Path) -> Path:
    """Create ``directory`` and any missing ancestors."""
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreationFailed(
            f"Unable to create settings directory {directory}: {exc}"
        ) from exc
    return directory


def resolve_path(
    program_identifier: str,
    *,
    file_name: str | None = None,
    root: Path | None = None,
    create: bool = True,
) -> Path:
    """Return the absolute settings file path for ``program_identifier``.

    Parameters
    ----------
    program_identifier:
        Name of the owning program; used as the directory name and, unless
        ``file_name`` is given, as the file stem.
    file_name:
        Optional file name inside the program directory. Its suffix selects
        the on-disk format.
    root:
        Optional replacement for the platform configuration directory.
    create:
        Create the program directory when it does not exist yet. The settings
        file itself is never touched.
    """

    directory = settings_directory(program_identifier, root=root)
    if file_name is None:
        name = default_file_name(program_identifier)
    else:
        name = validate_component(file_name, label="file name")

    if create:
        ensure_directory(directory)

    path = directory / name
    logger.debug("Resolved settings path for '%s': %s", program_identifier, path)
    return path
