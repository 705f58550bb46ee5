"""A settings record that remembers where it is saved."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Generic, TypeVar

from pydantic import BaseModel, Field, field_validator

from .errors import SettingsError
from .paths import validate_component
from .store import load_settings, save_settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SettingsContainer(BaseModel, Generic[T]):
    """Wraps a settings record together with its program and file name.

    Parametrize the class with the record type before loading, for example
    ``SettingsContainer[MySettings].load("demoapp", "window.yaml")``.
    """

    settings: T | None = Field(
        default=None,
        description="The wrapped settings record; empty for a default container.",
    )
    program_identifier: str = Field(
        description="Program whose settings directory holds the file.",
    )
    file_name: str = Field(
        description="File name inside the program's settings directory.",
    )

    @field_validator("program_identifier")
    @classmethod
    def _validate_program_identifier(cls, value: str) -> str:
        return validate_component(value)

    @field_validator("file_name")
    @classmethod
    def _validate_file_name(cls, value: str) -> str:
        return validate_component(value, label="file name")

    @classmethod
    def default(cls, program_identifier: str, file_name: str) -> SettingsContainer[T]:
        """Return an empty container bound to the given location."""
        return cls(program_identifier=program_identifier, file_name=file_name)

    @classmethod
    def load(
        cls,
        program_identifier: str,
        file_name: str,
        *,
        root: Path | None = None,
    ) -> SettingsContainer[T]:
        return load_settings(program_identifier, cls, file_name=file_name, root=root)

    @classmethod
    def try_load_or_default(
        cls,
        program_identifier: str,
        file_name: str,
        *,
        root: Path | None = None,
    ) -> SettingsContainer[T]:
        """Load the container, falling back to an empty one on any settings error."""
        try:
            return cls.load(program_identifier, file_name, root=root)
        except SettingsError as exc:
            logger.warning(
                "Could not load settings for '%s' (%s); using an empty container.",
                program_identifier,
                exc,
            )
            return cls.default(program_identifier, file_name)

    def save(self, *, root: Path | None = None) -> None:
        """Persist the whole container to its own program and file name."""
        save_settings(self.program_identifier, self, file_name=self.file_name, root=root)
