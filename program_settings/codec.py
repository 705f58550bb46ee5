"""Convert settings records to and from YAML or JSON text."""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Any, TypeVar

import yaml
from pydantic import PydanticSchemaGenerationError, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from .errors import DeserializationError, SerializationError

T = TypeVar("T")


class SettingsFormat(str, Enum):
    """Text encodings a settings file can use."""

    YAML = "yaml"
    JSON = "json"


def format_for_path(path: Path) -> SettingsFormat:
    """Pick the encoding from the file suffix; anything but ``.json`` is YAML."""
    if path.suffix.lower() == ".json":
        return SettingsFormat.JSON
    return SettingsFormat.YAML


def _reject_non_string_keys(value: Any, location: str = "record") -> None:
    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                raise SerializationError(
                    f"Mapping keys must be strings; found {key!r} in {location}."
                )
            _reject_non_string_keys(item, f"{location}.{key}")
    elif isinstance(value, (list, tuple, set, frozenset)):
        for item in value:
            _reject_non_string_keys(item, location)


def to_primitive(record: Any) -> Any:
    """Reduce ``record`` to JSON-compatible dicts, lists and scalars.

    Mappings must use string keys; any other key would come back as a string
    and the record would not survive a save and load unchanged.
    """
    try:
        adapter = TypeAdapter(type(record))
        _reject_non_string_keys(adapter.dump_python(record))
        return adapter.dump_python(record, mode="json")
    except (PydanticSchemaGenerationError, PydanticSerializationError) as exc:
        raise SerializationError(
            f"Unable to serialize a {type(record).__name__} record: {exc}"
        ) from exc


def from_primitive(data: Any, record_type: type[T]) -> T:
    """Validate primitive ``data`` into an instance of ``record_type``.

    Validation is strict against the JSON form of ``data``: values are never
    coerced into another type (``true`` does not become ``1``, ``"7"`` does not
    become ``7``).
    """
    try:
        adapter = TypeAdapter(record_type)
    except PydanticSchemaGenerationError as exc:
        raise DeserializationError(f"Unsupported record type {record_type!r}: {exc}") from exc
    try:
        payload = json.dumps(data)
    except (TypeError, ValueError) as exc:
        raise DeserializationError(f"Stored settings contain unsupported values: {exc}") from exc
    try:
        return adapter.validate_json(payload, strict=True)
    except ValidationError as exc:
        raise DeserializationError(
            f"Stored settings do not match {getattr(record_type, '__name__', record_type)}: {exc}"
        ) from exc


def dumps(record: Any, *, fmt: SettingsFormat = SettingsFormat.YAML) -> str:
    """Serialize ``record`` to text in the requested format."""
    data = to_primitive(record)
    try:
        if fmt is SettingsFormat.JSON:
            return json.dumps(data, indent=2, ensure_ascii=True) + "\n"
        return yaml.safe_dump(data, allow_unicode=False, sort_keys=False)
    except (TypeError, ValueError, yaml.YAMLError) as exc:
        raise SerializationError(f"Unable to encode settings as {fmt.value}: {exc}") from exc


def loads(text: str, record_type: type[T], *, fmt: SettingsFormat = SettingsFormat.YAML) -> T:
    """Parse ``text`` and rebuild a ``record_type`` value from it."""
    # Saves never produce an empty document, so an empty file is a truncated one.
    if not text.strip():
        raise DeserializationError("The settings file is empty.")
    try:
        if fmt is SettingsFormat.JSON:
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (ValueError, yaml.YAMLError) as exc:
        raise DeserializationError(f"Settings text is not valid {fmt.value}: {exc}") from exc
    return from_primitive(data, record_type)
