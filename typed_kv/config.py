"""Configuration objects for typed-kv drivers."""

from dataclasses import dataclass
from enum import StrEnum

import yaml
from mashumaro import DataClassDictMixin
from mashumaro.config import BaseConfig
from mashumaro.exceptions import InvalidFieldValue, MissingField

from .exceptions import InputException

__all__ = [
    "DriverKind",
    "DriverConfig",
]


class DriverKind(StrEnum):
    """The medium a driver reads and writes."""

    MEMORY = "memory"
    FILE = "file"
    YAML = "yaml"


@dataclass
class DriverConfig(DataClassDictMixin):
    """Configuration for building a driver."""

    kind: DriverKind = DriverKind.FILE
    """Which driver implementation to use."""

    path: str | None = None
    """Location of the store for file based drivers."""

    encoding: str = "utf-8"
    """Text encoding used by file based drivers."""

    missing_ok: bool = False
    """Load a missing file as an empty store instead of failing."""

    sort_keys: bool = True
    """Write entries ordered by key."""

    @classmethod
    def parse_yaml(cls, content: str) -> "DriverConfig":
        """Parse a serialized driver configuration."""
        try:
            doc = yaml.safe_load(content)
        except yaml.YAMLError as err:
            raise InputException(f"Invalid driver configuration: {err}") from err
        if doc is None:
            doc = {}
        if not isinstance(doc, dict):
            raise InputException(
                f"Invalid driver configuration: expected a mapping, got {type(doc).__name__}"
            )
        try:
            return cls.from_dict(doc)
        except (MissingField, InvalidFieldValue, ValueError) as err:
            raise InputException(f"Invalid driver configuration: {err}") from err

    class Config(BaseConfig):
        omit_none = True
