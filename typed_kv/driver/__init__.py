"""Drivers load and save the key value pairs of a store to and from a medium.

A `Driver` always moves the full set of entries. The `MemoryDriver` keeps
them in process memory and is the default for a new `Store`; the file based
drivers persist them on disk.
"""

import logging

from typed_kv.config import DriverConfig, DriverKind
from typed_kv.exceptions import InputException

from .driver import Driver, KeyValueMapping
from .in_memory import MemoryDriver
from .file import FileDriver
from .yaml_file import YamlDriver

__all__ = [
    "Driver",
    "KeyValueMapping",
    "MemoryDriver",
    "FileDriver",
    "YamlDriver",
    "make_driver",
]

_LOGGER = logging.getLogger(__name__)


def make_driver(config: DriverConfig) -> Driver:
    """Build the driver described by the configuration."""
    _LOGGER.debug("Creating driver from %s", config)
    if config.kind == DriverKind.MEMORY:
        return MemoryDriver()
    if not config.path:
        raise InputException(f"Driver kind '{config.kind}' requires a path")
    if config.kind == DriverKind.YAML:
        return YamlDriver(config.path, config)
    return FileDriver(config.path, config)
