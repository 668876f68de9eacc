"""Module for an in memory driver."""

import logging

from .driver import Driver, KeyValueMapping

_LOGGER = logging.getLogger(__name__)


class MemoryDriver(Driver):
    """Driver that keeps key value pairs in process memory.

    The data is lost when the driver is discarded. Entries are copied on the
    way in and out so the caller never shares the driver's own mapping.
    """

    def __init__(self, data: KeyValueMapping | None = None) -> None:
        """Initialize the MemoryDriver, optionally seeded with entries."""
        self._data: KeyValueMapping = dict(data) if data else {}

    def load(self) -> KeyValueMapping:
        """Return a copy of the held entries."""
        return dict(self._data)

    def save(self, mapping: KeyValueMapping) -> None:
        """Replace the held entries with a copy of the mapping."""
        _LOGGER.debug("Replacing %d entries with %d", len(self._data), len(mapping))
        self._data = dict(mapping)

    def __repr__(self) -> str:
        return f"MemoryDriver(entries={len(self._data)})"
