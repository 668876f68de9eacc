"""Driver interface for moving a whole store to and from a medium."""

from abc import ABC, abstractmethod

__all__ = ["Driver", "KeyValueMapping"]


KeyValueMapping = dict[str, str]


class Driver(ABC):
    """Abstract base class for loading and saving key value pairs.

    A driver always works on the full set of entries: `load` returns a fresh
    copy of everything the medium holds and `save` replaces the medium's
    contents. Implementations raise `DriverException` when the medium cannot
    be read or written and own their serialization format.
    """

    @abstractmethod
    def load(self) -> KeyValueMapping:
        """Return a copy of all key value pairs held by the medium.

        Raises:
            DriverException: If the medium cannot be read.
        """

    @abstractmethod
    def save(self, mapping: KeyValueMapping) -> None:
        """Replace the contents of the medium with the given key value pairs.

        Raises:
            DriverException: If the medium cannot be written.
        """
