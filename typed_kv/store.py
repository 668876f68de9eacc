"""Store module holding key value pairs and reading them as typed values.

A `Store` owns the current data, a mapping of string keys to string values,
and an active `Driver` used to load and save it. Entries coming from a driver
are validated before they are adopted: a load either accepts every entry or
leaves the store untouched. Saving writes the current data as it is.

Typed getters convert a value only when it is read. Each returns `None` when
the key is missing, otherwise a `TypedValue` holding the converted value or
the `ParseError` explaining why the text did not convert.
"""

from collections.abc import Iterator
import logging
from time import perf_counter
from typing import Any

from .driver import Driver, KeyValueMapping, MemoryDriver
from .exceptions import InvalidDataError
from .primitives import TypedValue, convert
from .validation import is_valid_key, is_valid_value

__all__ = ["Store"]

_LOGGER = logging.getLogger(__name__)


class Store:
    """Key value store with a replaceable persistence driver."""

    def __init__(
        self, data: KeyValueMapping | None = None, driver: Driver | None = None
    ) -> None:
        """Initialize the Store.

        The given data becomes the current data directly and is not validated.
        Without a driver the store uses an empty `MemoryDriver`.
        """
        self._data: KeyValueMapping = data if data is not None else {}
        self._driver: Driver = driver if driver is not None else MemoryDriver()

    @classmethod
    def from_mapping(cls, data: KeyValueMapping) -> "Store":
        """Create a store holding the given key value pairs."""
        return cls(data)

    @property
    def driver(self) -> Driver:
        """The active driver."""
        return self._driver

    def set_driver(self, driver: Driver) -> None:
        """Replace the active driver, leaving the current data unchanged."""
        _LOGGER.debug("Replacing driver %s with %s", self._driver, driver)
        self._driver = driver

    def load(self) -> None:
        """Replace the current data with the entries of the active driver.

        Raises:
            InvalidDataError: If any entry has an invalid key or value.
            DriverException: If the driver cannot read its medium.
        """
        self.load_from(self._driver)

    def load_from(self, driver: Driver) -> None:
        """Replace the current data with the entries of the given driver.

        The active driver is not changed.
        """
        start = perf_counter()
        data = driver.load()
        for key, value in data.items():
            if not is_valid_key(key):
                raise InvalidDataError(key, f"Invalid key '{key}'")
            if not is_valid_value(value):
                raise InvalidDataError(key, f"Invalid value for '{key}'")
        self._data = data
        _LOGGER.debug(
            "Loaded %d entries from %s (%0.4fs)",
            len(data),
            driver,
            perf_counter() - start,
        )

    def save(self) -> None:
        """Write the current data to the active driver."""
        self.save_to(self._driver)

    def save_to(self, driver: Driver) -> None:
        """Write the current data to the given driver.

        The active driver is not changed.
        """
        start = perf_counter()
        driver.save(self._data)
        _LOGGER.debug(
            "Saved %d entries to %s (%0.4fs)",
            len(self._data),
            driver,
            perf_counter() - start,
        )

    def get(self, key: str) -> str | None:
        """Return the value stored under key, or None."""
        return self._data.get(key)

    def get_char(self, key: str) -> str | None:
        """Return the first character of the value, or None if missing or empty."""
        value = self._data.get(key)
        return value[0] if value else None

    def get_typed(self, key: str, type_name: str) -> TypedValue[Any] | None:
        """Return the value converted to the named primitive type, or None."""
        if (value := self._data.get(key)) is None:
            return None
        return convert(key, value, type_name)

    def get_i8(self, key: str) -> TypedValue[int] | None:
        """Return the value as a signed 8 bit integer."""
        return self.get_typed(key, "i8")

    def get_u8(self, key: str) -> TypedValue[int] | None:
        """Return the value as an unsigned 8 bit integer."""
        return self.get_typed(key, "u8")

    def get_i16(self, key: str) -> TypedValue[int] | None:
        """Return the value as a signed 16 bit integer."""
        return self.get_typed(key, "i16")

    def get_u16(self, key: str) -> TypedValue[int] | None:
        """Return the value as an unsigned 16 bit integer."""
        return self.get_typed(key, "u16")

    def get_i32(self, key: str) -> TypedValue[int] | None:
        """Return the value as a signed 32 bit integer."""
        return self.get_typed(key, "i32")

    def get_u32(self, key: str) -> TypedValue[int] | None:
        """Return the value as an unsigned 32 bit integer."""
        return self.get_typed(key, "u32")

    def get_i64(self, key: str) -> TypedValue[int] | None:
        """Return the value as a signed 64 bit integer."""
        return self.get_typed(key, "i64")

    def get_u64(self, key: str) -> TypedValue[int] | None:
        """Return the value as an unsigned 64 bit integer."""
        return self.get_typed(key, "u64")

    def get_isize(self, key: str) -> TypedValue[int] | None:
        """Return the value as a signed pointer sized integer."""
        return self.get_typed(key, "isize")

    def get_usize(self, key: str) -> TypedValue[int] | None:
        """Return the value as an unsigned pointer sized integer."""
        return self.get_typed(key, "usize")

    def get_f32(self, key: str) -> TypedValue[float] | None:
        """Return the value as a single precision float."""
        return self.get_typed(key, "f32")

    def get_f64(self, key: str) -> TypedValue[float] | None:
        """Return the value as a double precision float."""
        return self.get_typed(key, "f64")

    def get_bool(self, key: str) -> TypedValue[bool] | None:
        """Return the value as a boolean."""
        return self.get_typed(key, "bool")

    def keys(self) -> list[str]:
        """Return the keys of the current data."""
        return list(self._data)

    def to_dict(self) -> KeyValueMapping:
        """Return a copy of the current data."""
        return dict(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)
