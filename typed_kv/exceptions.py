"""Exceptions related to typed-kv."""

__all__ = [
    "KVStoreException",
    "InputException",
    "DriverException",
    "InvalidDataError",
    "ParseError",
]


class KVStoreException(Exception):
    """Generic base exception used for this library."""


class InputException(KVStoreException):
    """Raised when configuration or command input is not formatted as expected."""


class DriverException(KVStoreException):
    """Raised when a driver cannot read from or write to its medium."""


class InvalidDataError(KVStoreException):
    """Raised when a loaded entry has an invalid key or value."""

    def __init__(self, key: str, message: str) -> None:
        super().__init__(message)
        self.key = key


class ParseError(KVStoreException, ValueError):
    """A stored value could not be converted to the requested type."""

    def __init__(self, key: str, type_name: str, reason: str) -> None:
        super().__init__(f"Value for '{key}' is not a valid {type_name}: {reason}")
        self.key = key
        self.type_name = type_name
        self.reason = reason
