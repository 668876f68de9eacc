"""Rules deciding which keys and values may be loaded into a store.

Keys are identifiers: a letter or underscore followed by letters, digits or
underscores. Values are any text on a single line, so that a store can always
be written as `KEY=VALUE` lines.
"""

import re

__all__ = ["is_valid_key", "is_valid_value"]

KEY_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def is_valid_key(key: object) -> bool:
    """Return True if the key is a string holding an ASCII identifier."""
    return isinstance(key, str) and KEY_PATTERN.fullmatch(key) is not None


def is_valid_value(value: object) -> bool:
    """Return True if the value is a string holding no newline."""
    return isinstance(value, str) and "\n" not in value
