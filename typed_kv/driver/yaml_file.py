"""Driver that keeps a store as a flat YAML mapping.

Scalars are read without implicit typing, so `port: 8080` loads as the
string `"8080"` and `debug: true` as `"true"`, leaving conversion to the
typed getters of the store.
"""

import logging
from typing import Any

import yaml

from typed_kv.exceptions import DriverException

from .driver import KeyValueMapping
from .file import BaseFileDriver

__all__ = ["YamlDriver"]

_LOGGER = logging.getLogger(__name__)


class YamlDriver(BaseFileDriver):
    """Driver storing entries in a YAML document."""

    def load(self) -> KeyValueMapping:
        """Read all entries from the YAML document."""
        if (content := self._read()) is None:
            return {}
        try:
            doc = yaml.load(content, Loader=yaml.BaseLoader)
        except yaml.YAMLError as err:
            raise DriverException(f"Unable to parse YAML in {self._path}: {err}") from err
        data = _check_mapping(doc, self._path)
        _LOGGER.debug("Read %d entries from %s", len(data), self._path)
        return data

    def save(self, mapping: KeyValueMapping) -> None:
        """Write all entries as a YAML document, replacing the file contents."""
        content = yaml.safe_dump(
            dict(self._ordered(mapping)),
            default_flow_style=False,
            sort_keys=False,
        )
        self._write(content)
        _LOGGER.debug("Wrote %d entries to %s", len(mapping), self._path)


def _check_mapping(doc: Any, source: Any) -> KeyValueMapping:
    """Verify the document is a flat mapping of strings."""
    if doc is None or doc == "":
        return {}
    if not isinstance(doc, dict):
        raise DriverException(
            f"Expected a mapping in {source} but found {type(doc).__name__}"
        )
    for key, value in doc.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise DriverException(
                f"Entry '{key}' in {source} is not a string to string pair"
            )
    return doc
