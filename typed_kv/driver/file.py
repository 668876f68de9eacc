"""Drivers that keep a store in a file on disk.

The text format holds one entry per line:

```
KEY=VALUE
```

The line is split at the first `=`, so a value may contain `=` but never a
newline. Blank lines are ignored. Keys and values are read as-is and are only
checked when loaded into a `Store`.
"""

import logging
import os
import pathlib
import tempfile

from typed_kv.config import DriverConfig
from typed_kv.exceptions import DriverException

from .driver import Driver, KeyValueMapping

__all__ = ["FileDriver"]

_LOGGER = logging.getLogger(__name__)

SEPARATOR = "="


def atomic_write_text(path: pathlib.Path, content: str, encoding: str) -> None:
    """Write the content to a temporary sibling file then replace the path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(
        dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="\n") as tmp:
            tmp.write(content)
        os.replace(tmp_name, path)
    except BaseException:
        pathlib.Path(tmp_name).unlink(missing_ok=True)
        raise


class BaseFileDriver(Driver):
    """Common file handling for drivers backed by a single file."""

    def __init__(
        self, path: str | pathlib.Path, config: DriverConfig | None = None
    ) -> None:
        """Initialize the driver for the file at the given path."""
        self._path = pathlib.Path(path)
        self._config = config or DriverConfig()

    @property
    def path(self) -> pathlib.Path:
        """Location of the backing file."""
        return self._path

    def _read(self) -> str | None:
        """Return the file contents, or None for an allowed missing file."""
        try:
            with self._path.open(encoding=self._config.encoding, newline="") as src:
                return src.read()
        except FileNotFoundError as err:
            if self._config.missing_ok:
                _LOGGER.debug("File %s does not exist, loading empty", self._path)
                return None
            raise DriverException(f"Store file {self._path} does not exist") from err
        except (OSError, UnicodeDecodeError) as err:
            raise DriverException(f"Unable to read store file {self._path}: {err}") from err

    def _write(self, content: str) -> None:
        try:
            atomic_write_text(self._path, content, self._config.encoding)
        except (OSError, UnicodeEncodeError) as err:
            raise DriverException(f"Unable to write store file {self._path}: {err}") from err

    def _ordered(self, mapping: KeyValueMapping) -> list[tuple[str, str]]:
        if self._config.sort_keys:
            return sorted(mapping.items())
        return list(mapping.items())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({str(self._path)!r})"


class FileDriver(BaseFileDriver):
    """Driver storing entries as `KEY=VALUE` lines in a text file."""

    def load(self) -> KeyValueMapping:
        """Read all entries from the file."""
        if (content := self._read()) is None:
            return {}
        data: KeyValueMapping = {}
        for lineno, line in enumerate(content.split("\n"), start=1):
            if not line.strip():
                continue
            key, sep, value = line.partition(SEPARATOR)
            if not sep:
                raise DriverException(
                    f"Store file {self._path} line {lineno} is missing '{SEPARATOR}'"
                )
            data[key] = value
        _LOGGER.debug("Read %d entries from %s", len(data), self._path)
        return data

    def save(self, mapping: KeyValueMapping) -> None:
        """Write all entries to the file, replacing its contents."""
        lines = []
        for key, value in self._ordered(mapping):
            if "\n" in key or "\n" in value or SEPARATOR in key:
                raise DriverException(
                    f"Entry '{key}' cannot be written as a single {SEPARATOR} line"
                )
            lines.append(f"{key}{SEPARATOR}{value}\n")
        self._write("".join(lines))
        _LOGGER.debug("Wrote %d entries to %s", len(lines), self._path)
