"""Tests for driver configuration."""

import pytest

from typed_kv.config import DriverConfig, DriverKind
from typed_kv.driver import FileDriver, MemoryDriver, YamlDriver, make_driver
from typed_kv.exceptions import InputException


def test_defaults() -> None:
    """An empty configuration describes a utf-8 file driver."""
    config = DriverConfig.from_dict({})
    assert config == DriverConfig(
        kind=DriverKind.FILE,
        path=None,
        encoding="utf-8",
        missing_ok=False,
        sort_keys=True,
    )


def test_parse_yaml() -> None:
    """Configuration may be read from YAML."""
    config = DriverConfig.parse_yaml(
        "kind: yaml\npath: /etc/app/settings.yaml\nmissing_ok: true\n"
    )
    assert config.kind == DriverKind.YAML
    assert config.path == "/etc/app/settings.yaml"
    assert config.missing_ok


def test_to_dict_omits_none() -> None:
    """Unset optional fields are left out when serialized."""
    assert DriverConfig(kind=DriverKind.MEMORY).to_dict() == {
        "kind": "memory",
        "encoding": "utf-8",
        "missing_ok": False,
        "sort_keys": True,
    }


@pytest.mark.parametrize(
    "content",
    [
        "kind: sqlite\n",
        "kind: [file\n",
        "- file\n",
    ],
)
def test_parse_yaml_invalid(content: str) -> None:
    """Invalid configuration is reported as an input error."""
    with pytest.raises(InputException, match="Invalid driver configuration"):
        DriverConfig.parse_yaml(content)


@pytest.mark.parametrize(
    ("config", "expected"),
    [
        (DriverConfig(kind=DriverKind.MEMORY), MemoryDriver),
        (DriverConfig(kind=DriverKind.FILE, path="store.env"), FileDriver),
        (DriverConfig(kind=DriverKind.YAML, path="store.yaml"), YamlDriver),
    ],
)
def test_make_driver(config: DriverConfig, expected: type) -> None:
    """The configured kind selects the driver."""
    assert isinstance(make_driver(config), expected)


def test_make_driver_requires_path() -> None:
    """File based drivers need a path."""
    with pytest.raises(InputException, match="requires a path"):
        make_driver(DriverConfig(kind=DriverKind.FILE))
