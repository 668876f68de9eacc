"""Tests for the in memory driver."""

from typed_kv.driver import MemoryDriver


def test_empty() -> None:
    """A new driver holds nothing."""
    assert MemoryDriver().load() == {}


def test_seeded() -> None:
    """A driver may be seeded with entries."""
    assert MemoryDriver({"a": "1"}).load() == {"a": "1"}


def test_load_returns_copy() -> None:
    """Changing a loaded mapping does not change the driver."""
    driver = MemoryDriver({"a": "1"})
    loaded = driver.load()
    loaded["a"] = "2"
    loaded["b"] = "3"
    assert driver.load() == {"a": "1"}


def test_seed_is_copied() -> None:
    """Changing the seed mapping does not change the driver."""
    seed = {"a": "1"}
    driver = MemoryDriver(seed)
    seed["a"] = "2"
    assert driver.load() == {"a": "1"}


def test_save_replaces() -> None:
    """Saving replaces the held entries rather than merging."""
    driver = MemoryDriver({"a": "1", "b": "2"})
    mapping = {"c": "3"}
    driver.save(mapping)
    mapping["d"] = "4"
    assert driver.load() == {"c": "3"}
