"""Shared fixtures for typed-kv tests."""

import pytest

from typed_kv import Store
from typed_kv.driver import MemoryDriver, KeyValueMapping


@pytest.fixture
def mapping() -> KeyValueMapping:
    """Key value pairs covering every typed getter."""
    return {
        "a": "123",
        "a_neg": "-123",
        "b": "4.56",
        "b_neg": "-4.56",
        "c": "789",
        "c_neg": "-789",
        "d": "10.1112",
        "d_neg": "-10.1112",
        "x": "abc",
        "y": "true",
        "z": "demon",
    }


@pytest.fixture
def store(mapping: KeyValueMapping) -> Store:
    """A store loaded from a seeded memory driver."""
    store = Store()
    store.set_driver(MemoryDriver(mapping))
    store.load()
    return store
