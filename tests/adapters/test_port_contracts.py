"""Adapter contract tests for the value store port.

Verify the in-memory adapter and the testing double keep satisfying
:class:`lib_config_lookup.application.ports.ValueStore` so the service can stay
agnostic of concrete stores.
"""

from __future__ import annotations

from lib_config_lookup.adapters.store import InMemoryValueStore
from lib_config_lookup.application import ports
from lib_config_lookup.testing import FailingValueStore


def test_in_memory_store_contract() -> None:
    store = InMemoryValueStore()
    assert isinstance(store, ports.ValueStore)
    assert store.lookup_int("ConnectionTimeoutSeconds") == 30


def test_failing_store_contract() -> None:
    assert isinstance(FailingValueStore(), ports.ValueStore)


def test_plain_object_is_not_a_store() -> None:
    assert not isinstance(object(), ports.ValueStore)
