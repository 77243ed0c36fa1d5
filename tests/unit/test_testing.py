from __future__ import annotations

import pytest

from lib_config_lookup.domain.errors import StoreUnavailable
from lib_config_lookup.testing import FAILURE_MESSAGE, FailingValueStore, i_should_fail


def test_i_should_fail_raises_runtime_error() -> None:
    with pytest.raises(RuntimeError, match="^i should fail$"):
        i_should_fail()


def test_i_should_fail_reexported() -> None:
    from lib_config_lookup import i_should_fail as exported
    from lib_config_lookup.testing import i_should_fail as original

    assert exported is original


def test_failing_store_raises_store_unavailable_by_default() -> None:
    store = FailingValueStore()
    with pytest.raises(StoreUnavailable, match=FAILURE_MESSAGE):
        store.lookup_int("ConnectionTimeoutSeconds")
    assert store.calls == ["ConnectionTimeoutSeconds"]


def test_failing_store_raises_supplied_error() -> None:
    store = FailingValueStore(KeyError("boom"))
    with pytest.raises(KeyError):
        store.lookup_int("anything")
