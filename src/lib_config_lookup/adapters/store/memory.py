"""In-memory value store adapter.

Purpose
-------
Simulate a database table of configuration values whose column type is
integer. The dataset is fixed at construction and never mutated afterwards.

Key behaviours
--------------
* Exact, case-sensitive key matching.
* Absent keys yield ``None`` instead of raising.
* Every lookup emits a ``value_found`` or ``value_missing`` debug event.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from ...domain.settings import DEFAULT_VALUES
from ...observability import log_debug, make_event


class InMemoryValueStore:
    """Serve integer configuration values from a frozen mapping.

    Examples
    --------
    >>> store = InMemoryValueStore()
    >>> store.lookup_int('ConnectionTimeoutSeconds')
    30
    >>> store.lookup_int('connectiontimeoutseconds') is None
    True
    >>> InMemoryValueStore(values={'Retries': 3}).keys()
    ['Retries']
    """

    def __init__(self, *, values: Mapping[str, int] | None = None) -> None:
        """Initialise the store with *values* or the default dataset.

        Parameters
        ----------
        values:
            Mapping of keys to integers. It is copied so later changes to the
            caller's mapping do not leak into the store.
        """

        source = DEFAULT_VALUES if values is None else values
        self._values: Mapping[str, int] = MappingProxyType(dict(source))

    def lookup_int(self, key: str) -> int | None:
        """Return the integer stored under *key* or ``None`` when absent."""

        value = self._values.get(key)
        if value is None:
            log_debug("value_missing", **make_event(key, "store"))
            return None
        log_debug("value_found", **make_event(key, "store", {"value": value}))
        return value

    def keys(self) -> list[str]:
        """Return the known keys in sorted order."""

        return sorted(self._values)
