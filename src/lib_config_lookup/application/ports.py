"""Application-layer port describing the storage collaborator.

Purpose
-------
Define the structural contract a value store must satisfy so the
configuration service never depends on a concrete backend.

Contents
--------
* :class:`ValueStore` – keyed lookup returning optional integers.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ValueStore(Protocol):
    """Look up integer-typed configuration values by key.

    Why
    ----
    The service only needs one capability from storage; keeping it structural
    lets tests pass any object with a matching ``lookup_int``.
    """

    def lookup_int(self, key: str) -> int | None:
        """Return the stored integer for *key* or ``None`` when absent.

        Absence is a normal result and must not raise.
        """
