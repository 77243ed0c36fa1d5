"""Testing diagnostics that keep failure scenarios observable and predictable.

Purpose
    Provide intentionally failing helpers that exercise the recovery path of
    the configuration service and the error handling of the CLI.

Contents
    - ``FAILURE_MESSAGE``: stable message used when forcing a failure.
    - ``i_should_fail``: raises ``RuntimeError`` with ``FAILURE_MESSAGE``.
    - ``FailingValueStore``: a value store whose every lookup raises.
"""

from __future__ import annotations

from typing import Final

from .domain.errors import StoreUnavailable

FAILURE_MESSAGE: Final[str] = "i should fail"
"""Stable message emitted when ``i_should_fail`` triggers a failure sequence."""


def i_should_fail() -> None:
    """Raise a deterministic :class:`RuntimeError` for failure-path testing.

    Examples
    --------
    >>> i_should_fail()
    Traceback (most recent call last):
    ...
    RuntimeError: i should fail
    """

    raise RuntimeError(FAILURE_MESSAGE)


class FailingValueStore:
    """Value store simulating a backend that breaks on every lookup.

    Parameters
    ----------
    error:
        Exception instance to raise. Defaults to :class:`StoreUnavailable`
        carrying :data:`FAILURE_MESSAGE`.

    Examples
    --------
    >>> FailingValueStore().lookup_int('ConnectionTimeoutSeconds')
    Traceback (most recent call last):
    ...
    lib_config_lookup.domain.errors.StoreUnavailable: i should fail
    """

    def __init__(self, error: Exception | None = None) -> None:
        self._error = error if error is not None else StoreUnavailable(FAILURE_MESSAGE)
        self.calls: list[str] = []

    def lookup_int(self, key: str) -> int | None:
        self.calls.append(key)
        raise self._error
