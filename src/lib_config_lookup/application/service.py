"""Configuration service normalising stored integers into strings.

Purpose
-------
Sit between an integer-typed value store and consumers that expect string
settings. The service is total: it always returns a ``str`` and never lets a
storage failure reach its caller.

Contents
--------
* :class:`ConfigurationService` – owns a :class:`~.ports.ValueStore` and exposes
  :meth:`~ConfigurationService.get_setting` plus the connection-timeout
  shortcut.
* :func:`_to_config_string` – conversion guard rejecting non-integer answers.

System Role
-----------
Absent values and unexpected failures both collapse to the setting's default.
They differ only in the events emitted through
:mod:`lib_config_lookup.observability`.
"""

from __future__ import annotations

import contextlib

from ..domain.errors import StoreContractError
from ..domain.settings import CONNECTION_TIMEOUT_KEY, DEFAULT_CONNECTION_TIMEOUT
from ..observability import log_debug, log_error, log_info, make_event
from .ports import ValueStore


class ConfigurationService:
    """Provide configuration values as strings regardless of storage type.

    Parameters
    ----------
    store:
        Collaborator answering ``lookup_int`` calls.

    Examples
    --------
    >>> from lib_config_lookup.adapters.store import InMemoryValueStore
    >>> service = ConfigurationService(InMemoryValueStore())
    >>> service.get_connection_timeout_setting()
    '30'
    >>> service.get_setting('Unknown', default='60')
    '60'
    """

    def __init__(self, store: ValueStore) -> None:
        self._store = store

    @property
    def store(self) -> ValueStore:
        """Return the store this service reads from."""

        return self._store

    def get_connection_timeout_setting(self) -> str:
        """Return the connection timeout in seconds as a string (``"60"`` on fallback)."""

        return self.get_setting(CONNECTION_TIMEOUT_KEY, DEFAULT_CONNECTION_TIMEOUT)

    def get_setting(self, key: str, default: str) -> str:
        """Return the decimal string form of the value stored under *key*.

        Why
        ----
        Consumers of this service only understand strings, while the store
        keeps integers.

        What
        ----
        Looks up *key*, renders a present integer in plain decimal, and returns
        *default* when the value is absent or when the lookup or conversion
        raises any :class:`Exception`.

        Side Effects
        ------------
        Emits ``value_converted``, ``value_defaulted`` or ``value_lookup_failed``.
        """

        try:
            value = self._store.lookup_int(key)
            if value is None:
                log_info("value_defaulted", **make_event(key, "service", {"default": default}))
                return default
            converted = _to_config_string(value)
            log_debug("value_converted", **make_event(key, "service", {"value": converted}))
            return converted
        except Exception as exc:  # noqa: BLE001 - every failure degrades to the default
            _report_failure(key, default, exc)
            return default


def _report_failure(key: str, default: str, exc: Exception) -> None:
    """Log a recovered lookup failure; a broken logger must not break the fallback."""

    fields = {"default": default, "error": _describe_error(exc), "error_type": type(exc).__name__}
    with contextlib.suppress(Exception):
        log_error("value_lookup_failed", **make_event(key, "service", fields))


def _describe_error(exc: Exception) -> str:
    """Return ``str(exc)``, or a placeholder when the exception cannot render itself.

    Examples
    --------
    >>> _describe_error(ValueError("bad value"))
    'bad value'
    >>> class Unprintable(Exception):
    ...     def __str__(self):
    ...         raise RuntimeError("cannot render")
    >>> _describe_error(Unprintable())
    '<unprintable Unprintable>'
    """

    try:
        return str(exc)
    except Exception:  # noqa: BLE001
        return f"<unprintable {type(exc).__name__}>"


def _to_config_string(value: object) -> str:
    """Return the canonical base-10 text of *value* or raise ``StoreContractError``.

    ``int.__repr__`` renders the integer itself, so ``int`` subclasses (``IntEnum``
    members included) cannot substitute their own ``__str__``.

    Examples
    --------
    >>> _to_config_string(30)
    '30'
    >>> _to_config_string(-7)
    '-7'
    >>> _to_config_string(True)
    Traceback (most recent call last):
    ...
    lib_config_lookup.domain.errors.StoreContractError: store returned bool, expected int
    """

    if isinstance(value, bool) or not isinstance(value, int):
        raise StoreContractError(f"store returned {type(value).__name__}, expected int")
    return int.__repr__(value)
