"""Composition root for ``lib_config_lookup``.

Purpose
-------
Wire the default in-memory store into a
:class:`~lib_config_lookup.application.service.ConfigurationService` and expose
module-level helpers for callers that do not need to manage the objects
themselves.

Contents
--------
* :func:`build_service` – construct a service over the default or a supplied
  dataset.
* :func:`get_connection_timeout_setting` – one-shot connection timeout lookup.
* :func:`get_setting` – one-shot lookup for any key.
"""

from __future__ import annotations

from typing import Mapping

from .adapters.store.memory import InMemoryValueStore
from .application.ports import ValueStore
from .application.service import ConfigurationService
from .domain.errors import ConfigError, StoreContractError, StoreUnavailable
from .domain.settings import CONNECTION_TIMEOUT_KEY, DEFAULT_CONNECTION_TIMEOUT, ConfigKey


def build_service(values: Mapping[str, int] | None = None) -> ConfigurationService:
    """Return a service reading from an :class:`InMemoryValueStore`.

    Parameters
    ----------
    values:
        Optional dataset replacing the default ``{"ConnectionTimeoutSeconds": 30}``.

    Examples
    --------
    >>> build_service({"ConnectionTimeoutSeconds": 45}).get_connection_timeout_setting()
    '45'
    """

    return ConfigurationService(InMemoryValueStore(values=values))


def get_connection_timeout_setting() -> str:
    """Return the connection timeout from the default dataset.

    Examples
    --------
    >>> get_connection_timeout_setting()
    '30'
    """

    return build_service().get_connection_timeout_setting()


def get_setting(key: str, default: str) -> str:
    """Return *key* from the default dataset as a string, or *default*.

    Examples
    --------
    >>> get_setting("MaxRetries", default="3")
    '3'
    """

    return build_service().get_setting(key, default)


__all__ = [
    "CONNECTION_TIMEOUT_KEY",
    "DEFAULT_CONNECTION_TIMEOUT",
    "ConfigError",
    "ConfigKey",
    "ConfigurationService",
    "InMemoryValueStore",
    "StoreContractError",
    "StoreUnavailable",
    "ValueStore",
    "build_service",
    "get_connection_timeout_setting",
    "get_setting",
]
