"""Public package surface for ``lib_config_lookup``.

Exports the composition-root helpers, the service and store types, the error
taxonomy, and the logging hooks so ``import lib_config_lookup`` is enough for
typical callers.
"""

from __future__ import annotations

from .core import (
    CONNECTION_TIMEOUT_KEY,
    DEFAULT_CONNECTION_TIMEOUT,
    ConfigError,
    ConfigKey,
    ConfigurationService,
    InMemoryValueStore,
    StoreContractError,
    StoreUnavailable,
    ValueStore,
    build_service,
    get_connection_timeout_setting,
    get_setting,
)
from .observability import bind_trace_id, get_logger
from .testing import FailingValueStore, i_should_fail

__all__ = [
    "CONNECTION_TIMEOUT_KEY",
    "DEFAULT_CONNECTION_TIMEOUT",
    "ConfigError",
    "ConfigKey",
    "ConfigurationService",
    "FailingValueStore",
    "InMemoryValueStore",
    "StoreContractError",
    "StoreUnavailable",
    "ValueStore",
    "bind_trace_id",
    "build_service",
    "get_connection_timeout_setting",
    "get_logger",
    "get_setting",
    "i_should_fail",
]
