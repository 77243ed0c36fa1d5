"""Structured logging for configuration lookups.

Purpose
    Record what happened to each lookup so operators can tell a missing key
    from a broken store, even though both hand callers the same default.

Contents
    - ``TRACE_ID``: context variable correlating the events of one request.
    - ``get_logger``: the ``lib_config_lookup`` logger, silent until a host
      application attaches a handler.
    - ``bind_trace_id``: tag subsequent lookup events with a request identifier.
    - ``log_debug`` / ``log_info`` / ``log_error``: one per event severity.
    - ``make_event``: builds the ``key`` / ``source`` payload every event carries.

Event catalogue
    ========================  =======  ======================================
    message                   level    emitted by
    ========================  =======  ======================================
    ``value_found``           DEBUG    store, key present (``value`` field)
    ``value_missing``         DEBUG    store, key absent
    ``value_converted``       DEBUG    service, decimal string produced
    ``value_defaulted``       INFO     service, absent value replaced
    ``value_lookup_failed``   ERROR    service, failure recovered
                                       (``error`` / ``error_type`` fields)
    ========================  =======  ======================================

Every record exposes its fields as ``record.context`` with ``trace_id`` first.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Any, Final, Mapping

TRACE_ID: ContextVar[str | None] = ContextVar("lib_config_lookup_trace_id", default=None)
"""Identifier attached to every lookup event; ``None`` when nothing is bound."""

_LOGGER: Final[logging.Logger] = logging.getLogger("lib_config_lookup")
_LOGGER.addHandler(logging.NullHandler())


def get_logger() -> logging.Logger:
    """Return the logger lookup events are sent to.

    Attach a handler and set ``DEBUG`` to see store hits and misses; ``INFO``
    shows only defaults and recovered failures.
    """

    return _LOGGER


def bind_trace_id(trace_id: str | None) -> None:
    """Tag the lookups that follow with *trace_id*; ``None`` removes the tag.

    Examples
    --------
    >>> bind_trace_id('request-42')
    >>> TRACE_ID.get()
    'request-42'
    >>> bind_trace_id(None)
    >>> TRACE_ID.get() is None
    True
    """

    TRACE_ID.set(trace_id)


def log_debug(message: str, **fields: Any) -> None:
    """Record a routine lookup step (hit, miss, conversion)."""

    _emit(logging.DEBUG, message, fields)


def log_info(message: str, **fields: Any) -> None:
    """Record that a caller received a default instead of a stored value."""

    _emit(logging.INFO, message, fields)


def log_error(message: str, **fields: Any) -> None:
    """Record a lookup failure the service recovered from."""

    _emit(logging.ERROR, message, fields)


def make_event(
    key: str,
    source: str,
    payload: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Build a structured logging payload for a single configuration lookup.

    Why
        Downstream log processors rely on stable ``key`` / ``source`` fields.
    Inputs
        key: Configuration key being looked up.
        source: Component emitting the event (``"store"`` or ``"service"``).
        payload: Optional mapping with extra diagnostic detail.

    Examples
    --------
    >>> make_event('ConnectionTimeoutSeconds', 'store', {'value': 30})
    {'key': 'ConnectionTimeoutSeconds', 'source': 'store', 'value': 30}
    """

    event: dict[str, Any] = {"key": key, "source": source}
    if payload:
        event |= dict(payload)
    return event


def _emit(level: int, message: str, fields: Mapping[str, Any]) -> None:
    """Send one lookup event with the bound trace identifier leading its context."""

    _LOGGER.log(level, message, extra={"context": {"trace_id": TRACE_ID.get(), **fields}})
