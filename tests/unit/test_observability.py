"""Unit tests for structured logging utilities in ``observability``."""

from __future__ import annotations

import logging

import pytest

from lib_config_lookup import bind_trace_id, get_logger
from lib_config_lookup.observability import TRACE_ID, log_info, make_event


def test_null_handler_present() -> None:
    """Package logger should always include a NullHandler to avoid surprises."""

    logger = get_logger()
    assert any(isinstance(handler, logging.NullHandler) for handler in logger.handlers)


def test_trace_id_in_log(caplog: pytest.LogCaptureFixture) -> None:
    """Structured logs should include the bound trace identifier and contextual fields."""

    caplog.set_level(logging.INFO, logger="lib_config_lookup")
    bind_trace_id("trace-123")
    try:
        log_info("value_defaulted", key="Missing", source="service")
    finally:
        bind_trace_id(None)
    record = caplog.records[-1]
    assert getattr(record, "context") == {"trace_id": "trace-123", "key": "Missing", "source": "service"}


def test_bind_trace_id_clears_context() -> None:
    bind_trace_id("trace-temp")
    bind_trace_id(None)
    assert TRACE_ID.get() is None


def test_make_event_without_payload() -> None:
    assert make_event("ConnectionTimeoutSeconds", "store") == {"key": "ConnectionTimeoutSeconds", "source": "store"}


def test_make_event_merges_optional_payload() -> None:
    event = make_event("ConnectionTimeoutSeconds", "store", {"value": 30})
    assert event == {"key": "ConnectionTimeoutSeconds", "source": "store", "value": 30}


def test_lookup_events_carry_bound_trace_id(caplog: pytest.LogCaptureFixture) -> None:
    """Store and service events of one lookup should share the bound trace identifier."""

    from lib_config_lookup import build_service

    caplog.set_level(logging.DEBUG, logger="lib_config_lookup")
    bind_trace_id("request-42")
    try:
        build_service().get_connection_timeout_setting()
    finally:
        bind_trace_id(None)
    assert [record.getMessage() for record in caplog.records] == ["value_found", "value_converted"]
    assert {getattr(record, "context")["trace_id"] for record in caplog.records} == {"request-42"}
