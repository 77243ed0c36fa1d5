"""Domain-level exception hierarchy.

Purpose
-------
Expose the error taxonomy shared by store adapters and the configuration
service.

Contents
--------
* :class:`ConfigError` – umbrella base class for all lookup-related issues.
* :class:`StoreUnavailable` – the backing store could not answer a lookup.
* :class:`StoreContractError` – the store answered with a non-integer value.

System Role
-----------
A missing key is *not* an error: stores return ``None`` for absence. Everything
in this module describes an unexpected failure, which
:class:`~lib_config_lookup.application.service.ConfigurationService` recovers
from by returning the setting's default.
"""

from __future__ import annotations


class ConfigError(Exception):
    """Base type for all exceptions emitted by ``lib_config_lookup``.

    Why
    ----
    Provide a single catch-all type for consumers that do not need fine-grained
    handling.
    """


class StoreUnavailable(ConfigError):
    """Raised when a value store cannot serve a lookup at all.

    Typical Sources
    ---------------
    Adapters wrapping an external backend, and
    :class:`lib_config_lookup.testing.FailingValueStore`.
    """


class StoreContractError(ConfigError):
    """Raised when a store returns something other than ``int`` or ``None``.

    Why
    ----
    The service must never hand out a string built from a value of the wrong
    type, so such answers are rejected before conversion.
    """
