"""Known configuration keys, their fallbacks, and the simulated dataset."""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping, NewType

ConfigKey = NewType("ConfigKey", str)

CONNECTION_TIMEOUT_KEY: Final[ConfigKey] = ConfigKey("ConnectionTimeoutSeconds")
DEFAULT_CONNECTION_TIMEOUT: Final[str] = "60"

# Values as the simulated backend stores them: integers, not strings.
DEFAULT_VALUES: Final[Mapping[str, int]] = MappingProxyType({CONNECTION_TIMEOUT_KEY: 30})
