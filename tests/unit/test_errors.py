from __future__ import annotations

from lib_config_lookup.domain.errors import ConfigError, StoreContractError, StoreUnavailable


def test_error_hierarchy() -> None:
    assert issubclass(StoreUnavailable, ConfigError)
    assert issubclass(StoreContractError, ConfigError)
    for exception in (StoreUnavailable(""), StoreContractError("")):
        assert isinstance(exception, ConfigError)
