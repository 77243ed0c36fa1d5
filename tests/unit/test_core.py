from __future__ import annotations

import lib_config_lookup
from lib_config_lookup import build_service, get_connection_timeout_setting, get_setting


def test_module_level_timeout_lookup() -> None:
    assert get_connection_timeout_setting() == "30"


def test_module_level_get_setting_falls_back() -> None:
    assert get_setting("ReadTimeoutSeconds", default="15") == "15"


def test_build_service_with_custom_dataset() -> None:
    service = build_service({"ConnectionTimeoutSeconds": 45, "MaxRetries": 3})
    assert service.get_connection_timeout_setting() == "45"
    assert service.get_setting("MaxRetries", default="0") == "3"


def test_build_service_without_timeout_key_defaults() -> None:
    assert build_service({}).get_connection_timeout_setting() == "60"


def test_public_surface() -> None:
    for name in lib_config_lookup.__all__:
        assert hasattr(lib_config_lookup, name)
