from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from smartschool_client.config import (
    DEFAULT_NAMESPACE,
    SmartschoolClientConfig,
    TransportConfig,
)

ENDPOINT = "https://school.smartschool.be/Webservices/V3"


def test_config_validate_rejects_empty_endpoint():
    cfg = SmartschoolClientConfig(api_endpoint="", accesscode="x")
    with pytest.raises(ValueError, match="api_endpoint must not be empty"):
        cfg.validate()


def test_config_validate_rejects_non_http_endpoint():
    cfg = SmartschoolClientConfig(api_endpoint="ftp://school", accesscode="x")
    with pytest.raises(ValueError, match="http"):
        cfg.validate()


def test_config_validate_rejects_non_str_accesscode():
    cfg = SmartschoolClientConfig(api_endpoint=ENDPOINT, accesscode=123)  # type: ignore[arg-type]
    with pytest.raises(ValueError, match="accesscode must be str"):
        cfg.validate()


def test_config_validate_rejects_empty_namespace():
    cfg = SmartschoolClientConfig(api_endpoint=ENDPOINT, accesscode="x", namespace="")
    with pytest.raises(ValueError, match="namespace"):
        cfg.validate()


def test_config_is_immutable():
    cfg = SmartschoolClientConfig(api_endpoint=ENDPOINT, accesscode="x")
    with pytest.raises(FrozenInstanceError):
        cfg.accesscode = "y"


def test_config_defaults():
    cfg = SmartschoolClientConfig(api_endpoint=ENDPOINT, accesscode="x")
    cfg.validate()
    assert cfg.namespace == DEFAULT_NAMESPACE
    assert cfg.transport.timeout_read_seconds is None
    assert cfg.transport.raise_for_status is False


def test_config_repr_hides_accesscode():
    cfg = SmartschoolClientConfig(api_endpoint=ENDPOINT, accesscode="super-secret")
    assert "super-secret" not in repr(cfg)


def test_config_from_mapping_reads_json_shape():
    cfg = SmartschoolClientConfig.from_mapping({"apiEndpoint": ENDPOINT, "accesscode": "abc"})
    assert cfg.api_endpoint == ENDPOINT
    assert cfg.accesscode == "abc"


def test_config_from_mapping_requires_keys():
    with pytest.raises(ValueError, match="accesscode"):
        SmartschoolClientConfig.from_mapping({"apiEndpoint": ENDPOINT})


@pytest.mark.parametrize(
    "field",
    [
        "timeout_connect_seconds",
        "timeout_read_seconds",
        "timeout_write_seconds",
        "timeout_pool_seconds",
    ],
)
def test_transport_config_rejects_non_positive_timeouts(field: str):
    cfg = SmartschoolClientConfig(
        api_endpoint=ENDPOINT,
        accesscode="x",
        transport=TransportConfig(**{field: 0.0}),
    )
    with pytest.raises(ValueError, match=f"transport.{field} must be > 0"):
        cfg.validate()


def test_transport_config_rejects_non_bool_raise_for_status():
    cfg = TransportConfig(raise_for_status="yes")  # type: ignore[arg-type]
    with pytest.raises(ValueError, match="transport.raise_for_status must be bool"):
        cfg.validate()
