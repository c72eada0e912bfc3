"""Client configuration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

DEFAULT_NAMESPACE = "https://example.smartschool.be/Webservices/V3"


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """Transport-related settings.

    A timeout of ``None`` waits indefinitely for the server.
    """

    timeout_connect_seconds: float | None = None
    timeout_read_seconds: float | None = None
    timeout_write_seconds: float | None = None
    timeout_pool_seconds: float | None = None
    raise_for_status: bool = False

    def validate(self) -> None:
        for field_name in (
            "timeout_connect_seconds",
            "timeout_read_seconds",
            "timeout_write_seconds",
            "timeout_pool_seconds",
        ):
            value = getattr(self, field_name)
            if value is not None and value <= 0:
                raise ValueError(f"transport.{field_name} must be > 0")
        if not isinstance(self.raise_for_status, bool):
            raise ValueError("transport.raise_for_status must be bool")


@dataclass(slots=True, frozen=True)
class SmartschoolClientConfig:
    """Runtime configuration for Smartschool client."""

    api_endpoint: str
    accesscode: str = field(repr=False)
    namespace: str = DEFAULT_NAMESPACE
    user_agent: str = "smartschool-client/0.1.0"

    transport: TransportConfig = field(default_factory=TransportConfig)

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> "SmartschoolClientConfig":
        """Build a config from the ``{"apiEndpoint", "accesscode"}`` JSON shape."""

        try:
            api_endpoint = data["apiEndpoint"]
            accesscode = data["accesscode"]
        except KeyError as exc:
            raise ValueError(f"config is missing required key {exc.args[0]!r}") from exc
        return cls(api_endpoint=str(api_endpoint), accesscode=str(accesscode))

    def validate(self) -> None:
        if not self.api_endpoint:
            raise ValueError("api_endpoint must not be empty")
        if not self.api_endpoint.startswith(("http://", "https://")):
            raise ValueError("api_endpoint must be an http(s) URL")
        if not isinstance(self.accesscode, str):
            raise ValueError("accesscode must be str")
        if not self.namespace:
            raise ValueError("namespace must not be empty")
        self.transport.validate()


__all__ = [
    "DEFAULT_NAMESPACE",
    "TransportConfig",
    "SmartschoolClientConfig",
]
