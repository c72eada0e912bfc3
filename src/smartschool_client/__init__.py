"""Public package exports for Smartschool client."""

from .async_client import AsyncSmartschoolClient
from .client import SmartschoolClient
from .config import SmartschoolClientConfig, TransportConfig
from .core.errors import (
    SmartschoolApiError,
    SmartschoolClientClosedError,
    SmartschoolDecodeError,
    SmartschoolError,
    SmartschoolTransportError,
    SmartschoolValidationError,
)

__all__ = [
    "SmartschoolClient",
    "AsyncSmartschoolClient",
    "SmartschoolClientConfig",
    "TransportConfig",
    "SmartschoolApiError",
    "SmartschoolError",
    "SmartschoolTransportError",
    "SmartschoolDecodeError",
    "SmartschoolValidationError",
    "SmartschoolClientClosedError",
]
