"""Error types and decoded-result classification."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .error_catalog import ErrorCatalog


class SmartschoolApiError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        http_status: int | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.http_status = http_status
        self.cause = cause


class SmartschoolError(SmartschoolApiError):
    """The server answered with a known error code."""

    def __init__(self, message: str, *, code: str) -> None:
        super().__init__(message, code=code, cause="domain")


class SmartschoolTransportError(SmartschoolApiError):
    """Network/transport-level failure."""


class SmartschoolDecodeError(SmartschoolApiError):
    """No decoding strategy could make sense of the response body."""


class SmartschoolValidationError(SmartschoolApiError):
    """Invalid input / request rejected before sending."""


class SmartschoolClientClosedError(SmartschoolApiError):
    """Raised when client is used after close."""


def classify_decoded_result(
    code: str | None,
    catalog: "ErrorCatalog",
) -> SmartschoolError | None:
    """Map a stringified decoded result to a domain error, if it is a known code."""

    from .error_catalog import decode_entities

    if code is None:
        return None
    message = catalog.lookup(code)
    if message is None:
        return None
    return SmartschoolError(decode_entities(message), code=code)


__all__ = [
    "SmartschoolApiError",
    "SmartschoolError",
    "SmartschoolTransportError",
    "SmartschoolDecodeError",
    "SmartschoolValidationError",
    "SmartschoolClientClosedError",
    "classify_decoded_result",
]
