"""Shared helpers for sync/async transport implementations."""

from __future__ import annotations

from collections.abc import Mapping

import httpx

from ..config import SmartschoolClientConfig
from .errors import SmartschoolTransportError

REQUEST_HEADERS: Mapping[str, str] = {"Content-Type": "application/xml"}


def build_default_headers(config: SmartschoolClientConfig) -> Mapping[str, str]:
    return {
        "Accept-Encoding": "gzip",
        "User-Agent": config.user_agent,
    }


def build_default_timeout(config: SmartschoolClientConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


def check_http_status(
    config: SmartschoolClientConfig,
    http_status: int | None,
) -> None:
    """Raise for 4xx/5xx only when the config asks for it.

    By default SOAP faults arrive with an error status and are decoded like
    any other body.
    """

    if not config.transport.raise_for_status:
        return
    if http_status is not None and http_status >= 400:
        raise SmartschoolTransportError(
            f"HTTP {http_status} from Smartschool endpoint",
            http_status=http_status,
            cause="http_status",
        )


def read_response_text(response: object) -> str:
    text = getattr(response, "text", None)
    if isinstance(text, str):
        return text
    content = getattr(response, "content", b"")
    if isinstance(content, (bytes, bytearray)):
        return content.decode("utf-8", errors="replace")
    return str(content)


__all__ = [
    "REQUEST_HEADERS",
    "build_default_headers",
    "build_default_timeout",
    "check_http_status",
    "read_response_text",
]
