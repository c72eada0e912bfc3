"""Async HTTP transport: one POST per call, no retries."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Protocol

import httpx

from ..config import SmartschoolClientConfig
from .errors import SmartschoolTransportError
from .transport_shared import (
    REQUEST_HEADERS,
    build_default_headers,
    build_default_timeout,
    check_http_status,
    read_response_text,
)

logger = logging.getLogger("smartschool_client")


class AsyncTransportClient(Protocol):
    async def post(self, url: str, *, content: str, headers: Mapping[str, str]) -> object: ...
    async def aclose(self) -> None: ...


class AsyncTransport:
    """Asynchronous transport for the Smartschool SOAP endpoint."""

    def __init__(
        self,
        config: SmartschoolClientConfig,
        *,
        client: AsyncTransportClient | None = None,
    ) -> None:
        self._config = config
        self._closed = False
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            headers=build_default_headers(config),
            timeout=build_default_timeout(config),
        )

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client and hasattr(self._client, "aclose"):
            await self._client.aclose()

    async def post(self, envelope: str, *, method_name: str | None = None) -> str:
        if self._closed:
            raise SmartschoolTransportError("transport is already closed")

        endpoint = self._config.api_endpoint
        logger.debug("request start method=%s endpoint=%s", method_name, endpoint)
        try:
            response = await self._client.post(
                endpoint,
                content=envelope,
                headers=REQUEST_HEADERS,
            )
        except Exception as exc:
            logger.error(
                "request network error method=%s endpoint=%s error=%s",
                method_name,
                endpoint,
                exc.__class__.__name__,
            )
            raise SmartschoolTransportError(
                "network/transport error",
                cause="network",
            ) from exc

        http_status = getattr(response, "status_code", None)
        logger.debug(
            "response received method=%s http_status=%s",
            method_name,
            http_status,
        )
        check_http_status(self._config, http_status)
        if http_status is not None and http_status >= 400:
            logger.warning(
                "non-success http status; decoding body anyway method=%s http_status=%s",
                method_name,
                http_status,
            )
        return read_response_text(response)


__all__ = [
    "AsyncTransport",
]
