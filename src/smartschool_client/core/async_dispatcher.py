"""Async single-call request execution: encode, POST, decode, classify."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Protocol

from ..config import SmartschoolClientConfig
from ..endpoints import get_endpoint
from .dispatch_shared import (
    ERROR_CODES_METHOD,
    build_call_params,
    resolve_decoded_result,
)
from .envelope import build_envelope
from .error_catalog import CatalogPhase, ErrorCatalog
from .errors import SmartschoolError
from .response_parsing import decode_response

logger = logging.getLogger("smartschool_client")


class AsyncPostTransport(Protocol):
    async def post(self, envelope: str, *, method_name: str | None = None) -> str: ...
    async def close(self) -> None: ...


class AsyncRequestDispatcher:
    """Async twin of :class:`RequestDispatcher`.

    Calls started while the catalog is still being fetched do not wait for
    it; they run with whatever the catalog holds at that moment.
    """

    def __init__(
        self,
        config: SmartschoolClientConfig,
        transport: AsyncPostTransport,
        *,
        catalog: ErrorCatalog | None = None,
    ) -> None:
        self._config = config
        self._transport = transport
        self._catalog = catalog if catalog is not None else ErrorCatalog()

    @property
    def catalog(self) -> ErrorCatalog:
        return self._catalog

    async def call(
        self,
        method_name: str,
        params: Mapping[str, object] | None = None,
        *,
        needs_auth: bool = True,
    ) -> object:
        await self._ensure_error_catalog()

        call_params = build_call_params(
            method_name,
            params,
            accesscode=self._config.accesscode,
            needs_auth=needs_auth,
        )
        envelope = build_envelope(method_name, call_params, namespace=self._config.namespace)
        body = await self._transport.post(envelope, method_name=method_name)
        decoded = decode_response(body)
        try:
            result = resolve_decoded_result(decoded, self._catalog)
        except SmartschoolError as exc:
            logger.warning("request rejected method=%s code=%s", method_name, exc.code)
            raise
        logger.info("request success method=%s", method_name)
        return result

    async def _ensure_error_catalog(self) -> None:
        if not self._catalog.begin_initialization():
            return
        endpoint = get_endpoint(ERROR_CODES_METHOD)
        try:
            payload = await self.call(
                endpoint.name,
                endpoint.build_params({}),
                needs_auth=endpoint.needs_auth,
            )
            self._catalog.populate(payload)
        except Exception as exc:
            logger.warning(
                "error code catalog unavailable; continuing without it error=%s",
                exc,
            )
            self._catalog.mark_ready()
            return
        finally:
            # Cancellation and interrupts bypass the handler above.
            if self._catalog.phase is CatalogPhase.INITIALIZING:
                self._catalog.mark_ready()
        logger.info("error code catalog loaded codes=%s", len(self._catalog))


__all__ = [
    "AsyncRequestDispatcher",
]
