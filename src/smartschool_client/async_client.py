"""Public async client entrypoint."""

from __future__ import annotations

from collections.abc import Mapping
from types import TracebackType

from .client_shared import prepare_invocation, validate_client_config
from .config import SmartschoolClientConfig
from .core.async_dispatcher import AsyncPostTransport, AsyncRequestDispatcher
from .core.async_transport import AsyncTransport
from .core.error_catalog import ErrorCatalog
from .core.errors import SmartschoolClientClosedError


class AsyncSmartschoolClient:
    """Public async Smartschool webservices client."""

    def __init__(
        self,
        config: SmartschoolClientConfig,
        *,
        transport: AsyncPostTransport | None = None,
        dispatcher: AsyncRequestDispatcher | None = None,
    ) -> None:
        self._config = config
        validate_client_config(self._config)

        self._transport = transport or AsyncTransport(self._config)
        self._dispatcher = dispatcher or AsyncRequestDispatcher(self._config, self._transport)
        self._closed = False

    @property
    def error_catalog(self) -> ErrorCatalog:
        return self._dispatcher.catalog

    async def call(
        self,
        method_name: str,
        params: Mapping[str, object] | None = None,
        *,
        needs_auth: bool = True,
    ) -> object:
        self._ensure_open()
        return await self._dispatcher.call(method_name, params, needs_auth=needs_auth)

    async def invoke(
        self,
        method_name: str,
        /,
        *,
        extra: Mapping[str, object] | None = None,
        **params: object,
    ) -> object:
        self._ensure_open()
        endpoint, call_params = prepare_invocation(method_name, params, extra)
        return await self._dispatcher.call(
            endpoint.name,
            call_params,
            needs_auth=endpoint.needs_auth,
        )

    def _ensure_open(self) -> None:
        if self._closed:
            raise SmartschoolClientClosedError("AsyncSmartschoolClient is already closed")

    async def close(self) -> None:
        if self._closed:
            return
        await self._transport.close()
        self._closed = True

    async def __aenter__(self) -> "AsyncSmartschoolClient":
        self._ensure_open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        await self.close()
        return False


__all__ = [
    "AsyncSmartschoolClient",
]
