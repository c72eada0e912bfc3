"""Public client entrypoint."""

from __future__ import annotations

from collections.abc import Mapping
from types import TracebackType

from .client_shared import prepare_invocation, validate_client_config
from .config import SmartschoolClientConfig
from .core.dispatcher import RequestDispatcher, SyncPostTransport
from .core.error_catalog import ErrorCatalog
from .core.errors import SmartschoolClientClosedError
from .core.transport import SyncTransport


class SmartschoolClient:
    """Public Smartschool webservices client.

    ``call`` sends any method by name; ``invoke`` checks the parameters
    against the method registry first.
    """

    def __init__(
        self,
        config: SmartschoolClientConfig,
        *,
        transport: SyncPostTransport | None = None,
        dispatcher: RequestDispatcher | None = None,
    ) -> None:
        self._config = config
        validate_client_config(self._config)

        self._transport = transport or SyncTransport(self._config)
        self._dispatcher = dispatcher or RequestDispatcher(self._config, self._transport)
        self._closed = False

    @property
    def error_catalog(self) -> ErrorCatalog:
        return self._dispatcher.catalog

    def call(
        self,
        method_name: str,
        params: Mapping[str, object] | None = None,
        *,
        needs_auth: bool = True,
    ) -> object:
        self._ensure_open()
        return self._dispatcher.call(method_name, params, needs_auth=needs_auth)

    def invoke(
        self,
        method_name: str,
        /,
        *,
        extra: Mapping[str, object] | None = None,
        **params: object,
    ) -> object:
        self._ensure_open()
        endpoint, call_params = prepare_invocation(method_name, params, extra)
        return self._dispatcher.call(endpoint.name, call_params, needs_auth=endpoint.needs_auth)

    def _ensure_open(self) -> None:
        if self._closed:
            raise SmartschoolClientClosedError("SmartschoolClient is already closed")

    def close(self) -> None:
        if self._closed:
            return
        self._transport.close()
        self._closed = True

    def __enter__(self) -> "SmartschoolClient":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


__all__ = [
    "SmartschoolClient",
]
