from __future__ import annotations

import pytest

from smartschool_client import (
    AsyncSmartschoolClient,
    SmartschoolClient,
    SmartschoolError,
)
from smartschool_client.core.async_transport import AsyncTransport
from smartschool_client.core.transport import SyncTransport
from tests.shared.mock_server import FakeSmartschoolServer
from tests.shared.payloads import base64_body, soap_env_body, soap_return
from tests.shared.transport import build_config

BODIES = {
    "status": soap_return("0"),
    "number": soap_return("4242"),
    "nested-xml": soap_return("<username>john.doe</username><status>actief</status>"),
    "json-return": soap_return('{"1A": ["john.doe"]}'),
    "soap-env-json": soap_env_body('{"courses": [1, 2]}'),
    "base64": base64_body(soap_return("<photo>aGVsbG8=</photo>")),
    "plain-text": "1;Fout\n2;Andere fout",
    "bare-json": '{"ok": true}',
}


@pytest.mark.asyncio
@pytest.mark.parametrize("body", list(BODIES.values()), ids=list(BODIES))
async def test_sync_async_decode_equivalence(body: str):
    sync_server = FakeSmartschoolServer({"getCourses": (200, body)})
    async_server = FakeSmartschoolServer({"getCourses": (200, body)})
    config = build_config()

    with SmartschoolClient(
        config,
        transport=SyncTransport(config, client=sync_server.sync_client()),
    ) as sync_client:
        sync_result = sync_client.call("getCourses")

    async with AsyncSmartschoolClient(
        config,
        transport=AsyncTransport(config, client=async_server.async_client()),
    ) as async_client:
        async_result = await async_client.call("getCourses")

    assert sync_result == async_result
    assert sync_server.methods == async_server.methods == ["returnJsonErrorCodes", "getCourses"]


@pytest.mark.asyncio
async def test_sync_async_domain_error_equivalence():
    config = build_config()
    routes = {"getUserDetails": (200, soap_return("12"))}
    sync_server = FakeSmartschoolServer(routes)
    async_server = FakeSmartschoolServer(routes)

    with SmartschoolClient(
        config,
        transport=SyncTransport(config, client=sync_server.sync_client()),
    ) as sync_client:
        with pytest.raises(SmartschoolError) as sync_exc:
            sync_client.invoke("getUserDetails", userIdentifier="nobody")

    async with AsyncSmartschoolClient(
        config,
        transport=AsyncTransport(config, client=async_server.async_client()),
    ) as async_client:
        with pytest.raises(SmartschoolError) as async_exc:
            await async_client.invoke("getUserDetails", userIdentifier="nobody")

    assert (sync_exc.value.code, sync_exc.value.message) == (
        async_exc.value.code,
        async_exc.value.message,
    )
