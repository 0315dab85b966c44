"""Shared fixtures: a DNS service wired to an in-memory API."""

from collections.abc import AsyncIterator

import httpx
import pytest
import pytest_asyncio

from clouddns import ComputeServer, DnsService, Domain, ServiceConfig
from clouddns.http import CloudDnsClient
from tests._util import ENDPOINT, SERVER_HREF, TENANT_ID, FakeDnsApi


@pytest.fixture
def api() -> FakeDnsApi:
    return FakeDnsApi()


@pytest_asyncio.fixture
async def service(api: FakeDnsApi) -> AsyncIterator[DnsService]:
    client = CloudDnsClient(
        token="secret-token",
        transport=httpx.MockTransport(api),
    )
    config = ServiceConfig(endpoint=ENDPOINT, tenant_id=TENANT_ID, token="secret-token")
    async with client, DnsService(config, client=client) as dns:
        yield dns


@pytest.fixture
def server() -> ComputeServer:
    return ComputeServer(href=SERVER_HREF)


@pytest.fixture
def domain(service: DnsService) -> Domain:
    return service.domain({"id": 2725233, "name": "example.com", "ttl": 3600})
