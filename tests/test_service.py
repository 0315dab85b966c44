"""DNS service, URL composition and the HTTP client."""

import httpx
import pytest

from clouddns import DnsService, Domain, ServiceConfig, UnsupportedOperationError
from clouddns.http import ClientConfig, CloudDnsClient, NoAttemptsLeftError
from clouddns.service import join_url
from tests._util import BASE_URL, ENDPOINT, TENANT_ID, FakeDnsApi


@pytest.mark.parametrize(
    ("base", "resource", "params", "expected"),
    [
        ("https://dns.example.com/v1.0/", None, None, "https://dns.example.com/v1.0"),
        ("https://dns.example.com/v1.0", "/rdns/", None, "https://dns.example.com/v1.0/rdns"),
        ("https://dns.example.com/v1.0", "rdns", {"href": "https://a/b"}, "https://dns.example.com/v1.0/rdns?href=https%3A%2F%2Fa%2Fb"),
        ("https://dns.example.com/v1.0", "domains", {"name": None}, "https://dns.example.com/v1.0/domains"),
    ],
)
def test_join_url(base: str, resource: str | None, params: dict | None, expected: str) -> None:
    assert join_url(base, resource, params) == expected


def test_service_urls(service: DnsService) -> None:
    assert service.name == "cloudDNS"
    assert service.base_url == BASE_URL
    assert service.url() == BASE_URL
    assert service.url("domains", {"name": "example.com"}) == f"{BASE_URL}/domains?name=example.com"


def test_service_builds_its_own_client() -> None:
    config = ServiceConfig(
        endpoint=ENDPOINT,
        tenant_id=TENANT_ID,
        token="abc",
        name="dns",
        client=ClientConfig(http2=False, retries=0),
    )
    service = DnsService(config)

    assert isinstance(service.client, CloudDnsClient)
    assert service.client.headers["X-Auth-Token"] == "abc"
    assert service.client.headers["Accept"] == "application/json"
    assert service.client.config.retries == 0
    assert service.name == "dns"


def test_client_without_token_sends_no_auth_header() -> None:
    client = CloudDnsClient(transport=httpx.MockTransport(FakeDnsApi()))
    assert "X-Auth-Token" not in client.headers


@pytest.mark.asyncio
async def test_request_sends_json(service: DnsService, api: FakeDnsApi) -> None:
    api.reply(200, {"ok": True})

    response = await service.request(f"{BASE_URL}/domains", "POST", {"domains": []})

    assert response.json() == {"ok": True}
    assert api.last.headers["Content-Type"] == "application/json"
    assert api.body() == {"domains": []}


@pytest.mark.asyncio
async def test_request_status_error_is_not_retried(service: DnsService, api: FakeDnsApi) -> None:
    api.reply(500, {"message": "boom"})

    with pytest.raises(httpx.HTTPStatusError):
        await service.request(BASE_URL)

    assert len(api.requests) == 1


@pytest.mark.asyncio
async def test_request_retries_transport_errors(service: DnsService, api: FakeDnsApi) -> None:
    api.fail(httpx.ConnectError("connection refused"))
    api.reply(200, {"ok": True})

    response = await service.request(BASE_URL)

    assert response.status_code == 200
    assert len(api.requests) == 2


@pytest.mark.asyncio
async def test_request_gives_up(api: FakeDnsApi) -> None:
    for _ in range(3):
        api.fail(httpx.ConnectError("connection refused"))
    client = CloudDnsClient(transport=httpx.MockTransport(api))
    service = DnsService(ServiceConfig(endpoint=ENDPOINT, tenant_id=TENANT_ID), client=client)

    with pytest.raises(NoAttemptsLeftError):
        await service.request(BASE_URL)

    assert len(api.requests) == 3
    await client.aclose()


def test_domain_factory(service: DnsService) -> None:
    domain = service.domain({"id": 1, "name": "example.com", "emailAddress": "admin@example.com"})

    assert isinstance(domain, Domain)
    assert domain.service is service
    assert domain.email_address == "admin@example.com"
    assert domain.url() == f"{BASE_URL}/domains/1"


@pytest.mark.asyncio
async def test_domain_create(service: DnsService, api: FakeDnsApi) -> None:
    domain = service.domain()

    await domain.create(name="example.org", email_address="hostmaster@example.org", ttl=3600)

    assert str(api.last.url) == f"{BASE_URL}/domains"
    assert api.body() == {
        "domains": [{"name": "example.org", "ttl": 3600, "emailAddress": "hostmaster@example.org"}],
    }


def test_object_without_create_keys(service: DnsService) -> None:
    class ReadOnly(Domain):
        create_keys = ()

    with pytest.raises(UnsupportedOperationError):
        ReadOnly(service).create_json()


@pytest.mark.asyncio
async def test_post_is_not_resent_after_read_timeout(service: DnsService, api: FakeDnsApi) -> None:
    api.fail(httpx.ReadTimeout("slow"))

    with pytest.raises(httpx.ReadTimeout):
        await service.request(f"{BASE_URL}/rdns", "POST", {"recordsList": {"records": []}})

    assert len(api.requests) == 1


@pytest.mark.asyncio
async def test_post_is_resent_when_connection_failed(service: DnsService, api: FakeDnsApi) -> None:
    api.fail(httpx.ConnectError("connection refused"))

    response = await service.request(f"{BASE_URL}/rdns", "POST", {"recordsList": {"records": []}})

    assert response.status_code == 202
    assert [r.method for r in api.requests] == ["POST", "POST"]


@pytest.mark.asyncio
async def test_put_is_retried_after_read_timeout(service: DnsService, api: FakeDnsApi) -> None:
    api.fail(httpx.ReadTimeout("slow"))

    response = await service.request(f"{BASE_URL}/rdns", "PUT", {"recordsList": {"records": []}})

    assert response.status_code == 202
    assert len(api.requests) == 2


@pytest.mark.asyncio
async def test_caller_client_stays_open(api: FakeDnsApi) -> None:
    client = CloudDnsClient(transport=httpx.MockTransport(api))

    async with DnsService(ServiceConfig(endpoint=ENDPOINT, tenant_id=TENANT_ID), client=client):
        pass

    assert not client.is_closed
    await client.aclose()


@pytest.mark.asyncio
async def test_own_client_is_closed() -> None:
    service = DnsService(ServiceConfig(endpoint=ENDPOINT, tenant_id=TENANT_ID))

    async with service:
        pass

    assert service.client.is_closed
