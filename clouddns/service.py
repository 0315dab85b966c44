'''
**clouddns.service**
-----------------

The DNS service: owns the tenant endpoint, the service name that PTR links
refer to, and the `request()` primitive every DNS object goes through.
'''
from __future__ import annotations

import dataclasses as dc
import logging
import urllib.parse
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Final, Self

import httpx

from clouddns import http
from clouddns.domain import Domain

if TYPE_CHECKING:
    from clouddns.records import Record

logger = logging.getLogger(__name__)

IDEMPOTENT_METHODS: Final = frozenset({'GET', 'HEAD', 'OPTIONS', 'PUT', 'DELETE'})


def join_url(base: str, resource: str | None = None, params: Mapping[str, Any] | None = None) -> str:
    '''
    Append a resource path and a url-encoded query string to a base URL.

    Parameters
    ----------
    base : str
    resource : str | None, optional
        Path segment(s) appended after a single slash
    params : Mapping[str, Any] | None, optional
        Query parameters, `None` values are dropped

    Returns
    -------
    str
    '''
    url = base.rstrip('/')
    if resource:
        url = f"{url}/{resource.strip('/')}"

    if params:
        query = urllib.parse.urlencode(
            {k: v for k, v in params.items() if v is not None}
        )
        if query:
            url = f"{url}?{query}"

    return url


@dc.dataclass(slots=True)
class ServiceConfig:
    '''
    Where and how to reach the DNS API.

    Attributes
    ----------
    - endpoint: the API root, e.g. `https://dns.api.example.com/v1.0`
    - tenant_id: the account the DNS objects belong to
    - token: an already issued auth token, sent as `X-Auth-Token`
    - name: the service name, used as `rel` in PTR links
    - client: options for the underlying HTTP client
    '''
    endpoint: str
    tenant_id: str
    token: str | None = None
    name: str = 'cloudDNS'
    client: http.ClientConfig | None = None


class DnsService:
    def __init__(
        self,
        config: ServiceConfig,
        client: http.CloudDnsClient | None = None,
    ) -> None:
        self._config = config
        self._owns_client = client is None
        self._client = client or http.CloudDnsClient(
            token=config.token,
            config=config.client,
        )
        self._retry = http.retry_policy(attempts=3)
        self._connect_retry = http.retry_policy(
            attempts=3,
            errors=http.retry_policy.CONNECT_ERRORS,
        )

    @property
    def name(self) -> str:
        return self._config.name

    @property
    def base_url(self) -> str:
        return join_url(self._config.endpoint, str(self._config.tenant_id))

    @property
    def client(self) -> http.CloudDnsClient:
        return self._client

    def url(self, resource: str | None = None, params: Mapping[str, Any] | None = None) -> str:
        return join_url(self.base_url, resource, params)

    async def request(
        self,
        url: str,
        method: str = 'GET',
        body: Mapping[str, Any] | None = None,
    ) -> httpx.Response:
        '''
        Send a request to the DNS API.

        Parameters
        ----------
        url : str
            Absolute URL, usually built with `url()`
        method : str, optional
            by default 'GET'
        body : Mapping[str, Any] | None, optional
            JSON body, by default None

        Returns
        -------
        httpx.Response

        Raises
        ------
        httpx.HTTPStatusError
            For any 4xx/5xx response.
        http.NoAttemptsLeftError
            When every attempt failed at the transport level. A POST is
            only sent again when the connection was never made.
        '''
        policy = self._retry if method.upper() in IDEMPOTENT_METHODS else self._connect_retry
        return await policy.call_with_retries(self._send, url, method, body)

    async def _send(
        self,
        url: str,
        method: str,
        body: Mapping[str, Any] | None,
    ) -> httpx.Response:
        logger.debug(f'{self.name}: {method} {url}')
        response = await self._client.request(
            method,
            url,
            json=dict(body) if body is not None else None,
        )
        response.raise_for_status()
        return response

    def domain(self, info: Mapping[str, Any] | str | int | None = None) -> Domain:
        return Domain(self, info)

    def ptr_record(self, info: Mapping[str, Any] | str | int | None = None) -> Record:
        from clouddns.records import Record
        return Record.ptr(self, info)

    async def aclose(self) -> None:
        '''
        Close the HTTP client if this service created it, a client passed
        in by the caller is left for the caller to close.
        '''
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *args) -> None:
        await self.aclose()
