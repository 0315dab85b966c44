import contextlib
import dataclasses as dc
import logging
import ssl

import httpx


logger = logging.getLogger(__name__)


def _base_limits() -> httpx.Limits:
    return httpx.Limits(
        max_connections=20,
        max_keepalive_connections=10,
        keepalive_expiry=30,
    )


def _base_timeouts() -> httpx.Timeout:
    return httpx.Timeout(
        connect=5.0,
        read=30.0,
        write=10.0,
        pool=5.0,
    )


def _default_headers() -> dict[str, str]:
    return {
        'Accept': 'application/json',
        'Content-Type': 'application/json',
    }


def api_ssl_context() -> ssl.SSLContext:
    '''
    creates the SSL context used to talk to the DNS API, TLS 1.2 at minimum
    with hostname verification enabled.

    Returns
    -------
    ssl.SSLContext
    '''
    ctx = ssl.create_default_context(purpose=ssl.Purpose.SERVER_AUTH)

    ctx.minimum_version = ssl.TLSVersion.TLSv1_2
    ctx.check_hostname = True
    ctx.verify_mode = ssl.CERT_REQUIRED

    with contextlib.suppress(NotImplementedError):
        ctx.set_alpn_protocols(["h2", "http/1.1"])

    ctx.options |= ssl.OP_NO_COMPRESSION
    return ctx


async def log_request_hook(request: httpx.Request) -> None:
    logger.debug(f'Sending request: {request.method} {request.url}')


async def log_response_hook(response: httpx.Response) -> None:
    request = response.request
    logger.debug(
        f'Received {response.status_code} for {request.method} {request.url}'
    )


@dc.dataclass(slots=True)
class ClientConfig:
    '''
    Configuration options for the DNS API HTTP client.
    Good defaults are provided for most use cases.
    '''
    timeout: httpx.Timeout = dc.field(default_factory=_base_timeouts)
    limits: httpx.Limits = dc.field(default_factory=_base_limits)
    http2: bool = True
    follow_redirects: bool = True
    trust_env: bool = False
    retries: int = 3


class CloudDnsClient(httpx.AsyncClient):
    '''
    Thin wrapper around httpx.AsyncClient with JSON defaults,
    token authentication and request/response logging hooks.

    A custom `transport` may be given (e.g. `httpx.MockTransport`),
    otherwise one is built from the config.
    '''

    def __init__(
        self,
        base_url: str | None = None,
        *,
        token: str | None = None,
        headers: dict[str, str] | None = None,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config: ClientConfig = config or ClientConfig()

        if transport is None:
            transport = httpx.AsyncHTTPTransport(
                http2=self._config.http2,
                verify=api_ssl_context(),
                trust_env=self._config.trust_env,
                retries=self._config.retries,
            )

        all_headers = _default_headers()
        if token:
            all_headers['X-Auth-Token'] = token
        if headers:
            all_headers.update(headers)

        super().__init__(
            base_url=base_url or '',
            transport=transport,
            limits=self._config.limits,
            timeout=self._config.timeout,
            headers=all_headers,
            follow_redirects=self._config.follow_redirects,
            event_hooks={
                'request': [log_request_hook],
                'response': [log_response_hook],
            },
        )

    @property
    def config(self) -> ClientConfig:
        return self._config
