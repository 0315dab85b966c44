'''
**clouddns.http**
---------

The HTTP utilities for clouddns: the `CloudDnsClient` (an httpx.AsyncClient
with JSON and token defaults), its `ClientConfig`, and the retry policy
decorator used by the DNS service for transport failures.
'''
from clouddns.http._client import (
    ClientConfig,
    CloudDnsClient,
    api_ssl_context,
    log_request_hook,
    log_response_hook,
)
from clouddns.http._retry import NoAttemptsLeftError, retry_policy

__all__ = [
    'ClientConfig',
    'CloudDnsClient',
    'api_ssl_context',
    'log_request_hook',
    'log_response_hook',
    'NoAttemptsLeftError',
    'retry_policy',
]
