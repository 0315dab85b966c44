'''
**clouddns.jobs**
-----------------

Mutating calls against the DNS API are accepted with `202 Accepted` and run as
provider-side jobs. `AsyncResponse` is the handle for such a job: it can be
refreshed from its callback URL or waited on until the job completes.
'''
from __future__ import annotations

import asyncio
import dataclasses as dc
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Final, Self

import httpx

from clouddns.exceptions import AsyncJobError, JobTimeoutError

if TYPE_CHECKING:
    from clouddns.service import DnsService

logger = logging.getLogger(__name__)

DONE_STATES: Final = frozenset({'COMPLETED', 'ERROR'})

_JSON_ALIASES: Final = {
    'jobId': 'job_id',
    'callbackUrl': 'callback_url',
    'requestUrl': 'request_url',
}


@dc.dataclass(slots=True)
class AsyncResponse:
    service: DnsService = dc.field(repr=False, compare=False)
    job_id: str | None = None
    callback_url: str | None = None
    status: str | None = None
    verb: str | None = None
    request_url: str | None = None
    error: Any = None
    response: Any = None
    extras: dict[str, Any] = dc.field(default_factory=dict)

    @classmethod
    def from_json(cls, service: DnsService, data: Mapping[str, Any]) -> Self:
        job = cls(service=service)
        job.populate(data)
        return job

    @classmethod
    def from_response(cls, service: DnsService, response: httpx.Response) -> Self:
        '''
        Build a job handle from an API response, an empty body
        gives a handle without a job id.
        '''
        data = response.json() if response.content else {}
        return cls.from_json(service, data)

    def populate(self, data: Mapping[str, Any]) -> None:
        job_fields = {f.name for f in dc.fields(self)} - {'service', 'extras'}
        for key, value in data.items():
            attr = _JSON_ALIASES.get(key, key)
            if attr not in job_fields:
                self.extras[key] = value
            else:
                setattr(self, attr, value)

    @property
    def done(self) -> bool:
        return self.status in DONE_STATES

    def url(self) -> str | None:
        if not self.callback_url:
            return None
        return str(
            httpx.URL(self.callback_url).copy_merge_params({'showDetails': 'true'})
        )

    async def refresh(self) -> Self:
        url = self.url()
        if url is None:
            raise ValueError('job has no callback URL to refresh from')

        response = await self.service.request(url)
        self.populate(response.json())
        return self

    async def wait(self, timeout: float = 60.0, interval: float = 1.0) -> Self:
        '''
        Poll the job until it is COMPLETED or ERROR.

        Parameters
        ----------
        timeout : float, optional
            Seconds to wait in total, by default 60.0
        interval : float, optional
            Seconds between polls, by default 1.0

        Returns
        -------
        Self

        Raises
        ------
        AsyncJobError
            If the job finishes with status ERROR.
        JobTimeoutError
            If the job is still running after `timeout` seconds.
        '''
        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout

        while not self.done:
            if loop.time() >= deadline:
                raise JobTimeoutError(
                    f"Job {self.job_id} still {self.status} after {timeout}s"
                )
            await self.refresh()
            logger.debug(f'Job {self.job_id} is {self.status}')
            if not self.done:
                await asyncio.sleep(interval)

        if self.status == 'ERROR':
            raise AsyncJobError(self.job_id, self.error)

        return self
