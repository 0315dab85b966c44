"""Provider-side job handles."""

import httpx
import pytest

from clouddns import AsyncJobError, AsyncResponse, DnsService, JobTimeoutError
from tests._util import BASE_URL, FakeDnsApi, job_body


def test_from_response_maps_keys(service: DnsService) -> None:
    response = httpx.Response(202, json=job_body(extra_key="x"))

    job = AsyncResponse.from_response(service, response)

    assert job.job_id == "852a1e4a"
    assert job.callback_url == f"{BASE_URL}/status/852a1e4a"
    assert job.request_url == f"{BASE_URL}/rdns"
    assert job.verb == "POST"
    assert job.extras == {"extra_key": "x"}
    assert not job.done


def test_empty_body(service: DnsService) -> None:
    job = AsyncResponse.from_response(service, httpx.Response(204))

    assert job.job_id is None
    assert job.url() is None


def test_url_asks_for_details(service: DnsService) -> None:
    job = AsyncResponse.from_json(service, job_body())
    url = httpx.URL(job.url())

    assert url.path == "/v1.0/123456/status/852a1e4a"
    assert url.params["showDetails"] == "true"


@pytest.mark.asyncio
async def test_refresh(service: DnsService, api: FakeDnsApi) -> None:
    job = AsyncResponse.from_json(service, job_body())
    api.reply(200, job_body("COMPLETED", response={"records": [{"id": "PTR-1"}]}))

    await job.refresh()

    assert api.last.method == "GET"
    assert job.status == "COMPLETED"
    assert job.done
    assert job.response == {"records": [{"id": "PTR-1"}]}


@pytest.mark.asyncio
async def test_refresh_without_callback(service: DnsService) -> None:
    with pytest.raises(ValueError, match="callback URL"):
        await AsyncResponse(service=service).refresh()


@pytest.mark.asyncio
async def test_wait_until_completed(service: DnsService, api: FakeDnsApi) -> None:
    job = AsyncResponse.from_json(service, job_body())
    api.reply(200, job_body("RUNNING"))
    api.reply(200, job_body("COMPLETED"))

    assert await job.wait(timeout=5, interval=0) is job

    assert job.status == "COMPLETED"
    assert len(api.requests) == 2


@pytest.mark.asyncio
async def test_wait_raises_on_error(service: DnsService, api: FakeDnsApi) -> None:
    job = AsyncResponse.from_json(service, job_body())
    api.reply(200, job_body("ERROR", error={"code": 400, "message": "Bad PTR"}))

    with pytest.raises(AsyncJobError) as exc_info:
        await job.wait(timeout=5, interval=0)

    assert exc_info.value.job_id == "852a1e4a"
    assert exc_info.value.error == {"code": 400, "message": "Bad PTR"}


@pytest.mark.asyncio
async def test_wait_times_out(service: DnsService, api: FakeDnsApi) -> None:
    job = AsyncResponse.from_json(service, job_body())

    with pytest.raises(JobTimeoutError):
        await job.wait(timeout=0, interval=0)

    assert api.requests == []


@pytest.mark.asyncio
async def test_wait_on_finished_job_does_not_poll(service: DnsService, api: FakeDnsApi) -> None:
    job = AsyncResponse.from_json(service, job_body("COMPLETED"))

    await job.wait()

    assert api.requests == []
