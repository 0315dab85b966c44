from __future__ import annotations

from typing import TYPE_CHECKING

from clouddns.compute import ServerLike, ServerLink
from clouddns.records._record import Record

if TYPE_CHECKING:
    from clouddns.domain import Domain
    from clouddns.service import DnsService


async def list_records(domain: Domain) -> list[Record]:
    '''
    Fetch the records of a domain.

    Parameters
    ----------
    domain : Domain

    Returns
    -------
    list[Record]
    '''
    response = await domain.service.request(domain.url('records'))
    return [
        Record(domain, item)
        for item in response.json().get('records', [])
    ]


async def list_ptr_records(service: DnsService, server: ServerLike) -> list[Record]:
    '''
    Fetch the PTR records of a compute server, each one
    already linked to that server.

    Parameters
    ----------
    service : DnsService
    server : ServerLike

    Returns
    -------
    list[Record]
    '''
    link = ServerLink.from_server(server)
    url = service.url(f'rdns/{link.rel}', {'href': link.href})
    response = await service.request(url)

    records: list[Record] = []
    for item in response.json().get('records', []):
        record = Record.ptr(service, item)
        record.link = link
        records.append(record)

    return records
