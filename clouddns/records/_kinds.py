'''
The record kinds: how a record of a given kind builds its URLs and request
bodies, and how it is deleted. Ordinary records live under their domain's
`records` collection. PTR records live under the service's `rdns` resource and
carry a link to the compute server they describe.
'''
from __future__ import annotations

import logging
import urllib.parse
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar, Protocol

from clouddns.exceptions import RecordTypeError
from clouddns.jobs import AsyncResponse

if TYPE_CHECKING:
    from clouddns.compute import ServerLink
    from clouddns.records._record import Record

logger = logging.getLogger(__name__)


class RecordKind(Protocol):
    name: ClassVar[str]
    forced_type: ClassVar[str | None]
    requires_server: ClassVar[bool]
    required_keys: ClassVar[tuple[str, ...]]

    def check(self, record: Record) -> None: ...

    def url(
        self,
        record: Record,
        subresource: str | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> str: ...

    def collection_url(self, record: Record) -> str: ...

    def refresh_url(self, record: Record) -> str: ...

    def create_payload(self, record: Record) -> dict[str, Any]: ...

    def update_payload(self, record: Record) -> dict[str, Any]: ...

    async def delete(self, record: Record) -> AsyncResponse: ...


class PlainRecordKind:
    name = 'plain'
    forced_type = None
    requires_server = False
    required_keys = ('type', 'name', 'data')

    def check(self, record: Record) -> None:
        pass

    def url(
        self,
        record: Record,
        subresource: str | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> str:
        resource = record.url_resource
        if record.id is not None:
            resource = f'{resource}/{record.id}'
        if subresource:
            resource = f'{resource}/{subresource}'
        return record.parent_ref.url(resource, params)

    def collection_url(self, record: Record) -> str:
        return record.parent_ref.url(record.url_resource)

    def refresh_url(self, record: Record) -> str:
        return self.url(record)

    def create_payload(self, record: Record) -> dict[str, Any]:
        return record.record_list()

    def update_payload(self, record: Record) -> dict[str, Any]:
        return record.to_json(record.update_keys)

    async def delete(self, record: Record) -> AsyncResponse:
        response = await record.service.request(self.url(record), 'DELETE')
        return AsyncResponse.from_response(record.service, response)


class PtrRecordKind:
    name = 'PTR'
    forced_type = 'PTR'
    requires_server = True
    required_keys = ('type', 'data')
    url_resource = 'rdns'

    def check(self, record: Record) -> None:
        if record.type != self.forced_type:
            raise RecordTypeError(
                f'Invalid record type [{record.type}], must be {self.forced_type}'
            )

    @staticmethod
    def _link(record: Record) -> ServerLink:
        if record.link is None:
            raise ValueError('PTR record is not linked to a server')
        return record.link

    def url(
        self,
        record: Record,
        subresource: str | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> str:
        return record.parent_ref.url(subresource or self.url_resource, params)

    def collection_url(self, record: Record) -> str:
        return self.url(record)

    def refresh_url(self, record: Record) -> str:
        link = self._link(record)
        return self.url(
            record,
            f'{self.url_resource}/{link.rel}/{record.id}',
            {'href': link.href},
        )

    def delete_url(self, record: Record) -> str:
        '''
        Without an IP in `data` the provider removes every PTR
        record of the linked device.
        '''
        link = self._link(record)
        url = self.url(record, f'{self.url_resource}/{link.rel}', {'href': link.href})
        if record.data:
            url += f'&ip={urllib.parse.quote(str(record.data), safe=":")}'
        return url

    def create_payload(self, record: Record) -> dict[str, Any]:
        return {
            'recordsList': record.record_list(),
            'link': self._link(record).to_json(),
        }

    def update_payload(self, record: Record) -> dict[str, Any]:
        payload = self.create_payload(record)
        payload['recordsList'][record.json_collection_name][0]['id'] = record.id
        return payload

    async def delete(self, record: Record) -> AsyncResponse:
        url = self.delete_url(record)
        logger.debug(f'Deleting PTR records of {record.link.href}')  # type: ignore[union-attr]
        response = await record.service.request(url, 'DELETE')
        return AsyncResponse.from_response(record.service, response)


PLAIN = PlainRecordKind()
PTR = PtrRecordKind()
