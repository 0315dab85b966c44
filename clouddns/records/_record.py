from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Self

from clouddns._object import DnsObject, ObjectInfo
from clouddns.compute import ServerLike, ServerLink
from clouddns.records._kinds import PLAIN, PTR, RecordKind
from clouddns.records._parent import ParentKind, RecordParent

if TYPE_CHECKING:
    from clouddns.domain import Domain
    from clouddns.jobs import AsyncResponse
    from clouddns.service import DnsService


class Record(DnsObject):
    '''
    A single DNS resource record.

    Ordinary records belong to a `Domain`. PTR (reverse DNS) records, built
    with `Record.ptr()`, belong to the `DnsService` and must be given the
    compute server they describe on create, update and delete.

    Parameters
    ----------
    parent : Domain | DnsService
        Kept as given and returned by `parent`
    info : Mapping | str | int | None, optional
        A payload to hydrate from, or the record id
    kind : RecordKind, optional
        by default the plain record kind
    '''
    fields = (
        'id',
        'name',
        'type',
        'data',
        'ttl',
        'priority',
        'comment',
        'created',
        'updated',
    )
    json_collection_name = 'records'
    url_resource = 'records'
    create_keys = ('type', 'name', 'ttl', 'data', 'priority', 'comment')
    update_keys = ('name', 'ttl', 'data', 'priority', 'comment')

    name: str | None
    type: str | None
    data: str | None
    ttl: int | None
    priority: int | None
    comment: str | None
    created: str | None
    updated: str | None

    def __init__(
        self,
        parent: Domain | DnsService,
        info: ObjectInfo = None,
        kind: RecordKind = PLAIN,
    ) -> None:
        self._parent = RecordParent.of(parent)
        self._kind = kind
        self.link: ServerLink | None = None

        defaults = {'type': kind.forced_type} if kind.forced_type else {}
        super().__init__(self._parent.service, info, **defaults)
        kind.check(self)

    @classmethod
    def ptr(cls, parent: Domain | DnsService, info: ObjectInfo = None) -> Self:
        return cls(parent, info, kind=PTR)

    def __repr__(self) -> str:
        return f'<Record {self.type} {self.name!r} id={self.id!r}>'

    @property
    def parent(self) -> Domain | DnsService:
        return self._parent.ref

    @property
    def parent_ref(self) -> RecordParent:
        return self._parent

    @property
    def parent_kind(self) -> ParentKind:
        return self._parent.kind

    @property
    def kind(self) -> RecordKind:
        return self._kind

    @property
    def is_ptr(self) -> bool:
        return self._kind is PTR

    def url(self, subresource: str | None = None, params: Mapping[str, Any] | None = None) -> str:
        return self._kind.url(self, subresource, params)

    def create_url(self) -> str:
        return self._kind.collection_url(self)

    def record_list(self) -> dict[str, Any]:
        return super().create_json()

    def create_json(self) -> dict[str, Any]:
        return self._kind.create_payload(self)

    def update_json(self) -> dict[str, Any]:
        return self._kind.update_payload(self)

    def check_required(self, keys: tuple[str, ...] | None = None) -> None:
        super().check_required(self._kind.required_keys if keys is None else keys)

    def validate(self) -> None:
        self._kind.check(self)

    def _bind(self, server: ServerLike | None) -> None:
        if server is None:
            if self._kind.requires_server:
                raise ValueError(f'{self._kind.name} records need a compute server')
            return

        if not self._kind.requires_server:
            raise TypeError(f'{self._kind.name} records are not linked to a server')
        self.link = ServerLink.from_server(server)

    async def create(self, server: ServerLike | None = None, **params: Any) -> AsyncResponse:
        self._bind(server)
        return await super().create(**params)

    async def update(self, server: ServerLike | None = None, **params: Any) -> AsyncResponse:
        self._bind(server)
        return await super().update(**params)

    async def delete(self, server: ServerLike | None = None) -> AsyncResponse:
        self._bind(server)
        return await self._kind.delete(self)

    async def refresh(self, server: ServerLike | None = None) -> None:
        if server is not None or self.link is None:
            self._bind(server)
        if self.id is None:
            raise ValueError('Record needs an id to refresh')
        response = await self.service.request(self._kind.refresh_url(self))
        self.populate(response.json())
        self._kind.check(self)
