from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar

from clouddns.exceptions import MissingFieldError, UnsupportedOperationError
from clouddns.jobs import AsyncResponse

if TYPE_CHECKING:
    from clouddns.service import DnsService

ObjectInfo = Mapping[str, Any] | str | int | None


class DnsObject:
    '''
    Base for objects persisted through the DNS API.

    Subclasses declare their attributes in `fields`, the JSON keys that differ
    from the attribute names in `json_aliases` (json key -> attribute), and the
    keys sent on create/update. Values not declared in `fields` are kept in
    `extras` so nothing the provider sends is lost.
    '''
    fields: ClassVar[tuple[str, ...]] = ('id',)
    json_aliases: ClassVar[Mapping[str, str]] = {}
    json_collection_name: ClassVar[str] = ''
    url_resource: ClassVar[str] = ''
    create_keys: ClassVar[tuple[str, ...]] = ()
    update_keys: ClassVar[tuple[str, ...]] = ()
    required_keys: ClassVar[tuple[str, ...]] = ()

    id: Any

    def __init__(self, service: DnsService, info: ObjectInfo = None, **defaults: Any) -> None:
        self._service = service
        self.extras: dict[str, Any] = {}

        for name in self.fields:
            setattr(self, name, None)
        for name, value in defaults.items():
            setattr(self, name, value)

        match info:
            case None:
                pass
            case Mapping():
                self.populate(info)
            case str() | int():
                self.id = info
            case _:
                raise TypeError(
                    f'{type(self).__name__} info must be an id or a mapping, '
                    f'got {type(info).__name__}'
                )

    def __repr__(self) -> str:
        return f'<{type(self).__name__} id={self.id!r}>'

    @property
    def service(self) -> DnsService:
        return self._service

    @classmethod
    def _attr_for(cls, key: str) -> str:
        return cls.json_aliases.get(key, key)

    @classmethod
    def _key_for(cls, attr: str) -> str:
        for key, name in cls.json_aliases.items():
            if name == attr:
                return key
        return attr

    def populate(self, data: Mapping[str, Any]) -> None:
        for key, value in data.items():
            attr = self._attr_for(key)
            if attr in self.fields:
                setattr(self, attr, value)
            else:
                self.extras[key] = value

    def to_json(self, keys: tuple[str, ...]) -> dict[str, Any]:
        '''
        Serialize the given attributes, skipping the unset ones.
        '''
        return {
            self._key_for(name): getattr(self, name)
            for name in keys
            if getattr(self, name) is not None
        }

    def create_json(self) -> dict[str, Any]:
        if not self.create_keys:
            raise UnsupportedOperationError(f'{type(self).__name__} cannot be created')
        return {self.json_collection_name: [self.to_json(self.create_keys)]}

    def update_json(self) -> dict[str, Any]:
        if not self.update_keys:
            raise UnsupportedOperationError(f'{type(self).__name__} cannot be updated')
        return self.to_json(self.update_keys)

    def check_required(self, keys: tuple[str, ...] | None = None) -> None:
        keys = self.required_keys if keys is None else keys
        missing = [name for name in keys if getattr(self, name) is None]
        if missing:
            raise MissingFieldError(type(self).__name__, missing)

    def url(self, subresource: str | None = None, params: Mapping[str, Any] | None = None) -> str:
        resource = self.url_resource
        if self.id is not None:
            resource = f'{resource}/{self.id}'
        if subresource:
            resource = f'{resource}/{subresource}'
        return self.service.url(resource, params)

    def create_url(self) -> str:
        return self.service.url(self.url_resource)

    def _apply(self, params: Mapping[str, Any]) -> None:
        for name, value in params.items():
            if name not in self.fields:
                raise AttributeError(f'{type(self).__name__} has no field {name!r}')
            setattr(self, name, value)

    def validate(self) -> None:
        pass

    async def create(self, **params: Any) -> AsyncResponse:
        self._apply(params)
        self.validate()
        self.check_required()
        response = await self.service.request(self.create_url(), 'POST', self.create_json())
        return AsyncResponse.from_response(self.service, response)

    async def update(self, **params: Any) -> AsyncResponse:
        self._apply(params)
        self.validate()
        response = await self.service.request(self.url(), 'PUT', self.update_json())
        return AsyncResponse.from_response(self.service, response)

    async def delete(self) -> AsyncResponse:
        response = await self.service.request(self.url(), 'DELETE')
        return AsyncResponse.from_response(self.service, response)

    async def refresh(self) -> None:
        if self.id is None:
            raise ValueError(f'{type(self).__name__} needs an id to refresh')
        response = await self.service.request(self.url())
        self.populate(response.json())
