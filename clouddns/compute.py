'''
**clouddns.compute**
-----------------

The compute-side types PTR records refer to. Any object shaped like
`ServerLike` (a `service` with a `name` and a `url()` method) can be passed,
`ComputeServer` is a plain implementation for callers without a compute SDK.
'''
from __future__ import annotations

import dataclasses as dc
from typing import Protocol, Self, runtime_checkable


class NamedService(Protocol):
    @property
    def name(self) -> str: ...


@runtime_checkable
class ServerLike(Protocol):
    @property
    def service(self) -> NamedService: ...

    def url(self) -> str: ...


@dc.dataclass(slots=True, frozen=True)
class ComputeService:
    name: str = 'cloudServersOpenStack'


@dc.dataclass(slots=True, frozen=True)
class ComputeServer:
    '''
    A reference to a compute server by its API URL.
    '''
    href: str
    service: ComputeService = dc.field(default_factory=ComputeService)

    def url(self) -> str:
        return self.href


@dc.dataclass(slots=True, frozen=True)
class ServerLink:
    '''
    The `link` object PTR requests carry, pointing at the device.
    '''
    rel: str
    href: str

    @classmethod
    def from_server(cls, server: ServerLike) -> Self:
        return cls(rel=server.service.name, href=server.url())

    def to_json(self) -> dict[str, str]:
        return {'href': self.href, 'rel': self.rel}
