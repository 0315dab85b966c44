from __future__ import annotations

import dataclasses as dc
import enum
from collections.abc import Mapping
from typing import Any, Self

from clouddns.domain import Domain
from clouddns.service import DnsService


class ParentKind(enum.Enum):
    DOMAIN = 'domain'
    SERVICE = 'service'


@dc.dataclass(slots=True, frozen=True, eq=False)
class RecordParent:
    '''
    What a record hangs off: a domain for ordinary records, the DNS service
    itself for PTR records. The variant is chosen once, at construction.
    '''
    kind: ParentKind
    ref: Domain | DnsService

    @classmethod
    def of(cls, parent: Domain | DnsService) -> Self:
        match parent:
            case Domain():
                return cls(ParentKind.DOMAIN, parent)
            case DnsService():
                return cls(ParentKind.SERVICE, parent)
            case _:
                raise TypeError(
                    f'record parent must be a Domain or a DnsService, '
                    f'got {type(parent).__name__}'
                )

    @property
    def service(self) -> DnsService:
        match self.kind:
            case ParentKind.DOMAIN:
                return self.ref.service  # type: ignore[union-attr]
            case ParentKind.SERVICE:
                return self.ref  # type: ignore[return-value]

    def url(self, subresource: str | None = None, params: Mapping[str, Any] | None = None) -> str:
        return self.ref.url(subresource, params)
