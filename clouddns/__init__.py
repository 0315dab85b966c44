'''
**clouddns**
---------

Object bindings for a cloud DNS provider's REST API: domains, records and
reverse DNS (PTR) records linked to compute servers. Every mutating call
returns an `AsyncResponse`, the handle of the provider-side job.
'''
from clouddns.compute import ComputeServer, ComputeService, ServerLike, ServerLink
from clouddns.domain import Domain
from clouddns.exceptions import (
    AsyncJobError,
    DnsError,
    JobTimeoutError,
    MissingFieldError,
    RecordTypeError,
    UnsupportedOperationError,
)
from clouddns.jobs import AsyncResponse
from clouddns.records import Record, list_ptr_records, list_records
from clouddns.service import DnsService, ServiceConfig

__all__ = [
    'ComputeServer',
    'ComputeService',
    'ServerLike',
    'ServerLink',
    'Domain',
    'AsyncJobError',
    'DnsError',
    'JobTimeoutError',
    'MissingFieldError',
    'RecordTypeError',
    'UnsupportedOperationError',
    'AsyncResponse',
    'Record',
    'list_ptr_records',
    'list_records',
    'DnsService',
    'ServiceConfig',
]
