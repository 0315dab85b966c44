'''
**clouddns.records**
-------------

DNS records and reverse DNS (PTR) records. A `Record` composes a
`RecordKind` (plain or PTR) that decides its URLs and request bodies,
and a `RecordParent` (domain or service) it hangs off.
'''
from clouddns.records._kinds import (
    PLAIN,
    PTR,
    PlainRecordKind,
    PtrRecordKind,
    RecordKind,
)
from clouddns.records._listing import list_ptr_records, list_records
from clouddns.records._parent import ParentKind, RecordParent
from clouddns.records._record import Record

__all__ = [
    'PLAIN',
    'PTR',
    'PlainRecordKind',
    'PtrRecordKind',
    'RecordKind',
    'list_ptr_records',
    'list_records',
    'ParentKind',
    'RecordParent',
    'Record',
]
