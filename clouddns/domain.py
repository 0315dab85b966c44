'''
**clouddns.domain**
-----------------

A DNS domain (zone). Records of a domain are built with
`Record(domain, ...)`, listed with `clouddns.records.list_records(domain)`.
'''
from clouddns._object import DnsObject


class Domain(DnsObject):
    fields = (
        'id',
        'name',
        'ttl',
        'email_address',
        'comment',
        'account_id',
        'created',
        'updated',
    )
    json_aliases = {
        'emailAddress': 'email_address',
        'accountId': 'account_id',
    }
    json_collection_name = 'domains'
    url_resource = 'domains'
    create_keys = ('name', 'ttl', 'email_address', 'comment')
    update_keys = ('ttl', 'email_address', 'comment')
    required_keys = ('name', 'email_address')
