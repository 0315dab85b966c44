import asyncio
import os
import sys

from clouddns import DnsService, Record, ServiceConfig, list_records


def records_str(domain_name: str, records: list[Record]) -> str:
    sep = '-------------------------'
    string = f'\n{sep}\nDomain: {domain_name}\n'
    for record in records:
        string += f'- {record.type:<6} {record.name} {record.data} ttl={record.ttl}\n'

    string += f'Total records found: {len(records)}\n{sep}'
    return string


async def main() -> int:
    if len(sys.argv) < 2:
        domain_id = input('Enter a domain id to list the records of: ').strip()
    else:
        domain_id = sys.argv[1].strip()

    config = ServiceConfig(
        endpoint=os.environ.get('DNS_ENDPOINT', 'https://dns.api.rackspacecloud.com/v1.0'),
        tenant_id=os.environ['DNS_TENANT_ID'],
        token=os.environ['DNS_TOKEN'],
    )

    exit_code = 1
    async with DnsService(config) as dns:
        try:
            domain = dns.domain(domain_id)
            await domain.refresh()
            print(records_str(domain.name, await list_records(domain)))
            exit_code = 0
        except Exception as exc:
            print(f'Error fetching records, check your network connection {exc}')

    return exit_code


if __name__ == '__main__':
    sys.exit(
        asyncio.run(main())
    )
