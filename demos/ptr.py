import asyncio
import os
import sys

from clouddns import ComputeServer, DnsService, ServiceConfig, list_ptr_records


def ptr_str(record) -> str:
    return f'- {record.data} -> {record.name} (ttl={record.ttl}, id={record.id})'


async def main() -> int:
    if len(sys.argv) < 3:
        server_href = input('Enter the compute server URL: ').strip()
        ip_addr = input('Enter the IP address to point at the hostname: ').strip()
    else:
        server_href, ip_addr = sys.argv[1].strip(), sys.argv[2].strip()

    hostname = input('Enter the hostname for the PTR record: ').strip()

    config = ServiceConfig(
        endpoint=os.environ.get('DNS_ENDPOINT', 'https://dns.api.rackspacecloud.com/v1.0'),
        tenant_id=os.environ['DNS_TENANT_ID'],
        token=os.environ['DNS_TOKEN'],
    )
    server = ComputeServer(href=server_href)

    exit_code = 1
    async with DnsService(config) as dns:
        try:
            record = dns.ptr_record({'name': hostname, 'data': ip_addr, 'ttl': 3600})
            job = await record.create(server)
            await job.wait(timeout=120)

            sep = '-------------------------'
            print(f'\n{sep}\nPTR records of {server_href}')
            for ptr in await list_ptr_records(dns, server):
                print(ptr_str(ptr))
            print(sep)
            exit_code = 0
        except Exception as exc:
            print(f'Error managing PTR records, check your credentials {exc}')

    return exit_code


if __name__ == '__main__':
    sys.exit(
        asyncio.run(main())
    )
