'''
**clouddns.exceptions**
-----------------

Errors raised by the clouddns object layer. HTTP status errors are not
translated, they surface as `httpx.HTTPStatusError`.
'''


class DnsError(Exception):
    '''
    Base class for clouddns errors.

    Parent: Exception
    '''


class RecordTypeError(DnsError, ValueError):
    '''
    Raised when a record's type does not match the type its kind requires,
    e.g. a PTR record whose payload carries `type="A"`.

    Parent: DnsError, ValueError
    '''


class MissingFieldError(DnsError, ValueError):
    '''
    Raised when a create is attempted without one of the required fields.

    Parent: DnsError, ValueError
    '''

    def __init__(self, object_name: str, missing: list[str]) -> None:
        self.object_name = object_name
        self.missing = missing
        super().__init__(
            f"{object_name} is missing required field(s): {', '.join(missing)}"
        )


class UnsupportedOperationError(DnsError):
    '''
    Raised when an object is asked to create or update itself but declares
    no keys for that operation.
    '''


class AsyncJobError(DnsError):
    '''
    Raised when a provider-side job finishes with status ERROR.
    '''

    def __init__(self, job_id: str | None, error: object) -> None:
        self.job_id = job_id
        self.error = error
        super().__init__(f"Job {job_id} failed: {error}")


class JobTimeoutError(DnsError, TimeoutError):
    '''
    Raised when waiting on a provider-side job exceeds its timeout.

    Parent: DnsError, TimeoutError
    '''
