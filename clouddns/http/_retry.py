'''
retry policy for requests against the DNS API, only transport level
failures are retried, HTTP status errors are raised straight away.

Raises
------
NoAttemptsLeftError
    _raised from previous exception when all attempts are exhausted_
'''

import asyncio
import functools
import logging
import random
from collections.abc import Awaitable, Callable
from typing import ParamSpec, TypeVar

import httpcore
import httpx

P = ParamSpec("P")
R = TypeVar("R")

logger = logging.getLogger(__name__)


class NoAttemptsLeftError(Exception):
    ...


class retry_policy:

    TRANSPORT_ERRORS = (
        ConnectionError,
        asyncio.TimeoutError,
        httpx.ConnectError,
        httpx.ReadTimeout,
        httpx.WriteError,
        httpx.RemoteProtocolError,
        httpx.PoolTimeout,
        httpx.NetworkError,
        httpcore.ConnectError,
    )

    CONNECT_ERRORS = (
        httpx.ConnectError,
        httpx.PoolTimeout,
        httpcore.ConnectError,
    )

    def __init__(
        self,
        *,
        attempts: int = 3,
        delay: float = 0.5,
        jitter: float = 0.1,
        errors: tuple[type[BaseException], ...] | None = None,
    ) -> None:
        '''
        Parameters
        ----------
        attempts : int, optional
            The maximum number of attempts, by default 3
        delay : float, optional
            The base delay between attempts, by default 0.5
        jitter : float, optional
            The jitter factor to apply to the delay, by default 0.1
        errors : tuple[type[BaseException], ...] | None, optional
            The exceptions worth another attempt, by default
            `TRANSPORT_ERRORS`. Use `CONNECT_ERRORS` for requests that
            must not be sent twice.
        '''
        if attempts < 1:
            raise ValueError(f"attempts must be at least 1, got {attempts}")
        self.attempts: int = attempts
        self.delay: float = delay
        self.jitter: float = jitter
        self.errors: tuple[type[BaseException], ...] = (
            self.TRANSPORT_ERRORS if errors is None else errors
        )

    def get_timeout(self, attempt_no: int) -> float:
        base = self.delay * attempt_no

        if self.jitter:
            j = base * self.jitter
            base += random.uniform(-j, j)

        return max(0.0, base)

    async def call_with_retries(
        self,
        func: Callable[P, Awaitable[R]],
        *args,
        **kwargs
    ) -> R:
        for attempt_no in range(1, self.attempts + 1):
            try:
                return await func(*args, **kwargs)
            except self.errors as exc:
                if attempt_no == self.attempts:
                    raise NoAttemptsLeftError(
                        f"Failed after {self.attempts} attempts: {exc}"
                    ) from exc
                logger.warning(
                    f'Attempt {attempt_no}/{self.attempts} of '
                    f'{getattr(func, "__qualname__", func)} failed: {exc!r}'
                )
                await asyncio.sleep(self.get_timeout(attempt_no))

        raise NoAttemptsLeftError(f"Failed after {self.attempts} attempts")

    def __call__(
        self,
        func: Callable[P, Awaitable[R]],
    ) -> Callable[P, Awaitable[R]]:

        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            return await self.call_with_retries(func, *args, **kwargs)

        return wrapper
