import asyncio
from datetime import timedelta
from inspect import unwrap

import pytest

from feature_resolver.lib.retry import retry


@pytest.mark.asyncio
async def test_retry():
    runs: int = 0

    @retry(None, sleep_init=0.01)
    async def func():
        nonlocal runs
        runs += 1

        # raise exception on first run
        if runs < 2:
            raise Exception  # noqa: TRY002

    await func()
    assert runs == 2


@pytest.mark.asyncio
async def test_retry_timeout():
    @retry(timedelta())
    async def func():
        raise RuntimeError

    with pytest.raises(TimeoutError):
        await func()


@pytest.mark.asyncio
async def test_retry_not_retryable():
    runs: int = 0

    @retry(None, retryable=lambda e: not isinstance(e, ValueError))
    async def func():
        nonlocal runs
        runs += 1
        raise ValueError

    with pytest.raises(ValueError):
        await func()
    assert runs == 1


@pytest.mark.asyncio
async def test_retry_does_not_catch_cancellation():
    runs: int = 0

    @retry(None)
    async def func():
        nonlocal runs
        runs += 1
        raise asyncio.CancelledError

    with pytest.raises(asyncio.CancelledError):
        await func()
    assert runs == 1


def test_retry_unwrap():
    async def func():
        pass

    wrapper = retry(timedelta())(func)
    assert unwrap(wrapper) == func
