import asyncio
import logging
from collections.abc import Callable
from datetime import timedelta
from functools import wraps
from random import uniform
from time import monotonic

import cython
from sentry_sdk import capture_exception


def retry(
    timeout: timedelta | None,
    *,
    sleep_init: cython.double = 0.15,
    sleep_limit: cython.double = 2,
    retryable: Callable[[Exception], bool] | None = None,
):
    """
    Decorator to retry an async function until it succeeds or the timeout is reached.

    Exceptions rejected by the optional retryable predicate are re-raised immediately.
    Cancellation is never retried.
    """
    timeout_seconds: cython.double = 0 if timeout is None else timeout.total_seconds()

    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            ts: cython.double = monotonic()
            sleep: cython.double = sleep_init
            attempt: cython.size_t = 0

            while True:
                try:
                    return await func(*args, **kwargs)
                except Exception as e:
                    if retryable is not None and not retryable(e):
                        raise
                    capture_exception()
                    attempt += 1

                    # retry is not possible, re-raise the exception
                    now: cython.double = monotonic()
                    next_timeout_seconds: cython.double = now + sleep - ts
                    if timeout is not None and next_timeout_seconds >= timeout_seconds:
                        raise TimeoutError(
                            f'{func.__qualname__} failed and timed out after {attempt} attempts'
                        ) from e

                    logging.info(
                        '%s failed (attempt %d), retrying in %.3fs',
                        func.__qualname__,
                        attempt,
                        sleep,
                        exc_info=True,
                    )
                    await asyncio.sleep(sleep)
                    sleep = min(uniform(sleep * 1.5, sleep * 2.5), sleep_limit)

        return wrapper

    return decorator
