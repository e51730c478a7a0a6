"""Helpers for calling the async search API from synchronous code.

Examples:
    >>> async def fetch_data():
    ...     return "data"
    >>>
    >>> result = run_async_in_sync_context(fetch_data())
    >>> print(result)
    data
"""

import asyncio
import concurrent.futures
from typing import Coroutine, TypeVar

from loguru import logger

T = TypeVar('T')


def run_async_in_sync_context(coro: Coroutine[None, None, T]) -> T:
    """Run a coroutine to completion from synchronous code.

    With no running event loop the coroutine runs via `asyncio.run()`.
    Inside a running loop (Jupyter, an async web handler) it runs on a fresh
    loop in a worker thread, which blocks the caller.

    Args:
        coro: Coroutine to execute

    Returns:
        The coroutine's return value
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)

    logger.debug(
        "Detected running event loop. Consider using async methods directly "
        "for better performance."
    )
    with concurrent.futures.ThreadPoolExecutor(max_workers=1) as executor:
        future = executor.submit(asyncio.run, coro)
        return future.result()
