"""Async utilities: bounded fan-out and running coroutines from sync code."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

T = TypeVar("T")
R = TypeVar("R")


async def map_with_concurrency(
    items: Sequence[T],
    concurrency: int,
    mapper: Callable[[T, int], Awaitable[R]],
) -> list[R]:
    """
    Apply an async *mapper* to every item with at most *concurrency* in flight.

    Workers share a next-index counter and each claims one index at a time,
    so ``results[i]`` always belongs to ``items[i]`` whatever order the calls
    finish in. The first exception raised by *mapper* cancels the remaining
    workers and propagates.

    Args:
        items: Inputs to map. Order is preserved in the output.
        concurrency: Maximum number of concurrent mapper calls. Clamped to
            ``[1, len(items)]``.
        mapper: ``async (item, index) -> result``.

    Returns:
        List of results in input order.
    """
    if not items:
        return []

    worker_count = max(1, min(concurrency, len(items)))
    results: list[R] = [None] * len(items)  # type: ignore[list-item]
    next_index = 0

    async def worker() -> None:
        nonlocal next_index
        while True:
            index = next_index
            next_index += 1
            if index >= len(items):
                return
            results[index] = await mapper(items[index], index)

    tasks = [asyncio.ensure_future(worker()) for _ in range(worker_count)]
    try:
        await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
    return results


def run_async_safely(coro):
    """
    Run an async coroutine from a sync context.

    If no event loop is running, uses asyncio.run() directly.
    If one is already running (e.g. inside Jupyter), dispatches
    to a thread pool to avoid "cannot run nested event loop" errors.
    """
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        loop = None

    if loop and loop.is_running():
        with ThreadPoolExecutor(max_workers=1) as executor:
            future = executor.submit(asyncio.run, coro)
            return future.result()
    else:
        return asyncio.run(coro)
