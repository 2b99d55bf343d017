"""Consumer loops draining sync and async sequences."""

import asyncio
import logging
import time
from typing import Callable, List, Optional, TypeVar

from .models import ConsumeStatistics, Cursor
from .protocols import AsyncCursorIterator, AsyncSequence, SyncSequence

T = TypeVar("T")

logger = logging.getLogger(__name__)


async def pull_with_timeout(
    iterator: AsyncCursorIterator[T], timeout: Optional[float] = None
) -> Cursor[T]:
    """
    Await one pull, optionally bounded by ``timeout`` seconds.

    On timeout the in-flight pull is cancelled and ``asyncio.TimeoutError``
    is raised to the caller.
    """
    if timeout is None:
        return await iterator.pull()
    return await asyncio.wait_for(iterator.pull(), timeout)


def consume(sequence: SyncSequence[T], action: Callable[[T], None]) -> ConsumeStatistics:
    """
    Pull from ``sequence`` until it completes, calling ``action`` per value.

    Args:
        sequence: Synchronous sequence to drain
        action: Side effect applied to each produced value

    Returns:
        ConsumeStatistics for the run
    """
    stats = ConsumeStatistics()
    start_time = time.time()
    iterator = sequence.create_iterator()

    while True:
        cursor = iterator.pull()
        if cursor.done:
            break
        action(cursor.value)
        stats.total_items += 1

    stats.elapsed_time = time.time() - start_time
    logger.info(f"Consumed {stats.total_items} items in {stats.elapsed_time:.2f} seconds")
    return stats


async def consume_async(
    sequence: AsyncSequence[T],
    action: Callable[[T], None],
    pull_timeout: Optional[float] = None,
) -> ConsumeStatistics:
    """
    Await pulls from ``sequence`` until it completes, calling ``action`` per value.

    Pulls are strictly sequential. A failed pull stops the loop and the
    error propagates to the caller; values already handed to ``action``
    stay handed.

    Args:
        sequence: Asynchronous sequence to drain
        action: Side effect applied to each produced value
        pull_timeout: Optional timeout in seconds for each individual pull

    Returns:
        ConsumeStatistics for the run
    """
    stats = ConsumeStatistics()
    start_time = time.time()
    iterator = sequence.create_iterator()

    while True:
        try:
            cursor = await pull_with_timeout(iterator, pull_timeout)
        except Exception as e:
            logger.error(f"Pull failed after {stats.total_items} items: {e}")
            raise
        if cursor.done:
            break
        action(cursor.value)
        stats.total_items += 1

    stats.elapsed_time = time.time() - start_time
    logger.info(f"Consumed {stats.total_items} items in {stats.elapsed_time:.2f} seconds")
    return stats


def collect(sequence: SyncSequence[T]) -> List[T]:
    """Drain ``sequence`` into a list."""
    values: List[T] = []
    consume(sequence, values.append)
    return values


async def collect_async(
    sequence: AsyncSequence[T], pull_timeout: Optional[float] = None
) -> List[T]:
    """Drain an asynchronous ``sequence`` into a list."""
    values: List[T] = []
    await consume_async(sequence, values.append, pull_timeout=pull_timeout)
    return values
