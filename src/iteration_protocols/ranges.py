"""Producers counting integers from a start bound to an end bound inclusive."""

import asyncio
import logging
from typing import Optional

from .models import Cursor
from .protocols import (
    AsyncCursorIterator,
    AsyncSequence,
    CursorIterator,
    LoggerProtocol,
    SyncSequence,
)
from .validation import require_int, require_non_negative_number

DEFAULT_DELAY_SECONDS = 0.1


class RangeProducer(SyncSequence[int], CursorIterator[int]):
    """
    Synchronous range producer.

    The producer is its own iterator: pulling mutates ``current``, so a
    consumed producer stays exhausted. Build a new instance to start over.
    """

    def __init__(self, start: int, end: int):
        """
        Initialize range producer.

        Args:
            start: First value produced
            end: Last value produced (inclusive)

        Raises:
            ConfigurationError: If either bound is not an integer
        """
        self.start = require_int("start", start)
        self.end = require_int("end", end)
        self.current = self.start

    def create_iterator(self) -> CursorIterator[int]:
        return self

    def pull(self) -> Cursor[int]:
        if self.current <= self.end:
            value = self.current
            self.current += 1
            return Cursor.of(value)
        return Cursor.exhausted()

    def __repr__(self) -> str:
        return f"RangeProducer(start={self.start}, end={self.end}, current={self.current})"


class AsyncRangeProducer(AsyncSequence[int], AsyncCursorIterator[int]):
    """
    Asynchronous range producer.

    Each pull suspends for ``delay_seconds`` before resolving, standing in
    for a unit of asynchronous work.
    """

    def __init__(
        self,
        start: int,
        end: int,
        delay_seconds: float = DEFAULT_DELAY_SECONDS,
        logger: Optional[LoggerProtocol] = None,
    ):
        """
        Initialize async range producer.

        Args:
            start: First value produced
            end: Last value produced (inclusive)
            delay_seconds: Suspension applied on every pull
            logger: Logger instance (defaults to module logger)

        Raises:
            ConfigurationError: If a bound is not an integer or the delay is invalid
        """
        self.start = require_int("start", start)
        self.end = require_int("end", end)
        self.delay_seconds = require_non_negative_number("delay_seconds", delay_seconds)
        self.current = self.start
        self._logger = logger or logging.getLogger(__name__)

    def create_iterator(self) -> AsyncCursorIterator[int]:
        return self

    async def pull(self) -> Cursor[int]:
        self._logger.debug(f"Waiting {self.delay_seconds}s before producing {self.current}")
        await asyncio.sleep(self.delay_seconds)

        if self.current <= self.end:
            value = self.current
            self.current += 1
            return Cursor.of(value)
        return Cursor.exhausted()

    def __repr__(self) -> str:
        return (
            f"AsyncRangeProducer(start={self.start}, end={self.end}, "
            f"current={self.current}, delay_seconds={self.delay_seconds})"
        )
