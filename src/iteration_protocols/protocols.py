"""Sequence contracts and collaborator protocols."""

from abc import ABC, abstractmethod
from typing import Any, Generic, Protocol, TypeVar

from .models import Cursor

T = TypeVar("T")


class CursorIterator(ABC, Generic[T]):
    """
    Pull-based synchronous iterator handle.

    ``pull()`` is the primitive; ``__next__`` adapts it to Python's
    iterator protocol so handles work in ``for`` loops.
    """

    @abstractmethod
    def pull(self) -> Cursor[T]:
        """Advance and return the next cursor.

        After the first terminal cursor every further call returns a
        terminal cursor again.
        """
        pass

    def __iter__(self) -> "CursorIterator[T]":
        return self

    def __next__(self) -> T:
        cursor = self.pull()
        if cursor.done:
            raise StopIteration
        return cursor.value


class SyncSequence(ABC, Generic[T]):
    """Contract for synchronous pull-based producers."""

    @abstractmethod
    def create_iterator(self) -> CursorIterator[T]:
        """Return an iterator handle positioned at the next value."""
        pass

    def __iter__(self) -> CursorIterator[T]:
        return self.create_iterator()


class AsyncCursorIterator(ABC, Generic[T]):
    """
    Pull-based asynchronous iterator handle.

    Callers await each ``pull()`` before issuing the next one.
    """

    @abstractmethod
    async def pull(self) -> Cursor[T]:
        """Suspend until the next cursor is ready and return it."""
        pass

    def __aiter__(self) -> "AsyncCursorIterator[T]":
        return self

    async def __anext__(self) -> T:
        cursor = await self.pull()
        if cursor.done:
            raise StopAsyncIteration
        return cursor.value


class AsyncSequence(ABC, Generic[T]):
    """Contract for asynchronous pull-based producers."""

    @abstractmethod
    def create_iterator(self) -> AsyncCursorIterator[T]:
        """Return an async iterator handle positioned at the next value."""
        pass

    def __aiter__(self) -> AsyncCursorIterator[T]:
        return self.create_iterator()


class JSONFetcher(Protocol):
    """Protocol for the network collaborator used by remote producers."""

    async def get_json(self, url: str) -> Any:
        """Fetch ``url`` and return the decoded JSON body."""
        ...


class LoggerProtocol(Protocol):
    """Protocol for logging."""

    def info(self, message: str) -> None:
        """Log info message."""
        ...

    def debug(self, message: str) -> None:
        """Log debug message."""
        ...

    def warning(self, message: str) -> None:
        """Log warning message."""
        ...

    def error(self, message: str) -> None:
        """Log error message."""
        ...
