"""Cursor views over eager collections."""

from collections.abc import Iterator as IteratorABC
from typing import Iterable, Iterator, Optional, TypeVar

from .models import Cursor
from .protocols import CursorIterator, SyncSequence

T = TypeVar("T")


class _CollectionCursorIterator(CursorIterator[T]):
    """Steps through a Python iterator one cursor at a time."""

    def __init__(self, source: Iterator[T]):
        self._source: Optional[Iterator[T]] = source

    def pull(self) -> Cursor[T]:
        if self._source is None:
            return Cursor.exhausted()
        try:
            value = next(self._source)
        except StopIteration:
            self._source = None
            return Cursor.exhausted()
        return Cursor.of(value)


class IterableSequence(SyncSequence[T]):
    """
    Exposes an eager collection through the cursor protocol.

    Every call to ``create_iterator()`` starts a fresh pass over the
    backing collection, in its own order.
    """

    def __init__(self, items: Iterable[T]):
        """
        Initialize the sequence.

        Args:
            items: Backing collection; one-shot iterators are materialized
        """
        if isinstance(items, IteratorABC):
            items = list(items)
        self._items = items

    def create_iterator(self) -> CursorIterator[T]:
        return _CollectionCursorIterator(iter(self._items))
