"""Network-backed producer resolving an identifier index into feed items."""

import logging
from typing import Any, List, Optional

from .config import FeedConfig
from .exceptions import NetworkFailure
from .models import Cursor, FeedItem, FeedState
from .protocols import AsyncCursorIterator, AsyncSequence, JSONFetcher, LoggerProtocol
from .validation import require_non_negative_int


class RemoteFeedProducer(AsyncSequence[FeedItem], AsyncCursorIterator[FeedItem]):
    """
    Asynchronous producer backed by two dependent requests.

    The first pull fetches the identifier index once and caches at most
    ``limit`` identifiers; each later pull resolves one identifier into a
    FeedItem. Failures surface from ``pull()`` as NetworkFailure and the
    producer never retries on its own.
    """

    def __init__(
        self,
        fetcher: JSONFetcher,
        limit: Optional[int] = None,
        config: Optional[FeedConfig] = None,
        logger: Optional[LoggerProtocol] = None,
    ):
        """
        Initialize remote feed producer.

        Args:
            fetcher: Network collaborator returning decoded JSON bodies
            limit: Maximum number of items (defaults to ``config.limit``)
            config: Endpoint configuration (defaults to FeedConfig())
            logger: Logger instance (defaults to module logger)

        Raises:
            ConfigurationError: If limit is not a non-negative integer
        """
        self.config = config or FeedConfig()
        self.limit = require_non_negative_int(
            "limit", self.config.limit if limit is None else limit
        )
        self._fetcher = fetcher
        self._logger = logger or logging.getLogger(__name__)

        self.state = FeedState.UNINITIALIZED
        self.position = 0
        self._identifiers: List[Any] = []

    def create_iterator(self) -> AsyncCursorIterator[FeedItem]:
        return self

    async def pull(self) -> Cursor[FeedItem]:
        if self.state is FeedState.UNINITIALIZED:
            await self._load_index()

        if self.state is FeedState.EXHAUSTED:
            return Cursor.exhausted()

        identifier = self._identifiers[self.position]
        item = await self._fetch_item(identifier)

        self.position += 1
        if self.position >= len(self._identifiers):
            self.state = FeedState.EXHAUSTED

        return Cursor.of(item)

    async def _load_index(self) -> None:
        url = self.config.index_url
        self._logger.debug(f"Fetching index from {url}...")

        payload = await self._fetcher.get_json(url)
        if not isinstance(payload, list):
            raise NetworkFailure(url, f"expected a list of identifiers, got {type(payload).__name__}")

        self._identifiers = payload[: self.limit]
        self.position = 0
        self.state = FeedState.LISTED if self._identifiers else FeedState.EXHAUSTED
        self._logger.debug(
            f"Index listed {len(payload)} identifiers, keeping {len(self._identifiers)}"
        )

    async def _fetch_item(self, identifier: Any) -> FeedItem:
        url = self.config.item_url(identifier)
        self._logger.debug(
            f"Fetching item {self.position + 1}/{len(self._identifiers)} from {url}..."
        )

        payload = await self._fetcher.get_json(url)
        try:
            return FeedItem.from_payload(identifier, payload)
        except ValueError as e:
            raise NetworkFailure(url, f"malformed item: {e}") from e

    def __repr__(self) -> str:
        return (
            f"RemoteFeedProducer(limit={self.limit}, state={self.state.value}, "
            f"position={self.position})"
        )
