"""Network collaborators returning decoded JSON bodies."""

import asyncio
import logging
from typing import Any, Dict, List, Optional

import httpx
from faker import Faker

from .config import FeedConfig
from .exceptions import NetworkFailure
from .protocols import LoggerProtocol
from .validation import require_non_negative_int, require_non_negative_number


class HttpJSONFetcher:
    """
    JSON fetcher backed by ``httpx.AsyncClient``.

    Transport errors, timeouts, non-success statuses and undecodable
    bodies are all raised as NetworkFailure. A client passed in by the
    caller is left open on ``aclose()``.
    """

    def __init__(
        self,
        timeout_seconds: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
        logger: Optional[LoggerProtocol] = None,
    ):
        """
        Initialize HTTP fetcher.

        Args:
            timeout_seconds: Timeout applied to every request
            client: Existing client to reuse (the fetcher creates one otherwise)
            logger: Logger instance (defaults to module logger)
        """
        self.timeout_seconds = require_non_negative_number("timeout_seconds", timeout_seconds)
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient()
        self._logger = logger or logging.getLogger(__name__)

    async def get_json(self, url: str) -> Any:
        """
        Fetch ``url`` and decode its JSON body.

        Args:
            url: Absolute URL to request

        Returns:
            Decoded JSON value

        Raises:
            NetworkFailure: If the request fails or the body is not JSON
        """
        self._logger.debug(f"GET {url}")

        try:
            response = await self._client.get(url, timeout=self.timeout_seconds)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            raise NetworkFailure(url, f"unexpected status {status_code}", status_code) from e
        except httpx.HTTPError as e:
            raise NetworkFailure(url, f"{type(e).__name__}: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise NetworkFailure(url, "response body is not valid JSON", response.status_code) from e

    async def aclose(self) -> None:
        """Close the underlying client if this fetcher created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpJSONFetcher":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
        return False


class SimulatedFeedFetcher:
    """
    Offline fetcher serving a Hacker-News-shaped feed.

    Stories are generated once with Faker so repeated requests for the same
    identifier return the same body.
    """

    def __init__(
        self,
        story_count: int = 30,
        latency_seconds: float = 0.05,
        first_id: int = 1000,
        seed: int = 42,
        config: Optional[FeedConfig] = None,
        logger: Optional[LoggerProtocol] = None,
    ):
        """
        Initialize simulated fetcher.

        Args:
            story_count: Number of stories listed by the index endpoint
            latency_seconds: Simulated latency per request
            first_id: Identifier of the first story
            seed: Random seed for reproducibility
            config: Endpoint layout to answer for (defaults to FeedConfig())
            logger: Logger instance (defaults to module logger)
        """
        self.story_count = require_non_negative_int("story_count", story_count)
        self.latency_seconds = require_non_negative_number("latency_seconds", latency_seconds)
        self.config = config or FeedConfig()
        self.requests: List[str] = []
        self._logger = logger or logging.getLogger(__name__)

        self.faker = Faker()
        self.faker.seed_instance(seed)
        self._stories = self._generate_stories(first_id)

    async def get_json(self, url: str) -> Any:
        """
        Answer ``url`` from the generated feed.

        Raises:
            NetworkFailure: If ``url`` is neither the index nor a known item
        """
        self._logger.debug(f"Simulating GET {url}...")
        self.requests.append(url)

        # Simulate API latency
        await asyncio.sleep(self.latency_seconds)

        if url == self.config.index_url:
            return [story["id"] for story in self._stories.values()]

        prefix = f"{self.config.base_url}/item/"
        if url.startswith(prefix) and url.endswith(".json"):
            key = url[len(prefix) : -len(".json")]
            if key in self._stories:
                return dict(self._stories[key])

        raise NetworkFailure(url, "unexpected status 404", 404)

    def _generate_stories(self, first_id: int) -> Dict[str, Dict]:
        """Generate story bodies keyed by identifier."""
        stories = {}
        for i in range(self.story_count):
            story_id = first_id + i
            stories[str(story_id)] = {
                "id": story_id,
                "type": "story",
                "by": self.faker.user_name(),
                "title": self.faker.sentence(nb_words=6).rstrip("."),
                "url": self.faker.uri(),
                "score": self.faker.random_int(1, 500),
            }
        return stories
