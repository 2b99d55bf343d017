"""Shared fixtures for iteration_protocols tests."""

from typing import Any, Dict, Iterable, List, Optional

import pytest

from iteration_protocols.config import FeedConfig
from iteration_protocols.exceptions import NetworkFailure


class FakeFetcher:
    """In-memory JSON fetcher answering from a fixed URL table."""

    def __init__(self, responses: Dict[str, Any], failing_urls: Optional[Iterable[str]] = None):
        self.responses = responses
        self.failing_urls = set(failing_urls or ())
        self.requests: List[str] = []

    async def get_json(self, url: str) -> Any:
        self.requests.append(url)
        if url in self.failing_urls or url not in self.responses:
            raise NetworkFailure(url, "unexpected status 503", 503)
        return self.responses[url]


def build_feed_responses(config: FeedConfig, identifiers: List[str]) -> Dict[str, Any]:
    """Index listing ``identifiers`` plus ``id -> {title: id, url: id.com}`` items."""
    responses: Dict[str, Any] = {config.index_url: list(identifiers)}
    for identifier in identifiers:
        responses[config.item_url(identifier)] = {
            "title": identifier,
            "url": f"{identifier}.com",
        }
    return responses


@pytest.fixture
def feed_config() -> FeedConfig:
    return FeedConfig(base_url="https://feed.test/v0", limit=5)


@pytest.fixture
def abc_fetcher(feed_config) -> FakeFetcher:
    return FakeFetcher(build_feed_responses(feed_config, ["a", "b", "c"]))


@pytest.fixture
def make_fetcher(feed_config):
    """Factory building a FakeFetcher over ``identifiers``.

    ``failing`` lists identifiers whose item request fails; ``index_fails``
    makes the index request fail.
    """

    def _make(identifiers, failing=(), index_fails=False):
        failing_urls = [feed_config.item_url(identifier) for identifier in failing]
        if index_fails:
            failing_urls.append(feed_config.index_url)
        return FakeFetcher(build_feed_responses(feed_config, list(identifiers)), failing_urls)

    return _make


@pytest.fixture
def raw_fetcher():
    """Factory building a FakeFetcher from an explicit URL table."""
    return FakeFetcher
