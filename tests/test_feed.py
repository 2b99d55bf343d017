"""Tests for feed module."""

import asyncio

import pytest

from iteration_protocols.config import FeedConfig
from iteration_protocols.consumer import collect_async, consume_async, pull_with_timeout
from iteration_protocols.exceptions import ConfigurationError, NetworkFailure
from iteration_protocols.feed import RemoteFeedProducer
from iteration_protocols.models import Cursor, FeedItem, FeedState


def test_limit_two_over_three_identifiers(abc_fetcher, feed_config):
    """Test the worked example: limit=2 against index [a, b, c]."""
    producer = RemoteFeedProducer(abc_fetcher, limit=2, config=feed_config)

    async def pull_three():
        return [await producer.pull() for _ in range(3)]

    cursors = asyncio.run(pull_three())

    assert [c.value.to_dict() for c in cursors[:2]] == [
        {"identifier": "a", "title": "a", "url": "a.com"},
        {"identifier": "b", "title": "b", "url": "b.com"},
    ]
    assert cursors[2] == Cursor.exhausted()
    assert feed_config.item_url("c") not in abc_fetcher.requests


def test_index_is_fetched_once(abc_fetcher, feed_config):
    """Test that the identifier list is cached for the whole iteration."""
    producer = RemoteFeedProducer(abc_fetcher, limit=3, config=feed_config)

    asyncio.run(collect_async(producer))

    assert abc_fetcher.requests == [
        feed_config.index_url,
        feed_config.item_url("a"),
        feed_config.item_url("b"),
        feed_config.item_url("c"),
    ]


@pytest.mark.parametrize("limit,available,expected", [(10, 3, 3), (3, 10, 3), (0, 3, 0), (4, 0, 0)])
def test_produces_min_of_limit_and_available(make_fetcher, feed_config, limit, available, expected):
    """Test that min(limit, index length) items are produced."""
    identifiers = [f"id{i}" for i in range(available)]
    fetcher = make_fetcher(identifiers)
    producer = RemoteFeedProducer(fetcher, limit=limit, config=feed_config)

    items = asyncio.run(collect_async(producer))

    assert [item.identifier for item in items] == identifiers[:expected]
    assert all(item.url == f"{item.title}.com" for item in items)


def test_state_transitions(abc_fetcher, feed_config):
    """Test Uninitialized -> Listed -> Exhausted."""
    producer = RemoteFeedProducer(abc_fetcher, limit=2, config=feed_config)
    assert producer.state is FeedState.UNINITIALIZED

    async def run():
        await producer.pull()
        assert producer.state is FeedState.LISTED
        assert producer.position == 1
        await producer.pull()
        assert producer.state is FeedState.EXHAUSTED

    asyncio.run(run())


def test_pull_after_exhaustion_issues_no_requests(abc_fetcher, feed_config):
    """Test that an exhausted producer keeps returning terminal cursors."""
    producer = RemoteFeedProducer(abc_fetcher, limit=1, config=feed_config)

    async def run():
        await collect_async(producer)
        request_count = len(abc_fetcher.requests)
        assert await producer.pull() == Cursor.exhausted()
        assert await producer.pull() == Cursor.exhausted()
        return request_count

    request_count = asyncio.run(run())

    assert len(abc_fetcher.requests) == request_count


def test_index_failure_fails_first_pull(make_fetcher, feed_config):
    """Test that a failed index request fails the first pull with no item requests."""
    fetcher = make_fetcher(["a", "b"], index_fails=True)
    producer = RemoteFeedProducer(fetcher, limit=2, config=feed_config)

    with pytest.raises(NetworkFailure) as exc_info:
        asyncio.run(producer.pull())

    assert exc_info.value.url == feed_config.index_url
    assert fetcher.requests == [feed_config.index_url]


@pytest.mark.parametrize("k", [1, 2, 3])
def test_item_failure_on_kth_item(make_fetcher, feed_config, k):
    """Test that failing on the k-th item surfaces after k-1 produced items."""
    identifiers = ["a", "b", "c", "d"]
    fetcher = make_fetcher(identifiers, failing=[identifiers[k - 1]])
    producer = RemoteFeedProducer(fetcher, limit=4, config=feed_config)
    produced = []

    with pytest.raises(NetworkFailure):
        asyncio.run(consume_async(producer, produced.append))

    assert [item.identifier for item in produced] == identifiers[: k - 1]
    # the consumer stopped pulling after the failure
    assert fetcher.requests[-1] == feed_config.item_url(identifiers[k - 1])
    assert producer.position == k - 1


def test_malformed_index_is_a_network_failure(raw_fetcher, feed_config):
    """Test that a non-list index body fails the pull."""
    fetcher = raw_fetcher({feed_config.index_url: {"ids": [1, 2]}})
    producer = RemoteFeedProducer(fetcher, limit=2, config=feed_config)

    with pytest.raises(NetworkFailure, match="expected a list"):
        asyncio.run(producer.pull())


def test_malformed_item_is_a_network_failure(raw_fetcher, feed_config):
    """Test that an item without title/url fails the pull."""
    fetcher = raw_fetcher(
        {
            feed_config.index_url: [7],
            feed_config.item_url(7): {"title": "Ask HN: no link"},
        }
    )
    producer = RemoteFeedProducer(fetcher, limit=1, config=feed_config)

    with pytest.raises(NetworkFailure, match="malformed item") as exc_info:
        asyncio.run(producer.pull())

    assert isinstance(exc_info.value.__cause__, ValueError)
    assert producer.position == 0


def test_limit_defaults_to_config(abc_fetcher):
    """Test that limit falls back to the config value."""
    config = FeedConfig(base_url="https://feed.test/v0", limit=1)
    producer = RemoteFeedProducer(abc_fetcher, config=config)

    assert producer.limit == 1


@pytest.mark.parametrize("limit", [-1, "two", 2.5, True])
def test_invalid_limit_rejected_at_construction(abc_fetcher, feed_config, limit):
    """Test that invalid limits fail before any request is issued."""
    with pytest.raises(ConfigurationError):
        RemoteFeedProducer(abc_fetcher, limit=limit, config=feed_config)

    assert abc_fetcher.requests == []


def test_async_for_over_feed(abc_fetcher, feed_config):
    """Test the async iteration bridge."""
    producer = RemoteFeedProducer(abc_fetcher, limit=3, config=feed_config)

    async def run():
        return [item async for item in producer]

    items = asyncio.run(run())

    assert items == [
        FeedItem("a", "a", "a.com"),
        FeedItem("b", "b", "b.com"),
        FeedItem("c", "c", "c.com"),
    ]


def test_pull_after_index_failure_requests_index_again(make_fetcher, feed_config):
    """Test that a failed index request leaves the producer uninitialized."""
    fetcher = make_fetcher(["a", "b"], index_fails=True)
    producer = RemoteFeedProducer(fetcher, limit=2, config=feed_config)

    async def run():
        with pytest.raises(NetworkFailure):
            await producer.pull()
        assert producer.state is FeedState.UNINITIALIZED

        fetcher.failing_urls.clear()
        return await producer.pull()

    cursor = asyncio.run(run())

    assert cursor == Cursor.of(FeedItem("a", "a", "a.com"))
    assert fetcher.requests == [
        feed_config.index_url,
        feed_config.index_url,
        feed_config.item_url("a"),
    ]


def test_timeout_mid_item_leaves_position_unchanged(abc_fetcher, feed_config):
    """Test that cancelling an in-flight item request does not advance the feed."""
    slow_url = feed_config.item_url("b")
    answer = abc_fetcher.get_json

    async def slow_get_json(url):
        if url == slow_url:
            await asyncio.sleep(5)
        return await answer(url)

    abc_fetcher.get_json = slow_get_json
    producer = RemoteFeedProducer(abc_fetcher, limit=3, config=feed_config)

    async def run():
        first = await pull_with_timeout(producer, 1.0)
        with pytest.raises(asyncio.TimeoutError):
            await pull_with_timeout(producer, 0.01)
        return first

    first = asyncio.run(run())

    assert first.value.identifier == "a"
    assert producer.position == 1
    assert producer.state is FeedState.LISTED
