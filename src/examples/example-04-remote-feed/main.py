"""
Example 04: A Network-Backed Sequence

RemoteFeedProducer fetches the story index once, then one story per pull.
Set FEED_SOURCE=http to read the live Hacker News API instead of the
simulated feed; FEED_LIMIT, FEED_BASE_URL and HTTP_TIMEOUT_SECONDS apply
as they do for the main runner.
"""

import asyncio

from iteration_protocols import (
    HttpJSONFetcher,
    NetworkFailure,
    RemoteFeedProducer,
    SimulatedFeedFetcher,
)
from iteration_protocols.config import get_app_config, get_feed_config


async def print_top_stories(fetcher, feed_config):
    producer = RemoteFeedProducer(fetcher, config=feed_config)
    async for story in producer:
        print(f"  {story.title}")
        print(f"      {story.url}")


async def main(app_config, feed_config):
    if app_config.feed_source == "http":
        async with HttpJSONFetcher(timeout_seconds=feed_config.timeout_seconds) as fetcher:
            await print_top_stories(fetcher, feed_config)
    else:
        await print_top_stories(SimulatedFeedFetcher(config=feed_config), feed_config)


if __name__ == "__main__":
    app_config = get_app_config()
    feed_config = get_feed_config()

    print(f"Top {feed_config.limit} stories from {feed_config.base_url} ({app_config.feed_source}):")
    try:
        asyncio.run(main(app_config, feed_config))
    except NetworkFailure as e:
        print(f"\n❌ Feed failed: {e}")
        raise SystemExit(1)

    print(f"\n✅ Only the first {feed_config.limit} stories were ever requested!")
