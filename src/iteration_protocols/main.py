"""Main entry point running the iteration demos to completion."""

import asyncio
import logging
import sys
from typing import Dict

from .config import AppConfig, FeedConfig, RangeConfig, get_app_config, get_feed_config, get_range_config
from .consumer import consume, consume_async
from .feed import RemoteFeedProducer
from .fetchers import HttpJSONFetcher, SimulatedFeedFetcher
from .models import ConsumeStatistics, FeedItem
from .protocols import JSONFetcher
from .ranges import AsyncRangeProducer, RangeProducer
from .sequences import IterableSequence

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure logging level.

    Args:
        verbose: Enable verbose logging
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    else:
        logging.getLogger().setLevel(logging.INFO)


def print_value(value) -> None:
    print(f"  {value}")


def print_feed_item(item: FeedItem) -> None:
    print(f"  [{item.identifier}] {item.title}")
    print(f"      {item.url}")


def print_summary(results: Dict[str, ConsumeStatistics]):
    """Print summary statistics.

    Args:
        results: Statistics keyed by demo name, in run order
    """
    print("\n" + "=" * 80)
    print("EXECUTION SUMMARY")
    print("=" * 80)

    for name, stats in results.items():
        print(f"\n{name}:")
        print(f"  Items produced: {stats.total_items}")
        print(f"  Time taken: {stats.elapsed_time:.2f} seconds")

    print("\n" + "=" * 80)


def demo_manual_iteration() -> ConsumeStatistics:
    """Pull cursors by hand from a list, then let a for loop do the same."""
    sequence = IterableSequence([1, 2, 3])

    print("\nManual pulls over [1, 2, 3]:")
    iterator = sequence.create_iterator()
    for _ in range(4):
        print_value(iterator.pull())

    print("\nfor loop over the same list:")
    return consume(sequence, print_value)


def demo_range(range_config: RangeConfig) -> ConsumeStatistics:
    """Drain a synchronous range producer."""
    producer = RangeProducer(range_config.start, range_config.end)
    print(f"\nSynchronous range {range_config.start}..{range_config.end}:")
    return consume(producer, print_value)


async def demo_async_range(range_config: RangeConfig, app_config: AppConfig) -> ConsumeStatistics:
    """Drain an asynchronous range producer."""
    producer = AsyncRangeProducer(
        range_config.start, range_config.end, delay_seconds=range_config.delay_seconds
    )
    print(
        f"\nAsynchronous range {range_config.start}..{range_config.end} "
        f"({range_config.delay_seconds}s per pull):"
    )
    return await consume_async(producer, print_value, pull_timeout=app_config.pull_timeout_seconds)


async def _consume_feed(
    fetcher: JSONFetcher, feed_config: FeedConfig, app_config: AppConfig
) -> ConsumeStatistics:
    producer = RemoteFeedProducer(fetcher, config=feed_config)
    print(f"\nRemote feed from {feed_config.base_url} (limit {producer.limit}):")
    return await consume_async(producer, print_feed_item, pull_timeout=app_config.pull_timeout_seconds)


async def demo_remote_feed(feed_config: FeedConfig, app_config: AppConfig) -> ConsumeStatistics:
    """Drain a remote feed producer against the configured source."""
    if app_config.feed_source == "http":
        logger.info("Using HTTP feed source (HttpJSONFetcher)")
        async with HttpJSONFetcher(timeout_seconds=feed_config.timeout_seconds) as fetcher:
            return await _consume_feed(fetcher, feed_config, app_config)

    logger.info("Using simulated feed source (SimulatedFeedFetcher)")
    fetcher = SimulatedFeedFetcher(config=feed_config)
    return await _consume_feed(fetcher, feed_config, app_config)


async def run_demos(
    app_config: AppConfig, range_config: RangeConfig, feed_config: FeedConfig
) -> Dict[str, ConsumeStatistics]:
    """Run every demo in order, stopping at the first failure.

    Returns:
        Statistics keyed by demo name
    """
    results = {}
    results["Manual iteration"] = demo_manual_iteration()
    results["Synchronous range"] = demo_range(range_config)
    results["Asynchronous range"] = await demo_async_range(range_config, app_config)
    results["Remote feed"] = await demo_remote_feed(feed_config, app_config)
    return results


def main():
    """Main execution function."""
    logger.info("Starting iteration protocol demos")
    logger.info("=" * 80)

    try:
        # Load configuration
        app_config = get_app_config()
        range_config = get_range_config()
        feed_config = get_feed_config()
        setup_logging(app_config.verbose)

        logger.info(f"Feed source: {app_config.feed_source}")
        logger.info(f"Feed limit: {feed_config.limit}")
        logger.info(f"Range: {range_config.start}..{range_config.end}")
        if app_config.pull_timeout_seconds is not None:
            logger.info(f"Pull timeout: {app_config.pull_timeout_seconds} seconds")

        results = asyncio.run(run_demos(app_config, range_config, feed_config))

        print_summary(results)

        logger.info("\nExecution completed successfully!")
        return 0

    except KeyboardInterrupt:
        logger.warning("\nExecution interrupted by user")
        return 130
    except Exception as e:
        logger.error(f"\nError during execution: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
