"""Iteration Protocols - cursor-based sync, async and network-backed sequences."""

__version__ = "0.1.0"

from .config import AppConfig, FeedConfig, RangeConfig
from .consumer import collect, collect_async, consume, consume_async, pull_with_timeout
from .exceptions import ConfigurationError, IterationProtocolError, NetworkFailure
from .feed import RemoteFeedProducer
from .fetchers import HttpJSONFetcher, SimulatedFeedFetcher
from .models import ConsumeStatistics, Cursor, FeedItem, FeedState
from .protocols import (
    AsyncCursorIterator,
    AsyncSequence,
    CursorIterator,
    JSONFetcher,
    LoggerProtocol,
    SyncSequence,
)
from .ranges import AsyncRangeProducer, RangeProducer
from .sequences import IterableSequence

__all__ = [
    # Config
    "AppConfig",
    "FeedConfig",
    "RangeConfig",
    # Models
    "Cursor",
    "FeedItem",
    "FeedState",
    "ConsumeStatistics",
    # Errors
    "IterationProtocolError",
    "ConfigurationError",
    "NetworkFailure",
    # Protocols
    "CursorIterator",
    "SyncSequence",
    "AsyncCursorIterator",
    "AsyncSequence",
    "JSONFetcher",
    "LoggerProtocol",
    # Producers
    "IterableSequence",
    "RangeProducer",
    "AsyncRangeProducer",
    "RemoteFeedProducer",
    # Fetchers
    "HttpJSONFetcher",
    "SimulatedFeedFetcher",
    # Consumers
    "consume",
    "consume_async",
    "collect",
    "collect_async",
    "pull_with_timeout",
]
