"""Configuration management for the application."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .exceptions import ConfigurationError
from .validation import require_int, require_non_negative_int, require_non_negative_number

# Load environment variables from .env file
load_dotenv()

FEED_SOURCES = ("http", "simulated")


def _env_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e


def _env_float(name: str, default: Optional[str]) -> Optional[float]:
    raw = os.getenv(name, default)
    if raw is None or raw == "":
        return None
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from e


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


@dataclass
class FeedConfig:
    """Remote feed configuration parameters."""

    base_url: str = "https://hacker-news.firebaseio.com/v0"
    limit: int = 5
    timeout_seconds: float = 10.0

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.limit = require_non_negative_int("limit", self.limit)
        self.timeout_seconds = require_non_negative_number("timeout_seconds", self.timeout_seconds)
        self.base_url = self.base_url.rstrip("/")

    @property
    def index_url(self) -> str:
        """URL of the endpoint listing item identifiers."""
        return f"{self.base_url}/topstories.json"

    def item_url(self, identifier) -> str:
        """URL of the endpoint resolving one identifier."""
        return f"{self.base_url}/item/{identifier}.json"

    @classmethod
    def from_env(cls) -> "FeedConfig":
        """Load feed configuration from environment variables."""
        return cls(
            base_url=os.getenv("FEED_BASE_URL", cls.base_url),
            limit=_env_int("FEED_LIMIT", "5"),
            timeout_seconds=_env_float("HTTP_TIMEOUT_SECONDS", "10"),
        )


@dataclass
class RangeConfig:
    """Range demo configuration parameters."""

    start: int = 1
    end: int = 3
    delay_seconds: float = 0.1

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.start = require_int("start", self.start)
        self.end = require_int("end", self.end)
        self.delay_seconds = require_non_negative_number("delay_seconds", self.delay_seconds)

    @classmethod
    def from_env(cls) -> "RangeConfig":
        """Load range configuration from environment variables."""
        return cls(
            start=_env_int("RANGE_START", "1"),
            end=_env_int("RANGE_END", "3"),
            delay_seconds=_env_float("RANGE_DELAY_SECONDS", "0.1"),
        )


@dataclass
class AppConfig:
    """Application configuration parameters."""

    feed_source: str = "simulated"
    pull_timeout_seconds: Optional[float] = None
    verbose: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.feed_source not in FEED_SOURCES:
            raise ConfigurationError(
                f"Unknown feed source: {self.feed_source}. "
                f"Valid options: {', '.join(FEED_SOURCES)}"
            )
        if self.pull_timeout_seconds is not None:
            self.pull_timeout_seconds = require_non_negative_number(
                "pull_timeout_seconds", self.pull_timeout_seconds
            )

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load application configuration from environment variables."""
        return cls(
            feed_source=os.getenv("FEED_SOURCE", "simulated").strip().lower(),
            pull_timeout_seconds=_env_float("PULL_TIMEOUT_SECONDS", None),
            verbose=_env_bool("VERBOSE", "false"),
        )


def get_feed_config() -> FeedConfig:
    """Get feed configuration."""
    return FeedConfig.from_env()


def get_range_config() -> RangeConfig:
    """Get range configuration."""
    return RangeConfig.from_env()


def get_app_config() -> AppConfig:
    """Get application configuration."""
    return AppConfig.from_env()
