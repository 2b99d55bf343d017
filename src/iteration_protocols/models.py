"""Data models shared by sequences, producers and consumers."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Cursor(Generic[T]):
    """
    One step of a sequence: a produced value plus a completion flag.

    A terminal cursor (``done=True``) never carries a value.
    """

    value: Optional[T] = None
    done: bool = False

    def __post_init__(self):
        if self.done and self.value is not None:
            raise ValueError("a terminal cursor cannot carry a value")

    @classmethod
    def of(cls, value: T) -> "Cursor[T]":
        """Create a non-terminal cursor holding ``value``."""
        return cls(value=value, done=False)

    @classmethod
    def exhausted(cls) -> "Cursor[T]":
        """Create the terminal cursor."""
        return cls(value=None, done=True)


class FeedState(str, Enum):
    """Lifecycle of a remote feed producer."""

    UNINITIALIZED = "uninitialized"
    LISTED = "listed"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class FeedItem:
    """A single resolved feed entry."""

    identifier: Any
    title: str
    url: str

    @classmethod
    def from_payload(cls, identifier: Any, payload: Any) -> "FeedItem":
        """
        Build an item from a decoded item-endpoint body.

        Args:
            identifier: Identifier the payload was fetched for
            payload: Decoded JSON body

        Returns:
            FeedItem

        Raises:
            ValueError: If the payload is not an object with string title and url
        """
        if not isinstance(payload, dict):
            raise ValueError(f"expected an object, got {type(payload).__name__}")

        title = payload.get("title")
        url = payload.get("url")
        if not isinstance(title, str) or not isinstance(url, str):
            raise ValueError("item is missing a string 'title' or 'url'")

        return cls(identifier=identifier, title=title, url=url)

    def to_dict(self) -> Dict:
        """Convert item to dictionary."""
        return {
            "identifier": self.identifier,
            "title": self.title,
            "url": self.url,
        }


@dataclass
class ConsumeStatistics:
    """Statistics for a consumer loop run."""

    total_items: int = 0
    elapsed_time: float = 0.0
