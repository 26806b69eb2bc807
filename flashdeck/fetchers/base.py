"""Base fetcher class."""

import json
from abc import ABC, abstractmethod
from typing import Any, List

from ..errors import TransportError


def parse_records(locator: str, payload: bytes) -> List[Any]:
    """
    Decode a dataset body into its list of records.

    Raises:
        TransportError: If the body is not UTF-8 JSON or not a JSON array
    """
    try:
        data = json.loads(payload.decode("utf-8-sig"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise TransportError(locator, cause=f"invalid JSON: {e}") from e
    if not isinstance(data, list):
        raise TransportError(locator, cause=f"expected a JSON array, got {type(data).__name__}")
    return data


class BaseFetcher(ABC):
    """
    Abstract base class for dataset fetchers.

    Provides lifecycle management and async context manager support.
    Subclasses implement fetch() and optionally override close().
    """

    @abstractmethod
    async def fetch(self, locator: str) -> List[Any]:
        """
        Fetch a dataset resource and return its records.

        Always reads a fresh copy; nothing is served from a cache.

        Args:
            locator: URL or filesystem path of the resource

        Returns:
            Records parsed from the JSON array

        Raises:
            TransportError: On any transport failure or non-success status
        """

    async def close(self) -> None:
        """Close any open resources (sessions, connections, etc.)."""

    async def __aenter__(self) -> "BaseFetcher":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - ensure resources are closed."""
        await self.close()
