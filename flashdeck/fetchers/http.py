"""HTTP dataset fetcher with session pooling."""

import asyncio
from typing import Any, List, Optional

import aiohttp

from ..config import Config
from ..errors import TransportError
from ..utils.logger import setup_logger
from .base import BaseFetcher, parse_records

logger = setup_logger("flashdeck.fetchers.http")


class HttpDatasetFetcher(BaseFetcher):
    """Download dataset JSON over http(s), bypassing every cache layer."""

    def __init__(self, session: Optional[aiohttp.ClientSession] = None) -> None:
        """
        Initialize HTTP fetcher.

        Args:
            session: Externally owned session to reuse; it is not closed by close()
        """
        self._session = session
        self._owns_session = session is None
        self._session_lock = asyncio.Lock()

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create a shared aiohttp session (connection pooling)."""
        async with self._session_lock:
            if self._session is None or self._session.closed:
                headers = {"User-Agent": Config.USER_AGENT}
                # No timeout: a hung request leaves the view in its loading state
                timeout = aiohttp.ClientTimeout(total=None)
                self._session = aiohttp.ClientSession(headers=headers, timeout=timeout)
                self._owns_session = True
            return self._session

    async def close(self) -> None:
        """Close the aiohttp session if this fetcher created it."""
        async with self._session_lock:
            if self._owns_session and self._session and not self._session.closed:
                await self._session.close()
            self._session = None

    async def fetch(self, locator: str) -> List[Any]:
        session = await self._get_session()
        logger.debug("GET %s", locator)
        try:
            async with session.get(locator, headers=Config.NO_CACHE_HEADERS) as response:
                if not 200 <= response.status < 300:
                    raise TransportError(locator, status=response.status, cause=response.reason or "")
                payload = await response.read()
        except aiohttp.ClientError as e:
            raise TransportError(locator, cause=str(e) or type(e).__name__) from e
        return parse_records(locator, payload)
