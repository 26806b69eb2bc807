"""Local file dataset fetcher."""

from pathlib import Path
from typing import Any, List
from urllib.parse import urlparse
from urllib.request import url2pathname

import aiofiles

from ..errors import TransportError
from .base import BaseFetcher, parse_records


def locator_to_path(locator: str) -> Path:
    """Turn a file:// URL or plain path into a Path."""
    if locator.startswith("file:"):
        return Path(url2pathname(urlparse(locator).path))
    return Path(locator)


class LocalDatasetFetcher(BaseFetcher):
    """Read dataset JSON from disk. The file is reread on every call."""

    async def fetch(self, locator: str) -> List[Any]:
        path = locator_to_path(locator)
        try:
            async with aiofiles.open(path, "rb") as f:
                payload = await f.read()
        except FileNotFoundError as e:
            raise TransportError(locator, status=404, cause="file not found") from e
        except OSError as e:
            raise TransportError(locator, cause=str(e)) from e
        return parse_records(locator, payload)
