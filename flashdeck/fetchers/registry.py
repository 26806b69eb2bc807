"""
Fetcher Registry - picks a dataset fetcher from the locator's URL scheme.

New transports (e.g. an S3 or zip-archive fetcher) can be registered
without touching the loader.
"""

from pathlib import PurePath
from typing import Callable, Dict
from urllib.parse import urljoin, urlparse

from .base import BaseFetcher

LOCAL_SCHEME = "file"


def locator_scheme(locator: str) -> str:
    """
    Return the scheme used to pick a fetcher.

    Plain paths (including Windows drive paths like ``C:\\data``) map to "file".
    """
    scheme = urlparse(locator).scheme.lower()
    if len(scheme) <= 1:
        return LOCAL_SCHEME
    return scheme


def resolve_locator(locator: str, base_url: str = "", data_dir: str = "") -> str:
    """
    Make a dataset locator absolute.

    Absolute URLs are returned unchanged. Relative names are joined onto
    ``base_url`` when one is configured, otherwise onto ``data_dir``.
    """
    scheme = urlparse(locator).scheme
    if len(scheme) > 1:
        return locator
    if PurePath(locator).is_absolute():
        return locator
    if base_url:
        return urljoin(base_url if base_url.endswith("/") else base_url + "/", locator)
    if data_dir:
        return str(PurePath(data_dir) / locator)
    return locator


class FetcherRegistry:
    """
    Registry for dataset fetchers keyed by URL scheme.

    Usage:
        # Register a fetcher
        FetcherRegistry.register("s3", S3DatasetFetcher)

        # Get a fetcher instance
        fetcher = FetcherRegistry.get_fetcher("https")
    """

    _factories: Dict[str, Callable[[], BaseFetcher]] = {}

    @classmethod
    def register(cls, scheme: str, factory: Callable[[], BaseFetcher]) -> None:
        """
        Register a fetcher for a URL scheme.

        Args:
            scheme: Scheme name (e.g., "http", "https", "file")
            factory: Fetcher class or zero-argument factory
        """
        cls._factories[scheme.lower()] = factory

    @classmethod
    def get_fetcher(cls, scheme: str) -> BaseFetcher:
        """
        Get a new fetcher instance for a scheme.

        Raises:
            KeyError: If no fetcher is registered for the scheme
        """
        factory = cls._factories.get(scheme.lower())
        if factory is None:
            available = sorted(cls._factories)
            raise KeyError(f"No fetcher for scheme '{scheme}'. Available: {available}")
        return factory()


def _register_default_fetchers() -> None:
    """Register built-in fetchers on module load."""
    # Import here to avoid circular imports
    from .http import HttpDatasetFetcher
    from .local import LocalDatasetFetcher

    FetcherRegistry.register("http", HttpDatasetFetcher)
    FetcherRegistry.register("https", HttpDatasetFetcher)
    FetcherRegistry.register(LOCAL_SCHEME, LocalDatasetFetcher)


# Auto-register default fetchers when module is imported
_register_default_fetchers()
