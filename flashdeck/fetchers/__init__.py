"""Fetchers module - dataset transports with Strategy pattern."""

from .base import BaseFetcher, parse_records
from .http import HttpDatasetFetcher
from .local import LocalDatasetFetcher
from .registry import FetcherRegistry, locator_scheme, resolve_locator

__all__ = [
    'BaseFetcher',
    'parse_records',
    'HttpDatasetFetcher',
    'LocalDatasetFetcher',
    'FetcherRegistry',
    'locator_scheme',
    'resolve_locator',
]
