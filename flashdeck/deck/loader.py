"""Dataset loading: fetch every source of a descriptor and normalize its records."""

from contextlib import AsyncExitStack
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from ..config import SettingsManager
from ..errors import EmptyDatasetError, TransportError
from ..fetchers import BaseFetcher, FetcherRegistry, locator_scheme, resolve_locator
from ..models import DatasetDescriptor, RawPair
from ..utils.logger import setup_logger
from ..utils.parsing import TextParser

logger = setup_logger("flashdeck.loader")


@dataclass(frozen=True)
class FieldAliases:
    """Accepted key spellings per logical field, in priority order."""

    primary: Tuple[str, ...] = ("question", "slovenian")
    secondary: Tuple[str, ...] = ("answer", "english")


DEFAULT_ALIASES = FieldAliases()


def first_present(record: Mapping[str, Any], aliases: Sequence[str]) -> str:
    """Value of the first alias present with a non-null value, else ""."""
    for key in aliases:
        value = record.get(key)
        if value is not None:
            return TextParser.clean_field(value)
    return ""


def normalize_record(record: Mapping[str, Any], aliases: FieldAliases = DEFAULT_ALIASES) -> RawPair:
    """Map one dataset record onto a RawPair. Missing sides become empty strings."""
    return RawPair(
        primary_text=first_present(record, aliases.primary),
        secondary_text=first_present(record, aliases.secondary),
    )


def default_fetcher_factory(locator: str) -> BaseFetcher:
    try:
        return FetcherRegistry.get_fetcher(locator_scheme(locator))
    except KeyError as e:
        raise TransportError(locator, cause=f"unsupported scheme '{locator_scheme(locator)}'") from e


class CardSetLoader:
    """
    Resolve a dataset descriptor into raw term pairs.

    Sources are fetched one after another in descriptor order. The first
    failing source aborts the whole load with TransportError and whatever
    was read from earlier sources is dropped.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        data_dir: Optional[str] = None,
        keep_blank: Optional[bool] = None,
        aliases: FieldAliases = DEFAULT_ALIASES,
        fetcher_factory: Callable[[str], BaseFetcher] = default_fetcher_factory,
    ) -> None:
        """
        Args:
            base_url: Base URL for relative locators (default: DATASET_BASE_URL setting)
            data_dir: Directory for relative locators when no base URL is set
                      (default: DATA_DIR setting)
            keep_blank: Keep records with both sides empty (default: KEEP_BLANK_RECORDS)
            aliases: Accepted field spellings
            fetcher_factory: Returns a fetcher for an absolute locator
        """
        self._base_url = base_url
        self._data_dir = data_dir
        self._keep_blank = keep_blank
        self._aliases = aliases
        self._fetcher_factory = fetcher_factory

    def _setting(self, override: Any, key: str, default: Any) -> Any:
        if override is not None:
            return override
        return SettingsManager().get(key, default)

    def resolve(self, source: str) -> str:
        """Absolute locator for one descriptor source."""
        return resolve_locator(
            source,
            base_url=self._setting(self._base_url, "DATASET_BASE_URL", ""),
            data_dir=self._setting(self._data_dir, "DATA_DIR", ""),
        )

    async def fetch_records(self, descriptor: DatasetDescriptor) -> List[Any]:
        """Fetch and concatenate the raw records of every source."""
        records: List[Any] = []
        fetchers: Dict[str, BaseFetcher] = {}
        async with AsyncExitStack() as stack:
            for source in descriptor.sources:
                locator = self.resolve(source)
                scheme = locator_scheme(locator)
                fetcher = fetchers.get(scheme)
                if fetcher is None:
                    fetcher = await stack.enter_async_context(self._fetcher_factory(locator))
                    fetchers[scheme] = fetcher
                batch = await fetcher.fetch(locator)
                logger.info("Fetched %d records from %s", len(batch), locator)
                records.extend(batch)
        return records

    def normalize(self, records: Sequence[Any]) -> List[RawPair]:
        """Normalize records, applying the blank-record policy."""
        keep_blank = bool(self._setting(self._keep_blank, "KEEP_BLANK_RECORDS", False))
        pairs: List[RawPair] = []
        skipped = blanks = 0
        for record in records:
            if not isinstance(record, Mapping):
                skipped += 1
                continue
            pair = normalize_record(record, self._aliases)
            if pair.is_blank and not keep_blank:
                blanks += 1
                continue
            pairs.append(pair)
        if skipped:
            logger.warning("Skipped %d records that are not JSON objects", skipped)
        if blanks:
            logger.warning("Dropped %d records with both sides empty", blanks)
        return pairs

    async def load(self, descriptor: DatasetDescriptor) -> List[RawPair]:
        """
        Load every source of ``descriptor`` as one list of pairs.

        Raises:
            TransportError: If any source fails
            EmptyDatasetError: If no usable pair remains
        """
        logger.info("Loading dataset '%s' (%d source(s))", descriptor.id, len(descriptor.sources))
        records = await self.fetch_records(descriptor)
        pairs = self.normalize(records)
        if not pairs:
            raise EmptyDatasetError(descriptor.id)
        return pairs
