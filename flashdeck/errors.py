"""Exceptions raised by the card loading pipeline."""

from typing import Optional


class CardSetError(Exception):
    """Base class for failures while turning a dataset into cards."""


class TransportError(CardSetError):
    """A dataset source could not be fetched or read."""

    def __init__(self, locator: str, status: Optional[int] = None, cause: str = "") -> None:
        self.locator = locator
        self.status = status
        self.cause = cause
        detail = f"status {status}" if status is not None else cause or "transport failure"
        if status is not None and cause:
            detail = f"{detail}: {cause}"
        super().__init__(f"Failed to fetch {locator} ({detail})")


class EmptyDatasetError(CardSetError):
    """A dataset loaded successfully but yielded no usable cards."""

    def __init__(self, dataset_id: str) -> None:
        self.dataset_id = dataset_id
        super().__init__(f"Dataset '{dataset_id}' contains no cards")
