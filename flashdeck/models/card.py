"""Data models for FlashDeck."""

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True)
class DatasetDescriptor:
    """A named study set made of one or more JSON sources."""

    id: str
    display_name: str
    sources: Tuple[str, ...]

    def __post_init__(self) -> None:
        if isinstance(self.sources, str):
            raise TypeError("sources must be a sequence of locators, not a string")
        object.__setattr__(self, "sources", tuple(self.sources))
        if not self.sources:
            raise ValueError(f"Dataset '{self.id}' has no sources")

    @property
    def is_composite(self) -> bool:
        return len(self.sources) > 1


@dataclass(frozen=True)
class RawPair:
    """Both sides of a term pair before a direction is chosen."""

    # Native side (Slovenian)
    primary_text: str = ""
    # Foreign side (English)
    secondary_text: str = ""

    @property
    def is_blank(self) -> bool:
        return not self.primary_text and not self.secondary_text


@dataclass(frozen=True)
class Card:
    """A display-ready card."""

    id: int
    front: str
    back: str
    # Text spoken by the audio cue, always the foreign side
    canonical_text: str
    # True when the front shows the native side
    direction_flag: bool


@dataclass
class SessionState:
    """Interactive state of one study session."""

    cards: List[Card] = field(default_factory=list)
    current_index: int = 0
    is_flipped: bool = False
