"""Best-effort pronunciation of the current card."""

from abc import ABC, abstractmethod
from typing import Optional

from ..models import Card


class SpeechEngine(ABC):
    """Text-to-speech backend used by AudioCue."""

    @property
    @abstractmethod
    def available(self) -> bool:
        """Whether speech can be produced in this environment."""

    @abstractmethod
    def cancel(self) -> None:
        """Stop any utterance that is pending or playing."""

    @abstractmethod
    def speak(self, text: str) -> None:
        """Start speaking ``text`` without waiting for it to finish."""


class AudioCue:
    """
    Fire-and-forget speech: the latest request wins, nothing is queued.

    Without a usable engine every call is a silent no-op; the audio
    control is hidden instead of raising.
    """

    def __init__(self, engine: Optional[SpeechEngine] = None) -> None:
        self._engine = engine

    @property
    def available(self) -> bool:
        return self._engine is not None and self._engine.available

    def speak(self, text: str) -> bool:
        """
        Speak ``text``, cancelling whatever is in flight.

        Returns:
            True if an utterance was started
        """
        if not text or not self.available:
            return False
        self._engine.cancel()
        self._engine.speak(text)
        return True

    def speak_card(self, card: Card) -> bool:
        return self.speak(card.canonical_text)
