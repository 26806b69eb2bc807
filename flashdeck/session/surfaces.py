"""
Contracts between the session core and the outside world.

CardRenderer is what the core draws on; InputSurface is where input
events arrive. The flet shell provides the concrete implementations.
"""

from abc import ABC, abstractmethod
from collections import defaultdict
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List


class ErrorKind(str, Enum):
    """Load failures the user can tell apart."""

    TRANSPORT = "transport"
    EMPTY = "empty"


class CardRenderer(ABC):
    """Rendering surface the session core draws on."""

    @abstractmethod
    def show_card(self, front: str, back: str) -> None:
        """Set the front and back text of the card display."""

    @abstractmethod
    def set_flipped(self, flipped: bool) -> None:
        """Toggle the flipped visual state."""

    @abstractmethod
    def set_counter(self, text: str) -> None:
        """Set the position counter label."""

    @abstractmethod
    def set_controls_enabled(self, enabled: bool) -> None:
        """Enable or disable the navigation and audio controls."""

    @abstractmethod
    def set_audio_visible(self, visible: bool) -> None:
        """Show or hide the audio control."""

    @abstractmethod
    def show_loading(self) -> None:
        """Show the loading placeholder and disable the controls."""

    @abstractmethod
    def show_error(self, kind: ErrorKind) -> None:
        """Show the placeholder for a failed load."""

    def refresh(self) -> None:
        """Push pending changes to the screen."""


class InputEvent(str, Enum):
    KEY = "key"
    CARD_TAP = "card_tap"
    PREV_TAP = "prev_tap"
    NEXT_TAP = "next_tap"
    AUDIO_TAP = "audio_tap"
    TOUCH_START = "touch_start"
    TOUCH_END = "touch_end"


@dataclass
class KeyEvent:
    """A key press. Handlers that act on it set ``default_prevented``."""

    key: str
    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True


Handler = Callable[[Any], None]


class InputSurface:
    """
    Fan-out point for input events.

    Every subscription returns its own unsubscribe callable, so whoever
    attached a handler can remove exactly that handler and nothing else.
    """

    def __init__(self) -> None:
        self._handlers: Dict[InputEvent, List[Handler]] = defaultdict(list)

    def subscribe(self, event: InputEvent, handler: Handler) -> Callable[[], None]:
        event = InputEvent(event)
        self._handlers[event].append(handler)

        def unsubscribe() -> None:
            handlers = self._handlers.get(event, [])
            for i, registered in enumerate(handlers):
                if registered is handler:
                    del handlers[i]
                    break

        return unsubscribe

    def emit(self, event: InputEvent, payload: Any = None) -> int:
        """
        Deliver ``payload`` to every handler of ``event``.

        Returns:
            Number of handlers called
        """
        handlers = list(self._handlers.get(InputEvent(event), ()))
        for handler in handlers:
            handler(payload)
        return len(handlers)

    def handler_count(self, event: InputEvent) -> int:
        return len(self._handlers.get(InputEvent(event), ()))
