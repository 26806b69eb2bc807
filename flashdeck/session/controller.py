"""Navigation and flip state machine for one study session."""

from typing import Sequence, Tuple

from ..config import Config
from ..errors import EmptyDatasetError
from ..models import Card, SessionState
from .surfaces import CardRenderer


class SessionController:
    """
    Owns the card sequence, the current position and the flip flag.

    Navigation wraps around in both directions and always shows the
    front of the card it lands on. Every operation redraws the renderer.
    """

    def __init__(
        self,
        cards: Sequence[Card],
        renderer: CardRenderer,
        dataset_id: str = "",
        counter_format: str = Config.COUNTER_FORMAT,
    ) -> None:
        if not cards:
            raise EmptyDatasetError(dataset_id)
        self._state = SessionState(cards=list(cards))
        self._renderer = renderer
        self.dataset_id = dataset_id
        self._counter_format = counter_format

    @property
    def cards(self) -> Tuple[Card, ...]:
        return tuple(self._state.cards)

    @property
    def current_index(self) -> int:
        return self._state.current_index

    @property
    def is_flipped(self) -> bool:
        return self._state.is_flipped

    @property
    def state(self) -> SessionState:
        """Snapshot of the session state."""
        return SessionState(
            cards=list(self._state.cards),
            current_index=self._state.current_index,
            is_flipped=self._state.is_flipped,
        )

    def __len__(self) -> int:
        return len(self._state.cards)

    def current_card(self) -> Card:
        return self._state.cards[self._state.current_index]

    def next(self) -> None:
        total = len(self._state.cards)
        if total == 0:
            return
        self._state.current_index = (self._state.current_index + 1) % total
        self._state.is_flipped = False
        self.render()

    def previous(self) -> None:
        total = len(self._state.cards)
        if total == 0:
            return
        self._state.current_index = (self._state.current_index - 1 + total) % total
        self._state.is_flipped = False
        self.render()

    def flip(self) -> None:
        self._state.is_flipped = not self._state.is_flipped
        self._renderer.set_flipped(self._state.is_flipped)
        self._renderer.set_controls_enabled(True)
        self._renderer.refresh()

    def counter_text(self) -> str:
        return self._counter_format.format(
            current=self._state.current_index + 1,
            total=len(self._state.cards),
        )

    def render(self) -> None:
        """Draw the current card, its flip state and the counter."""
        card = self.current_card()
        self._renderer.show_card(card.front, card.back)
        self._renderer.set_flipped(self._state.is_flipped)
        self._renderer.set_counter(self.counter_text())
        self._renderer.set_controls_enabled(True)
        self._renderer.refresh()
