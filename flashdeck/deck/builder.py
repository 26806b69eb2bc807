"""Turns normalized term pairs into display-ready cards."""

import random
from typing import List, Sequence

from ..models import Card, RawPair
from .shuffler import shuffle


class CardFactory:
    """
    Shuffle term pairs and give every card its own translation direction.

    Each card independently shows the native side first with probability 0.5.
    The canonical (spoken) text is always the foreign side.
    """

    def __init__(self, rng=None) -> None:
        """
        Args:
            rng: Random source with ``random()`` and ``randrange()``; defaults to ``random``
        """
        self._rng = rng or random

    def build(self, pairs: Sequence[RawPair]) -> List[Card]:
        cards: List[Card] = []
        for index, pair in enumerate(shuffle(pairs, self._rng)):
            native_to_foreign = self._rng.random() < 0.5
            if native_to_foreign:
                front, back = pair.primary_text, pair.secondary_text
            else:
                front, back = pair.secondary_text, pair.primary_text
            cards.append(Card(
                id=index,
                front=front,
                back=back,
                canonical_text=pair.secondary_text,
                direction_flag=native_to_foreign,
            ))
        return cards


def build_cards(pairs: Sequence[RawPair], rng=None) -> List[Card]:
    """Shortcut for ``CardFactory(rng).build(pairs)``."""
    return CardFactory(rng).build(pairs)
