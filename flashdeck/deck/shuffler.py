"""Fisher-Yates shuffle that never touches the caller's sequence."""

import random
from typing import List, Sequence, TypeVar

T = TypeVar("T")


def shuffle(sequence: Sequence[T], rng=None) -> List[T]:
    """
    Return a uniformly random permutation of a copy of ``sequence``.

    Args:
        sequence: Items to shuffle; left unmodified
        rng: Object with ``randrange`` (e.g. ``random.Random``); defaults to ``random``

    Returns:
        New list with the same items in random order
    """
    rng = rng or random
    items = list(sequence)
    for i in range(len(items) - 1, 0, -1):
        j = rng.randrange(i + 1)
        items[i], items[j] = items[j], items[i]
    return items
