"""Deck module - from dataset sources to shuffled cards."""

from .shuffler import shuffle
from .builder import CardFactory, build_cards
from .loader import CardSetLoader, FieldAliases, DEFAULT_ALIASES, normalize_record

__all__ = [
    'shuffle',
    'CardFactory',
    'build_cards',
    'CardSetLoader',
    'FieldAliases',
    'DEFAULT_ALIASES',
    'normalize_record',
]
