"""FlashDeck - shuffled two-way vocabulary cards"""

__version__ = "1.0.0"

from .config import Config, DATASETS, SettingsManager
from .deck import CardFactory, CardSetLoader, shuffle
from .errors import CardSetError, EmptyDatasetError, TransportError
from .models import Card, DatasetDescriptor, RawPair, SessionState
from .session import AudioCue, ListenerLifecycle, SessionController, SessionHost

__all__ = [
    'Config',
    'DATASETS',
    'SettingsManager',
    'CardFactory',
    'CardSetLoader',
    'shuffle',
    'CardSetError',
    'EmptyDatasetError',
    'TransportError',
    'Card',
    'DatasetDescriptor',
    'RawPair',
    'SessionState',
    'AudioCue',
    'ListenerLifecycle',
    'SessionController',
    'SessionHost',
]
