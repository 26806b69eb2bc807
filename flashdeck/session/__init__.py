"""Session module - the interactive state of one loaded card set."""

from .surfaces import CardRenderer, ErrorKind, InputEvent, InputSurface, KeyEvent
from .controller import SessionController
from .audio import AudioCue, SpeechEngine
from .listeners import ListenerLifecycle, KEY_ACTIONS
from .host import SessionHost

__all__ = [
    'CardRenderer',
    'ErrorKind',
    'InputEvent',
    'InputSurface',
    'KeyEvent',
    'SessionController',
    'AudioCue',
    'SpeechEngine',
    'ListenerLifecycle',
    'KEY_ACTIONS',
    'SessionHost',
]
