"""UI module - Flet views for FlashDeck."""

from .speech import EdgeSpeechEngine
from .study_view import FletCardRenderer, StudyView

__all__ = [
    'EdgeSpeechEngine',
    'FletCardRenderer',
    'StudyView',
]
