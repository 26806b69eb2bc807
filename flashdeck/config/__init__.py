"""Configuration module for FlashDeck."""

from .settings import Config
from .languages import LANG_CONFIG
from .config_manager import SettingsManager, PREFERENCE_KEY
from .datasets import DATASETS, find_dataset, get_dataset, get_dataset_ids

__all__ = [
    'Config',
    'LANG_CONFIG',
    'SettingsManager',
    'PREFERENCE_KEY',
    'DATASETS',
    'find_dataset',
    'get_dataset',
    'get_dataset_ids',
]
