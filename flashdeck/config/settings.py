"""Global settings and configuration."""

from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load from project root
_env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(_env_path)

from .languages import LANG_CONFIG

# Language spoken by the audio cue
CANONICAL_LANG = "EN"


@dataclass
class Config:
    """Application-wide configuration."""

    settings = LANG_CONFIG.get(CANONICAL_LANG, LANG_CONFIG["EN"])

    # Speech parameters (fixed, not user-configurable)
    CANONICAL_LANG: str = CANONICAL_LANG
    VOICE: str = settings["voice"]
    SPEECH_RATE: str = settings["rate"]
    SPEECH_PITCH: str = settings["pitch"]
    SPEECH_VOLUME: str = "+0%"

    # Input
    SWIPE_THRESHOLD: float = 50

    # Display
    APP_TITLE: str = "FlashDeck"
    COUNTER_FORMAT: str = "Card {current} of {total}"
    LOADING_FRONT: str = "Loading cards…"
    LOADING_BACK: str = "Please wait 🙂"
    TRANSPORT_ERROR_FRONT: str = "Could not load the cards 😢"
    TRANSPORT_ERROR_BACK: str = "(check the dataset URL)"
    EMPTY_ERROR_FRONT: str = "This set has no cards"
    EMPTY_ERROR_BACK: str = "(pick another set)"

    # Fetching: never reuse a cached copy of a dataset
    NO_CACHE_HEADERS = {
        "Cache-Control": "no-cache, no-store",
        "Pragma": "no-cache",
    }
    USER_AGENT: str = "FlashDeck/1.0"

    # Cross-platform paths using pathlib
    # BASE_DIR is the project root (parent of flashdeck/)
    BASE_DIR: Path = Path(__file__).parent.parent.parent.resolve()

    DATA_DIR: str = str(BASE_DIR / "data")
    MEDIA_DIR: str = str(BASE_DIR / "media")
    SETTINGS_FILE: str = str(BASE_DIR / "settings.json")
