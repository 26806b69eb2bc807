import os
import sys
from typing import Any, Dict, List

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from flashdeck.config import SettingsManager
from flashdeck.errors import TransportError
from flashdeck.fetchers import BaseFetcher
from flashdeck.models import Card
from flashdeck.session import CardRenderer, ErrorKind, SpeechEngine


@pytest.fixture(autouse=True)
def settings(tmp_path, monkeypatch):
    """Fresh SettingsManager backed by a temp file, with no env overrides."""
    for key in SettingsManager.DEFAULTS:
        monkeypatch.delenv(key, raising=False)
    SettingsManager.reset_instance()
    manager = SettingsManager(str(tmp_path / "settings.json"))
    yield manager
    SettingsManager.reset_instance()


class RecordingRenderer(CardRenderer):
    def __init__(self):
        self.calls: List[tuple] = []
        self.front = ""
        self.back = ""
        self.flipped = False
        self.counter = ""
        self.controls_enabled = False
        self.audio_visible = True
        self.error = None
        self.loading = False

    def show_card(self, front, back):
        self.calls.append(("show_card", front, back))
        self.front, self.back = front, back
        self.error = None
        self.loading = False

    def set_flipped(self, flipped):
        self.calls.append(("set_flipped", flipped))
        self.flipped = flipped

    def set_counter(self, text):
        self.calls.append(("set_counter", text))
        self.counter = text

    def set_controls_enabled(self, enabled):
        self.calls.append(("set_controls_enabled", enabled))
        self.controls_enabled = enabled

    def set_audio_visible(self, visible):
        self.calls.append(("set_audio_visible", visible))
        self.audio_visible = visible

    def show_loading(self):
        self.calls.append(("show_loading",))
        self.loading = True
        self.controls_enabled = False

    def show_error(self, kind: ErrorKind):
        self.calls.append(("show_error", kind))
        self.error = kind
        self.loading = False

    def errors(self) -> list:
        return [c[1] for c in self.calls if c[0] == "show_error"]


class FakeSpeechEngine(SpeechEngine):
    def __init__(self, available=True):
        self._available = available
        self.calls: List[str] = []

    @property
    def available(self):
        return self._available

    def cancel(self):
        self.calls.append("cancel")

    def speak(self, text):
        self.calls.append(f"speak:{text}")


class FakeFetcher(BaseFetcher):
    """Serves records from a dict keyed by locator; exceptions are raised."""

    def __init__(self, responses: Dict[str, Any]):
        self.responses = responses
        self.requested: List[str] = []
        self.closed = False

    async def fetch(self, locator):
        self.requested.append(locator)
        response = self.responses.get(locator)
        if response is None:
            raise TransportError(locator, status=404, cause="Not Found")
        if isinstance(response, Exception):
            raise response
        return list(response)

    async def close(self):
        self.closed = True


class ScriptedRandom:
    """randrange never swaps; random() replays a fixed list of draws."""

    def __init__(self, draws):
        self.draws = list(draws)

    def randrange(self, n):
        return n - 1

    def random(self):
        return self.draws.pop(0)


def make_cards(n: int) -> List[Card]:
    return [
        Card(id=i, front=f"front {i}", back=f"back {i}", canonical_text=f"back {i}", direction_flag=False)
        for i in range(n)
    ]


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def speech():
    return FakeSpeechEngine()
