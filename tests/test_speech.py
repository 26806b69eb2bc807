import asyncio
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from flashdeck.ui import speech as speech_module
from flashdeck.ui.speech import EdgeSpeechEngine


class FakeCommunicate:
    created = []

    def __init__(self, text, voice, rate="+0%", pitch="+0Hz", volume="+0%"):
        self.text = text
        self.voice = voice
        self.rate = rate
        FakeCommunicate.created.append(self)

    async def save(self, path):
        with open(path, "wb") as f:
            f.write(b"\xff" * 256)


class FailingCommunicate(FakeCommunicate):
    async def save(self, path):
        with open(path, "wb") as f:
            f.write(b"partial")
        raise RuntimeError("429 Too Many Requests")


@pytest.fixture
def engine(tmp_path, monkeypatch):
    FakeCommunicate.created = []
    monkeypatch.setattr(speech_module.edge_tts, "Communicate", FakeCommunicate)
    return EdgeSpeechEngine(MagicMock(), media_dir=str(tmp_path))


async def test_synthesize_writes_and_caches_clip(engine):
    first = await engine.synthesize("<b>house</b>")
    second = await engine.synthesize("house")

    assert first == second
    assert first.exists()
    assert len(FakeCommunicate.created) == 1
    assert FakeCommunicate.created[0].text == "house"
    assert FakeCommunicate.created[0].rate == "-10%"


async def test_synthesize_failure_leaves_no_files(engine, tmp_path, monkeypatch):
    monkeypatch.setattr(speech_module.edge_tts, "Communicate", FailingCommunicate)

    assert await engine.synthesize("dog") is None
    assert list(tmp_path.iterdir()) == []


async def test_empty_text_is_not_synthesized(engine):
    assert await engine.synthesize("   ") is None
    assert FakeCommunicate.created == []


async def test_only_latest_request_is_played(engine, monkeypatch):
    played = []

    async def fake_play(path):
        played.append(path.name)

    monkeypatch.setattr(engine, "_play", fake_play)

    engine.speak("house")
    first = engine._task
    engine.cancel()
    engine.speak("dog")
    await engine._task
    await asyncio.gather(first, return_exceptions=True)

    assert played == [engine.clip_path("dog").name]


@pytest.fixture
def engine_without_flet_audio(tmp_path, monkeypatch):
    """Build engines as if the installed flet had no Audio control."""
    FakeCommunicate.created = []
    monkeypatch.setattr(speech_module.edge_tts, "Communicate", FakeCommunicate)
    monkeypatch.setattr(speech_module, "ft", SimpleNamespace())

    def build(player):
        monkeypatch.setattr(speech_module, "find_system_player", lambda: player)
        return EdgeSpeechEngine(MagicMock(), media_dir=str(tmp_path))

    return build


async def test_failed_playback_is_logged_not_raised(engine_without_flet_audio, monkeypatch):
    log = MagicMock()
    monkeypatch.setattr(speech_module, "logger", log)
    engine = engine_without_flet_audio(["/nonexistent/flashdeck-player"])

    engine.speak("house")
    await engine._task

    assert engine._task.exception() is None
    log.warning.assert_called_once()
    assert log.warning.call_args[0][0].startswith("Playback failed")


async def test_windows_default_player_used_without_command_line_player(engine_without_flet_audio, monkeypatch):
    opened = []
    monkeypatch.setattr(speech_module.os, "startfile", opened.append, raising=False)
    engine = engine_without_flet_audio(None)

    assert engine.available
    engine.speak("dog")
    await engine._task

    assert opened == [str(engine.clip_path("dog"))]


def test_unavailable_without_any_player(engine_without_flet_audio, monkeypatch):
    monkeypatch.delattr(speech_module.os, "startfile", raising=False)
    engine = engine_without_flet_audio(None)

    assert not engine.available
