"""Speech engine: Edge TTS synthesis played back through flet or a system player."""

import asyncio
import hashlib
import os
import shutil
import uuid
from pathlib import Path
from typing import List, Optional

import edge_tts
import flet as ft

from ..config import Config, SettingsManager
from ..session.audio import SpeechEngine
from ..utils.logger import setup_logger
from ..utils.parsing import TextParser

logger = setup_logger("flashdeck.speech")

# Command-line players tried when the flet Audio control is not available
SYSTEM_PLAYERS = (
    ["afplay"],
    ["ffplay", "-nodisp", "-autoexit", "-loglevel", "quiet"],
    ["mpg123", "-q"],
)


def find_system_player() -> Optional[List[str]]:
    """Command prefix of the first installed audio player, or None."""
    for command in SYSTEM_PLAYERS:
        if shutil.which(command[0]):
            return list(command)
    return None


class EdgeSpeechEngine(SpeechEngine):
    """
    Speak text with Edge TTS.

    Clips are cached in the media directory by text and voice. Every
    speak() takes a new token; synthesis or playback belonging to an
    older token is dropped, so only the latest request is ever heard.
    """

    # Version suffix for cache invalidation on format changes
    VERSION = "v1"

    def __init__(
        self,
        page: ft.Page,
        voice: str = Config.VOICE,
        rate: str = Config.SPEECH_RATE,
        pitch: str = Config.SPEECH_PITCH,
        media_dir: Optional[str] = None,
    ) -> None:
        self.page = page
        self.voice = voice
        self.rate = rate
        self.pitch = pitch
        self.media_dir = Path(media_dir or SettingsManager().get("MEDIA_DIR", Config.MEDIA_DIR))

        self._token: int = 0
        self._task: Optional[asyncio.Task] = None
        self._process: Optional[asyncio.subprocess.Process] = None
        self._audio_player = None

        self._use_flet_audio: bool = hasattr(ft, "Audio")
        self._system_player: Optional[List[str]] = None if self._use_flet_audio else find_system_player()
        # Windows hands the clip to its default player when nothing else is installed
        self._open_with_os: bool = (
            not self._use_flet_audio and self._system_player is None and hasattr(os, "startfile")
        )

    @property
    def available(self) -> bool:
        return self._use_flet_audio or self._system_player is not None or self._open_with_os

    def cancel(self) -> None:
        self._token += 1
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None
        self._stop_playback()

    def speak(self, text: str) -> None:
        self._token += 1
        token = self._token
        self._task = asyncio.get_running_loop().create_task(self._speak(text, token))

    async def _speak(self, text: str, token: int) -> None:
        path = await self.synthesize(text)
        if path is None or token != self._token:
            return
        await self._play(path)

    def clip_path(self, text: str) -> Path:
        digest = hashlib.sha1(f"{self.voice}|{self.rate}|{self.pitch}|{text}".encode("utf-8")).hexdigest()[:16]
        return self.media_dir / f"_speech_{digest}_{self.VERSION}.mp3"

    async def synthesize(self, text: str) -> Optional[Path]:
        """
        Generate an MP3 for ``text``, reusing a cached clip when present.

        Uses atomic write pattern: write to temp file, then rename.

        Returns:
            Path of the clip, or None if synthesis failed
        """
        clean_text = TextParser.clean_for_tts(text)
        if not clean_text:
            return None

        output_path = self.clip_path(clean_text)
        if output_path.exists() and output_path.stat().st_size > 100:
            return output_path

        temp_path = None
        try:
            os.makedirs(output_path.parent, exist_ok=True)
            temp_path = f"{output_path}.{uuid.uuid4().hex[:8]}.tmp"

            communicate = edge_tts.Communicate(
                clean_text,
                self.voice,
                rate=self.rate,
                pitch=self.pitch,
                volume=Config.SPEECH_VOLUME,
            )
            await communicate.save(temp_path)

            if os.path.exists(temp_path) and os.path.getsize(temp_path) > 100:
                os.replace(temp_path, output_path)
                temp_path = None
                return output_path
            logger.warning("Speech synthesis produced no audio for %r", clean_text[:40])
            return None

        except Exception as e:
            logger.warning("Speech synthesis failed: %s", str(e)[:80])
            return None

        finally:
            if temp_path and os.path.exists(temp_path):
                try:
                    os.remove(temp_path)
                except OSError:
                    pass

    async def _play(self, path: Path) -> None:
        try:
            if self._use_flet_audio:
                self._play_in_page(path)
            elif self._system_player is not None:
                await self._play_with_system_player(path)
            elif self._open_with_os:
                os.startfile(str(path))
        except Exception as e:
            logger.warning("Playback failed: %s", str(e)[:80])

    async def _play_with_system_player(self, path: Path) -> None:
        process = await asyncio.create_subprocess_exec(
            *self._system_player, str(path),
            stdout=asyncio.subprocess.DEVNULL,
            stderr=asyncio.subprocess.DEVNULL,
        )
        self._process = process
        try:
            await process.wait()
        finally:
            if self._process is process:
                self._process = None

    def _play_in_page(self, path: Path) -> None:
        """Play a clip using Flet's native Audio control."""
        self._remove_page_player()
        self._audio_player = ft.Audio(
            src=str(path.resolve()),
            autoplay=True,
            volume=1.0,
        )
        self.page.overlay.append(self._audio_player)
        self.page.update()

    def _remove_page_player(self) -> None:
        if self._audio_player is None:
            return
        if self._audio_player in self.page.overlay:
            self._audio_player.pause()
            self.page.overlay.remove(self._audio_player)
        self._audio_player = None

    def _stop_playback(self) -> None:
        if self._use_flet_audio:
            self._remove_page_player()
        elif self._process is not None and self._process.returncode is None:
            self._process.terminate()
