"""Input handler bookkeeping for one session."""

from typing import Callable, List, Optional

from ..config import Config
from .audio import AudioCue
from .controller import SessionController
from .surfaces import InputEvent, InputSurface, KeyEvent

# Key names as reported by browsers ("ArrowLeft") and by flet ("Arrow Left")
KEY_ACTIONS = {
    "ArrowLeft": "previous",
    "Arrow Left": "previous",
    "ArrowRight": "next",
    "Arrow Right": "next",
    "Space": "flip",
    " ": "flip",
}


class ListenerLifecycle:
    """
    Binds one set of input handlers to one SessionController.

    attach() registers the handlers on the input surface and keeps their
    unsubscribe callables; destroy() runs them in reverse order and forgets
    the controller, so a replaced session can no longer be reached from
    any input event.
    """

    def __init__(
        self,
        controller: SessionController,
        surface: InputSurface,
        audio: Optional[AudioCue] = None,
        swipe_threshold: float = Config.SWIPE_THRESHOLD,
    ) -> None:
        self._controller: Optional[SessionController] = controller
        self._surface = surface
        self._audio = audio
        self._swipe_threshold = swipe_threshold
        self._detachers: List[Callable[[], None]] = []
        self._attached = False
        self._destroyed = False
        self._suspended = False
        self._touch_start_x: Optional[float] = None

    @property
    def controller(self) -> Optional[SessionController]:
        return self._controller

    @property
    def active(self) -> bool:
        return self._attached and not self._destroyed

    @property
    def suspended(self) -> bool:
        return self._suspended

    def suspend(self) -> None:
        """Ignore input until resume(), e.g. while a reload is in flight."""
        self._suspended = True

    def resume(self) -> None:
        self._suspended = False

    def attach(self) -> None:
        if self._attached or self._destroyed:
            raise RuntimeError("ListenerLifecycle can only be attached once")
        self._attached = True
        self._bind(InputEvent.KEY, self._on_key)
        self._bind(InputEvent.CARD_TAP, lambda _: self._dispatch("flip"))
        self._bind(InputEvent.PREV_TAP, lambda _: self._dispatch("previous"))
        self._bind(InputEvent.NEXT_TAP, lambda _: self._dispatch("next"))
        self._bind(InputEvent.TOUCH_START, self._on_touch_start)
        self._bind(InputEvent.TOUCH_END, self._on_touch_end)
        if self._audio is not None and self._audio.available:
            self._bind(InputEvent.AUDIO_TAP, self._on_audio)

    def destroy(self) -> None:
        """Detach every handler this instance attached. Calling it again does nothing."""
        if self._destroyed:
            return
        self._destroyed = True
        while self._detachers:
            self._detachers.pop()()
        self._controller = None
        self._audio = None

    def _bind(self, event: InputEvent, handler) -> None:
        self._detachers.append(self._surface.subscribe(event, handler))

    def _dispatch(self, action: str) -> None:
        if self._controller is None or self._suspended:
            return
        getattr(self._controller, action)()

    def _on_key(self, event: KeyEvent) -> None:
        action = KEY_ACTIONS.get(event.key)
        if action is None:
            return
        event.prevent_default()
        self._dispatch(action)

    def _on_audio(self, _) -> None:
        if self._controller is None or self._audio is None or self._suspended:
            return
        self._audio.speak_card(self._controller.current_card())

    def _on_touch_start(self, x: float) -> None:
        self._touch_start_x = x

    def _on_touch_end(self, x: float) -> None:
        start, self._touch_start_x = self._touch_start_x, None
        if start is None:
            return
        self.handle_swipe(start, x)

    def handle_swipe(self, start_x: float, end_x: float) -> None:
        """Leftward swipe advances, rightward goes back; short moves are ignored."""
        diff = start_x - end_x
        if abs(diff) <= self._swipe_threshold:
            return
        self._dispatch("next" if diff > 0 else "previous")
