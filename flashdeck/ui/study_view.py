"""
Study View - flip cards, navigate and listen
-------------------------------------------

Flet implementation of the card renderer and the input surface. Flet
events are forwarded into an InputSurface; the session core never sees
a flet control.
"""

from typing import Optional

import flet as ft

from ..config import DATASETS, Config, find_dataset
from ..models import DatasetDescriptor
from ..session import (
    AudioCue,
    CardRenderer,
    ErrorKind,
    InputEvent,
    InputSurface,
    KeyEvent,
    SessionHost,
)
from ..utils.logger import setup_logger
from .speech import EdgeSpeechEngine

logger = setup_logger("flashdeck.ui")


class DesignTokens:
    """Colors shared by the study view."""

    CARD_FRONT = "#1F1F24"
    CARD_BACK = "#2A2340"
    ACCENT = "#7C4DFF"
    TEXT_PRIMARY = ft.Colors.WHITE
    TEXT_SECONDARY = ft.Colors.WHITE54
    ERROR = ft.Colors.RED_300


def event_x(e) -> float:
    """Horizontal screen coordinate of a drag event."""
    position = getattr(e, "global_position", None)
    if position is not None:
        return float(position.x)
    return float(getattr(e, "global_x", 0.0))


class FletCardRenderer(CardRenderer):
    """Draws session state onto flet controls."""

    def __init__(self, page: ft.Page) -> None:
        self.page = page

        self.front_text = ft.Text(
            "",
            size=32,
            weight=ft.FontWeight.BOLD,
            color=DesignTokens.TEXT_PRIMARY,
            text_align=ft.TextAlign.CENTER,
        )
        self.back_text = ft.Text(
            "",
            size=28,
            color=DesignTokens.TEXT_SECONDARY,
            text_align=ft.TextAlign.CENTER,
        )
        self.card = ft.Container(
            content=self.front_text,
            width=520,
            height=300,
            padding=24,
            border_radius=16,
            bgcolor=DesignTokens.CARD_FRONT,
            alignment=ft.Alignment(0, 0),
            animate=ft.Animation(200, ft.AnimationCurve.EASE_IN_OUT),
        )
        self.counter = ft.Text("", size=14, color=DesignTokens.TEXT_SECONDARY)

        self.prev_button = ft.IconButton(icon=ft.Icons.ARROW_BACK_ROUNDED, tooltip="Previous", disabled=True)
        self.next_button = ft.IconButton(icon=ft.Icons.ARROW_FORWARD_ROUNDED, tooltip="Next", disabled=True)
        self.audio_button = ft.IconButton(icon=ft.Icons.VOLUME_UP_ROUNDED, tooltip="Pronounce", disabled=True)

        self._flipped = False

    def show_card(self, front: str, back: str) -> None:
        self.front_text.value = front
        self.front_text.color = DesignTokens.TEXT_PRIMARY
        self.back_text.value = back
        self.back_text.color = DesignTokens.TEXT_SECONDARY

    def set_flipped(self, flipped: bool) -> None:
        self._flipped = flipped
        self.card.content = self.back_text if flipped else self.front_text
        self.card.bgcolor = DesignTokens.CARD_BACK if flipped else DesignTokens.CARD_FRONT

    def set_counter(self, text: str) -> None:
        self.counter.value = text

    def set_controls_enabled(self, enabled: bool) -> None:
        for button in (self.prev_button, self.next_button, self.audio_button):
            button.disabled = not enabled

    def set_audio_visible(self, visible: bool) -> None:
        self.audio_button.visible = visible

    def show_loading(self) -> None:
        self.set_controls_enabled(False)
        self.set_flipped(False)
        self.front_text.value = Config.LOADING_FRONT
        self.back_text.value = Config.LOADING_BACK

    def show_error(self, kind: ErrorKind) -> None:
        if kind == ErrorKind.EMPTY:
            front, back = Config.EMPTY_ERROR_FRONT, Config.EMPTY_ERROR_BACK
        else:
            front, back = Config.TRANSPORT_ERROR_FRONT, Config.TRANSPORT_ERROR_BACK
        self.set_flipped(False)
        self.front_text.value = front
        self.front_text.color = DesignTokens.ERROR
        self.back_text.value = back

    def refresh(self) -> None:
        self.page.update()


class StudyView:
    """
    Dataset picker, reload button and the card with its controls.

    Flet handlers are async so they run on the page's event loop, one at
    a time, like every other piece of session code.
    """

    def __init__(self, page: ft.Page, host: Optional[SessionHost] = None) -> None:
        """
        Initialize the study view.

        Args:
            page: Flet page instance for updates
            host: Session owner; built with the default loader and Edge TTS when omitted
        """
        self.page = page
        self.surface = InputSurface()
        self.renderer = FletCardRenderer(page)
        self.host = host or SessionHost(
            self.renderer,
            self.surface,
            audio=AudioCue(EdgeSpeechEngine(page)),
        )

        self._touch_x: Optional[float] = None
        self._dataset_dropdown: Optional[ft.Dropdown] = None
        self._reload_button: Optional[ft.FilledButton] = None

        self._wire_controls()
        self._container = self._build_view()

    @property
    def container(self) -> ft.Container:
        """Get the main container for this view."""
        return self._container

    def _wire_controls(self) -> None:
        self.renderer.prev_button.on_click = self._on_prev_click
        self.renderer.next_button.on_click = self._on_next_click
        self.renderer.audio_button.on_click = self._on_audio_click
        self.page.on_keyboard_event = self._on_keyboard

    def _build_view(self) -> ft.Container:
        last = self.host.restore_last_selection()
        self._dataset_dropdown = ft.Dropdown(
            label="Card set",
            width=320,
            value=(last or DATASETS[0]).id,
            options=[ft.dropdown.Option(key=d.id, text=d.display_name) for d in DATASETS],
        )
        self._reload_button = ft.FilledButton(
            "Load cards",
            icon=ft.Icons.REFRESH_ROUNDED,
            on_click=self._on_reload_click,
        )

        card_surface = ft.GestureDetector(
            content=self.renderer.card,
            on_tap=self._on_card_tap,
            on_horizontal_drag_start=self._on_drag_start,
            on_horizontal_drag_update=self._on_drag_update,
            on_horizontal_drag_end=self._on_drag_end,
        )

        return ft.Container(
            content=ft.Column(
                controls=[
                    ft.Row(
                        controls=[self._dataset_dropdown, self._reload_button],
                        alignment=ft.MainAxisAlignment.CENTER,
                        spacing=12,
                    ),
                    card_surface,
                    self.renderer.counter,
                    ft.Row(
                        controls=[
                            self.renderer.prev_button,
                            self.renderer.audio_button,
                            self.renderer.next_button,
                        ],
                        alignment=ft.MainAxisAlignment.CENTER,
                        spacing=24,
                    ),
                    ft.Text(
                        "← / → to navigate, space to flip, swipe on touch screens",
                        size=12,
                        color=DesignTokens.TEXT_SECONDARY,
                    ),
                ],
                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                spacing=20,
            ),
            expand=True,
            padding=24,
            alignment=ft.Alignment(0, -1),
        )

    def selected_dataset(self) -> DatasetDescriptor:
        return find_dataset(self._dataset_dropdown.value if self._dataset_dropdown else None)

    def start(self) -> None:
        """Reload the previously chosen set, if there was one."""
        if self.host.restore_last_selection() is not None:
            self.page.run_task(self.reload)

    async def reload(self) -> None:
        descriptor = self.selected_dataset()
        logger.info("Reload requested for '%s'", descriptor.id)
        await self.host.reload(descriptor)

    # Flet event handlers

    async def _on_reload_click(self, e: ft.ControlEvent) -> None:
        self.page.run_task(self.reload)

    async def _on_keyboard(self, e: ft.KeyboardEvent) -> None:
        self.surface.emit(InputEvent.KEY, KeyEvent(e.key))

    async def _on_card_tap(self, e) -> None:
        self.surface.emit(InputEvent.CARD_TAP)

    async def _on_prev_click(self, e: ft.ControlEvent) -> None:
        self.surface.emit(InputEvent.PREV_TAP)

    async def _on_next_click(self, e: ft.ControlEvent) -> None:
        self.surface.emit(InputEvent.NEXT_TAP)

    async def _on_audio_click(self, e: ft.ControlEvent) -> None:
        self.surface.emit(InputEvent.AUDIO_TAP)

    async def _on_drag_start(self, e) -> None:
        self._touch_x = event_x(e)
        self.surface.emit(InputEvent.TOUCH_START, self._touch_x)

    async def _on_drag_update(self, e) -> None:
        self._touch_x = event_x(e)

    async def _on_drag_end(self, e) -> None:
        if self._touch_x is None:
            return
        x, self._touch_x = self._touch_x, None
        self.surface.emit(InputEvent.TOUCH_END, x)
