"""
FlashDeck: Study Card Viewer
----------------------------

A Flet interface for studying shuffled two-way vocabulary cards.
"""

import sys
from pathlib import Path

# Ensure project root is on sys.path for absolute imports
_ROOT = Path(__file__).resolve().parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import flet as ft

from flashdeck.config import Config, SettingsManager
from flashdeck.ui import StudyView
from flashdeck.utils.logger import setup_logger

logger = setup_logger("flashdeck.app")


class FlashDeckApp:
    """Main application controller."""

    def __init__(self, page: ft.Page) -> None:
        """
        Initialize the application.

        Args:
            page: Flet page instance
        """
        self.page = page
        self._setup_page()
        self.study = StudyView(self.page)
        self.page.add(self.study.container)
        self.page.on_disconnect = self._on_disconnect
        self.study.start()

    def _setup_page(self) -> None:
        """Configure page settings and theme."""
        self.page.title = Config.APP_TITLE
        self.page.theme_mode = ft.ThemeMode.DARK
        self.page.bgcolor = "#121212"
        self.page.theme = ft.Theme(
            color_scheme_seed="#7C4DFF",
            font_family="Inter, Roboto, Segoe UI, sans-serif",
        )
        self.page.padding = 0
        self.page.window.min_width = 480
        self.page.window.min_height = 600
        self.page.window.width = 720
        self.page.window.height = 760

    def _on_disconnect(self, e) -> None:
        self.study.host.shutdown()


def main(page: ft.Page) -> None:
    """
    Main entry point for Flet application.

    Args:
        page: Flet page instance
    """
    settings = SettingsManager()
    setup_logger(level=settings.get("LOG_LEVEL", "INFO"))
    try:
        FlashDeckApp(page)
    except Exception:
        logger.exception("UI failed to start")
        page.add(
            ft.Container(
                content=ft.Text("UI failed to start, see the log for details", size=20, color=ft.Colors.RED_400),
                padding=20,
            )
        )
        page.update()


if __name__ == "__main__":
    ft.run(main)
