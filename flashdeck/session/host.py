"""Owner of the active study session and the reload procedure."""

from typing import Optional

from ..config import PREFERENCE_KEY, SettingsManager, get_dataset
from ..deck import CardFactory, CardSetLoader
from ..errors import EmptyDatasetError, TransportError
from ..models import DatasetDescriptor
from ..utils.logger import setup_logger
from .audio import AudioCue
from .controller import SessionController
from .listeners import ListenerLifecycle
from .surfaces import CardRenderer, ErrorKind, InputSurface

logger = setup_logger("flashdeck.session")


class SessionHost:
    """
    Holds the one active SessionController and its listener binding.

    Only reload() installs a new session, through replace(), which tears
    the old binding down before the new one is attached. Each reload takes
    a generation number; a load that finishes after a newer reload started
    is discarded instead of installed.
    """

    def __init__(
        self,
        renderer: CardRenderer,
        surface: InputSurface,
        loader: Optional[CardSetLoader] = None,
        factory: Optional[CardFactory] = None,
        audio: Optional[AudioCue] = None,
        settings: Optional[SettingsManager] = None,
    ) -> None:
        self._renderer = renderer
        self._surface = surface
        self._loader = loader or CardSetLoader()
        self._factory = factory or CardFactory()
        self._audio = audio or AudioCue()
        self._settings = settings or SettingsManager()

        self._session: Optional[SessionController] = None
        self._lifecycle: Optional[ListenerLifecycle] = None
        self._generation: int = 0

    @property
    def session(self) -> Optional[SessionController]:
        return self._session

    @property
    def lifecycle(self) -> Optional[ListenerLifecycle]:
        return self._lifecycle

    @property
    def generation(self) -> int:
        return self._generation

    def replace(self, session: SessionController) -> None:
        """Tear down the current binding, then bind and draw ``session``."""
        previous = self._lifecycle
        self._session = None
        self._lifecycle = None
        if previous is not None:
            previous.destroy()

        lifecycle = ListenerLifecycle(session, self._surface, self._audio)
        lifecycle.attach()
        self._session = session
        self._lifecycle = lifecycle

        self._renderer.set_audio_visible(self._audio.available)
        session.render()

    def shutdown(self) -> None:
        """Detach the active session, e.g. when the page closes."""
        if self._lifecycle is not None:
            self._lifecycle.destroy()
        self._lifecycle = None
        self._session = None

    def restore_last_selection(self) -> Optional[DatasetDescriptor]:
        """Dataset chosen in an earlier run, or None if there was none."""
        return get_dataset(self._settings.get(PREFERENCE_KEY, ""))

    async def reload(self, descriptor: DatasetDescriptor) -> Optional[SessionController]:
        """
        Load ``descriptor`` and install it as the active session.

        Input to the previous session is ignored while the load is in
        flight. Load failures are logged and shown as a placeholder; the
        previous session, if any, stays bound and takes input again.

        Returns:
            The installed controller, or None if the load failed or was superseded
        """
        self._generation += 1
        generation = self._generation

        self._settings.set(PREFERENCE_KEY, descriptor.id)
        if self._lifecycle is not None:
            self._lifecycle.suspend()
        self._renderer.show_loading()
        self._renderer.refresh()

        try:
            pairs = await self._loader.load(descriptor)
            cards = self._factory.build(pairs)
            session = SessionController(cards, self._renderer, dataset_id=descriptor.id)
        except TransportError as e:
            logger.error("Loading '%s' failed: %s", descriptor.id, e)
            self._show_failure(generation, ErrorKind.TRANSPORT)
            return None
        except EmptyDatasetError as e:
            logger.warning("Loading '%s' failed: %s", descriptor.id, e)
            self._show_failure(generation, ErrorKind.EMPTY)
            return None
        except Exception:
            logger.exception("Unexpected error while loading '%s'", descriptor.id)
            self._show_failure(generation, ErrorKind.TRANSPORT)
            return None

        if generation != self._generation:
            logger.info(
                "Discarding stale load of '%s' (generation %d, current %d)",
                descriptor.id, generation, self._generation,
            )
            return None

        self.replace(session)
        logger.info("Session ready: '%s' with %d cards", descriptor.id, len(session))
        return session

    def _show_failure(self, generation: int, kind: ErrorKind) -> None:
        if generation != self._generation:
            # A newer reload owns the view
            return
        self._renderer.show_error(kind)
        if self._lifecycle is not None:
            self._lifecycle.resume()
        self._renderer.set_controls_enabled(self._session is not None)
        self._renderer.refresh()
