"""Pronunciation playback."""

import logging
from collections.abc import Callable

from word_lookup.interfaces import AudioBackend

logger = logging.getLogger(__name__)


class AudioPlayer:
    """Plays the currently selected pronunciation clip on demand.

    Each call starts a fresh playback; earlier clips are left alone. Playback
    failures are logged and never reach the user.
    """

    def __init__(
        self,
        backend: AudioBackend,
        current_url: Callable[[], str | None] | None = None,
    ):
        """Initialize the player.

        Args:
            backend: Playback implementation
            current_url: Returns the selected clip URL; usually the view
                state controller's ``current_audio_url`` getter
        """
        self._backend = backend
        self._current_url = current_url

    def play(self, url: str | None = None) -> bool:
        """Start playing ``url``, or the current selection if omitted.

        Args:
            url: Clip to play

        Returns:
            True if playback was started, False if there was nothing to play
            or the backend failed
        """
        if url is None and self._current_url is not None:
            url = self._current_url()

        if not url or not url.strip():
            logger.debug("No pronunciation audio selected, nothing to play")
            return False

        try:
            self._backend.play(url)
        except Exception as e:
            logger.warning(f"Audio playback failed for {url}: {e}")
            return False
        return True
