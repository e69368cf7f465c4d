"""Protocol for pronunciation audio playback."""

from typing import Protocol


class AudioBackend(Protocol):
    """Interface for something that can start playing a remote clip."""

    def play(self, url: str) -> None:
        """Start a fresh playback of the clip at ``url``.

        Must not stop clips that are already playing.
        """
        ...
