"""Pronunciation playback through Qt Multimedia."""

import logging

from PyQt6.QtCore import QObject, QUrl
from PyQt6.QtMultimedia import QAudioOutput, QMediaPlayer

logger = logging.getLogger(__name__)


class QtAudioBackend(QObject):
    """Plays remote clips with a fresh QMediaPlayer per request.

    Implements AudioBackend protocol. Players are kept alive until they stop
    or fail, then released; a new clip never interrupts an older one.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self._players: list[QMediaPlayer] = []

    def play(self, url: str) -> None:
        player = QMediaPlayer(self)
        output = QAudioOutput(player)
        player.setAudioOutput(output)

        player.errorOccurred.connect(
            lambda error, error_string, p=player: self._on_error(p, error_string)
        )
        player.playbackStateChanged.connect(
            lambda state, p=player: self._on_playback_state_changed(p, state)
        )

        self._players.append(player)
        player.setSource(QUrl(url))
        player.play()
        logger.debug(f"Playing pronunciation {url}")

    def _on_error(self, player: QMediaPlayer, error_string: str) -> None:
        logger.warning(f"Audio playback failed: {error_string}")
        self._release(player)

    def _on_playback_state_changed(self, player: QMediaPlayer, state) -> None:
        if state == QMediaPlayer.PlaybackState.StoppedState:
            self._release(player)

    def _release(self, player: QMediaPlayer) -> None:
        if player in self._players:
            self._players.remove(player)
            player.deleteLater()
