"""Tests for AudioPlayer."""

import logging
from unittest.mock import MagicMock

from word_lookup.models import ViewState
from word_lookup.orchestration import ViewStateController
from word_lookup.services import AudioPlayer


class RecordingAudioBackend:
    """AudioBackend that records every clip it is asked to play."""

    def __init__(self):
        self.played = []

    def play(self, url):
        self.played.append(url)


class TestAudioPlayer:
    """Tests for AudioPlayer.play."""

    def test_plays_explicit_url(self):
        backend = RecordingAudioBackend()
        assert AudioPlayer(backend).play("https://x/a.mp3") is True
        assert backend.played == ["https://x/a.mp3"]

    def test_plays_current_selection(self, null_view, hello_entry):
        backend = RecordingAudioBackend()
        view_state = ViewStateController(null_view)
        player = AudioPlayer(backend, lambda: view_state.current_audio_url)

        view_state.render(hello_entry)
        player.play()

        assert backend.played == [hello_entry.phonetics[0].audio]

    def test_noop_without_selection(self, null_view):
        backend = RecordingAudioBackend()
        view_state = ViewStateController(null_view)
        player = AudioPlayer(backend, lambda: view_state.current_audio_url)

        view_state.show_default()

        assert player.play() is False
        assert backend.played == []

    def test_noop_without_selection_source(self):
        backend = RecordingAudioBackend()
        assert AudioPlayer(backend).play() is False
        assert backend.played == []

    def test_noop_for_blank_url(self):
        backend = RecordingAudioBackend()
        assert AudioPlayer(backend).play("   ") is False
        assert backend.played == []

    def test_each_play_starts_fresh_playback(self):
        backend = RecordingAudioBackend()
        player = AudioPlayer(backend)

        player.play("https://x/a.mp3")
        player.play("https://x/a.mp3")

        assert backend.played == ["https://x/a.mp3", "https://x/a.mp3"]

    def test_backend_failure_is_swallowed_and_logged(self, null_view, hello_entry, caplog):
        backend = MagicMock()
        backend.play.side_effect = RuntimeError("autoplay blocked")
        view_state = ViewStateController(null_view)
        player = AudioPlayer(backend, lambda: view_state.current_audio_url)
        view_state.render(hello_entry)

        with caplog.at_level(logging.WARNING, logger="word_lookup.services.audio_player"):
            assert player.play() is False

        assert "autoplay blocked" in caplog.text
        assert view_state.state is ViewState.RESULT
