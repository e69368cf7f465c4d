"""Tests for the Qt presentation layer.

Requires PyQt6 to be importable. Tests are skipped if PyQt6 or a display is unavailable.
"""

import os
import threading

import pytest

from word_lookup.exceptions import NotFoundError

from word_lookup.models import Panel, ViewState
from word_lookup.services import MemoryPreferenceBackend, PreferenceStore

# Run Qt without a window system when none is configured
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Skip all tests in this module if PyQt6 is not available
try:
    from PyQt6.QtWidgets import QApplication

    _app = QApplication.instance() or QApplication([])
    _HAS_QT = True
except (ImportError, RuntimeError):
    _HAS_QT = False

pytestmark = pytest.mark.skipif(not _HAS_QT, reason="PyQt6 not available")


class BlockingProvider:
    """DictionaryProvider whose lookups wait until released."""

    def __init__(self, entries):
        self.entries = entries
        self.release = threading.Event()

    def lookup(self, query):
        self.release.wait(5)
        if query not in self.entries:
            raise NotFoundError(query)
        return self.entries[query]


class BrokenProvider:
    def lookup(self, query):
        raise RuntimeError("connection reset")


class RecordingAudioBackend:
    def __init__(self):
        self.played = []

    def play(self, url):
        self.played.append(url)


def _visible_pages(view):
    return [view.panel_widget(panel) for panel in Panel if view.panel_widget(panel).isVisibleTo(view)]


@pytest.fixture
def lookup_view():
    from word_lookup.gui.views import QtLookupView

    view = QtLookupView()
    view.show()
    yield view
    view.close()


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    from word_lookup.gui.utils import GUIConfigManager

    path = tmp_path / "word_lookup" / "gui_config.json"
    monkeypatch.setattr(GUIConfigManager, "CONFIG_FILE", path)
    return path


@pytest.fixture
def make_window(test_config, config_file):
    from word_lookup.gui.main_window import MainWindow

    windows = []

    def _make(provider):
        win = MainWindow(
            config=test_config,
            preferences=PreferenceStore(MemoryPreferenceBackend()),
            provider=provider,
            audio_backend=RecordingAudioBackend(),
        )
        windows.append(win)
        return win

    yield _make
    for win in windows:
        win.close()


@pytest.fixture
def window(make_window, fake_provider):
    return make_window(fake_provider)


def _wait_for_lookup(win):
    for worker in win.runner.active_workers:
        assert worker.wait(5000)
    QApplication.processEvents()


class TestQtLookupView:
    """Tests for QtLookupView panel switching."""

    @pytest.mark.parametrize("panel", list(Panel))
    def test_exactly_one_panel_visible(self, lookup_view, panel):
        lookup_view.show_panel(panel)

        assert lookup_view.current_panel is panel
        assert _visible_pages(lookup_view) == [lookup_view.panel_widget(panel)]

    def test_play_button_follows_audio(self, lookup_view, hello_entry, make_api_entry):
        from word_lookup.models import LookupEntry
        from word_lookup.services.entry_renderer import render_entry

        panel = lookup_view.result_panel
        lookup_view.display_entry(render_entry(hello_entry))
        assert not panel.play_button.isHidden()

        lookup_view.display_entry(render_entry(LookupEntry.from_dict(make_api_entry())))
        assert panel.play_button.isHidden()

    def test_title_shown(self, lookup_view, hello_entry):
        from word_lookup.services.entry_renderer import render_entry

        lookup_view.display_entry(render_entry(hello_entry))
        assert lookup_view.result_panel.title_label.text() == "hello"

    def test_title_is_plain_text(self, lookup_view, make_api_entry):
        from PyQt6.QtCore import Qt

        from word_lookup.models import LookupEntry
        from word_lookup.services.entry_renderer import render_entry

        lookup_view.display_entry(render_entry(LookupEntry.from_dict(make_api_entry(word="<b>bold</b>"))))

        title = lookup_view.result_panel.title_label
        assert title.textFormat() is Qt.TextFormat.PlainText
        assert title.text() == "<b>bold</b>"


class TestQSettingsBackend:
    """Tests for durable QSettings-backed preferences."""

    def test_round_trip_through_file(self, tmp_path):
        from word_lookup.gui.utils import QSettingsBackend

        path = tmp_path / "prefs.ini"
        PreferenceStore(QSettingsBackend.from_file(path)).set("theme", "dark")

        fresh = PreferenceStore(QSettingsBackend.from_file(path))
        assert fresh.theme == "dark"
        assert fresh.font == "sans-serif"


class TestMainWindow:
    """Tests for the wired-up main window."""

    def test_starts_on_default_entry(self, window):
        assert window.view_state.state is ViewState.DEFAULT
        assert window.view.current_panel is Panel.RESULT
        assert window.view.result_panel.title_label.text() == "keyboard"
        assert window.view.result_panel.play_button.isHidden()

    def test_search_renders_result(self, window):
        window.search_bar.search_input.setText("hello")
        window.search_bar.search_button.click()
        assert window.view_state.state is ViewState.LOADING

        _wait_for_lookup(window)

        assert window.view_state.state is ViewState.RESULT
        assert window.view.result_panel.title_label.text() == "hello"
        assert not window.view.result_panel.play_button.isHidden()

    def test_unknown_word_shows_error(self, window):
        window.search_bar.search_input.setText("asdfqwerty")
        window.search_bar.search_input.returnPressed.emit()
        _wait_for_lookup(window)

        assert window.view_state.state is ViewState.ERROR
        assert window.view.current_panel is Panel.ERROR

    def test_clear_during_lookup_keeps_default(self, window):
        window.search_bar.search_input.setText("hello")
        window.search_bar.search_button.click()
        window.search_bar.search_input.clear()
        _wait_for_lookup(window)

        assert window.view_state.state is ViewState.DEFAULT

    def test_play_button_plays_selected_audio(self, window, hello_entry):
        window.search_bar.search_input.setText("hello")
        window.search_bar.search_button.click()
        _wait_for_lookup(window)

        window.view.result_panel.play_button.click()

        assert window.audio_player._backend.played == [hello_entry.phonetics[0].audio]

    def test_theme_toggle_persists(self, window):
        window.header.theme_toggle.setChecked(True)
        assert window.preferences.theme == "dark"

        window.header.theme_toggle.setChecked(False)
        assert window.preferences.theme == "light"

    def test_font_selection_persists(self, window):
        index = window.header.font_select.findData("serif")
        window.header.font_select.setCurrentIndex(index)

        assert window.preferences.font == "serif"

    def test_unexpected_provider_error_shows_error(self, make_window):
        win = make_window(BrokenProvider())
        win.search_bar.search_input.setText("hello")
        win.search_bar.search_button.click()
        _wait_for_lookup(win)

        assert win.view_state.state is ViewState.ERROR
        assert win.view.current_panel is Panel.ERROR

    def test_superseded_lookup_is_cancelled(self, make_window, hello_entry):
        provider = BlockingProvider({"hello": hello_entry})
        win = make_window(provider)

        win.controller.search("asdfqwerty")
        first = win.runner.active_workers[0]
        win.controller.search("hello")
        second = win.runner.active_workers[-1]

        assert first.is_cancelled
        assert not second.is_cancelled

        provider.release.set()
        assert first.wait(5000)
        assert second.wait(5000)
        QApplication.processEvents()

        assert win.view_state.state is ViewState.RESULT
        assert win.view.result_panel.title_label.text() == "hello"

    def test_close_saves_config(self, window, config_file, test_config):
        from word_lookup.gui.utils import GUIConfigManager

        window.show()
        window.close()

        assert config_file.exists()
        assert GUIConfigManager.load_config() == test_config

    def test_close_keeps_existing_config(self, window, config_file):
        config_file.parent.mkdir(parents=True)
        config_file.write_text("{}", encoding="utf-8")

        window.show()
        window.close()

        assert config_file.read_text(encoding="utf-8") == "{}"
