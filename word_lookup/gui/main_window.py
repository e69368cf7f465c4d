"""Main window for the Word Lookup GUI."""

import logging

from PyQt6.QtGui import QKeySequence, QShortcut
from PyQt6.QtWidgets import QFrame, QMainWindow, QVBoxLayout, QWidget

from word_lookup import __version__
from word_lookup.config import WordLookupConfig, create_default_config
from word_lookup.gui.resources.styles import SPACING
from word_lookup.gui.resources.styles.theme import Theme
from word_lookup.gui.utils import GUIConfigManager, QSettingsBackend
from word_lookup.gui.views import QtLookupView
from word_lookup.gui.widgets.header_widget import HeaderWidget
from word_lookup.gui.widgets.search_bar import SearchBar
from word_lookup.gui.workers import QtLookupRunner
from word_lookup.interfaces import AudioBackend, DictionaryProvider
from word_lookup.orchestration import LookupController, ViewStateController
from word_lookup.services import AudioPlayer, DictionaryClient, PreferenceStore

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window.

    Builds the header, search bar and stacked panels, and wires them to the
    controllers. Collaborators can be injected; anything omitted is created
    from the configuration.
    """

    def __init__(
        self,
        config: WordLookupConfig | None = None,
        preferences: PreferenceStore | None = None,
        provider: DictionaryProvider | None = None,
        audio_backend: AudioBackend | None = None,
    ):
        """Initialize the main window.

        Args:
            config: Application configuration
            preferences: Theme/font store; QSettings-backed if omitted
            provider: Dictionary to query; the online client if omitted
            audio_backend: Playback backend; Qt Multimedia if omitted
        """
        super().__init__()

        self.config = config or create_default_config()
        self.preferences = preferences or PreferenceStore(
            QSettingsBackend.for_application(
                self.config.settings_organization, self.config.settings_application
            )
        )
        self.provider = provider or DictionaryClient(
            api_url=self.config.api_url, timeout=self.config.request_timeout
        )

        self._setup_ui()

        self.view_state = ViewStateController(self.view, self.config)
        self.controller = LookupController(self.view_state)
        self.runner = QtLookupRunner(self.provider, self.controller, self)
        self.controller.set_runner(self.runner)

        if audio_backend is None:
            # Imported lazily: Qt Multimedia needs platform audio plugins
            from word_lookup.gui.utils.audio_backend import QtAudioBackend

            audio_backend = QtAudioBackend(self)
        self.audio_player = AudioPlayer(audio_backend, lambda: self.view_state.current_audio_url)

        self._connect_signals()
        self._setup_shortcuts()
        self._apply_appearance()

        self.controller.start()

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        self.setWindowTitle(f"Dictionary {__version__}")
        self.resize(self.config.window_width, self.config.window_height)

        central_widget = QWidget()
        layout = QVBoxLayout()
        layout.setContentsMargins(0, 0, 0, SPACING.md)
        layout.setSpacing(SPACING.sm)

        self.header = HeaderWidget(self.preferences.theme, self.preferences.font)
        layout.addWidget(self.header)

        divider = QFrame()
        divider.setObjectName("header-divider")
        divider.setFrameShape(QFrame.Shape.HLine)
        layout.addWidget(divider)

        self.search_bar = SearchBar()
        layout.addWidget(self.search_bar)

        self.view = QtLookupView()
        layout.addWidget(self.view, 1)

        central_widget.setLayout(layout)
        self.setCentralWidget(central_widget)

    def _connect_signals(self) -> None:
        self.search_bar.search_requested.connect(self.controller.search)
        self.search_bar.text_edited.connect(self.controller.on_text_changed)
        self.view.result_panel.play_requested.connect(lambda: self.audio_player.play())
        self.header.theme_changed.connect(self._on_theme_changed)
        self.header.font_changed.connect(self._on_font_changed)

    def _setup_shortcuts(self) -> None:
        """Set up global keyboard shortcuts."""
        theme_shortcut = QShortcut(QKeySequence("Ctrl+T"), self)
        theme_shortcut.activated.connect(self.header.theme_toggle.toggle)

        search_shortcut = QShortcut(QKeySequence("Ctrl+L"), self)
        search_shortcut.activated.connect(self.search_bar.focus_input)

    def _apply_appearance(self, theme: str | None = None, font: str | None = None) -> None:
        """Restyle the window; falls back to the stored preferences."""
        theme = theme or self.preferences.theme
        font = font or self.preferences.font
        self.setStyleSheet(Theme.get_stylesheet(theme, font))
        self.view.result_panel.set_document_css(Theme.get_document_css(theme, font))

    def _on_theme_changed(self, theme: str) -> None:
        # Apply first; the write is best effort
        self._apply_appearance(theme=theme, font=self.header.font_select.currentData())
        self.preferences.theme = theme
        logger.debug(f"Theme set to {theme}")

    def _on_font_changed(self, font: str) -> None:
        theme = "dark" if self.header.theme_toggle.isChecked() else "light"
        self._apply_appearance(theme=theme, font=font)
        self.preferences.font = font
        logger.debug(f"Font set to {font}")

    def closeEvent(self, event) -> None:
        """Handle window close event.

        Args:
            event: Close event
        """
        self.runner.shutdown()
        if not GUIConfigManager.config_exists():
            try:
                GUIConfigManager.save_config(self.config)
            except OSError as e:
                logger.warning(f"Could not save configuration: {e}")
        super().closeEvent(event)
