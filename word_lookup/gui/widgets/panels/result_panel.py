"""Result panel: word title, play button and the entry body."""

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QTextBrowser, QVBoxLayout, QWidget

from word_lookup.gui.resources.styles import SPACING
from word_lookup.models import RenderedEntry
from word_lookup.utils import format_entry_html


class ResultPanel(QWidget):
    """Shows one RenderedEntry.

    The play button is visible only when the entry has an audio URL.
    Source links open in the system browser.
    """

    play_requested = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)

        layout = QVBoxLayout()
        layout.setContentsMargins(SPACING.md, SPACING.md, SPACING.md, SPACING.md)
        layout.setSpacing(SPACING.xs)

        header = QHBoxLayout()
        self.title_label = QLabel()
        self.title_label.setObjectName("word-title")
        self.title_label.setTextFormat(Qt.TextFormat.PlainText)
        self.title_label.setWordWrap(True)
        header.addWidget(self.title_label, 1)

        self.play_button = QPushButton("▶")
        self.play_button.setObjectName("play-button")
        self.play_button.setToolTip("Play pronunciation")
        self.play_button.setAccessibleName("Play pronunciation")
        self.play_button.clicked.connect(self.play_requested.emit)
        self.play_button.setVisible(False)
        header.addWidget(self.play_button)
        layout.addLayout(header)

        self.body = QTextBrowser()
        self.body.setObjectName("entry-body")
        self.body.setOpenExternalLinks(True)
        layout.addWidget(self.body, 1)

        self.setLayout(layout)
        self._entry: RenderedEntry | None = None

    @property
    def entry(self) -> RenderedEntry | None:
        return self._entry

    def set_document_css(self, css: str) -> None:
        """Style the rich-text body and re-render the current entry."""
        self.body.document().setDefaultStyleSheet(css)
        if self._entry is not None:
            self.body.setHtml(format_entry_html(self._entry))

    def display_entry(self, entry: RenderedEntry) -> None:
        self._entry = entry
        self.title_label.setText(entry.title)
        self.play_button.setVisible(entry.has_audio)
        self.body.setHtml(format_entry_html(entry))
