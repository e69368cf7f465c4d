"""Search input with its trigger button."""

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QHBoxLayout, QLineEdit, QPushButton, QWidget

from word_lookup.gui.resources.styles import SPACING


class SearchBar(QWidget):
    """Line edit plus Search button.

    Emits search_requested for a button click or Enter, and text_edited
    for every change the user makes to the input.
    """

    search_requested = pyqtSignal(str)
    text_edited = pyqtSignal(str)

    def __init__(self, parent=None):
        super().__init__(parent)

        layout = QHBoxLayout()
        layout.setContentsMargins(SPACING.md, 0, SPACING.md, 0)
        layout.setSpacing(SPACING.xs)

        self.search_input = QLineEdit()
        self.search_input.setObjectName("search-input")
        self.search_input.setPlaceholderText("Search for any word...")
        self.search_input.setClearButtonEnabled(True)
        self.search_input.returnPressed.connect(self._emit_search)
        self.search_input.textChanged.connect(self.text_edited.emit)
        layout.addWidget(self.search_input, 1)

        self.search_button = QPushButton("Search")
        self.search_button.setObjectName("search-button")
        self.search_button.clicked.connect(self._emit_search)
        layout.addWidget(self.search_button)

        self.setLayout(layout)

    def text(self) -> str:
        return self.search_input.text()

    def focus_input(self) -> None:
        self.search_input.setFocus()
        self.search_input.selectAll()

    def _emit_search(self) -> None:
        self.search_requested.emit(self.search_input.text())
