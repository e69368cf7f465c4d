"""Header widget for main window.

Provides app branding, the font selector and the dark mode toggle.
"""

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QCheckBox, QComboBox, QHBoxLayout, QLabel, QWidget

from word_lookup.config import FONT_CHOICES
from word_lookup.gui.resources.styles import SPACING
from word_lookup.gui.resources.styles.theme import Theme


class HeaderWidget(QWidget):
    """Header widget with app branding and appearance controls.

    Displays:
    - App title
    - Font selector (fixed set of families)
    - Dark mode toggle
    """

    # Signals emitted when the user changes an appearance control
    theme_changed = pyqtSignal(str)  # "light" or "dark"
    font_changed = pyqtSignal(str)  # font preference key

    def __init__(self, theme: str = "light", font: str = "sans-serif", parent=None):
        """Initialize the header widget.

        Args:
            theme: Theme to show as selected
            font: Font preference to show as selected
            parent: Optional parent widget
        """
        super().__init__(parent)
        self._setup_ui()
        self.set_theme(theme)
        self.set_font_choice(font)

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        layout = QHBoxLayout()
        layout.setContentsMargins(SPACING.md, SPACING.sm, SPACING.md, SPACING.sm)
        layout.setSpacing(SPACING.md)

        title_label = QLabel("Dictionary")
        title_label.setObjectName("panel-title")
        layout.addWidget(title_label)
        layout.addStretch()

        self.font_select = QComboBox()
        self.font_select.setObjectName("font-select")
        for font in FONT_CHOICES:
            self.font_select.addItem(Theme.FONT_LABELS[font], font)
        self.font_select.setToolTip("Select the font used to display entries")
        self.font_select.currentIndexChanged.connect(self._on_font_changed)
        layout.addWidget(self.font_select)

        self.theme_toggle = QCheckBox("Dark mode")
        self.theme_toggle.setToolTip("Switch between light and dark theme (Ctrl+T)")
        self.theme_toggle.toggled.connect(self._on_theme_toggled)
        layout.addWidget(self.theme_toggle)

        self.setLayout(layout)
        self.setObjectName("header-widget")

    def set_theme(self, theme: str) -> None:
        """Update the toggle without emitting theme_changed."""
        self.theme_toggle.blockSignals(True)
        self.theme_toggle.setChecked(theme == "dark")
        self.theme_toggle.blockSignals(False)

    def set_font_choice(self, font: str) -> None:
        """Update the selector without emitting font_changed."""
        index = self.font_select.findData(font)
        self.font_select.blockSignals(True)
        self.font_select.setCurrentIndex(max(index, 0))
        self.font_select.blockSignals(False)

    def _on_theme_toggled(self, checked: bool) -> None:
        self.theme_changed.emit("dark" if checked else "light")

    def _on_font_changed(self, index: int) -> None:
        font = self.font_select.itemData(index)
        if font:
            self.font_changed.emit(font)
