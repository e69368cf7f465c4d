"""Simple centered message panel used for the loading and error states."""

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from word_lookup.gui.resources.styles import SPACING


class MessagePanel(QWidget):
    """A heading and a caption, centered."""

    def __init__(self, title: str, caption: str = "", title_object_name: str = "panel-title", parent=None):
        super().__init__(parent)

        layout = QVBoxLayout()
        layout.setContentsMargins(SPACING.lg, SPACING.xl, SPACING.lg, SPACING.xl)
        layout.setSpacing(SPACING.xs)
        layout.addStretch()

        self.title_label = QLabel(title)
        self.title_label.setObjectName(title_object_name)
        self.title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.title_label)

        self.caption_label = QLabel(caption)
        self.caption_label.setObjectName("panel-caption")
        self.caption_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.caption_label.setWordWrap(True)
        self.caption_label.setVisible(bool(caption))
        layout.addWidget(self.caption_label)

        layout.addStretch()
        self.setLayout(layout)
