"""Stacked-widget view showing exactly one panel at a time."""

from PyQt6.QtWidgets import QStackedWidget

from word_lookup.gui.widgets.panels import MessagePanel, ResultPanel
from word_lookup.models import Panel, RenderedEntry


class QtLookupView(QStackedWidget):
    """Result, loading and error panels in a QStackedWidget.

    Implements LookupView protocol. A stacked widget only ever shows its
    current page, so every transition leaves exactly one panel visible.
    """

    def __init__(self, parent=None):
        super().__init__(parent)

        self.result_panel = ResultPanel()
        self.loading_panel = MessagePanel("Loading...", "Looking up your word")
        self.error_panel = MessagePanel(
            "No Definitions Found",
            "Sorry pal, we couldn't find definitions for the word you were looking for. "
            "You can try the search again at later time or head to the web instead.",
            title_object_name="error-title",
        )

        self._panels = {
            Panel.RESULT: self.result_panel,
            Panel.LOADING: self.loading_panel,
            Panel.ERROR: self.error_panel,
        }
        for widget in self._panels.values():
            self.addWidget(widget)

    @property
    def current_panel(self) -> Panel:
        current = self.currentWidget()
        for panel, widget in self._panels.items():
            if widget is current:
                return panel
        raise RuntimeError("Stacked widget shows an unknown page")

    def panel_widget(self, panel: Panel):
        return self._panels[panel]

    def show_panel(self, panel: Panel) -> None:
        self.setCurrentWidget(self._panels[panel])

    def display_entry(self, entry: RenderedEntry) -> None:
        self.result_panel.display_entry(entry)
