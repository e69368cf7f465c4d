"""Protocol for the presentation layer driven by the view state controller."""

from typing import Protocol

from word_lookup.models import Panel, RenderedEntry


class LookupView(Protocol):
    """Interface for showing panels and entries to the user (Qt, tests, etc).

    Keeps the view state controller independent of any display surface.
    """

    def show_panel(self, panel: Panel) -> None:
        """Make ``panel`` the only visible panel.

        Args:
            panel: Panel to show; every other panel must be hidden
        """
        ...

    def display_entry(self, entry: RenderedEntry) -> None:
        """Fill the result panel with a rendered entry.

        Args:
            entry: Display-ready entry, including audio control visibility
        """
        ...
