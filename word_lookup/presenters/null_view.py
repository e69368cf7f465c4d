"""Null view for testing and headless use (no output)."""

from word_lookup.models import Panel, RenderedEntry


class NullView:
    """Present lookups to nowhere (testing implementation)."""

    def show_panel(self, panel: Panel) -> None:
        """Show a panel (no-op)."""
        pass

    def display_entry(self, entry: RenderedEntry) -> None:
        """Display an entry (no-op)."""
        pass
