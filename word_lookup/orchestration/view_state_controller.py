"""Owner of the lookup window's view state."""

import logging

from word_lookup.config import WordLookupConfig
from word_lookup.interfaces import LookupView
from word_lookup.models import LookupEntry, RenderedEntry, ViewState
from word_lookup.services.entry_renderer import DEFAULT_ENTRY, render_entry

logger = logging.getLogger(__name__)


class ViewStateController:
    """Decides what the user sees for every lookup outcome.

    Holds exactly one ViewState at a time and drives a LookupView so that
    exactly one panel is visible after every transition. All methods must
    be called from the thread that owns the view.
    """

    def __init__(self, view: LookupView, config: WordLookupConfig | None = None):
        """Initialize the controller.

        The view is not touched until the first transition.

        Args:
            view: Presentation layer to drive
            config: Supplies rendering limits; defaults if omitted
        """
        self.view = view
        self.config = config or WordLookupConfig()
        self._state = ViewState.DEFAULT
        self._entry: RenderedEntry | None = None

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def rendered_entry(self) -> RenderedEntry | None:
        """Entry currently on the result panel, or None outside RESULT/DEFAULT."""
        return self._entry

    @property
    def current_audio_url(self) -> str | None:
        """Audio selected by the last render; None unless a lookup result is showing."""
        if self._state is not ViewState.RESULT or self._entry is None:
            return None
        return self._entry.audio_url

    def show_loading(self) -> None:
        """Switch to the loading panel."""
        self._transition(ViewState.LOADING)

    def show_error(self) -> None:
        """Switch to the error panel."""
        self._entry = None
        self._transition(ViewState.ERROR)

    def show_default(self) -> None:
        """Show the built-in fallback entry on the result panel."""
        self._entry = DEFAULT_ENTRY
        self.view.display_entry(DEFAULT_ENTRY)
        self._transition(ViewState.DEFAULT)

    def render(self, entry: LookupEntry) -> RenderedEntry:
        """Render a lookup result and switch to the result panel.

        Args:
            entry: Parsed dictionary entry

        Returns:
            The RenderedEntry now displayed
        """
        rendered = render_entry(
            entry,
            max_definitions=self.config.max_definitions,
            max_synonyms=self.config.max_synonyms,
        )
        self._entry = rendered
        self.view.display_entry(rendered)
        self._transition(ViewState.RESULT)
        return rendered

    def _transition(self, state: ViewState) -> None:
        if state is not self._state:
            logger.debug(f"View state {self._state.value} -> {state.value}")
        self._state = state
        self.view.show_panel(state.panel)
