"""Input handling: search triggers, cleared input and stale responses."""

import logging

from word_lookup.exceptions import NotFoundError
from word_lookup.interfaces import DictionaryProvider, LookupRunner
from word_lookup.models import LookupEntry
from word_lookup.orchestration.view_state_controller import ViewStateController

logger = logging.getLogger(__name__)


class LookupController:
    """Turns user input into view state transitions.

    Every search and every clear bumps a generation token. Lookup outcomes
    carry the token they were started with and are dropped unless it is
    still current, so a late response cannot overwrite a newer view.
    """

    def __init__(self, view_state: ViewStateController, runner: LookupRunner | None = None):
        """Initialize the controller.

        Args:
            view_state: Controller that owns the visible panel
            runner: Dispatches lookups; can be attached later with
                ``set_runner`` when the runner needs this controller
        """
        self.view_state = view_state
        self._runner = runner
        self._generation = 0
        self._last_text = ""

    def set_runner(self, runner: LookupRunner) -> None:
        self._runner = runner

    @property
    def generation(self) -> int:
        """Token of the currently relevant request."""
        return self._generation

    def start(self) -> None:
        """Show the default view on startup."""
        self.view_state.show_default()

    def search(self, text: str) -> bool:
        """Handle the search button or Enter key.

        Args:
            text: Raw contents of the search box

        Returns:
            True if a lookup was started, False for blank input
        """
        query = text.strip()
        self._last_text = query
        if not query:
            return False
        if self._runner is None:
            raise RuntimeError("LookupController has no runner attached")

        self._generation += 1
        logger.debug(f"Search #{self._generation} for '{query}'")
        self.view_state.show_loading()
        self._runner.start(self._generation, query)
        return True

    def on_text_changed(self, text: str) -> None:
        """Handle edits to the search box.

        Emptying a previously non-empty box shows the default view and
        invalidates any lookup in flight.
        """
        stripped = text.strip()
        was_empty = not self._last_text
        self._last_text = stripped
        if stripped or was_empty:
            return

        self._generation += 1
        logger.debug(f"Input cleared, discarding results before #{self._generation}")
        self.view_state.show_default()

    def on_lookup_succeeded(self, generation: int, entry: LookupEntry) -> None:
        if not self._is_current(generation):
            return
        self.view_state.render(entry)

    def on_lookup_failed(self, generation: int, reason: str = "") -> None:
        if not self._is_current(generation):
            return
        if reason:
            logger.info(f"Lookup #{generation} failed: {reason}")
        self.view_state.show_error()

    def _is_current(self, generation: int) -> bool:
        if generation != self._generation:
            logger.debug(f"Dropping stale lookup #{generation} (current #{self._generation})")
            return False
        return True


class SynchronousLookupRunner:
    """Runs lookups inline on the calling thread.

    Implements LookupRunner protocol. Used when no event loop is available
    and in tests.
    """

    def __init__(self, provider: DictionaryProvider, controller: LookupController):
        self.provider = provider
        self.controller = controller

    def start(self, generation: int, query: str) -> None:
        try:
            entry = self.provider.lookup(query)
        except NotFoundError as e:
            self.controller.on_lookup_failed(generation, str(e))
            return
        self.controller.on_lookup_succeeded(generation, entry)
