"""Protocol for dispatching lookups off the caller's task."""

from typing import Protocol


class LookupRunner(Protocol):
    """Interface for starting a dictionary lookup.

    Implementations report back by calling the lookup controller's
    ``on_lookup_succeeded(generation, entry)`` or
    ``on_lookup_failed(generation)``, on the thread that owns the view.
    """

    def start(self, generation: int, query: str) -> None:
        """Begin looking up ``query`` for request number ``generation``."""
        ...
