"""Protocol for durable key/value preference storage."""

from typing import Protocol


class PreferenceBackend(Protocol):
    """Interface for a string key/value store that survives restarts."""

    def value(self, key: str) -> str | None:
        """Return the stored value for ``key``, or None if unset."""
        ...

    def set_value(self, key: str, value: str) -> None:
        """Persist ``value`` under ``key``.

        May raise on storage failure; the preference store swallows it.
        """
        ...
