"""Theme and font preferences with best-effort persistence."""

import logging

from word_lookup.config import FONT_CHOICES, THEME_CHOICES
from word_lookup.interfaces import PreferenceBackend

logger = logging.getLogger(__name__)

THEME_KEY = "theme"
FONT_KEY = "font"

DEFAULTS = {
    THEME_KEY: "light",
    FONT_KEY: "sans-serif",
}

ALLOWED_VALUES = {
    THEME_KEY: THEME_CHOICES,
    FONT_KEY: FONT_CHOICES,
}


class MemoryPreferenceBackend:
    """In-process preference backend for headless use and tests.

    Implements PreferenceBackend protocol.
    """

    def __init__(self, initial: dict[str, str] | None = None):
        self._values: dict[str, str] = dict(initial or {})

    def value(self, key: str) -> str | None:
        return self._values.get(key)

    def set_value(self, key: str, value: str) -> None:
        self._values[key] = value


class PreferenceStore:
    """Reads and writes the ``theme`` and ``font`` preferences.

    Unset or unrecognized stored values resolve to the defaults. Writes never
    raise: a failing backend is logged and otherwise ignored.
    """

    def __init__(self, backend: PreferenceBackend):
        """Initialize the store.

        Args:
            backend: Durable key/value storage
        """
        self._backend = backend

    def get(self, key: str) -> str:
        """Get a preference value.

        Args:
            key: ``"theme"`` or ``"font"``

        Returns:
            Stored value, or the documented default if unset or invalid

        Raises:
            KeyError: If ``key`` is not a known preference
        """
        default = DEFAULTS[key]
        try:
            stored = self._backend.value(key)
        except Exception:
            logger.warning(f"Could not read preference '{key}', using default", exc_info=True)
            return default

        if stored is None:
            return default
        if stored not in ALLOWED_VALUES[key]:
            logger.warning(f"Ignoring unknown {key} preference '{stored}'")
            return default
        return stored

    def set(self, key: str, value: str) -> None:
        """Persist a preference value (fire and forget).

        Args:
            key: ``"theme"`` or ``"font"``
            value: One of the allowed values for ``key``

        Raises:
            KeyError: If ``key`` is not a known preference
            ValueError: If ``value`` is not allowed for ``key``
        """
        if value not in ALLOWED_VALUES[key]:
            raise ValueError(f"Invalid {key} '{value}', expected one of {ALLOWED_VALUES[key]}")

        try:
            self._backend.set_value(key, value)
        except Exception:
            logger.warning(f"Could not save preference {key}={value}", exc_info=True)

    @property
    def theme(self) -> str:
        return self.get(THEME_KEY)

    @theme.setter
    def theme(self, value: str) -> None:
        self.set(THEME_KEY, value)

    @property
    def font(self) -> str:
        return self.get(FONT_KEY)

    @font.setter
    def font(self, value: str) -> None:
        self.set(FONT_KEY, value)

    def toggle_theme(self) -> str:
        """Flip between light and dark and persist the result.

        Returns:
            The new theme
        """
        new_theme = "light" if self.theme == "dark" else "dark"
        self.theme = new_theme
        return new_theme
