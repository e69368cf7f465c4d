"""Configuration classes for Word Lookup."""

from dataclasses import dataclass

THEME_CHOICES = ("light", "dark")
FONT_CHOICES = ("sans-serif", "serif", "monospace")


@dataclass(frozen=True)
class WordLookupConfig:
    """Immutable configuration for the lookup application.

    Frozen so the worker thread and the GUI thread can share one instance.
    """

    # Dictionary service
    api_url: str = "https://api.dictionaryapi.dev/api/v2/entries/en/"
    request_timeout: float | None = 10.0  # None = wait forever

    # Rendering limits
    max_definitions: int = 5
    max_synonyms: int = 5

    # Preference storage (QSettings scope)
    settings_organization: str = "WordLookup"
    settings_application: str = "GUI"

    # Logging
    log_level: str = "INFO"

    # Window geometry
    window_width: int = 640
    window_height: int = 720

    def __post_init__(self):
        """Validate field types and normalize the API base URL so a word can be appended directly."""
        for name in ("api_url", "log_level", "settings_organization", "settings_application"):
            if not isinstance(getattr(self, name), str):
                raise TypeError(f"{name} must be a string")
        if not self.api_url.endswith("/"):
            object.__setattr__(self, "api_url", self.api_url + "/")
        if self.max_definitions < 1 or self.max_synonyms < 1:
            raise ValueError("max_definitions and max_synonyms must be positive")
