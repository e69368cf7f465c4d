"""Default configuration values for Word Lookup."""

from .config import WordLookupConfig


def create_default_config(**overrides) -> WordLookupConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        WordLookupConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            request_timeout=5.0,
            log_level="DEBUG"
        )
    """
    return WordLookupConfig(**overrides)
