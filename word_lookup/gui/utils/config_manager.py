"""GUI configuration persistence manager."""

import json
import logging
from dataclasses import asdict
from pathlib import Path

from word_lookup.config import WordLookupConfig, create_default_config

logger = logging.getLogger(__name__)


class GUIConfigManager:
    """Manager for GUI configuration persistence.

    Saves and loads the application configuration to/from a JSON file in
    the user's home directory, falling back to defaults when the file is
    missing or invalid. Theme and font are not part of this file; they are
    user preferences kept by PreferenceStore.
    """

    CONFIG_FILE = Path.home() / ".word_lookup" / "gui_config.json"

    @classmethod
    def save_config(cls, config: WordLookupConfig) -> None:
        """Save configuration to JSON file.

        Args:
            config: Configuration to save

        Raises:
            OSError: If unable to create directory or write file
        """
        cls.CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)

        with cls.CONFIG_FILE.open("w", encoding="utf-8") as f:
            json.dump(asdict(config), f, indent=2, ensure_ascii=False)

    @classmethod
    def load_config(cls) -> WordLookupConfig:
        """Load configuration from JSON file.

        Returns:
            Loaded configuration, or default configuration if file doesn't exist

        Note:
            If the file exists but is invalid, falls back to default configuration
            and logs a warning. Unknown keys count as invalid.
        """
        if not cls.CONFIG_FILE.exists():
            return create_default_config()

        try:
            with cls.CONFIG_FILE.open("r", encoding="utf-8") as f:
                config_dict = json.load(f)

            if not isinstance(config_dict, dict):
                raise TypeError("config file must contain a JSON object")

            return WordLookupConfig(**config_dict)

        except (json.JSONDecodeError, TypeError, ValueError) as e:
            logger.warning(f"Invalid config file, using defaults: {e}")
            return create_default_config()

    @classmethod
    def config_exists(cls) -> bool:
        """Check if configuration file exists."""
        return cls.CONFIG_FILE.exists()
