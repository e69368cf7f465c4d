"""Configuration management for Word Lookup."""

from .config import FONT_CHOICES, THEME_CHOICES, WordLookupConfig
from .defaults import create_default_config

__all__ = ["WordLookupConfig", "create_default_config", "FONT_CHOICES", "THEME_CHOICES"]
