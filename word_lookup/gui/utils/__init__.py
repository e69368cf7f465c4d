"""Utility functions for the GUI layer."""

from .config_manager import GUIConfigManager
from .settings_backend import QSettingsBackend

__all__ = [
    "GUIConfigManager",
    "QSettingsBackend",
]
