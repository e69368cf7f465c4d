"""Business logic services for Word Lookup."""

from .audio_player import AudioPlayer
from .dictionary_client import DictionaryClient
from .entry_renderer import DEFAULT_ENTRY, render_entry
from .preference_store import MemoryPreferenceBackend, PreferenceStore

__all__ = [
    "AudioPlayer",
    "DictionaryClient",
    "DEFAULT_ENTRY",
    "render_entry",
    "MemoryPreferenceBackend",
    "PreferenceStore",
]
