"""Interface protocols for Word Lookup."""

from .audio_backend import AudioBackend
from .dictionary_provider import DictionaryProvider
from .lookup_runner import LookupRunner
from .preference_backend import PreferenceBackend
from .view import LookupView

__all__ = [
    "AudioBackend",
    "DictionaryProvider",
    "LookupRunner",
    "LookupView",
    "PreferenceBackend",
]
