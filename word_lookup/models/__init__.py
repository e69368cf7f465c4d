"""Data models for Word Lookup."""

from .entry import Definition, LookupEntry, Meaning, Phonetic
from .rendered import RenderedDefinition, RenderedEntry, RenderedMeaning, SourceLink
from .view_state import Panel, ViewState

__all__ = [
    "Phonetic",
    "Definition",
    "Meaning",
    "LookupEntry",
    "RenderedDefinition",
    "RenderedMeaning",
    "RenderedEntry",
    "SourceLink",
    "ViewState",
    "Panel",
]
