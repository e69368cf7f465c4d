"""Custom exceptions for Word Lookup."""

from .base import WordLookupException
from .lookup import MalformedEntryError, NotFoundError

__all__ = [
    "WordLookupException",
    "NotFoundError",
    "MalformedEntryError",
]
