"""Base exception classes for Word Lookup."""


class WordLookupException(Exception):
    """Base exception for all Word Lookup errors.

    All custom exceptions in the word_lookup package should inherit
    from this base class for consistent error handling.
    """

    pass
