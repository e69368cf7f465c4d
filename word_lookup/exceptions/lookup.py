"""Dictionary lookup exceptions."""

from .base import WordLookupException


class NotFoundError(WordLookupException):
    """Raised when a lookup yields no usable entry.

    Covers unknown words, HTTP failures, transport failures and malformed
    payloads alike; callers are not meant to tell them apart.
    """

    def __init__(self, query: str, reason: str = ""):
        self.query = query
        self.reason = reason
        message = f"No entry found for '{query}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class MalformedEntryError(WordLookupException, ValueError):
    """Raised when a dictionary payload does not have the expected shape."""

    pass
