"""Protocol for dictionary lookup providers."""

from typing import Protocol

from word_lookup.models import LookupEntry


class DictionaryProvider(Protocol):
    """Interface for a dictionary backend that can look up a word.

    The online DictionaryClient implements this protocol; tests substitute
    in-memory fakes.
    """

    def lookup(self, query: str) -> LookupEntry:
        """Look up a single word.

        Args:
            query: Non-empty word to look up (not yet percent-encoded)

        Returns:
            The first entry for the word

        Raises:
            NotFoundError: If the word is unknown or the lookup failed for
                any reason
        """
        ...
