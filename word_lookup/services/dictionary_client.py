"""Online dictionary client for the Free Dictionary API."""

import logging
from urllib.parse import quote

import requests

from word_lookup.exceptions import MalformedEntryError, NotFoundError
from word_lookup.models import LookupEntry

logger = logging.getLogger(__name__)


class DictionaryClient:
    """Looks up words via the dictionaryapi.dev REST endpoint.

    Implements DictionaryProvider protocol. Every failure mode collapses into
    NotFoundError.
    """

    def __init__(
        self,
        api_url: str = "https://api.dictionaryapi.dev/api/v2/entries/en/",
        timeout: float | None = 10.0,
        session: requests.Session | None = None,
    ):
        """Initialize with API URL and request timeout.

        Args:
            api_url: Base URL; the encoded word is appended to it.
            timeout: Seconds before a request is abandoned, or None.
            session: Optional requests session to reuse connections.
        """
        self._api_url = api_url if api_url.endswith("/") else api_url + "/"
        self._timeout = timeout
        self._session = session

    def build_url(self, query: str) -> str:
        """Build the request URL for ``query`` with every reserved character encoded."""
        return f"{self._api_url}{quote(query, safe='')}"

    def lookup(self, query: str) -> LookupEntry:
        """Look up a word.

        Args:
            query: Non-empty word; the caller strips and validates it.

        Returns:
            The first entry in the response array.

        Raises:
            NotFoundError: On non-2xx status, transport failure, or a payload
                that is not a non-empty array of well-formed entries.
        """
        url = self.build_url(query)
        logger.debug(f"Looking up '{query}' at {url}")

        get = self._session.get if self._session is not None else requests.get
        try:
            response = get(url, timeout=self._timeout)
        except requests.RequestException as e:
            logger.debug(f"Lookup for '{query}' failed: {e}")
            raise NotFoundError(query, "request failed") from e

        if not response.ok:
            logger.debug(f"Lookup for '{query}' returned HTTP {response.status_code}")
            raise NotFoundError(query, f"HTTP {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            logger.debug(f"Lookup for '{query}' returned invalid JSON")
            raise NotFoundError(query, "invalid JSON") from e

        if not isinstance(data, list) or not data:
            logger.debug(f"Lookup for '{query}' returned no entries")
            raise NotFoundError(query, "empty response")

        try:
            entry = LookupEntry.from_dict(data[0])
        except MalformedEntryError as e:
            logger.debug(f"Malformed entry for '{query}'", exc_info=True)
            raise NotFoundError(query, str(e)) from e

        logger.debug(f"Found '{entry.word}' with {len(entry.meanings)} meanings")
        return entry
