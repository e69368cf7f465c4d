"""Pytest configuration and shared fixtures."""

import copy

import pytest

from word_lookup.config import WordLookupConfig
from word_lookup.exceptions import NotFoundError
from word_lookup.models import LookupEntry, Panel
from word_lookup.presenters import NullView
from word_lookup.services import MemoryPreferenceBackend, PreferenceStore

HELLO_PAYLOAD = {
    "word": "hello",
    "phonetics": [
        {"text": "/həˈloʊ/", "audio": "https://api.dictionaryapi.dev/media/pronunciations/en/hello-us.mp3"},
    ],
    "meanings": [
        {
            "partOfSpeech": "noun",
            "definitions": [
                {"definition": '"Hello!" or an equivalent greeting.', "example": "She gave me a cheery hello."},
            ],
            "synonyms": ["greeting"],
        },
        {
            "partOfSpeech": "verb",
            "definitions": [
                {"definition": 'To greet with "hello".'},
            ],
            "synonyms": [],
        },
    ],
    "sourceUrls": ["https://en.wiktionary.org/wiki/hello"],
}


@pytest.fixture
def test_config():
    """Provide a test configuration pointing at a fake API host."""
    return WordLookupConfig(
        api_url="https://dictionary.test/api/v2/entries/en/",
        request_timeout=1.0,
        settings_organization="WordLookupTests",
    )


@pytest.fixture
def hello_payload():
    """Provide a fresh copy of a well-formed entry payload for 'hello'."""
    return copy.deepcopy(HELLO_PAYLOAD)


@pytest.fixture
def hello_entry(hello_payload):
    return LookupEntry.from_dict(hello_payload)


@pytest.fixture
def make_api_entry():
    """Factory fixture for API-shaped entry dicts with sensible defaults."""

    def _make(word="test", phonetics=None, meanings=None, source_urls=None):
        return {
            "word": word,
            "phonetics": phonetics if phonetics is not None else [],
            "meanings": meanings
            if meanings is not None
            else [{"partOfSpeech": "noun", "definitions": [{"definition": "A trial."}], "synonyms": []}],
            "sourceUrls": source_urls if source_urls is not None else [],
        }

    return _make


class RecordingView:
    """A real LookupView implementation that records every call for assertion."""

    def __init__(self):
        self.visible: set[Panel] = set()
        self.panel_history: list[Panel] = []
        self.entries = []

    def show_panel(self, panel: Panel) -> None:
        self.visible = {panel}
        self.panel_history.append(panel)

    def display_entry(self, entry) -> None:
        self.entries.append(entry)

    @property
    def last_entry(self):
        return self.entries[-1] if self.entries else None


@pytest.fixture
def recording_view():
    """Provide a view that records panels and entries."""
    return RecordingView()


@pytest.fixture
def null_view():
    """Provide a null view for testing (no output)."""
    return NullView()


@pytest.fixture
def memory_backend():
    return MemoryPreferenceBackend()


@pytest.fixture
def preference_store(memory_backend):
    return PreferenceStore(memory_backend)


class FakeProvider:
    """In-memory DictionaryProvider keyed by query."""

    def __init__(self, entries=None):
        self.entries = dict(entries or {})
        self.queries = []

    def lookup(self, query):
        self.queries.append(query)
        if query not in self.entries:
            raise NotFoundError(query)
        return self.entries[query]


@pytest.fixture
def fake_provider(hello_entry):
    return FakeProvider({"hello": hello_entry})


class DeferredRunner:
    """LookupRunner that holds lookups until the test completes them.

    Lets tests deliver responses out of order, as a slow network would.
    """

    def __init__(self, provider, controller=None):
        self.provider = provider
        self.controller = controller
        self.pending: list[tuple[int, str]] = []

    def start(self, generation, query):
        self.pending.append((generation, query))

    def complete(self, index=0):
        """Finish the pending lookup at ``index`` and report it to the controller."""
        generation, query = self.pending.pop(index)
        try:
            entry = self.provider.lookup(query)
        except NotFoundError as e:
            self.controller.on_lookup_failed(generation, str(e))
        else:
            self.controller.on_lookup_succeeded(generation, entry)


@pytest.fixture
def deferred_runner(fake_provider):
    return DeferredRunner(fake_provider)
