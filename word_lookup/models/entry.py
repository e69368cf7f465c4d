"""Data models for dictionary entries as returned by the lookup service."""

from dataclasses import dataclass, field
from typing import Any

from word_lookup.exceptions import MalformedEntryError


def _optional_str(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise MalformedEntryError(f"'{field_name}' must be a string, got {type(value).__name__}")
    return value


def _list_of(payload: dict[str, Any], key: str) -> list[Any]:
    value = payload.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise MalformedEntryError(f"'{key}' must be a list, got {type(value).__name__}")
    return value


def _require_dict(value: Any, what: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise MalformedEntryError(f"{what} must be an object, got {type(value).__name__}")
    return value


@dataclass
class Phonetic:
    """One pronunciation variant: IPA text and/or an audio clip URL."""

    text: str | None = None
    audio: str | None = None

    @classmethod
    def from_dict(cls, payload: Any) -> "Phonetic":
        data = _require_dict(payload, "phonetic")
        return cls(
            text=_optional_str(data.get("text"), "phonetics.text"),
            audio=_optional_str(data.get("audio"), "phonetics.audio"),
        )


@dataclass
class Definition:
    """A single definition with an optional usage example."""

    definition: str
    example: str | None = None

    @classmethod
    def from_dict(cls, payload: Any) -> "Definition":
        data = _require_dict(payload, "definition")
        text = data.get("definition")
        if not isinstance(text, str):
            raise MalformedEntryError("definition entry is missing 'definition' text")
        return cls(definition=text, example=_optional_str(data.get("example"), "example"))


@dataclass
class Meaning:
    """One part of speech's definitions and synonyms within an entry."""

    part_of_speech: str
    definitions: list[Definition] = field(default_factory=list)
    synonyms: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, payload: Any) -> "Meaning":
        data = _require_dict(payload, "meaning")
        part_of_speech = data.get("partOfSpeech")
        if not isinstance(part_of_speech, str):
            raise MalformedEntryError("meaning is missing 'partOfSpeech'")

        synonyms = _list_of(data, "synonyms")
        if not all(isinstance(s, str) for s in synonyms):
            raise MalformedEntryError("'synonyms' must contain only strings")

        return cls(
            part_of_speech=part_of_speech,
            definitions=[Definition.from_dict(d) for d in _list_of(data, "definitions")],
            synonyms=list(synonyms),
        )


@dataclass
class LookupEntry:
    """Complete dictionary entry for one word.

    Created per successful response and discarded on the next search or clear.
    """

    word: str
    phonetics: list[Phonetic] = field(default_factory=list)
    meanings: list[Meaning] = field(default_factory=list)
    source_urls: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, payload: Any) -> "LookupEntry":
        """Parse one element of the dictionary service's JSON array.

        Args:
            payload: Decoded JSON object for a single entry

        Returns:
            Parsed LookupEntry

        Raises:
            MalformedEntryError: If required fields are missing or mistyped,
                or the entry has no meanings
        """
        data = _require_dict(payload, "entry")

        word = data.get("word")
        if not isinstance(word, str) or not word:
            raise MalformedEntryError("entry is missing 'word'")

        meanings = [Meaning.from_dict(m) for m in _list_of(data, "meanings")]
        if not meanings:
            raise MalformedEntryError(f"entry for '{word}' has no meanings")

        source_urls = _list_of(data, "sourceUrls")
        if not all(isinstance(u, str) for u in source_urls):
            raise MalformedEntryError("'sourceUrls' must contain only strings")

        return cls(
            word=word,
            phonetics=[Phonetic.from_dict(p) for p in _list_of(data, "phonetics")],
            meanings=meanings,
            source_urls=list(source_urls),
        )

    def __str__(self) -> str:
        return f"{self.word} ({len(self.meanings)} meanings)"
