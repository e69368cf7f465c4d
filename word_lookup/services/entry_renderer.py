"""Pure transformation from a LookupEntry to what the result panel shows."""

from word_lookup.models import (
    Definition,
    LookupEntry,
    Meaning,
    Phonetic,
    RenderedDefinition,
    RenderedEntry,
    RenderedMeaning,
    SourceLink,
)

FALLBACK_SOURCE_LABEL = "Dictionary API"


def select_phonetic_text(phonetics: list[Phonetic]) -> str:
    """Return the first non-empty phonetic text, or an empty string.

    Args:
        phonetics: Phonetic variants in API order

    Returns:
        Phonetic text to show (the line is always shown, possibly blank)
    """
    for phonetic in phonetics:
        if phonetic.text:
            return phonetic.text
    return ""


def select_audio_url(phonetics: list[Phonetic]) -> str | None:
    """Return the first audio URL that is non-empty after trimming.

    Args:
        phonetics: Phonetic variants in API order

    Returns:
        Audio URL as given by the API, or None if no variant has audio
    """
    for phonetic in phonetics:
        if phonetic.audio and phonetic.audio.strip():
            return phonetic.audio
    return None


def render_meaning(meaning: Meaning, max_definitions: int = 5, max_synonyms: int = 5) -> RenderedMeaning:
    """Truncate one meaning's definitions and synonyms, keeping their order."""
    return RenderedMeaning(
        part_of_speech=meaning.part_of_speech,
        definitions=[_render_definition(d) for d in meaning.definitions[:max_definitions]],
        synonyms=list(meaning.synonyms[:max_synonyms]),
    )


def _render_definition(definition: Definition) -> RenderedDefinition:
    return RenderedDefinition(text=definition.definition, example=definition.example or None)


def render_source(source_urls: list[str]) -> SourceLink:
    """Build the source link; falls back to a non-navigating label."""
    if source_urls and source_urls[0]:
        return SourceLink(label=source_urls[0], url=source_urls[0])
    return SourceLink(label=FALLBACK_SOURCE_LABEL, url=None)


def render_entry(entry: LookupEntry, max_definitions: int = 5, max_synonyms: int = 5) -> RenderedEntry:
    """Turn a parsed entry into a display-ready one.

    Same input always yields an equal result.

    Args:
        entry: Parsed dictionary entry
        max_definitions: Definitions shown per meaning
        max_synonyms: Synonyms shown per meaning

    Returns:
        RenderedEntry for the result panel
    """
    return RenderedEntry(
        title=entry.word,
        phonetic_text=select_phonetic_text(entry.phonetics),
        audio_url=select_audio_url(entry.phonetics),
        meanings=[render_meaning(m, max_definitions, max_synonyms) for m in entry.meanings],
        source=render_source(entry.source_urls),
    )


# Shown on startup and whenever the search box is cleared.
DEFAULT_ENTRY = RenderedEntry(
    title="keyboard",
    phonetic_text="/ˈkiːbɔːd/",
    audio_url=None,
    meanings=[
        RenderedMeaning(
            part_of_speech="noun",
            definitions=[
                RenderedDefinition("A set of keys used to operate a typewriter, computer, etc."),
                RenderedDefinition(
                    "A component of many instruments including the piano, organ, and "
                    "harpsichord consisting of usually black and white keys that cause "
                    "different tones to be produced when struck."
                ),
                RenderedDefinition(
                    "A device with keys or a set of buttons used to lock or unlock "
                    "something from the keyboard device."
                ),
            ],
            synonyms=["electronic keyboard"],
        ),
        RenderedMeaning(
            part_of_speech="verb",
            definitions=[
                RenderedDefinition("To type on a computer keyboard"),
                RenderedDefinition("To configure a keyboard key"),
            ],
            synonyms=[],
        ),
    ],
    source=SourceLink(
        label="https://en.wiktionary.org/wiki/keyboard",
        url="https://en.wiktionary.org/wiki/keyboard",
    ),
)
