"""Display-ready models derived from a LookupEntry."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RenderedDefinition:
    """A definition line and the example shown right after it."""

    text: str
    example: str | None = None


@dataclass(frozen=True)
class RenderedMeaning:
    """A part-of-speech section, already truncated for display."""

    part_of_speech: str
    definitions: list[RenderedDefinition] = field(default_factory=list)
    synonyms: list[str] = field(default_factory=list)

    @property
    def has_synonyms(self) -> bool:
        """Check if the synonyms line should be shown."""
        return len(self.synonyms) > 0

    @property
    def synonyms_text(self) -> str:
        return ", ".join(self.synonyms)


@dataclass(frozen=True)
class SourceLink:
    """Source attribution; a None url means the link does not navigate."""

    label: str
    url: str | None = None


@dataclass(frozen=True)
class RenderedEntry:
    """Everything the result panel shows for one entry."""

    title: str
    phonetic_text: str
    audio_url: str | None
    meanings: list[RenderedMeaning]
    source: SourceLink

    @property
    def has_audio(self) -> bool:
        """Check if the play control should be visible."""
        return bool(self.audio_url)
