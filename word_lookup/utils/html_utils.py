"""Rich-text formatting of rendered entries for Qt text widgets."""

import html

from word_lookup.models import RenderedEntry, RenderedMeaning


def _format_meaning(meaning: RenderedMeaning) -> str:
    items = []
    for definition in meaning.definitions:
        item = html.escape(definition.text)
        if definition.example:
            item += f'<br><em class="example">"{html.escape(definition.example)}"</em>'
        items.append(f"<li>{item}</li>")

    parts = [
        '<div class="definitions-section">',
        f'<h2 class="part-of-speech">{html.escape(meaning.part_of_speech)}</h2>',
        '<p class="meaning-label">Meaning</p>',
        f'<ul class="definitions-list">{"".join(items)}</ul>',
    ]
    if meaning.has_synonyms:
        parts.append(
            '<p class="synonyms-section">'
            '<span class="synonyms-label">Synonyms</span> '
            f'<span class="synonyms-text">{html.escape(meaning.synonyms_text)}</span>'
            "</p>"
        )
    parts.append("</div>")
    return "".join(parts)


def format_entry_html(entry: RenderedEntry) -> str:
    """Format an entry's body as HTML for a QTextBrowser.

    The title and play button live in separate widgets, so the body starts
    at the phonetic line.

    Args:
        entry: Display-ready entry

    Returns:
        HTML fragment with all text escaped
    """
    parts = []

    # Always present, even when blank
    parts.append(f'<p class="phonetic">{html.escape(entry.phonetic_text)}</p>')

    for meaning in entry.meanings:
        parts.append(_format_meaning(meaning))

    label = html.escape(entry.source.label)
    if entry.source.url:
        link = f'<a class="source-link" href="{html.escape(entry.source.url, quote=True)}">{label}</a>'
    else:
        link = f'<span class="source-link">{label}</span>'
    parts.append(f'<p class="source-section"><span class="source-label">Source</span> {link}</p>')

    return "\n".join(parts)
