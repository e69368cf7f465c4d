"""Design variables for consistent UI styling.

This module provides centralized design tokens as frozen dataclasses for:
- Spacing values
- Font sizes
- Border radius values

Usage in Python:
    from word_lookup.gui.resources.styles._variables import SPACING, FONT_SIZES

    layout.setSpacing(SPACING.md)
    font.setPixelSize(FONT_SIZES.title)

Usage in QSS (after substitution):
    font-size: ${font-size-title}px;
    padding: ${spacing-md}px;
    border-radius: ${border-radius-large}px;
"""

from dataclasses import dataclass, fields


@dataclass(frozen=True)
class Spacing:
    """Spacing values based on 4px/8px grid system."""

    xxs: int = 4
    xs: int = 8
    sm: int = 12
    md: int = 16
    lg: int = 24
    xl: int = 32


@dataclass(frozen=True)
class FontSizes:
    """Font size values in pixels."""

    title: int = 40  # Looked-up word
    phonetic: int = 20
    heading: int = 18  # Part of speech
    body: int = 15
    caption: int = 13  # Labels ("Meaning", "Synonyms", "Source")
    small: int = 12


@dataclass(frozen=True)
class BorderRadius:
    """Border radius values in pixels."""

    small: int = 4
    default: int = 8
    large: int = 16
    pill: int = 9999


SPACING = Spacing()
FONT_SIZES = FontSizes()
BORDER_RADIUS = BorderRadius()


def get_variable_dict() -> dict[str, str]:
    """Get all design variables as a dictionary for QSS substitution.

    Variable names follow the pattern: category-name (e.g., spacing-md,
    font-size-title). Underscores in field names become dashes.

    Returns:
        Dictionary mapping variable names to their pixel values (as strings)
    """
    variables = {}
    for prefix, tokens in (
        ("spacing", SPACING),
        ("font-size", FONT_SIZES),
        ("border-radius", BORDER_RADIUS),
    ):
        for field in fields(tokens):
            name = field.name.replace("_", "-")
            variables[f"{prefix}-{name}"] = str(getattr(tokens, field.name))
    return variables
