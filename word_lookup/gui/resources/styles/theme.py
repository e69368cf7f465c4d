"""Theme management system for the Word Lookup GUI.

Two themes are supported:
- Light: white surface with a purple accent
- Dark: near-black surface for night usage

Each can be combined with one of three font families (sans-serif, serif,
monospace). Preferences themselves are stored by PreferenceStore; this
module only turns them into stylesheets.
"""

import re
from pathlib import Path
from typing import Literal

from ._variables import get_variable_dict

ThemeMode = Literal["light", "dark"]


class Theme:
    """Color palettes, font families and stylesheet generation."""

    # ============== THEME COLOR PALETTES ==============

    LIGHT_COLORS = {
        "accent": "#A445ED",  # Purple
        "accent_soft": "#E9D0FA",
        "error": "#FF5252",
        "background": "#FFFFFF",
        "surface": "#F4F4F4",
        "border": "#E9E9E9",
        "text_primary": "#2D2D2D",
        "text_secondary": "#757575",
        "link": "#2D2D2D",
    }

    DARK_COLORS = {
        "accent": "#A445ED",
        "accent_soft": "#3A2452",
        "error": "#FF5252",
        "background": "#050505",
        "surface": "#1F1F1F",
        "border": "#3A3A3A",
        "text_primary": "#FFFFFF",
        "text_secondary": "#757575",
        "link": "#FFFFFF",
    }

    # ============== TYPOGRAPHY ==============

    FONT_FAMILIES = {
        "sans-serif": "'Inter', 'Segoe UI', 'Helvetica Neue', Arial, sans-serif",
        "serif": "'Lora', 'Georgia', 'Times New Roman', serif",
        "monospace": "'Inconsolata', 'JetBrains Mono', 'Consolas', monospace",
    }

    FONT_LABELS = {
        "sans-serif": "Sans Serif",
        "serif": "Serif",
        "monospace": "Monospace",
    }

    @classmethod
    def get_colors(cls, mode: ThemeMode = "light") -> dict[str, str]:
        """Get color palette for a theme mode.

        Args:
            mode: Theme mode; unknown modes fall back to light

        Returns:
            Dictionary of color values
        """
        color_map = {
            "light": cls.LIGHT_COLORS,
            "dark": cls.DARK_COLORS,
        }
        return color_map.get(mode, cls.LIGHT_COLORS)

    @classmethod
    def get_font_family(cls, font: str) -> str:
        """Get the CSS font-family list for a font preference."""
        return cls.FONT_FAMILIES.get(font, cls.FONT_FAMILIES["sans-serif"])

    @classmethod
    def get_stylesheet(cls, mode: ThemeMode = "light", font: str = "sans-serif") -> str:
        """Get the complete QSS stylesheet for a theme mode and font.

        Args:
            mode: Theme mode
            font: Font preference key

        Returns:
            Complete QSS stylesheet as string
        """
        styles_dir = Path(__file__).parent
        variables = cls._theme_variables(mode, font)

        common_qss = cls._load_qss_file(styles_dir / "common.qss", variables)
        palette_qss = cls._load_qss_file(styles_dir / "palette.qss", variables)

        return common_qss + "\n\n" + palette_qss

    @classmethod
    def get_document_css(cls, mode: ThemeMode = "light", font: str = "sans-serif") -> str:
        """Get the CSS used inside the result panel's rich-text document.

        QSS does not reach into QTextDocument content, so definition lists,
        examples and synonyms are styled here instead.
        """
        colors = cls.get_colors(mode)
        variables = get_variable_dict()
        return (
            f"body {{ font-family: {cls.get_font_family(font)}; color: {colors['text_primary']}; }}\n"
            f".phonetic {{ color: {colors['accent']}; font-size: {variables['font-size-phonetic']}px; }}\n"
            f".part-of-speech {{ font-size: {variables['font-size-heading']}px; font-style: italic; }}\n"
            f".meaning-label, .source-label {{ color: {colors['text_secondary']}; }}\n"
            f".example {{ color: {colors['text_secondary']}; }}\n"
            f".synonyms-label {{ color: {colors['text_secondary']}; }}\n"
            f".synonyms-text {{ color: {colors['accent']}; font-weight: bold; }}\n"
            f"a {{ color: {colors['link']}; }}\n"
        )

    @classmethod
    def _theme_variables(cls, mode: ThemeMode, font: str) -> dict[str, str]:
        variables = get_variable_dict()
        for name, value in cls.get_colors(mode).items():
            variables[f"color-{name.replace('_', '-')}"] = value
        variables["font-family"] = cls.get_font_family(font)
        return variables

    @classmethod
    def _load_qss_file(cls, file_path: Path, variables: dict[str, str]) -> str:
        """Load QSS file and perform variable substitution.

        Args:
            file_path: Path to QSS file
            variables: Values for ``${name}`` placeholders

        Returns:
            QSS content with variables substituted
        """
        if not file_path.exists():
            return ""

        with open(file_path, encoding="utf-8") as f:
            qss_content = f.read()

        return cls._substitute_variables(qss_content, variables)

    @staticmethod
    def _substitute_variables(qss_content: str, variables: dict[str, str]) -> str:
        """Substitute ${variable-name} placeholders; unknown names are left as-is."""

        def replace_var(match: re.Match) -> str:
            var_name = match.group(1)
            return str(variables.get(var_name, match.group(0)))

        return re.sub(r"\$\{([a-z0-9-]+)\}", replace_var, qss_content)
