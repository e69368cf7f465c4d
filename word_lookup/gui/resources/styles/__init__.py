"""GUI styling and theme management."""

from ._variables import BORDER_RADIUS, FONT_SIZES, SPACING
from .theme import Theme

__all__ = ["Theme", "SPACING", "FONT_SIZES", "BORDER_RADIUS"]
