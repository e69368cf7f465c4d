"""View implementations that need no display surface."""

from .null_view import NullView

__all__ = ["NullView"]
