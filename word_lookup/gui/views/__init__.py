"""Qt implementations of the LookupView protocol."""

from .qt_lookup_view import QtLookupView

__all__ = ["QtLookupView"]
