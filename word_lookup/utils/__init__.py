"""Utility functions for Word Lookup."""

from .html_utils import format_entry_html

__all__ = ["format_entry_html"]
