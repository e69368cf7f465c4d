"""PyQt6 presentation layer for Word Lookup."""
