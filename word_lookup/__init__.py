"""
Word Lookup - Desktop Dictionary Lookup Widget

Looks up English words against a public dictionary service and shows
definitions, phonetics, synonyms and audio pronunciation.
"""

__version__ = "1.0.0"
__author__ = "Word Lookup Contributors"
