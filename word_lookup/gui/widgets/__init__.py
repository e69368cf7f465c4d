"""Widgets making up the lookup window."""
