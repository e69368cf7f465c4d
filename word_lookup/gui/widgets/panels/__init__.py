"""Mutually exclusive content panels."""

from .message_panel import MessagePanel
from .result_panel import ResultPanel

__all__ = ["MessagePanel", "ResultPanel"]
