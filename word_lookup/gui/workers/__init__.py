"""Background worker threads for GUI."""

from .lookup_worker import LookupWorkerThread, QtLookupRunner

__all__ = [
    "LookupWorkerThread",
    "QtLookupRunner",
]
