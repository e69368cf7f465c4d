"""Worker thread and runner for dictionary lookups."""

import logging
import threading

from PyQt6.QtCore import QObject, QThread, pyqtSignal, pyqtSlot

from word_lookup.exceptions import NotFoundError
from word_lookup.interfaces import DictionaryProvider
from word_lookup.orchestration import LookupController

logger = logging.getLogger(__name__)


class LookupWorkerThread(QThread):
    """Worker thread that performs one lookup off the GUI thread.

    Every signal carries the generation token the lookup was started with,
    so the receiver can tell stale results apart. Once cancelled, the worker
    finishes its request but emits nothing.
    """

    succeeded = pyqtSignal(int, object)  # generation, LookupEntry
    failed = pyqtSignal(int, str)  # generation, message

    def __init__(self, provider: DictionaryProvider, generation: int, query: str, parent=None):
        """Initialize the lookup worker thread.

        Args:
            provider: Dictionary to query
            generation: Token of the request this worker serves
            query: Word to look up
            parent: Optional parent QObject
        """
        super().__init__(parent)
        self.provider = provider
        self.generation = generation
        self.query = query
        self._cancel_event = threading.Event()

    def cancel(self) -> None:
        """Suppress this worker's result; the request itself still completes."""
        self._cancel_event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._cancel_event.is_set()

    def run(self) -> None:
        """Execute the lookup in the background thread."""
        try:
            entry = self.provider.lookup(self.query)
        except NotFoundError as e:
            if not self.is_cancelled:
                self.failed.emit(self.generation, str(e))
            return
        except Exception as e:
            logger.exception(f"Unexpected error looking up '{self.query}'")
            if not self.is_cancelled:
                self.failed.emit(self.generation, f"Unexpected error: {e}")
            return

        if not self.is_cancelled:
            self.succeeded.emit(self.generation, entry)


class QtLookupRunner(QObject):
    """Starts LookupWorkerThreads and feeds their results to the controller.

    Implements LookupRunner protocol. Lives on the GUI thread, so worker
    signals arrive through queued connections and the controller is only
    ever touched from the GUI thread.
    """

    def __init__(self, provider: DictionaryProvider, controller: LookupController, parent=None):
        super().__init__(parent)
        self.provider = provider
        self.controller = controller
        self._workers: list[LookupWorkerThread] = []

    @property
    def active_workers(self) -> list[LookupWorkerThread]:
        return list(self._workers)

    def start(self, generation: int, query: str) -> None:
        # Older lookups can no longer be current
        for worker in self._workers:
            worker.cancel()

        worker = LookupWorkerThread(self.provider, generation, query, self)
        worker.succeeded.connect(self._on_succeeded)
        worker.failed.connect(self._on_failed)
        worker.finished.connect(lambda w=worker: self._on_finished(w))
        self._workers.append(worker)
        worker.start()

    def shutdown(self, timeout_ms: int = 2000) -> None:
        """Cancel all workers and wait for them to finish.

        Args:
            timeout_ms: Maximum wait per worker in milliseconds
        """
        for worker in self._workers:
            worker.cancel()
        for worker in list(self._workers):
            if worker.isRunning():
                worker.wait(timeout_ms)

    @pyqtSlot(int, object)
    def _on_succeeded(self, generation: int, entry) -> None:
        self.controller.on_lookup_succeeded(generation, entry)

    @pyqtSlot(int, str)
    def _on_failed(self, generation: int, message: str) -> None:
        self.controller.on_lookup_failed(generation, message)

    def _on_finished(self, worker: LookupWorkerThread) -> None:
        if worker in self._workers:
            self._workers.remove(worker)
        worker.deleteLater()
