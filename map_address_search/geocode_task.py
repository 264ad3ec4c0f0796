"""Geocoding task.

The lookup runs on a QThreadPool worker. run() only collects the result; it is
handed back through a queued signal so the completion callback always runs on
the thread that owns the runner (the UI thread).
"""
from __future__ import annotations
import itertools
import logging
from typing import Callable, Dict, Optional, Protocol
from PyQt5.QtCore import QObject, QRunnable, QThreadPool, pyqtSignal, pyqtSlot
from .geocoding_base import GeocodeResult

logger = logging.getLogger(__name__)

GeocodeFn = Callable[[str], GeocodeResult]
ResultCallback = Callable[[GeocodeResult], None]


class SearchRunner(Protocol):
    def submit(self, query: str, geocode_fn: GeocodeFn, callback: ResultCallback) -> None: ...


class RequestSequencer:
    """Monotonic request tokens; only the latest token's result is applied."""

    def __init__(self):
        self._latest = 0

    def next_token(self) -> int:
        self._latest += 1
        return self._latest

    def is_latest(self, token: int) -> bool:
        return token == self._latest

    @property
    def latest(self) -> int:
        return self._latest


class _TaskSignals(QObject):
    finished = pyqtSignal(int, object)


class GeocodeTask(QRunnable):
    def __init__(self, task_id: int, query: str, geocode_fn: GeocodeFn) -> None:
        super().__init__()
        self.task_id = task_id
        self.query = query
        self.geocode_fn = geocode_fn
        self.signals = _TaskSignals()

    # -------- worker thread --------
    def run(self) -> None:
        try:
            res = self.geocode_fn(self.query)
        except Exception as ex:
            logger.exception("Geocoder raised for '%s'", self.query)
            res = GeocodeResult.failure(str(ex))
        self.signals.finished.emit(self.task_id, res)


class GeocodeTaskRunner(QObject):
    """Submits one GeocodeTask per search and calls back on the owner thread."""

    def __init__(self, pool: Optional[QThreadPool] = None, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.pool = pool if pool is not None else QThreadPool.globalInstance()
        self._ids = itertools.count(1)
        # tasks and callbacks stay referenced until their result is delivered
        self._pending: Dict[int, tuple] = {}

    def submit(self, query: str, geocode_fn: GeocodeFn, callback: ResultCallback) -> None:
        task_id = next(self._ids)
        task = GeocodeTask(task_id, query, geocode_fn)
        task.setAutoDelete(False)
        self._pending[task_id] = (task, callback)
        task.signals.finished.connect(self._on_finished)
        self.pool.start(task)

    @pyqtSlot(int, object)
    def _on_finished(self, task_id: int, result: GeocodeResult) -> None:
        entry = self._pending.pop(task_id, None)
        if entry is None:
            return
        _, callback = entry
        callback(result)
