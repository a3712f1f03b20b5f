"""Concurrent health checking with a single result-reporting thread."""

from __future__ import annotations

import queue
import threading
from collections.abc import Iterable

from healthmon.checker import Checker, Result
from healthmon.reporter import HealthReporter

_POLL = 0.05


class Aggregator:
    """Runs checkers continuously on worker threads and reports results."""

    def __init__(
        self, checkers: Iterable[Checker], reporter: HealthReporter, workers: int
    ) -> None:
        self.checkers = list(checkers)
        self.reporter = reporter
        self.workers = workers
        self._results: queue.Queue[Result] = queue.Queue(maxsize=1)
        self._done = threading.Event()

    def _halted(self, cancel: threading.Event) -> bool:
        return cancel.is_set() or self._done.is_set()

    def _work(self, cancel: threading.Event) -> None:
        while not self._halted(cancel):
            if not self.checkers:
                self._done.wait(_POLL)
            for checker in self.checkers:
                if self._halted(cancel):
                    return
                result = checker.ping()
                while True:
                    if self._halted(cancel):
                        return
                    try:
                        self._results.put(result, timeout=_POLL)
                        break
                    except queue.Full:
                        pass

    def _process(self, cancel: threading.Event) -> None:
        while not self._halted(cancel):
            try:
                result = self._results.get(timeout=_POLL)
            except queue.Empty:
                continue
            self.reporter.report(result)

    def start(self, cancel: threading.Event | None = None) -> None:
        """Start worker and reporting threads and return at once.

        Setting ``cancel`` or calling :meth:`stop` ends them.
        """
        cancel = cancel if cancel is not None else threading.Event()
        for target in [self._work] * self.workers + [self._process]:
            threading.Thread(target=target, args=(cancel,), daemon=True).start()

    def stop(self) -> None:
        """Signal all threads to finish."""
        self._done.set()