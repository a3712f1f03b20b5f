"""Reporting and aggregated statistics for health check results."""

from __future__ import annotations

import dataclasses
import sys
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TextIO

from healthmon.checker import Result

_SLOW_LIMIT = 1.0


@dataclass
class Stats:
    """Running totals of health check outcomes."""

    total_checks: int = 0
    success_count: int = 0
    failure_count: int = 0
    slow_count: int = 0
    average_latency: float = 0.0


class HealthReporter(ABC):
    """Receives health check results and keeps statistics about them."""

    @abstractmethod
    def report(self, result: Result) -> None:
        """Record one result."""

    @abstractmethod
    def get_stats(self) -> Stats:
        """Return a snapshot of the statistics so far."""


def _describe(error: str | None) -> str:
    return "ok" if error is None else error


def _format_duration(seconds: float) -> str:
    text = f"{seconds:.6f}".rstrip("0").rstrip(".")
    return f"{text}s"


class ConsoleReporter(HealthReporter):
    """Prints failures, slow responses and status changes to a stream."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out
        self._stats = Stats()
        self._last_results: dict[str, Result] = {}
        self._lock = threading.Lock()

    def _print(self, message: str) -> None:
        print(message, file=self._out if self._out is not None else sys.stdout)

    def report(self, result: Result) -> None:
        with self._lock:
            self._stats.total_checks += 1

            if result.error is None:
                self._stats.success_count += 1
            else:
                self._stats.failure_count += 1
                self._print(f"❌ {result.url} is DOWN: {result.error}")

            if result.response_time > _SLOW_LIMIT:
                self._stats.slow_count += 1
                self._print(
                    f"⚠️ {result.url} is SLOW: {_format_duration(result.response_time)}"
                )

            previous = self._last_results.get(result.url)
            if previous is not None and (previous.error is None) != (result.error is None):
                self._print(
                    f"🔄 {result.url} status changed: "
                    f"{_describe(previous.error)} -> {_describe(result.error)}"
                )

            self._last_results[result.url] = result

    def get_stats(self) -> Stats:
        with self._lock:
            return dataclasses.replace(self._stats)