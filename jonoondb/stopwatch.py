"""A restartable stopwatch with accumulated running time."""

from __future__ import annotations

import time

__all__ = ["Stopwatch"]


class Stopwatch:
    """Measures elapsed time across one or more start/stop intervals."""

    def __init__(self, start_now: bool = False) -> None:
        self._start_ns = 0
        self._stop_ns = 0
        self._previous_ns = 0
        self._running = False
        if start_now:
            self._start_ns = time.perf_counter_ns()
            self._running = True

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self) -> None:
        """Start or resume timing; does nothing if already running."""
        if not self._running:
            self._previous_ns += self._stop_ns - self._start_ns
            self._start_ns = time.perf_counter_ns()
            self._running = True

    def stop(self) -> None:
        """Pause timing; does nothing if not running."""
        if self._running:
            self._stop_ns = time.perf_counter_ns()
            self._running = False

    def reset(self) -> None:
        """Stop and clear all accumulated time."""
        self.stop()
        self._start_ns = 0
        self._stop_ns = 0
        self._previous_ns = 0

    def restart(self) -> None:
        """Clear accumulated time and start again."""
        self.reset()
        self.start()

    def _elapsed_ns(self) -> int:
        if self._running:
            return time.perf_counter_ns() - self._start_ns + self._previous_ns
        return self._stop_ns - self._start_ns + self._previous_ns

    def elapsed_seconds(self) -> int:
        return self._elapsed_ns() // 1_000_000_000

    def elapsed_milliseconds(self) -> int:
        return self._elapsed_ns() // 1_000_000

    def elapsed_microseconds(self) -> int:
        return self._elapsed_ns() // 1_000