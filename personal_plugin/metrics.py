from __future__ import annotations

import threading
import time
from contextlib import contextmanager


class Counter:
    """Process-wide count, shared by every plugin instance."""

    def __init__(self) -> None:
        self.value = 0
        self._lock = threading.Lock()

    def inc(self, n: int = 1) -> None:
        with self._lock:
            self.value += n


class Timer:
    """Single-owner stopwatch; each plugin keeps its own."""

    def __init__(self) -> None:
        self.last_ms: float | None = None
        self._start: float | None = None

    def start(self) -> None:
        self._start = time.perf_counter()

    def stop(self) -> float | None:
        if self._start is None:
            return None
        end = time.perf_counter()
        self.last_ms = (end - self._start) * 1000
        self._start = None
        return self.last_ms

    @contextmanager
    def time(self):  # noqa: ANN201 (to keep it lightweight)
        self.start()
        try:
            yield
        finally:
            self.stop()


utterances_total = Counter()
unmatched_total = Counter()
save_failures_total = Counter()
