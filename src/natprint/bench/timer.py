"""Accumulating wall-clock timer."""
from __future__ import annotations

import time


class ElapsedTimer:
    """Sums elapsed time over any number of start/stop laps.

    Usable as a context manager; each `with` block is one lap.
    """

    def __init__(self) -> None:
        self.elapsed = 0.0
        self.laps: list[float] = []
        self._started: float | None = None

    @property
    def running(self) -> bool:
        return self._started is not None

    def start(self) -> None:
        if self._started is not None:
            raise RuntimeError("Timer already running")
        self._started = time.perf_counter()

    def stop(self) -> float:
        """End the current lap and return its duration in seconds."""
        if self._started is None:
            raise RuntimeError("Timer not running")
        lap = time.perf_counter() - self._started
        self._started = None
        self.laps.append(lap)
        self.elapsed += lap
        return lap

    def reset(self) -> None:
        self.elapsed = 0.0
        self.laps.clear()
        self._started = None

    def __enter__(self) -> "ElapsedTimer":
        self.start()
        return self

    def __exit__(self, *exc) -> None:
        self.stop()
