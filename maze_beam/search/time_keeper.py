"""Wall-clock budget guard polled inside the search loop."""

from __future__ import annotations

import time
from typing import Callable

from maze_beam.errors import ConfigurationError


class TimeKeeper:
    """Reports whether *threshold_ms* have passed since construction.

    *clock* returns seconds and defaults to ``time.perf_counter``; tests
    inject a fake clock to make deadlines deterministic.
    """

    def __init__(
        self,
        threshold_ms: float,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        if threshold_ms < 0:
            raise ConfigurationError("threshold_ms must be >= 0")
        self._clock = clock
        self._started_at = clock()
        self.threshold_ms = threshold_ms

    def elapsed_ms(self) -> float:
        return (self._clock() - self._started_at) * 1000.0

    def is_time_over(self) -> bool:
        return self.elapsed_ms() >= self.threshold_ms
