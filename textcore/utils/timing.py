"""Timing utilities for batch stages."""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass
class Stopwatch:
    started: float = field(default_factory=time.perf_counter)
    stopped: Optional[float] = None

    @property
    def elapsed_ms(self) -> int:
        end = self.stopped if self.stopped is not None else time.perf_counter()
        return int((end - self.started) * 1000)


@contextmanager
def timed() -> Iterator[Stopwatch]:
    watch = Stopwatch()
    try:
        yield watch
    finally:
        watch.stopped = time.perf_counter()
