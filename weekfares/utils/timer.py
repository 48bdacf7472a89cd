from time import perf_counter
from typing import Optional


class Timer:
    def __init__(self, start: bool = False) -> None:
        self._start: Optional[float] = None
        self._elapsed = 0.0
        if start:
            self.start()

    def start(self) -> None:
        self._start = perf_counter()

    def stop(self) -> None:
        if self._start is None:
            raise RuntimeError("Timer stopped before being started")
        self._elapsed = perf_counter() - self._start
        self._start = None

    @property
    def seconds_elapsed(self) -> float:
        return round(self._elapsed, 3)
