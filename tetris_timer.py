"""Cancelable repeating timers driven by elapsed milliseconds"""
from dataclasses import dataclass
from typing import Callable, Dict


@dataclass
class _Interval:
    interval_ms: float
    callback: Callable[[], None]
    elapsed: float = 0.0


class IntervalScheduler:
    """setInterval/clearInterval over a clock the host advances.

    The pygame loop feeds it the frame delta; tests call advance() directly.
    """

    def __init__(self):
        self._timers: Dict[int, _Interval] = {}
        self._next_handle = 1

    @property
    def active_count(self) -> int:
        return len(self._timers)

    def set_interval(self, interval_ms: float, callback: Callable[[], None]) -> int:
        if interval_ms <= 0:
            raise ValueError(f"interval must be positive, got {interval_ms}")
        handle = self._next_handle
        self._next_handle += 1
        self._timers[handle] = _Interval(interval_ms, callback)
        return handle

    def clear_interval(self, handle) -> None:
        self._timers.pop(handle, None)

    def is_active(self, handle) -> bool:
        return handle in self._timers

    def advance(self, dt_ms: float) -> None:
        for handle, timer in list(self._timers.items()):
            if self._timers.get(handle) is not timer:
                continue
            timer.elapsed += dt_ms
            while timer.elapsed >= timer.interval_ms:
                timer.elapsed -= timer.interval_ms
                timer.callback()
                # callback may have cleared or replaced this timer
                if self._timers.get(handle) is not timer:
                    break
