"""
Fixed-interval repeating timer driving the starfield tick.

Ticks never overlap. When a tick takes longer than the interval the next one
starts right after it: ticks are delayed, never dropped, and the schedule
restarts from the late tick rather than bursting to catch up.
"""

import threading
import time
from typing import Callable, Optional


class RepeatingTimer:
    def __init__(self, interval_ms: float, callback: Callable[[], None],
                 clock: Callable[[], float] = time.monotonic):
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be > 0, got {interval_ms}")
        self.interval = interval_ms / 1000.0
        self.callback = callback
        self.clock = clock
        self.ticks = 0
        self._cancelled = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def start(self):
        """Run the schedule on a background daemon thread."""
        if self._thread is not None:
            raise RuntimeError("RepeatingTimer already started")
        self._thread = threading.Thread(target=self.run, name="starfield-timer", daemon=True)
        self._thread.start()

    def run(self, max_ticks: Optional[int] = None):
        """Run the schedule in the calling thread until cancelled or max_ticks."""
        deadline = self.clock() + self.interval
        while not self._cancelled.is_set():
            if max_ticks is not None and self.ticks >= max_ticks:
                break
            delay = deadline - self.clock()
            if delay > 0:
                if self._cancelled.wait(delay):
                    break
                deadline += self.interval
            else:
                deadline = self.clock() + self.interval
            self.callback()
            self.ticks += 1

    def cancel(self):
        self._cancelled.set()

    def join(self, timeout: Optional[float] = None):
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(timeout)
