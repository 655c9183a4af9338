import threading
import time

import pytest

from rendering.scheduler import RepeatingTimer


def test_rejects_non_positive_interval():
    with pytest.raises(ValueError):
        RepeatingTimer(0, lambda: None)


def test_run_stops_after_max_ticks():
    calls = []
    timer = RepeatingTimer(1, lambda: calls.append(time.monotonic()))
    timer.run(max_ticks=3)
    assert len(calls) == 3
    assert timer.ticks == 3


def test_ticks_are_spaced_by_the_interval():
    calls = []
    timer = RepeatingTimer(20, lambda: calls.append(time.monotonic()))
    start = time.monotonic()
    timer.run(max_ticks=3)
    # First tick waits one full interval
    assert calls[0] - start >= 0.015
    assert calls[2] - calls[0] >= 0.03


def test_cancel_from_callback():
    timer = None

    def callback():
        if timer.ticks == 1:
            timer.cancel()

    timer = RepeatingTimer(1, callback)
    timer.run(max_ticks=10)
    assert timer.ticks == 2
    assert timer.cancelled


def test_slow_ticks_are_delayed_not_dropped():
    calls = []

    def slow():
        calls.append(time.monotonic())
        time.sleep(0.01)

    timer = RepeatingTimer(1, slow)
    timer.run(max_ticks=4)
    assert len(calls) == 4
    # Never overlapping: each tick starts after the previous one finished
    for earlier, later in zip(calls, calls[1:]):
        assert later - earlier >= 0.01


def test_background_thread_never_overlaps():
    active = []
    overlaps = []
    lock = threading.Lock()

    def callback():
        with lock:
            active.append(1)
            if len(active) > 1:
                overlaps.append(len(active))
        time.sleep(0.002)
        with lock:
            active.pop()

    timer = RepeatingTimer(1, callback)
    timer.start()
    time.sleep(0.05)
    timer.cancel()
    timer.join(1.0)

    assert timer.ticks > 0
    assert overlaps == []
    ticks = timer.ticks
    time.sleep(0.01)
    assert timer.ticks == ticks


def test_start_twice_raises():
    timer = RepeatingTimer(1000, lambda: None)
    timer.start()
    try:
        with pytest.raises(RuntimeError):
            timer.start()
    finally:
        timer.cancel()
        timer.join(1.0)


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_overrun_reanchors_without_waiting():
    clock = FakeClock()
    seen = []

    def overrunning_tick():
        seen.append(clock.now)
        # Each tick takes two and a half intervals
        clock.now += 0.025

    timer = RepeatingTimer(10, overrunning_tick, clock=clock)
    start = time.monotonic()
    timer.run(max_ticks=4)

    assert seen == pytest.approx([0.0, 0.025, 0.05, 0.075])
    # Only the first tick waited; late ticks run straight away
    assert time.monotonic() - start < 0.5
