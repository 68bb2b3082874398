"""Shared test fixtures."""
import os
from datetime import datetime, timedelta

import pytest

# Qt widget tests must not need a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class FakeClock:
    def __init__(self, start=datetime(2020, 5, 7, 3, 15, 30)):
        self._now = start

    def now(self):
        return self._now

    def advance(self, seconds):
        self._now += timedelta(seconds=seconds)


class FakeSignal:
    def __init__(self):
        self.slots = []

    def connect(self, slot):
        self.slots.append(slot)

    def emit(self):
        for slot in list(self.slots):
            slot()


class FakeTimer:
    """Stand-in for QTimer; tests fire it by hand."""

    def __init__(self):
        self.timeout = FakeSignal()
        self.interval = None
        self.active = False

    def start(self, msec):
        self.interval = msec
        self.active = True

    def stop(self):
        self.active = False

    def fire(self):
        self.timeout.emit()


class TimerFactory:
    def __init__(self):
        self.timers = []

    def __call__(self):
        timer = FakeTimer()
        self.timers.append(timer)
        return timer

    @property
    def timer(self):
        return self.timers[-1]


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def timers():
    return TimerFactory()
