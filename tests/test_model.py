"""Tests for the WatchModel view model."""
import math
from datetime import datetime

import pytest

from watchface.model import WatchModel


@pytest.fixture
def model(clock, timers):
    return WatchModel(clock=clock, timer_factory=timers)


def test_initial_reading_is_blank(model):
    assert model.hour_angle == 0
    assert model.minute_angle == 0
    assert model.second_angle == 0
    assert model.description == ""


def test_start_publishes_current_time_at_once(model):
    model.start()
    assert model.hour_angle == pytest.approx(2 * math.pi * (3 + 15 / 60 + 30 / 3600) / 12)
    assert model.minute_angle == pytest.approx(2 * math.pi * 15.5 / 60)
    assert model.second_angle == pytest.approx(math.pi)
    assert model.description == "3:15:30"


def test_tick_updates_reading(model, clock, timers):
    model.start()
    clock.advance(15)
    timers.timer.fire()
    assert model.second_angle == pytest.approx(2 * math.pi * 45 / 60)
    assert model.description == "3:15:45"


def test_listeners_get_each_reading(model, clock, timers):
    received = []
    model.subscribe(received.append)
    model.start()
    clock.advance(1)
    timers.timer.fire()
    assert [r.description for r in received] == ["3:15:30", "3:15:31"]
    assert received[-1] is model.reading


def test_listeners_called_in_order(model):
    calls = []
    model.subscribe(lambda r: calls.append("first"))
    model.subscribe(lambda r: calls.append("second"))
    model.start()
    assert calls == ["first", "second"]


def test_unsubscribe(model, clock, timers):
    received = []
    unsubscribe = model.subscribe(received.append)
    model.start()
    unsubscribe()
    unsubscribe()
    timers.timer.fire()
    assert len(received) == 1


def test_double_start_publishes_once_per_tick(model, timers):
    received = []
    model.subscribe(received.append)
    model.start()
    model.start()
    timers.timer.fire()
    assert len(received) == 2
    assert len(timers.timers) == 1


def test_stop_ends_updates(model, clock, timers):
    model.start()
    model.stop()
    clock.advance(10)
    timers.timer.fire()
    assert model.description == "3:15:30"


def test_published_angles_are_wrapped(model):
    reading = model.update(datetime(2020, 5, 7, 12, 0, 0))
    assert reading.hour_angle == 0
    assert reading.description == "12:00:00"


def test_evening_hours_match_morning(model):
    morning = model.update(datetime(2020, 5, 7, 3, 15, 30))
    evening = model.update(datetime(2020, 5, 7, 15, 15, 30))
    assert evening.hour_angle == pytest.approx(morning.hour_angle)
    assert evening.description == "15:15:30"


def test_style_is_used(clock, timers):
    model = WatchModel(style="full", clock=clock, timer_factory=timers)
    model.start()
    assert model.description == "3 hours, 15 minutes, 30 seconds"


def test_unknown_style_rejected():
    with pytest.raises(ValueError):
        WatchModel(style="roman")
