"""Tests for TimeSource."""
import pytest

from watchface.time_source import SystemClock, TimeSource


@pytest.fixture
def ticks():
    return []


@pytest.fixture
def source(ticks, clock, timers):
    return TimeSource(ticks.append, clock=clock, timer_factory=timers)


def test_idle_until_started(source, ticks, timers):
    assert source.state == TimeSource.IDLE
    assert ticks == []
    assert timers.timers == []


def test_start_emits_immediately(source, ticks, clock):
    source.start()
    assert ticks == [clock.now()]
    assert source.state == TimeSource.RUNNING


def test_timer_runs_at_one_second(source, timers):
    source.start()
    assert timers.timer.interval == 1000
    assert timers.timer.active


def test_custom_interval(ticks, clock, timers):
    TimeSource(ticks.append, interval=0.25, clock=clock, timer_factory=timers).start()
    assert timers.timer.interval == 250


def test_each_timeout_delivers_current_time(source, ticks, clock, timers):
    source.start()
    for _ in range(3):
        clock.advance(1)
        timers.timer.fire()
    assert len(ticks) == 4
    assert ticks[-1] == clock.now()
    assert ticks == sorted(ticks)


def test_second_start_is_ignored(source, ticks, timers):
    source.start()
    source.start()
    assert len(timers.timers) == 1
    assert len(ticks) == 1

    timers.timer.fire()
    assert len(ticks) == 2


def test_stop_halts_ticks(source, ticks, timers):
    source.start()
    timer = timers.timer
    source.stop()
    assert source.state == TimeSource.STOPPED
    assert not timer.active

    # a timeout already queued before stop() is dropped
    timer.fire()
    assert len(ticks) == 1


def test_stop_is_idempotent(source):
    source.start()
    source.stop()
    source.stop()
    assert source.state == TimeSource.STOPPED


def test_stop_before_start(source, timers):
    source.stop()
    assert source.state == TimeSource.STOPPED
    assert timers.timers == []


def test_restart_after_stop_raises(source):
    source.start()
    source.stop()
    with pytest.raises(RuntimeError, match="cannot be restarted"):
        source.start()


def test_stop_from_first_tick_leaves_timer_idle(clock, timers):
    def on_tick(timestamp):
        source.stop()

    source = TimeSource(on_tick, clock=clock, timer_factory=timers)
    source.start()
    assert source.state == TimeSource.STOPPED
    assert not timers.timer.active


@pytest.mark.parametrize("interval", [0, -1])
def test_rejects_non_positive_interval(interval):
    with pytest.raises(ValueError, match="must be positive"):
        TimeSource(lambda ts: None, interval=interval)


def test_system_clock_returns_local_time():
    assert SystemClock().now().tzinfo is None


def test_failing_first_callback_keeps_ticking(clock, timers):
    calls = []

    def on_tick(timestamp):
        calls.append(timestamp)
        if len(calls) == 1:
            raise OSError("display unavailable")

    source = TimeSource(on_tick, clock=clock, timer_factory=timers)
    with pytest.raises(OSError):
        source.start()

    assert source.state == TimeSource.RUNNING
    assert timers.timer.active

    source.start()
    assert len(timers.timers) == 1

    clock.advance(1)
    timers.timer.fire()
    assert calls[-1] == clock.now()
    assert len(calls) == 2
