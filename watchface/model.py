"""View model holding the current hand angles and description."""
import logging

from . import angles, config
from .time_source import TimeSource

logger = logging.getLogger(__name__)


class WatchModel:
    """Turns ticks from a TimeSource into published ClockReadings.

    The current reading lives in one cell written only by the tick path.
    Listeners registered with ``subscribe`` are called after each write, on
    the same thread, in registration order.
    """

    def __init__(self, style=config.DEFAULT_STYLE, clock=None, timer_factory=None,
                 interval=config.TICK_INTERVAL):
        if style not in angles.STYLES:
            raise ValueError(f"Unknown description style {style!r}")
        self.style = style
        self._reading = angles.EMPTY_READING
        self._listeners = []
        self.source = TimeSource(self._on_tick, interval=interval, clock=clock,
                                 timer_factory=timer_factory)

    @property
    def reading(self):
        return self._reading

    @property
    def hour_angle(self):
        return self._reading.hour_angle

    @property
    def minute_angle(self):
        return self._reading.minute_angle

    @property
    def second_angle(self):
        return self._reading.second_angle

    @property
    def description(self):
        return self._reading.description

    def subscribe(self, callback):
        """Register ``callback(reading)``; returns a function that unregisters it."""
        self._listeners.append(callback)

        def unsubscribe():
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def start(self):
        self.source.start()

    def stop(self):
        self.source.stop()

    def update(self, timestamp):
        """Recompute and publish the reading for ``timestamp``."""
        hour, minute, second = angles.components(timestamp)
        reading = angles.convert(hour, minute, second, self.style).normalized()
        self._reading = reading
        for listener in list(self._listeners):
            listener(reading)
        return reading

    def _on_tick(self, timestamp):
        self.update(timestamp)
