"""Conversion from wall-clock time to hand angles.

Angles are in radians, measured clockwise from 12 o'clock. The hour and
minute hands sweep continuously; the second hand steps once per second.
"""
import math
import time as _time
from collections import namedtuple
from datetime import date, datetime

FULL_TURN = 2 * math.pi

STYLES = ('positional', 'abbreviated', 'full')


class ClockReading(namedtuple('ClockReading', 'hour_angle minute_angle second_angle description')):
    """Hand angles plus description derived from a single tick."""

    __slots__ = ()

    def normalized(self):
        """Return a copy with all three angles wrapped into [0, 2*pi)."""
        return self._replace(
            hour_angle=normalize(self.hour_angle),
            minute_angle=normalize(self.minute_angle),
            second_angle=normalize(self.second_angle),
        )


EMPTY_READING = ClockReading(0.0, 0.0, 0.0, '')


def normalize(angle):
    angle = math.fmod(angle, FULL_TURN)
    if angle < 0:
        angle += FULL_TURN
    # fmod of a value just below a full turn can round up to it
    if angle >= FULL_TURN:
        angle = 0.0
    return angle


def hour_angle(hour, minute=0, second=0):
    """One full turn every 12 hours."""
    hour_decimal = hour + minute / 60 + second / 3600
    return hour_decimal / 12 * FULL_TURN


def minute_angle(minute, second=0):
    """One full turn every 60 minutes."""
    minute_decimal = minute + second / 60
    return minute_decimal / 60 * FULL_TURN


def second_angle(second):
    return second / 60 * FULL_TURN


def components(timestamp):
    """Split a timestamp into a local (hour, minute, second) triple.

    Args:
        timestamp: a datetime, time or date object, or POSIX seconds.
            Components the value does not carry (e.g. a bare date) are 0.
    """
    if isinstance(timestamp, (int, float)):
        local = _time.localtime(timestamp)
        return local.tm_hour, local.tm_min, local.tm_sec
    if isinstance(timestamp, date) and not isinstance(timestamp, datetime):
        return 0, 0, 0
    return (
        getattr(timestamp, 'hour', 0) or 0,
        getattr(timestamp, 'minute', 0) or 0,
        getattr(timestamp, 'second', 0) or 0,
    )


def _units(hour, minute, second):
    return [(hour, 'hour'), (minute, 'minute'), (second, 'second')]


def describe(hour, minute, second, style='positional'):
    """Format the components the way a date-components formatter would.

    positional: ``3:15:30``, leading zero hour dropped (``15:30``)
    abbreviated: ``3h 15m 30s``
    full: ``3 hours, 15 minutes, 30 seconds``
    """
    if style == 'positional':
        if hour:
            return f"{hour}:{minute:02d}:{second:02d}"
        return f"{minute}:{second:02d}"
    if style == 'abbreviated':
        parts = [f"{value}{unit[0]}" for value, unit in _units(hour, minute, second) if value]
        return ' '.join(parts) or '0s'
    if style == 'full':
        parts = [
            f"{value} {unit}{'' if value == 1 else 's'}"
            for value, unit in _units(hour, minute, second) if value
        ]
        return ', '.join(parts) or '0 seconds'
    raise ValueError(f"Unknown description style {style!r}; expected one of {', '.join(STYLES)}")


def convert(hour, minute, second, style='positional'):
    """Build the raw, unwrapped reading for one (hour, minute, second) triple."""
    return ClockReading(
        hour_angle(hour, minute, second),
        minute_angle(minute, second),
        second_angle(second),
        describe(hour, minute, second, style),
    )
