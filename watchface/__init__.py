"""Analog watch face: hand angles from wall-clock time, drawn over a face image."""
from .angles import ClockReading, convert, describe
from .model import WatchModel
from .time_source import SystemClock, TimeSource

__all__ = ['ClockReading', 'SystemClock', 'TimeSource', 'WatchModel', 'convert', 'describe']
