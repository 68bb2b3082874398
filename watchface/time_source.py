"""Once-per-second tick producer for the watch face."""
import logging
from datetime import datetime

from . import config

logger = logging.getLogger(__name__)


class SystemClock:
    """Local wall-clock time. Inject any object with ``now()`` in tests."""

    def now(self):
        return datetime.now()


def qt_timer():
    """Create a repeating QTimer bound to the current thread's event loop."""
    from .qt import QtCore
    timer = QtCore.QTimer()
    timer.setSingleShot(False)
    return timer


class TimeSource:
    """Delivers the current timestamp immediately on start, then every interval.

    States go IDLE -> RUNNING -> STOPPED. ``start()`` is idempotent while
    running and ``stop()`` is terminal.
    """

    IDLE = 'idle'
    RUNNING = 'running'
    STOPPED = 'stopped'

    def __init__(self, callback, interval=config.TICK_INTERVAL, clock=None, timer_factory=None):
        """Initialize a time source.

        Args:
            callback: called with each timestamp, on the timer's thread
            interval: seconds between ticks (default: 1.0)
            clock: object with a ``now()`` method (default: SystemClock)
            timer_factory: callable returning an object with ``timeout.connect``,
                ``start(msec)`` and ``stop()`` (default: QTimer)
        """
        if interval <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval!r}")
        self.callback = callback
        self.interval = interval
        self.clock = clock if clock is not None else SystemClock()
        self.timer_factory = timer_factory if timer_factory is not None else qt_timer
        self.state = self.IDLE
        self.timer = None
        self.tick_count = 0

    @property
    def running(self):
        return self.state == self.RUNNING

    def start(self):
        if self.state == self.RUNNING:
            logger.debug("Time source already running; ignoring start()")
            return
        if self.state == self.STOPPED:
            raise RuntimeError("Time source has been stopped and cannot be restarted")

        self.timer = self.timer_factory()
        self.timer.timeout.connect(self._on_timeout)
        self.state = self.RUNNING
        logger.info("Time source started (interval %.3fs)", self.interval)

        # Timer is already running when the first callback fires
        self.timer.start(int(round(self.interval * 1000)))
        # First reading goes out now rather than one interval later
        self._emit()

    def stop(self):
        if self.state == self.STOPPED:
            return
        if self.timer is not None:
            self.timer.stop()
            self.timer = None
        self.state = self.STOPPED
        logger.info("Time source stopped after %d ticks", self.tick_count)

    def _on_timeout(self):
        # A timeout queued before stop() may still be dispatched
        if self.state != self.RUNNING:
            return
        self._emit()

    def _emit(self):
        timestamp = self.clock.now()
        self.tick_count += 1
        logger.debug("Tick %d at %s", self.tick_count, timestamp)
        self.callback(timestamp)
