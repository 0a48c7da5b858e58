"""
Run Loop - drives the sync cycle once or on a fixed interval.

One-shot mode runs a single cycle and lets errors propagate. Daemon mode
runs a cycle immediately and then on a monotonic schedule of
start + k * interval. Cycle failures in daemon mode are logged and the
next tick still fires. Ticks missed while a cycle overran are not queued:
the next cycle starts right away once, and the schedule carries on from
the latest missed tick.
"""

import logging
import threading
import time
from typing import Callable, Optional

from ..exceptions import SyncError
from ..parsers import DurationParser

logger = logging.getLogger(__name__)


class RunLoop:
    """Periodic driver for a sync cycle"""

    def __init__(self,
                 cycle: Callable[[], object],
                 interval: float = 0,
                 stop_event: Optional[threading.Event] = None,
                 clock: Callable[[], float] = time.monotonic):
        """
        Args:
            cycle: Callable performing one resolve/update pass
            interval: Seconds between cycles; 0 or less means one-shot
            stop_event: Set it to stop the daemon after the current cycle
            clock: Monotonic clock
        """
        self._cycle = cycle
        self.interval = interval
        self.stop_event = stop_event or threading.Event()
        self._clock = clock
        self.cycles_run = 0
        self.cycles_failed = 0

    @property
    def is_daemon(self) -> bool:
        return self.interval > 0

    def run(self) -> None:
        """Run in the mode selected by the interval"""
        if self.is_daemon:
            self.run_daemon()
        else:
            self.run_once()

    def run_once(self) -> None:
        """
        Run exactly one cycle.

        Raises:
            SyncError: If the cycle fails
        """
        self.cycles_run += 1
        try:
            self._cycle()
        except SyncError:
            self.cycles_failed += 1
            raise

    def _run_logged(self) -> None:
        try:
            self.run_once()
        except SyncError as e:
            logger.error(f"Error updating DNS: {e}")

    def run_daemon(self) -> None:
        """Run cycles until the stop event is set"""
        logger.info(f"Running in daemon mode with interval: {DurationParser.format(self.interval)}")

        last_tick = self._clock()
        self._run_logged()

        while not self.stop_event.is_set():
            next_tick = last_tick + self.interval
            now = self._clock()

            if now < next_tick:
                if self.stop_event.wait(next_tick - now):
                    break
                last_tick = next_tick
            else:
                missed = int((now - last_tick) // self.interval)
                last_tick += missed * self.interval
                logger.warning(
                    f"Sync cycle overran the interval; skipped {missed - 1} tick(s)"
                    if missed > 1 else
                    "Sync cycle overran the interval; starting next cycle immediately"
                )

            self._run_logged()

        logger.info(f"Daemon stopped after {self.cycles_run} cycle(s), {self.cycles_failed} failed")

    def stop(self) -> None:
        self.stop_event.set()
