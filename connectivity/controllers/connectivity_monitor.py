"""
Connectivity Monitor

Background worker that calls a check on a fixed cadence.

The checker itself never owns a timer. This monitor is the scheduling
harness around it: it only decides WHEN to call, the checker decides
WHAT a check does.
"""

import logging
import threading
from typing import Any, Callable, Optional

from connectivity.constants import DEFAULT_CHECK_INTERVAL_SECONDS


class ConnectivityMonitor:
    """
    Periodic runner for a connectivity check.

    Usage:
        monitor = ConnectivityMonitor(checker.run, interval_seconds=30)
        monitor.start()
        ...
        monitor.stop()
    """

    def __init__(
        self,
        check: Callable[[], Any],
        interval_seconds: float = DEFAULT_CHECK_INTERVAL_SECONDS,
        name: str = "ConnectivityMonitor",
    ):
        """
        Args:
            check: Called once per tick (usually ConnectivityChecker.run)
            interval_seconds: Delay between the end of one check and the
                start of the next

        Raises:
            ValueError: If interval_seconds is not positive
        """
        if interval_seconds <= 0:
            raise ValueError(f"Invalid interval: {interval_seconds}s")

        self.logger = logging.getLogger(__name__)
        self.check = check
        self.interval_seconds = interval_seconds
        self.name = name

        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self.tick_count = 0

    def start(self) -> None:
        """Start the background thread (first check runs immediately)"""
        if self.is_running():
            self.logger.warning("Monitor already running")
            return

        self.logger.info(
            f"Starting connectivity monitor (every {self.interval_seconds}s)",
        )
        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._loop,
            daemon=True,
            name=self.name,
        )
        self._thread.start()

    def stop(self, timeout: float = 5.0) -> None:
        """
        Signal the thread to stop and wait for it.

        A check already in progress runs to completion first.
        """
        self._stop_event.set()
        if self._thread and self._thread.is_alive():
            self.logger.info("Waiting for connectivity monitor to stop...")
            self._thread.join(timeout=timeout)
        self._thread = None

    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def check_now(self) -> Any:
        """Run one check on the calling thread"""
        return self.check()

    def _loop(self) -> None:
        self.logger.info("Connectivity monitor thread started")

        while not self._stop_event.is_set():
            try:
                self.check()
                self.tick_count += 1
            except Exception as e:
                self.logger.error(
                    f"Connectivity monitor error: {e}",
                    exc_info=True,
                )

            # Event.wait returns early when stop() is called
            self._stop_event.wait(self.interval_seconds)

        self.logger.info("Connectivity monitor thread stopped")
