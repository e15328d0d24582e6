"""
Async Event Bus

Fire-and-forget event delivery using a queue and worker thread.

Why a queue?
- publish() returns immediately, the checker never waits on subscribers
- Natural ordering (first published, first delivered)
- A failing subscriber cannot reach the publisher
"""

import logging
import queue
import threading
import time
from typing import Any, Callable, Dict, List, Optional

from connectivity.interfaces.event_sink_interface import EventSinkInterface
from connectivity.models.connectivity_state import ConnectivityChangedEvent

Subscriber = Callable[[ConnectivityChangedEvent], None]


class AsyncEventBus(EventSinkInterface):
    """
    Sequential event dispatcher.

    This class:
    - Maintains a FIFO queue of events
    - Runs a background worker thread
    - Calls every subscriber for each event, in publish order

    Usage:
        bus = AsyncEventBus()
        bus.subscribe(lambda event: print(event.connected))
        bus.publish(ConnectivityChangedEvent(True))  # Returns immediately
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)

        self._subscribers: List[Subscriber] = []
        self._subscribers_lock = threading.Lock()

        # Thread-safe FIFO
        self._event_queue: queue.Queue[ConnectivityChangedEvent] = queue.Queue()

        self._worker_thread: Optional[threading.Thread] = None
        self._worker_running = False
        self._pending = 0
        self._state_lock = threading.Lock()

        self.delivered_count = 0
        self.failed_count = 0

        self._start_worker()

        self.logger.info("Async event bus initialized")

    def _start_worker(self) -> None:
        if self._worker_running:
            self.logger.warning("Worker already running")
            return

        self._worker_running = True
        self._worker_thread = threading.Thread(
            target=self._worker_loop,
            daemon=True,
            name="EventBus-Worker",
        )
        self._worker_thread.start()

    def _worker_loop(self) -> None:
        self.logger.debug("Worker thread started")

        while self._worker_running:
            try:
                # Timeout lets the loop notice stop()
                event = self._event_queue.get(timeout=1.0)
            except queue.Empty:
                continue

            try:
                self._dispatch(event)
            except Exception as e:
                self.logger.error(f"Error in worker loop: {e}", exc_info=True)
            finally:
                with self._state_lock:
                    self._pending -= 1
                self._event_queue.task_done()

        self.logger.debug("Worker thread stopped")

    def _dispatch(self, event: ConnectivityChangedEvent) -> None:
        with self._subscribers_lock:
            subscribers = list(self._subscribers)

        for subscriber in subscribers:
            try:
                subscriber(event)
                self.delivered_count += 1
            except Exception as e:
                # Never let one subscriber starve the others
                self.failed_count += 1
                self.logger.error(
                    f"Subscriber {subscriber!r} failed on {event}: {e}",
                    exc_info=True,
                )

    def subscribe(self, callback: Subscriber) -> None:
        """
        Register a callback for every future event.

        Args:
            callback: Called on the worker thread with each event
        """
        with self._subscribers_lock:
            if callback not in self._subscribers:
                self._subscribers.append(callback)

    def unsubscribe(self, callback: Subscriber) -> None:
        with self._subscribers_lock:
            self._subscribers = [cb for cb in self._subscribers if cb != callback]

    def publish(self, event: ConnectivityChangedEvent) -> None:
        """
        Queue an event for delivery.

        Returns IMMEDIATELY - subscribers run on the worker thread.
        """
        # Shared with stop() so nothing is queued after the drain
        with self._state_lock:
            if not self._worker_running:
                self.logger.warning(f"Event bus stopped, dropping {event}")
                return

            self._pending += 1
            self._event_queue.put(event)

        self.logger.debug(
            f"Queued {event} (queue size: {self.get_queue_size()})",
        )

    def get_queue_size(self) -> int:
        """Number of events waiting (excludes the one being dispatched)"""
        return self._event_queue.qsize()

    def is_busy(self) -> bool:
        """True while any published event has not finished dispatching"""
        with self._state_lock:
            return self._pending > 0

    def wait_until_idle(self, timeout: Optional[float] = None) -> bool:
        """
        Wait until every queued event has been dispatched.

        Args:
            timeout: Maximum time to wait in seconds, or None for no limit

        Returns:
            True if the bus became idle, False if timeout occurred
        """
        deadline = None if timeout is None else time.time() + timeout
        while self.is_busy():
            if deadline is not None and time.time() >= deadline:
                return False
            time.sleep(0.01)
        return True

    def get_status(self) -> Dict[str, Any]:
        with self._subscribers_lock:
            subscriber_count = len(self._subscribers)
        return {
            "subscribers": subscriber_count,
            "queue_size": self.get_queue_size(),
            "delivered": self.delivered_count,
            "failed": self.failed_count,
            "worker_running": self._worker_running,
        }

    def stop(self) -> None:
        """Stop the worker thread. Pending events are dropped."""
        with self._state_lock:
            if not self._worker_running:
                return

            self.logger.info("Stopping event bus")
            self._worker_running = False

            dropped = 0
            try:
                while True:
                    self._event_queue.get_nowait()
                    self._event_queue.task_done()
                    self._pending -= 1
                    dropped += 1
            except queue.Empty:
                pass

        if dropped:
            self.logger.warning(f"Dropped {dropped} undelivered events")

        if self._worker_thread and self._worker_thread.is_alive():
            self._worker_thread.join(timeout=3.0)

        self.logger.info("Event bus stopped")
