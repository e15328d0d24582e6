"""
Recording Event Sink

Synchronous event sink that records what it receives instead of
dispatching. Used by tests in place of AsyncEventBus.
"""

import logging
from typing import List, Optional

from connectivity.interfaces.event_sink_interface import EventSinkInterface
from connectivity.models.connectivity_state import ConnectivityChangedEvent


class RecordingEventSink(EventSinkInterface):
    """
    Mock event sink that keeps every published event in order.

    Set `fail_with` to make publish() raise, to check that sink
    failures never reach the checker's caller.
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self.events: List[ConnectivityChangedEvent] = []
        self.fail_with: Optional[Exception] = None

    def publish(self, event: ConnectivityChangedEvent) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        self.events.append(event)
        self.logger.debug(f"[MOCK] Recorded {event}")

    @property
    def connected_values(self) -> List[bool]:
        """Payloads of every recorded event, in order"""
        return [event.connected for event in self.events]

    def was_called(self) -> bool:
        return len(self.events) > 0

    def get_call_count(self) -> int:
        return len(self.events)

    def reset(self) -> None:
        self.events.clear()
