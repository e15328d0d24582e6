"""
Event Sink Interface

Opaque notification sink for connectivity transition events. The checker
hands events over and never inspects what subscribers do with them.
"""

from abc import ABC, abstractmethod

from connectivity.models.connectivity_state import ConnectivityChangedEvent


class EventSinkInterface(ABC):
    """Abstract base class for event sinks"""

    @abstractmethod
    def publish(self, event: ConnectivityChangedEvent) -> None:
        """
        Hand an event to the sink.

        Should return quickly. Delivery semantics (ordering, retries,
        threading) belong to the implementation.

        Args:
            event: Transition event to deliver
        """
