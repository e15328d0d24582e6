"""
Connectivity Notifier

Publishes what the checker decided:
- a ConnectivityChangedEvent on each transition (fire-and-forget)
- the full snapshot on every check, transition or not

Sink failures are logged and swallowed. Whatever subscribers do must
never change the checker's state or return value.
"""

import logging

from connectivity.constants import SYNC_PATH_CONNECTIVITY
from connectivity.interfaces.event_sink_interface import EventSinkInterface
from connectivity.interfaces.sync_channel_interface import SyncChannelInterface
from connectivity.models.connectivity_state import (
    ConnectivityChangedEvent,
    ConnectivityState,
)


class ConnectivityNotifier:
    """
    Hands transition events and snapshots to their sinks.

    Usage:
        notifier = ConnectivityNotifier(AsyncEventBus(), MemorySyncChannel())
        notifier.notify(True)
        notifier.publish_snapshot(state)
    """

    def __init__(
        self,
        event_sink: EventSinkInterface,
        sync_channel: SyncChannelInterface,
        sync_path: str = SYNC_PATH_CONNECTIVITY,
    ):
        """
        Args:
            event_sink: Receives ConnectivityChangedEvent on transitions
            sync_channel: Receives the snapshot after every check
            sync_path: Name the snapshot is published under
        """
        self.logger = logging.getLogger(__name__)
        self.event_sink = event_sink
        self.sync_channel = sync_channel
        self.sync_path = sync_path

    def notify(self, connected: bool) -> None:
        """
        Publish a transition event.

        Args:
            connected: New connectivity verdict
        """
        event = ConnectivityChangedEvent(connected=connected)
        try:
            self.event_sink.publish(event)
        except Exception as e:
            self.logger.error(f"Failed to publish {event}: {e}", exc_info=True)

    def publish_snapshot(self, state: ConnectivityState) -> None:
        """
        Publish the current snapshot under sync_path.

        Args:
            state: Snapshot written by the checker
        """
        try:
            self.sync_channel.sync(self.sync_path, state.to_dict())
        except Exception as e:
            self.logger.error(
                f"Failed to sync '{self.sync_path}' snapshot: {e}",
                exc_info=True,
            )
