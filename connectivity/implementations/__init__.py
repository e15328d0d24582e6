"""
Connectivity Implementations Package

Exposes concrete implementations of the connectivity interfaces.
"""

from connectivity.implementations.async_event_bus import AsyncEventBus
from connectivity.implementations.json_file_sync_channel import JsonFileSyncChannel
from connectivity.implementations.memory_state_store import MemoryStateStore
from connectivity.implementations.memory_sync_channel import MemorySyncChannel
from connectivity.implementations.mock_event_sink import RecordingEventSink
from connectivity.implementations.mock_prober import MockProber
from connectivity.implementations.socket_prober import SocketProber

# Public API (sorted alphabetically)
__all__ = [
    "AsyncEventBus",
    "JsonFileSyncChannel",
    "MemoryStateStore",
    "MemorySyncChannel",
    "MockProber",
    "RecordingEventSink",
    "SocketProber",
]
