"""
Connectivity Interfaces Package

Exposes abstract interfaces that define contracts for the checker's
collaborators.
"""

from connectivity.interfaces.event_sink_interface import EventSinkInterface
from connectivity.interfaces.prober_interface import (
    ConnectivityError,
    ConnectivityRequiredButAbsent,
    ProberInterface,
)
from connectivity.interfaces.state_store_interface import StateStoreInterface
from connectivity.interfaces.sync_channel_interface import SyncChannelInterface

# Public API (sorted alphabetically)
__all__ = [
    "ConnectivityError",
    "ConnectivityRequiredButAbsent",
    "EventSinkInterface",
    "ProberInterface",
    "StateStoreInterface",
    "SyncChannelInterface",
]
