"""
Connectivity Models Package
"""

from connectivity.models.connectivity_state import (
    ConnectivityChangedEvent,
    ConnectivityState,
)

__all__ = [
    "ConnectivityChangedEvent",
    "ConnectivityState",
]
