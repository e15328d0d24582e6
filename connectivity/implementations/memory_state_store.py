"""
Memory State Store

In-process holder for the connectivity snapshot. All access goes through
a lock so the monitor thread and on-demand callers can share one store.
"""

import logging
import threading
from dataclasses import replace
from typing import Optional

from connectivity.interfaces.state_store_interface import StateStoreInterface
from connectivity.models.connectivity_state import ConnectivityState


class MemoryStateStore(StateStoreInterface):
    """
    Single-cell, lock-protected connectivity state.

    Returns copies so callers cannot mutate the stored snapshot.
    """

    def __init__(self, initial: Optional[ConnectivityState] = None):
        """
        Args:
            initial: Starting snapshot (None = unknown state)
        """
        self.logger = logging.getLogger(__name__)
        self._lock = threading.Lock()
        self._state = replace(initial) if initial else ConnectivityState()

    def get_connectivity(self) -> ConnectivityState:
        with self._lock:
            return replace(self._state)

    def set_connectivity(self, state: ConnectivityState) -> None:
        with self._lock:
            self._state = replace(state)
        self.logger.debug(f"Stored {state}")
