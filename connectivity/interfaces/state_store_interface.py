"""
State Store Interface

The key-value holder the checker reads its previous verdict from and writes
the fresh one into. The checker treats it as a single mutable cell.
"""

from abc import ABC, abstractmethod

from connectivity.models.connectivity_state import ConnectivityState


class StateStoreInterface(ABC):
    """
    Abstract base class for connectivity state storage.

    Implementations must be thread-safe; the checker does not lock
    around individual get/set calls.
    """

    @abstractmethod
    def get_connectivity(self) -> ConnectivityState:
        """
        Get the current connectivity snapshot.

        Returns:
            ConnectivityState (internet is None before the first check)
        """

    @abstractmethod
    def set_connectivity(self, state: ConnectivityState) -> None:
        """
        Replace the current connectivity snapshot.

        Args:
            state: New snapshot
        """
