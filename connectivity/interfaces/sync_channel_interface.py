"""
Sync Channel Interface

"Publish snapshot under a named path" sink. Used to push the full
connectivity state to whatever mirrors application state (UI, files).
"""

from abc import ABC, abstractmethod
from typing import Any, Dict


class SyncChannelInterface(ABC):
    """Abstract base class for snapshot synchronization channels"""

    @abstractmethod
    def sync(self, path: str, snapshot: Dict[str, Any]) -> None:
        """
        Publish a snapshot.

        Args:
            path: Name the snapshot is published under (e.g. "connectivity")
            snapshot: JSON-serializable state

        Raises:
            OSError: If the channel cannot write (implementation specific)
        """
