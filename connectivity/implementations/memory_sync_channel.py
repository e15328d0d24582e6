"""
Memory Sync Channel

Keeps the latest snapshot for each path in memory and forwards every
publish to registered listeners (e.g. a UI refresh callback).
"""

import copy
import logging
import threading
from collections import deque
from typing import Any, Callable, Deque, Dict, List, Optional, Tuple

from connectivity.interfaces.sync_channel_interface import SyncChannelInterface

SyncListener = Callable[[str, Dict[str, Any]], None]

DEFAULT_HISTORY_LIMIT = 100


class MemorySyncChannel(SyncChannelInterface):
    """
    In-process snapshot channel.

    Usage:
        channel = MemorySyncChannel()
        channel.add_listener(lambda path, snap: print(path, snap))
        checker = ConnectivityChecker(..., sync_channel=channel)
        channel.get_latest("connectivity")
    """

    def __init__(
        self,
        keep_history: bool = True,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
    ):
        """
        Args:
            keep_history: Record recent publishes (useful for tests)
            history_limit: Most recent publishes kept in history

        Raises:
            ValueError: If history_limit is not positive
        """
        if history_limit <= 0:
            raise ValueError(f"Invalid history limit: {history_limit}")

        self.logger = logging.getLogger(__name__)
        self._lock = threading.Lock()
        self._latest: Dict[str, Dict[str, Any]] = {}
        self._publish_counts: Dict[str, int] = {}
        self._listeners: List[SyncListener] = []
        self.keep_history = keep_history
        # Oldest entries fall off once the limit is reached
        self.history: Deque[Tuple[str, Dict[str, Any]]] = deque(maxlen=history_limit)

    def sync(self, path: str, snapshot: Dict[str, Any]) -> None:
        snapshot = copy.deepcopy(snapshot)

        with self._lock:
            self._latest[path] = snapshot
            self._publish_counts[path] = self._publish_counts.get(path, 0) + 1
            if self.keep_history:
                self.history.append((path, snapshot))
            listeners = list(self._listeners)

        for listener in listeners:
            try:
                listener(path, copy.deepcopy(snapshot))
            except Exception as e:
                self.logger.error(
                    f"Sync listener failed for '{path}': {e}",
                    exc_info=True,
                )

    def get_latest(self, path: str) -> Optional[Dict[str, Any]]:
        """Most recent snapshot published under path (None if never)"""
        with self._lock:
            snapshot = self._latest.get(path)
            return copy.deepcopy(snapshot) if snapshot is not None else None

    def publish_count(self, path: str) -> int:
        """Total publishes under path, independent of history"""
        with self._lock:
            return self._publish_counts.get(path, 0)

    def add_listener(self, listener: SyncListener) -> None:
        with self._lock:
            self._listeners.append(listener)

    def remove_listener(self, listener: SyncListener) -> None:
        with self._lock:
            self._listeners = [l for l in self._listeners if l != listener]
