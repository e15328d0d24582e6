"""
JSON File Sync Channel

Publishes each snapshot as <directory>/<path>.json so other processes
(scripts, metrics exporters, a watchdog) can read the current state.

Writes go to a temp file first and are renamed into place, so readers
never see a half-written file.
"""

import json
import logging
import os
import re
import threading
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from config.settings import SYNC_DIRECTORY
from connectivity.interfaces.sync_channel_interface import SyncChannelInterface

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_.-]")


class JsonFileSyncChannel(SyncChannelInterface):
    """
    File-backed snapshot channel.

    Usage:
        channel = JsonFileSyncChannel(Path("/tmp/connectivity_sync"))
        channel.sync("connectivity", {"internet": True})
        # -> /tmp/connectivity_sync/connectivity.json
    """

    def __init__(self, directory: Optional[Path] = None):
        """
        Args:
            directory: Output directory (None = SYNC_DIRECTORY setting)
        """
        self.logger = logging.getLogger(__name__)
        self.directory = Path(directory or SYNC_DIRECTORY)
        self._lock = threading.Lock()

    def path_for(self, path: str) -> Path:
        """File a snapshot path is written to"""
        name = _UNSAFE_CHARS.sub("_", path.strip("/")) or "root"
        return self.directory / f"{name}.json"

    def sync(self, path: str, snapshot: Dict[str, Any]) -> None:
        """
        Write the snapshot.

        Raises:
            OSError: If the directory or file cannot be written
        """
        target = self.path_for(path)
        payload = {
            "path": path,
            "published_at": datetime.now().isoformat(),
            "data": snapshot,
        }

        with self._lock:
            self.directory.mkdir(parents=True, exist_ok=True)
            temp = target.with_suffix(".json.tmp")
            temp.write_text(json.dumps(payload, indent=2), encoding="utf-8")
            os.replace(temp, target)

        self.logger.debug(f"Synced '{path}' to {target}")

    def read(self, path: str) -> Optional[Dict[str, Any]]:
        """
        Read back the last snapshot written under path.

        Returns:
            Snapshot data, or None if missing or unreadable
        """
        target = self.path_for(path)
        if not target.exists():
            return None

        try:
            return json.loads(target.read_text(encoding="utf-8"))["data"]
        except (OSError, ValueError, KeyError) as e:
            self.logger.warning(f"Failed to read snapshot {target}: {e}")
            return None
