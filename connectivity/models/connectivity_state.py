"""
Connectivity Models

Data classes for the connectivity snapshot and the transition event.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass
class ConnectivityState:
    """
    Snapshot of what the checker last observed.

    `internet` is tri-state: None until the first check completes, then
    True/False. Unknown is treated as disconnected when comparing.
    """

    internet: Optional[bool] = None
    local_address: Optional[str] = None  # Set only when connected
    last_checked: Optional[datetime] = None

    @property
    def is_known(self) -> bool:
        """Check if at least one check has completed"""
        return self.internet is not None

    @property
    def is_connected(self) -> bool:
        """Connected verdict with unknown collapsed to False"""
        return self.internet is True

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for snapshot publishing"""
        return {
            "internet": self.internet,
            "local_address": self.local_address,
            "last_checked": (
                self.last_checked.isoformat() if self.last_checked else None
            ),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ConnectivityState":
        """Rebuild a snapshot written by to_dict()"""
        last_checked = data.get("last_checked")
        return cls(
            internet=data.get("internet"),
            local_address=data.get("local_address"),
            last_checked=(
                datetime.fromisoformat(last_checked) if last_checked else None
            ),
        )

    def __str__(self) -> str:
        if self.internet is None:
            status = "unknown"
        else:
            status = "connected" if self.internet else "disconnected"
        return f"ConnectivityState({status}, address={self.local_address})"


@dataclass(frozen=True)
class ConnectivityChangedEvent:
    """Published once each time the connectivity verdict flips"""

    connected: bool
