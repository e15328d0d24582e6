"""
Mock Prober Implementation

Simulated reachability probe for development and testing.
No sockets are opened; each target is "reachable" if it is in the
configured reachable set.

Perfect for:
- Unit tests of the checker state machine
- Running the service offline (--mock)
"""

import logging
from typing import Iterable, List, Optional, Sequence, Set

from connectivity.interfaces.prober_interface import ProberInterface

MOCK_TARGETS = ("a.test", "b.test")


class MockProber(ProberInterface):
    """
    Mock prober that answers from an in-memory reachable set.

    Tracks every target it "contacted" so tests can verify that
    probing stops at the first success.
    """

    def __init__(
        self,
        targets: Sequence[str] = MOCK_TARGETS,
        reachable: Optional[Iterable[str]] = None,
    ):
        """
        Initialize mock prober.

        Args:
            targets: Ordered hostnames to pretend to probe
            reachable: Hosts that accept connections (None = all of them)
        """
        self.logger = logging.getLogger(__name__)

        self._targets = tuple(targets)
        self._reachable: Set[str] = (
            set(self._targets) if reachable is None else set(reachable)
        )
        self._last_reachable_target: Optional[str] = None

        # Track calls for test verification
        self.contacted: List[str] = []
        self.probe_count = 0

        self.logger.info(
            f"[MOCK] Prober initialized (reachable: {sorted(self._reachable)})",
        )

    @property
    def targets(self) -> Sequence[str]:
        return self._targets

    @property
    def last_reachable_target(self) -> Optional[str]:
        return self._last_reachable_target

    def probe(self) -> bool:
        self.probe_count += 1
        self._last_reachable_target = None

        for host in self._targets:
            if self.is_reachable(host):
                self._last_reachable_target = host
                return True

        return False

    def is_reachable(self, host: str) -> bool:
        self.contacted.append(host)
        reachable = host in self._reachable
        self.logger.debug(f"[MOCK] {host}: {'up' if reachable else 'down'}")
        return reachable

    # =========================================================================
    # TEST HELPERS
    # =========================================================================

    def set_reachable(self, hosts: Iterable[str]) -> None:
        """Replace the reachable set"""
        self._reachable = set(hosts)

    def set_online(self, online: bool) -> None:
        """Make every target reachable (True) or none of them (False)"""
        self._reachable = set(self._targets) if online else set()

    def reset(self) -> None:
        """Clear call history"""
        self.contacted.clear()
        self.probe_count = 0
