"""
Connectivity Checker

Decides whether the Internet is reachable and reports changes.

State Flow:
    UNKNOWN ──(probe ok)──→ CONNECTED ──(probe fails)──→ DISCONNECTED
       │                        ↑                              │
       └───(probe fails)──→ DISCONNECTED ←──────────(probe ok)─┘

UNKNOWN (before the first check) compares as DISCONNECTED, so the first
successful check always reports "became connected". Repeating the same
verdict (CONNECTED → CONNECTED, DISCONNECTED → DISCONNECTED) emits nothing.

Each check:
1. Read the previous verdict from the state store
2. Probe the targets (and resolve the local address if reachable)
3. Store the new verdict
4. Emit a transition event if the verdict flipped
5. Publish the snapshot, always
"""

import logging
import threading
from datetime import datetime
from typing import Callable, Optional, Tuple

from connectivity.constants import ConnectivityTransition
from connectivity.controllers.connectivity_notifier import ConnectivityNotifier
from connectivity.interfaces.event_sink_interface import EventSinkInterface
from connectivity.interfaces.prober_interface import (
    ConnectivityRequiredButAbsent,
    ProberInterface,
)
from connectivity.interfaces.state_store_interface import StateStoreInterface
from connectivity.interfaces.sync_channel_interface import SyncChannelInterface
from connectivity.models.connectivity_state import ConnectivityState
from connectivity.utils.network_utils import get_local_host


def classify_transition(
    was_connected: bool,
    connected: bool,
) -> ConnectivityTransition:
    """
    Compare the previous verdict with a fresh one.

    Args:
        was_connected: Previous verdict (unknown must be passed as False)
        connected: Fresh probe result

    Returns:
        BECAME_CONNECTED, BECAME_DISCONNECTED or UNCHANGED
    """
    if connected and not was_connected:
        return ConnectivityTransition.BECAME_CONNECTED
    if was_connected and not connected:
        return ConnectivityTransition.BECAME_DISCONNECTED
    return ConnectivityTransition.UNCHANGED


class ConnectivityChecker:
    """
    Connectivity state tracker.

    Wires together:
    - Prober (is anything reachable?)
    - State store (what did we decide last time?)
    - Notifier (tell the rest of the application)

    check_connectivity() may be called from a periodic monitor and from
    on-demand callers at the same time. The read-compare-write sequence
    runs under one lock so a transition is never reported twice or missed.

    Usage:
        checker = ConnectivityChecker(prober, store, bus, channel)
        if checker.check_connectivity():
            print("Online")

        checker.connect()  # Raises ConnectivityRequiredButAbsent if offline
    """

    def __init__(
        self,
        prober: ProberInterface,
        state_store: StateStoreInterface,
        event_sink: EventSinkInterface,
        sync_channel: SyncChannelInterface,
        local_address_resolver: Optional[Callable[[], str]] = None,
    ):
        """
        Initialize checker.

        Args:
            prober: Reachability probe
            state_store: Holder of the previous verdict
            event_sink: Receives transition events
            sync_channel: Receives the snapshot after every check
            local_address_resolver: Returns the local address once the
                Internet is reachable (None = get_local_host)
        """
        self.logger = logging.getLogger(__name__)

        self.prober = prober
        self.state_store = state_store
        self.notifier = ConnectivityNotifier(event_sink, sync_channel)
        self.local_address_resolver = local_address_resolver or get_local_host

        self._lock = threading.Lock()

        # Diagnostics
        self.check_count = 0
        self.last_transition: Optional[ConnectivityTransition] = None

        self.logger.info(
            f"Connectivity checker initialized ({len(prober.targets)} targets)",
        )

    # =========================================================================
    # PUBLIC API
    # =========================================================================

    def check_connectivity(self) -> bool:
        """
        Probe now, update state, and notify on change.

        Never raises. An unreachable Internet is reported as False.

        Returns:
            True if at least one probe target was reachable
        """
        with self._lock:
            was_connected = self._read_previous()

            connected, local_address = self._probe()

            state = ConnectivityState(
                internet=connected,
                local_address=local_address,
                last_checked=datetime.now(),
            )
            self._store(state)

            transition = classify_transition(was_connected, connected)
            if transition == ConnectivityTransition.BECAME_CONNECTED:
                self.logger.info("Became connected")
                self.notifier.notify(True)
            elif transition == ConnectivityTransition.BECAME_DISCONNECTED:
                self.logger.info("Became disconnected")
                self.notifier.notify(False)

            # Published on every check, not only on transitions
            self.notifier.publish_snapshot(state)

            self.check_count += 1
            self.last_transition = transition

            return connected

    def connect(self) -> None:
        """
        Check connectivity and fail loudly if there is none.

        Raises:
            ConnectivityRequiredButAbsent: If no probe target was reachable
        """
        if not self.check_connectivity():
            raise ConnectivityRequiredButAbsent("Could not connect")

    def run(self) -> None:
        """Timer entry point - one check, result discarded"""
        self.check_connectivity()

    def is_connected(self) -> bool:
        """
        Last known verdict, without probing.

        Returns:
            False before the first check
        """
        return self.state_store.get_connectivity().is_connected

    def get_state(self) -> ConnectivityState:
        """Current snapshot from the state store"""
        return self.state_store.get_connectivity()

    # =========================================================================
    # INTERNAL
    # =========================================================================

    def _read_previous(self) -> bool:
        try:
            return self.state_store.get_connectivity().is_connected
        except Exception as e:
            self.logger.error(
                f"Could not read previous connectivity, assuming disconnected: {e}",
                exc_info=True,
            )
            return False

    def _store(self, state: ConnectivityState) -> None:
        try:
            self.state_store.set_connectivity(state)
        except Exception as e:
            self.logger.error(
                f"Could not store connectivity state: {e}",
                exc_info=True,
            )

    def _probe(self) -> Tuple[bool, Optional[str]]:
        """
        Run the prober and resolve the local address.

        Returns:
            (connected, local_address) - address is None when disconnected
            or when it could not be resolved
        """
        try:
            reachable = self.prober.probe()
        except Exception as e:
            self.logger.error(f"Prober failed unexpectedly: {e}", exc_info=True)
            reachable = False

        if not reachable:
            self.logger.info(
                "None of the test sites were reachable -- no internet connection",
            )
            return False, None

        self.logger.debug(
            f"Internet is reachable via {self.prober.last_reachable_target}",
        )

        # A missing local address does not downgrade the verdict
        try:
            return True, self.local_address_resolver()
        except Exception as e:
            self.logger.error(f"Could not get local host: {e}", exc_info=True)
            return True, None
