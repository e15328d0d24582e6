"""
Connectivity Factory

Factory pattern for creating probers and fully wired checkers.
Follows the same pattern as the storage and hardware factories.
"""

import logging
from typing import Literal, Optional

from connectivity.config import ConnectivityConfig
from connectivity.controllers.connectivity_checker import ConnectivityChecker
from connectivity.implementations.async_event_bus import AsyncEventBus
from connectivity.implementations.memory_state_store import MemoryStateStore
from connectivity.implementations.memory_sync_channel import MemorySyncChannel
from connectivity.implementations.mock_prober import MockProber
from connectivity.implementations.socket_prober import SocketProber
from connectivity.interfaces.event_sink_interface import EventSinkInterface
from connectivity.interfaces.prober_interface import ProberInterface
from connectivity.interfaces.state_store_interface import StateStoreInterface
from connectivity.interfaces.sync_channel_interface import SyncChannelInterface

# Type alias for better type hints
ProberMode = Literal["auto", "real", "mock"]


class ConnectivityFactory:
    """
    Factory for creating connectivity components.

    Usage:
        # Real sockets, configured targets
        checker = ConnectivityFactory.create_checker()

        # Offline simulation (useful for testing)
        checker = ConnectivityFactory.create_checker(mode="mock")
    """

    _logger = logging.getLogger(__name__)

    @classmethod
    def create_prober(
        cls,
        mode: ProberMode = "auto",
        config: Optional[ConnectivityConfig] = None,
    ) -> ProberInterface:
        """
        Create a prober.

        Args:
            mode: "auto"/"real" (socket prober), "mock" (simulation)
            config: ConnectivityConfig (None = settings defaults, no file)

        Returns:
            ProberInterface implementation (SocketProber or MockProber)

        Raises:
            RuntimeError: If mode="real" and the prober cannot be built
        """
        if mode == "mock":
            cls._logger.info("Creating Mock Prober (forced)")
            return MockProber()

        if config is None:
            config = ConnectivityConfig(create_if_missing=False)

        try:
            prober = SocketProber(
                targets=config.probe_targets,
                port=config.probe_port,
                timeout_millis=config.connect_timeout_millis,
            )
        except ValueError as e:
            if mode == "real":
                raise RuntimeError(
                    f"Socket prober requested but not available: {e}",
                ) from e
            cls._logger.warning(f"Socket prober not available ({e}), using Mock Prober")
            return MockProber()

        cls._logger.info("Creating Socket Prober")
        return prober

    @classmethod
    def create_checker(
        cls,
        mode: ProberMode = "auto",
        config: Optional[ConnectivityConfig] = None,
        state_store: Optional[StateStoreInterface] = None,
        event_sink: Optional[EventSinkInterface] = None,
        sync_channel: Optional[SyncChannelInterface] = None,
    ) -> ConnectivityChecker:
        """
        Create a fully wired ConnectivityChecker.

        Any collaborator not supplied gets an in-process default:
        MemoryStateStore, AsyncEventBus, MemorySyncChannel (latest
        snapshot only, no history).

        Example:
            bus = AsyncEventBus()
            bus.subscribe(on_change)
            checker = ConnectivityFactory.create_checker(event_sink=bus)
        """
        prober = cls.create_prober(mode=mode, config=config)

        return ConnectivityChecker(
            prober=prober,
            state_store=state_store or MemoryStateStore(),
            event_sink=event_sink or AsyncEventBus(),
            sync_channel=sync_channel or MemorySyncChannel(keep_history=False),
        )


# Convenience functions for quick creation


def create_checker(
    force_mock: bool = False,
    config: Optional[ConnectivityConfig] = None,
) -> ConnectivityChecker:
    """
    Quick checker creation with simple mock override.

    Args:
        force_mock: If True, always use the mock prober (good for testing)
        config: ConnectivityConfig object

    Example:
        checker = create_checker()
        checker.check_connectivity()
    """
    mode = "mock" if force_mock else "auto"
    return ConnectivityFactory.create_checker(mode=mode, config=config)
