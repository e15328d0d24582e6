"""
Connectivity Module

Internet reachability checker for long-running networked services.

Architecture mirrors the other packages of this project:
- interfaces/: Abstract base classes (contracts)
- implementations/: Concrete implementations (real and mock)
- controllers/: Checker state machine, notifier, periodic monitor
- models/: Data structures
- utils/: Shared socket helpers
"""

from connectivity.config import ConnectivityConfig, ConnectivityConfigError
from connectivity.constants import SYNC_PATH_CONNECTIVITY, ConnectivityTransition
from connectivity.controllers.connectivity_checker import (
    ConnectivityChecker,
    classify_transition,
)
from connectivity.controllers.connectivity_monitor import ConnectivityMonitor
from connectivity.controllers.connectivity_notifier import ConnectivityNotifier
from connectivity.factory import ConnectivityFactory, create_checker
from connectivity.interfaces.prober_interface import (
    ConnectivityError,
    ConnectivityRequiredButAbsent,
)
from connectivity.models.connectivity_state import (
    ConnectivityChangedEvent,
    ConnectivityState,
)

# Public API - what users import
__all__ = [
    "SYNC_PATH_CONNECTIVITY",
    "ConnectivityChangedEvent",
    # Main controller (primary API)
    "ConnectivityChecker",
    "ConnectivityConfig",
    "ConnectivityConfigError",
    "ConnectivityError",
    # Factory for creating checkers
    "ConnectivityFactory",
    "ConnectivityMonitor",
    "ConnectivityNotifier",
    "ConnectivityRequiredButAbsent",
    "ConnectivityState",
    "ConnectivityTransition",
    "classify_transition",
    "create_checker",
]
