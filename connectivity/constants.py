"""
Connectivity Constants

Enum types and fixed names used throughout the connectivity module.
Tunable values (targets, port, timeouts) live in config/settings.py
following the "ALL config in config/settings.py" principle.
"""

from enum import Enum

from config.settings import (
    CHECK_INTERVAL_SECONDS,
    CONNECT_TIMEOUT_MILLIS,
    PROBE_PORT,
    PROBE_TARGETS,
)

# =============================================================================
# DEFAULTS (imported from config.settings - change them there)
# =============================================================================

DEFAULT_PROBE_TARGETS = tuple(PROBE_TARGETS)
DEFAULT_PROBE_PORT = PROBE_PORT
DEFAULT_CONNECT_TIMEOUT_MILLIS = CONNECT_TIMEOUT_MILLIS
DEFAULT_CHECK_INTERVAL_SECONDS = CHECK_INTERVAL_SECONDS

# =============================================================================
# SYNC PATHS
# =============================================================================

# Path under which the connectivity snapshot is published on every check
SYNC_PATH_CONNECTIVITY = "connectivity"

# =============================================================================
# ENUMS
# =============================================================================


class ConnectivityTransition(Enum):
    """Outcome of comparing a fresh probe against the previous state"""

    BECAME_CONNECTED = "became_connected"
    BECAME_DISCONNECTED = "became_disconnected"
    UNCHANGED = "unchanged"

