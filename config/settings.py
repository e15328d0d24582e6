"""
Central Configuration File

ALL configuration values live here. This is the single source of truth.

Guidelines:
- Machine-specific overrides go in .env, NOT here
- Import these settings in modules: from config.settings import PROBE_PORT
- connectivity/config.py layers an optional YAML file on top of these defaults
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_list(name: str, default: str) -> list:
    """Read a comma-separated environment variable into a list of strings"""
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


# =============================================================================
# PROBE CONFIGURATION
# =============================================================================

# Ordered probe targets. Spread across regions and providers so a single
# blocked or down site does not read as "disconnected".
DEFAULT_PROBE_TARGETS = (
    "mail.yahoo.com",
    "www.microsoft.com",
    "blogfa.com",
    "www.baidu.com",
)
PROBE_TARGETS = _env_list(
    "CONNECTIVITY_PROBE_TARGETS",
    ",".join(DEFAULT_PROBE_TARGETS),
)
PROBE_PORT = int(os.getenv("CONNECTIVITY_PROBE_PORT", "80"))

# Per-target connect timeout (milliseconds)
CONNECT_TIMEOUT_MILLIS = int(
    os.getenv("CONNECTIVITY_CONNECT_TIMEOUT_MILLIS", "30000"),
)

# =============================================================================
# MONITORING CONFIGURATION
# =============================================================================

# How often the monitor re-checks (seconds)
CHECK_INTERVAL_SECONDS = float(os.getenv("CONNECTIVITY_CHECK_INTERVAL", "120"))

# Where JsonFileSyncChannel writes snapshots
SYNC_DIRECTORY = os.getenv(
    "CONNECTIVITY_SYNC_DIR",
    "/tmp/connectivity_sync",  # noqa: S108
)

# Optional YAML overrides
CONNECTIVITY_CONFIG_PATH = os.getenv(
    "CONNECTIVITY_CONFIG_PATH",
    "config/connectivity.yaml",
)

# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

LOG_DIR = os.getenv("CONNECTIVITY_LOG_DIR", "/var/log/connectivity")
LOG_SERVICE_FILE = "service.log"
LOG_BACKUP_DAYS = 7
