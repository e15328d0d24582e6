"""
Connectivity Configuration Handler

Manages the YAML configuration file for the connectivity checker.
Provides defaults (from config/settings.py) and validation.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from config.settings import CONNECTIVITY_CONFIG_PATH, SYNC_DIRECTORY
from connectivity.constants import (
    DEFAULT_CHECK_INTERVAL_SECONDS,
    DEFAULT_CONNECT_TIMEOUT_MILLIS,
    DEFAULT_PROBE_PORT,
    DEFAULT_PROBE_TARGETS,
)


class ConnectivityConfigError(ValueError):
    """Raised when a configuration value is invalid"""


class ConnectivityConfig:
    """
    Connectivity configuration with YAML file support.

    Reads from config/connectivity.yaml if it exists,
    otherwise uses defaults from config/settings.py.

    Usage:
        config = ConnectivityConfig()
        targets = config.probe_targets
        timeout = config.connect_timeout_millis
    """

    DEFAULT_CONFIG_PATH = Path(CONNECTIVITY_CONFIG_PATH)

    def __init__(
        self,
        config_path: Optional[Path] = None,
        create_if_missing: bool = True,
    ):
        """
        Initialize configuration.

        Args:
            config_path: Path to YAML config file (None = use default)
            create_if_missing: Write a default file when none exists

        Raises:
            ConnectivityConfigError: If the merged configuration is invalid
        """
        self.logger = logging.getLogger(__name__)
        self.config_path = Path(config_path or self.DEFAULT_CONFIG_PATH)
        self.create_if_missing = create_if_missing

        # Load configuration (defaults + file overrides)
        self._config = self._load_config()

    def _get_defaults(self) -> Dict[str, Any]:
        """Get default configuration values from settings"""
        return {
            # Probing
            "probe_targets": list(DEFAULT_PROBE_TARGETS),
            "probe_port": DEFAULT_PROBE_PORT,
            "connect_timeout_millis": DEFAULT_CONNECT_TIMEOUT_MILLIS,

            # Monitoring
            "check_interval_seconds": DEFAULT_CHECK_INTERVAL_SECONDS,

            # Snapshot publishing
            "sync_directory": SYNC_DIRECTORY,
        }

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file or use defaults"""
        config = self._get_defaults()

        if self.config_path.exists():
            try:
                with open(self.config_path, "r") as f:
                    file_config = yaml.safe_load(f) or {}

                if not isinstance(file_config, dict):
                    raise ConnectivityConfigError(
                        f"Expected a mapping, got {type(file_config).__name__}",
                    )

                # File overrides defaults
                config.update(file_config)

                self.logger.info(f"Loaded config from {self.config_path}")

            except (OSError, yaml.YAMLError, ConnectivityConfigError) as e:
                self.logger.warning(
                    f"Failed to load config from {self.config_path}: {e}. "
                    f"Using defaults.",
                )
        elif self.create_if_missing:
            self.logger.info(
                f"Config file not found at {self.config_path}. "
                f"Using defaults. Creating default config file...",
            )
            self._save_config(config)
        else:
            self.logger.debug(
                f"Config file not found at {self.config_path}, using defaults",
            )

        self._validate_config(config)

        return config

    def _validate_config(self, config: Dict[str, Any]) -> None:
        """Validate configuration values"""
        targets = config["probe_targets"]
        if isinstance(targets, str):
            # Allow "a.com, b.com" in YAML
            targets = [t.strip() for t in targets.split(",") if t.strip()]
            config["probe_targets"] = targets

        if not isinstance(targets, list) or not targets:
            raise ConnectivityConfigError(
                "probe_targets must be a non-empty list of hostnames",
            )
        if not all(isinstance(t, str) and t.strip() for t in targets):
            raise ConnectivityConfigError(
                f"probe_targets must contain hostnames only: {targets}",
            )

        port = config["probe_port"]
        if isinstance(port, bool) or not isinstance(port, int) or not (
            1 <= port <= 65535
        ):
            raise ConnectivityConfigError(f"Invalid probe_port: {port}")

        timeout = config["connect_timeout_millis"]
        if isinstance(timeout, bool) or not isinstance(timeout, int) or timeout <= 0:
            raise ConnectivityConfigError(
                f"connect_timeout_millis must be a positive integer: {timeout}",
            )

        interval = config["check_interval_seconds"]
        if isinstance(interval, bool) or not isinstance(interval, (int, float)) or (
            interval <= 0
        ):
            raise ConnectivityConfigError(
                f"check_interval_seconds must be positive: {interval}",
            )

        # Warn when one check can take longer than the interval
        worst_case = len(targets) * timeout / 1000.0
        if worst_case > interval:
            self.logger.warning(
                f"A full probe can take {worst_case:.0f}s, longer than "
                f"check_interval_seconds ({interval}s)",
            )

    def _save_config(self, config: Optional[Dict[str, Any]] = None) -> None:
        """Save configuration to YAML file"""
        if config is None:
            config = self._config

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)

            with open(self.config_path, "w") as f:
                yaml.dump(
                    config,
                    f,
                    default_flow_style=False,
                    sort_keys=False,
                    indent=2,
                )

            self.logger.info(f"Config saved to {self.config_path}")

        except OSError as e:
            self.logger.error(f"Failed to save config: {e}")

    # =========================================================================
    # PROPERTY ACCESSORS
    # =========================================================================

    @property
    def probe_targets(self) -> List[str]:
        """Ordered hostnames to probe"""
        return list(self._config["probe_targets"])

    @property
    def probe_port(self) -> int:
        return self._config["probe_port"]

    @property
    def connect_timeout_millis(self) -> int:
        """Connect timeout per target"""
        return self._config["connect_timeout_millis"]

    @property
    def check_interval_seconds(self) -> float:
        """How often the monitor re-checks"""
        return self._config["check_interval_seconds"]

    @property
    def sync_directory(self) -> Path:
        """Where JSON snapshots are written"""
        return Path(self._config["sync_directory"])

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    def get(self, key: str, default: Any = None) -> Any:
        return self._config.get(key, default)

    def set(self, key: str, value: Any, save: bool = True) -> None:
        """
        Set configuration value.

        Args:
            key: Configuration key
            value: New value
            save: If True, save to file immediately

        Raises:
            ConnectivityConfigError: If the new value is invalid
        """
        candidate = self._config.copy()
        candidate[key] = value
        self._validate_config(candidate)
        self._config = candidate

        if save:
            self._save_config()

    def reload(self) -> None:
        """Reload configuration from file"""
        self._config = self._load_config()
        self.logger.info("Configuration reloaded")

    def to_dict(self) -> Dict[str, Any]:
        return self._config.copy()

    def __repr__(self) -> str:
        return f"ConnectivityConfig(path={self.config_path})"
