#!/usr/bin/env python3
"""
Connectivity Service

Main service coordinator for the connectivity checker.
Wires the checker to its collaborators and runs it on a timer.

Architecture:
- ConnectivityChecker decides connected/disconnected (no timer of its own)
- ConnectivityMonitor calls it every check_interval_seconds
- AsyncEventBus delivers transition events to subscribers
- JsonFileSyncChannel mirrors the latest snapshot to disk

Usage:
    python connectivity_service.py            # Run until SIGINT/SIGTERM
    python connectivity_service.py --once     # One check, exit 0 if online
    python connectivity_service.py --mock     # No sockets (simulation)
"""

import argparse
import logging
import logging.handlers
import signal
import sys
import time
from pathlib import Path
from typing import List, Optional

from config.settings import LOG_BACKUP_DAYS, LOG_DIR, LOG_SERVICE_FILE
from connectivity import (
    ConnectivityChangedEvent,
    ConnectivityConfig,
    ConnectivityFactory,
    ConnectivityMonitor,
)
from connectivity.implementations.async_event_bus import AsyncEventBus
from connectivity.implementations.json_file_sync_channel import JsonFileSyncChannel
from connectivity.implementations.memory_state_store import MemoryStateStore


class ConnectivityService:
    """
    Main service coordinator.

    Wires together:
    - Prober, state store, event bus, sync channel (via the factory)
    - Periodic monitor
    - Signal handling and graceful shutdown

    Usage:
        service = ConnectivityService(ConnectivityConfig())
        service.run()  # Blocks until shutdown
    """

    def __init__(
        self,
        config: ConnectivityConfig,
        mock: bool = False,
        interval_seconds: Optional[float] = None,
    ):
        """Initialize all components and wire callbacks."""
        self.logger = logging.getLogger(__name__)
        self.logger.info("Initializing Connectivity Service...")

        self.config = config
        self.running = False

        self.event_bus = AsyncEventBus()
        self.state_store = MemoryStateStore()
        self.sync_channel = JsonFileSyncChannel(config.sync_directory)

        self.checker = ConnectivityFactory.create_checker(
            mode="mock" if mock else "auto",
            config=config,
            state_store=self.state_store,
            event_sink=self.event_bus,
            sync_channel=self.sync_channel,
        )

        if interval_seconds is None:
            interval_seconds = config.check_interval_seconds

        try:
            self.monitor = ConnectivityMonitor(
                self.checker.run,
                interval_seconds=interval_seconds,
            )
        except ValueError:
            self.event_bus.stop()
            raise

        self.event_bus.subscribe(self._handle_connectivity_changed)

        self.logger.info("Connectivity Service initialized successfully")

    def _handle_connectivity_changed(self, event: ConnectivityChangedEvent) -> None:
        """Log transitions (runs on the event bus worker thread)."""
        if event.connected:
            state = self.state_store.get_connectivity()
            self.logger.info(
                f"Internet connection available (local address: "
                f"{state.local_address or 'unknown'})",
            )
        else:
            self.logger.warning("Internet connection lost")

    def check_once(self) -> bool:
        """Run a single check and wait for its event to be delivered."""
        connected = self.checker.check_connectivity()
        self.event_bus.wait_until_idle(timeout=5.0)
        return connected

    def run(self) -> None:
        """
        Main service loop.

        Runs until shutdown signal received.
        """
        signal.signal(signal.SIGTERM, self._signal_handler)
        signal.signal(signal.SIGINT, self._signal_handler)

        self.running = True
        self.logger.info("Starting Connectivity Service main loop...")

        self.monitor.start()

        try:
            while self.running:
                time.sleep(0.5)
        except KeyboardInterrupt:
            self.logger.info("Keyboard interrupt received")
        finally:
            self.shutdown()

    def _signal_handler(self, signum, _frame):
        """
        Handle shutdown signals (SIGTERM, SIGINT).

        Args:
            signum: Signal number
            _frame: Current stack frame (unused, required by signal API)
        """
        signal_name = signal.Signals(signum).name
        self.logger.info(f"Received signal {signal_name}, shutting down...")
        self.running = False

    def shutdown(self) -> None:
        """Stop the monitor, then the event bus."""
        self.logger.info("Shutting down Connectivity Service...")
        self.running = False
        self.monitor.stop()
        self.event_bus.stop()
        self.logger.info("Connectivity Service shutdown complete")


def setup_logging(level: int = logging.INFO) -> None:
    """
    Setup logging with rotation.

    Logs to both console and file with rotation:
    - Daily rotation
    - Keep LOG_BACKUP_DAYS days of logs
    """
    logger = logging.getLogger()
    logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(message)s | %(name)s"))
    logger.addHandler(console_handler)

    file_format = logging.Formatter(
        "%(asctime)s - %(levelname)s - %(message)s | %(name)s",
    )

    log_file = Path(LOG_DIR) / LOG_SERVICE_FILE
    try:
        file_handler = logging.handlers.TimedRotatingFileHandler(
            str(log_file),
            when="midnight",
            interval=1,
            backupCount=LOG_BACKUP_DAYS,
            encoding="utf-8",
        )
    except (PermissionError, FileNotFoundError):
        # Fallback to local logs directory if LOG_DIR is not writable
        logs_dir = Path("logs")
        logs_dir.mkdir(exist_ok=True)

        fallback_log = logs_dir / "connectivity-service.log"
        logger.warning(f"Cannot write to {log_file}, using fallback: {fallback_log}")

        file_handler = logging.handlers.TimedRotatingFileHandler(
            str(fallback_log),
            when="midnight",
            interval=1,
            backupCount=LOG_BACKUP_DAYS,
            encoding="utf-8",
        )

    file_handler.setLevel(level)
    file_handler.setFormatter(file_format)
    logger.addHandler(file_handler)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Monitor Internet connectivity and report changes",
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Run a single check and exit (0 = connected, 1 = not connected)",
    )
    parser.add_argument(
        "--mock",
        action="store_true",
        help="Use the simulated prober instead of real sockets",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to YAML config file (default: config/connectivity.yaml)",
    )
    parser.add_argument(
        "--interval",
        type=float,
        default=None,
        help="Seconds between checks (overrides config)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the service.

    Sets up logging and runs the service.
    """
    args = parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    logger = logging.getLogger(__name__)
    logger.info("=" * 60)
    logger.info("Connectivity Service Starting")
    logger.info("=" * 60)

    try:
        config = ConnectivityConfig(args.config)
        service = ConnectivityService(
            config,
            mock=args.mock,
            interval_seconds=args.interval,
        )

        if args.once:
            connected = service.check_once()
            service.shutdown()
            print("Internet available" if connected else "No internet connection")
            return 0 if connected else 1

        service.run()
        return 0
    except Exception as e:
        logger.critical(f"Fatal error in main: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
