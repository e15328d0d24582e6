"""
Connectivity Controllers Package

High-level coordination: the checker state machine, the notifier that
publishes its decisions, and the monitor that schedules it.
"""

from connectivity.controllers.connectivity_checker import (
    ConnectivityChecker,
    classify_transition,
)
from connectivity.controllers.connectivity_monitor import ConnectivityMonitor
from connectivity.controllers.connectivity_notifier import ConnectivityNotifier

__all__ = [
    "ConnectivityChecker",
    "ConnectivityMonitor",
    "ConnectivityNotifier",
    "classify_transition",
]
