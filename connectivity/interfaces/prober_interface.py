"""
Prober Interface

Abstract interface for reachability probes following Dependency Inversion
Principle. ConnectivityChecker depends on this interface, not on sockets.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence


class ProberInterface(ABC):
    """
    Abstract base class for Internet reachability probes.

    Any prober must provide these methods. This allows easy swapping
    between the real socket prober and a scripted mock for testing.
    """

    @property
    @abstractmethod
    def targets(self) -> Sequence[str]:
        """Ordered hostnames this prober tries"""

    @property
    @abstractmethod
    def last_reachable_target(self) -> Optional[str]:
        """Target that answered during the most recent probe() (None if none)"""

    @abstractmethod
    def probe(self) -> bool:
        """
        Try each target in order until one accepts a connection.

        Never raises: unreachable targets are logged and skipped.

        Returns:
            True on the first reachable target, False if none were
        """

    @abstractmethod
    def is_reachable(self, host: str) -> bool:
        """
        Try a single target.

        Args:
            host: Hostname to connect to

        Returns:
            True if the connection was accepted within the timeout
        """


class ConnectivityError(Exception):
    """
    Base exception for connectivity-related errors.

    Makes it easy to catch connectivity-specific errors:
        except ConnectivityError as e:
            logger.error(f"Connectivity failed: {e}")
    """


class ConnectivityRequiredButAbsent(ConnectivityError, ConnectionError):
    """
    Raised by ConnectivityChecker.connect() when no target is reachable.

    This is the only connectivity error that leaves the checker.
    """
