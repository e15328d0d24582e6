"""
Socket Prober

Real reachability probe. Opens a plain TCP connection to each target in
turn and stops at the first one that answers. No payload is exchanged:
a completed handshake is enough evidence that the Internet is reachable.

Several independent targets are used so that one blocked or down site
does not produce a false "disconnected" verdict.
"""

import logging
import socket
from typing import Optional, Sequence, Tuple

from connectivity.constants import (
    DEFAULT_CONNECT_TIMEOUT_MILLIS,
    DEFAULT_PROBE_PORT,
    DEFAULT_PROBE_TARGETS,
)
from connectivity.interfaces.prober_interface import ProberInterface
from connectivity.utils.network_utils import close_quietly


class SocketProber(ProberInterface):
    """
    TCP connect prober.

    Targets are tried sequentially, so the worst case latency of probe()
    is len(targets) * timeout (plus name resolution).

    Usage:
        prober = SocketProber(["mail.yahoo.com", "www.baidu.com"])
        if prober.probe():
            print(f"Reached {prober.last_reachable_target}")
    """

    def __init__(
        self,
        targets: Optional[Sequence[str]] = None,
        port: int = DEFAULT_PROBE_PORT,
        timeout_millis: int = DEFAULT_CONNECT_TIMEOUT_MILLIS,
    ):
        """
        Initialize prober.

        Args:
            targets: Ordered hostnames (None = configured defaults)
            port: TCP port used for every target
            timeout_millis: Connect timeout per target

        Raises:
            ValueError: If targets is empty or timeout is not positive
        """
        self.logger = logging.getLogger(__name__)

        if targets is None:
            targets = DEFAULT_PROBE_TARGETS
        if not targets:
            raise ValueError("At least one probe target is required")
        if timeout_millis <= 0:
            raise ValueError(f"Invalid timeout: {timeout_millis}ms")

        self._targets = tuple(targets)
        self.port = port
        self.timeout_millis = timeout_millis
        self._last_reachable_target: Optional[str] = None

        self.logger.debug(
            f"Socket prober initialized ({len(self._targets)} targets, "
            f"port {port}, timeout {timeout_millis}ms)",
        )

    @property
    def targets(self) -> Sequence[str]:
        return self._targets

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_millis / 1000.0

    @property
    def last_reachable_target(self) -> Optional[str]:
        return self._last_reachable_target

    def probe(self) -> bool:
        """
        Check if any target is reachable.

        Returns:
            True as soon as one target accepts, False if all fail
        """
        self._last_reachable_target = None

        for host in self._targets:
            if self.is_reachable(host):
                self._last_reachable_target = host
                return True

        return False

    def _resolve(self, host: str) -> Tuple:
        """
        Resolve host to a single stream address.

        Only the first address is used, so one target costs at most one
        connect timeout however many records the name has.

        Raises:
            socket.gaierror: If the name does not resolve
        """
        addresses = socket.getaddrinfo(host, self.port, type=socket.SOCK_STREAM)
        if not addresses:
            raise socket.gaierror(f"No address found for {host}")
        return addresses[0]

    def is_reachable(self, host: str) -> bool:
        """
        Attempt one TCP connection and close it straight away.

        Refusal, timeout and DNS failure all count as unreachable.
        """
        sock = None
        try:
            self.logger.debug(f"Testing site: {host}")
            family, socktype, proto, _, address = self._resolve(host)
            sock = socket.socket(family, socktype, proto)
            sock.settimeout(self.timeout_seconds)
            sock.connect(address)
            return True
        except (socket.timeout, OSError) as e:
            # Refused, timed out, or DNS lookup failed
            self.logger.debug(f"Could not connect to {host}:{self.port}: {e}")
            return False
        except Exception as e:
            self.logger.debug(
                f"Unexpected error probing {host}: {e}",
                exc_info=True,
            )
            return False
        finally:
            close_quietly(sock)
