"""
Network Utilities

Small socket helpers shared by the prober and the checker.
"""

import ipaddress
import logging
import socket
from typing import Optional

logger = logging.getLogger(__name__)

# Any routable address works: connecting a UDP socket only consults the
# routing table, no packet is sent.
ROUTE_LOOKUP_ADDRESS = ("8.8.8.8", 80)


class LocalAddressError(OSError):
    """Raised when no usable local network address can be determined"""


def close_quietly(sock: Optional[socket.socket]) -> None:
    """
    Close a socket, logging and swallowing any error.

    Args:
        sock: Socket to close (None is ignored)
    """
    if sock is None:
        return

    try:
        sock.close()
    except Exception as e:
        logger.debug(
            f"Unable to close connectivity test socket: {e}",
            exc_info=True,
        )


def is_loopback(address: str) -> bool:
    """Check if an IP address string is a loopback address"""
    try:
        return ipaddress.ip_address(address).is_loopback
    except ValueError:
        return False


def get_outbound_address() -> str:
    """
    Get the address of the interface used for outbound traffic.

    Returns:
        IP address string

    Raises:
        OSError: If there is no route (e.g. no interface is up)
    """
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.connect(ROUTE_LOOKUP_ADDRESS)
        return sock.getsockname()[0]


def get_local_host() -> str:
    """
    Resolve this machine's local network address.

    Tries the hostname first. Many Linux hosts map their hostname to
    127.0.1.1, so a loopback answer falls back to the outbound interface.

    Returns:
        Non-loopback IP address string

    Raises:
        LocalAddressError: If no usable address was found

    Example:
        try:
            address = get_local_host()
        except LocalAddressError:
            address = None
    """
    try:
        address = socket.gethostbyname(socket.gethostname())
        if not is_loopback(address):
            return address
        logger.debug(f"Hostname resolves to loopback ({address})")
    except OSError as e:
        logger.debug(f"Hostname lookup failed: {e}")

    try:
        address = get_outbound_address()
    except OSError as e:
        raise LocalAddressError(f"Could not get local host: {e}") from e

    if address == "0.0.0.0" or is_loopback(address):
        raise LocalAddressError(f"No usable local address (got {address})")

    return address
