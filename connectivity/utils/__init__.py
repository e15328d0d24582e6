"""
Connectivity Utilities Package
"""

from connectivity.utils.network_utils import (
    LocalAddressError,
    close_quietly,
    get_local_host,
    get_outbound_address,
    is_loopback,
)

__all__ = [
    "LocalAddressError",
    "close_quietly",
    "get_local_host",
    "get_outbound_address",
    "is_loopback",
]
