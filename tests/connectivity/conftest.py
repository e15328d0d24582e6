"""
Connectivity Test Configuration and Fixtures

This file contains pytest fixtures shared across connectivity tests.
No test here opens a real network connection: probers are mocked or
socket name resolution and socket creation are patched.

To use pytest:
    pip install -e .[test]
    pytest tests/connectivity/
"""

import socket
from types import SimpleNamespace
from unittest.mock import patch

import pytest

from connectivity.controllers.connectivity_checker import ConnectivityChecker
from connectivity.implementations.async_event_bus import AsyncEventBus
from connectivity.implementations.memory_state_store import MemoryStateStore
from connectivity.implementations.memory_sync_channel import MemorySyncChannel
from connectivity.implementations.mock_event_sink import RecordingEventSink
from connectivity.implementations.mock_prober import MockProber

LOCAL_ADDRESS = "192.168.1.20"


# =============================================================================
# COLLABORATOR FIXTURES
# =============================================================================

@pytest.fixture
def mock_prober():
    """
    Provide a MockProber over ["a.test", "b.test"], both reachable.

    Usage:
        def test_offline(mock_prober):
            mock_prober.set_online(False)
    """
    return MockProber(targets=("a.test", "b.test"))


@pytest.fixture
def state_store():
    """Provide an empty (unknown) MemoryStateStore"""
    return MemoryStateStore()


@pytest.fixture
def recording_sink():
    """Provide a synchronous sink that records published events"""
    return RecordingEventSink()


@pytest.fixture
def sync_channel():
    """Provide a MemorySyncChannel that keeps publish history"""
    return MemorySyncChannel()


@pytest.fixture
def event_bus():
    """
    Provide a running AsyncEventBus.

    Automatically stopped after the test.
    """
    bus = AsyncEventBus()
    yield bus
    bus.stop()


# =============================================================================
# NETWORK FIXTURES
# =============================================================================

@pytest.fixture
def tcp_network():
    """
    Patch name resolution and socket creation used by SocketProber.

    Every host resolves to one IPv4 address. Script connect outcomes with
    tcp_network.sock.connect.side_effect; each target gets a fresh call.

    Usage:
        def test_refused(tcp_network):
            tcp_network.sock.connect.side_effect = ConnectionRefusedError()
    """
    with patch("socket.getaddrinfo") as mock_getaddrinfo, \
            patch("socket.socket") as mock_socket:
        mock_getaddrinfo.return_value = [
            (socket.AF_INET, socket.SOCK_STREAM, 6, "", ("192.0.2.10", 80)),
        ]
        yield SimpleNamespace(
            getaddrinfo=mock_getaddrinfo,
            socket=mock_socket,
            sock=mock_socket.return_value,
        )


# =============================================================================
# CONTROLLER FIXTURES
# =============================================================================

@pytest.fixture
def checker(mock_prober, state_store, recording_sink, sync_channel):
    """
    Provide a ConnectivityChecker wired to mocks.

    The local address resolver returns LOCAL_ADDRESS without touching
    the network.

    Usage:
        def test_check(checker, recording_sink):
            assert checker.check_connectivity() is True
            assert recording_sink.connected_values == [True]
    """
    return ConnectivityChecker(
        prober=mock_prober,
        state_store=state_store,
        event_sink=recording_sink,
        sync_channel=sync_channel,
        local_address_resolver=lambda: LOCAL_ADDRESS,
    )


# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================

def pytest_configure(config):
    """
    Configure pytest with custom markers.
    """
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "unit_integration: Unit integration tests")
    config.addinivalue_line("markers", "integration: Full integration tests")
    config.addinivalue_line("markers", "slow: Slow tests (use sparingly)")
