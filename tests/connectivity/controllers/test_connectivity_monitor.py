"""
Connectivity Monitor Tests

Tests for the periodic runner:
- Runs checks on its own thread until stopped
- Survives a failing check
- On-demand checks

To run these tests:
    pytest tests/connectivity/controllers/test_connectivity_monitor.py -v
"""

import threading

import pytest

from connectivity.controllers.connectivity_monitor import ConnectivityMonitor


@pytest.mark.unit
def test_invalid_interval_rejected():
    with pytest.raises(ValueError):
        ConnectivityMonitor(lambda: None, interval_seconds=0)


@pytest.mark.unit_integration
def test_monitor_runs_checks_periodically():
    calls = []
    enough = threading.Event()

    def check():
        calls.append(1)
        if len(calls) >= 3:
            enough.set()

    monitor = ConnectivityMonitor(check, interval_seconds=0.01)
    monitor.start()
    try:
        assert enough.wait(timeout=5.0)
        assert monitor.is_running()
    finally:
        monitor.stop()

    assert not monitor.is_running()
    assert len(calls) >= 3


@pytest.mark.unit_integration
def test_monitor_survives_failing_check():
    calls = []
    recovered = threading.Event()

    def check():
        calls.append(1)
        if len(calls) == 1:
            raise RuntimeError("first check fails")
        recovered.set()

    monitor = ConnectivityMonitor(check, interval_seconds=0.01)
    monitor.start()
    try:
        assert recovered.wait(timeout=5.0)
    finally:
        monitor.stop()


@pytest.mark.unit_integration
def test_stop_interrupts_wait():
    """stop() returns promptly even with a long interval"""
    started = threading.Event()

    monitor = ConnectivityMonitor(started.set, interval_seconds=3600)
    monitor.start()
    assert started.wait(timeout=5.0)

    monitor.stop(timeout=2.0)

    assert not monitor.is_running()
    assert monitor.tick_count == 1


@pytest.mark.unit
def test_check_now_runs_on_caller_thread():
    monitor = ConnectivityMonitor(lambda: True, interval_seconds=10)
    assert monitor.check_now() is True
    assert not monitor.is_running()


@pytest.mark.unit_integration
def test_monitor_drives_checker(checker, recording_sink):
    """The monitor calls checker.run; the checker owns all state"""
    done = threading.Event()

    def tick():
        checker.run()
        if checker.check_count >= 2:
            done.set()

    monitor = ConnectivityMonitor(tick, interval_seconds=0.01)
    monitor.start()
    try:
        assert done.wait(timeout=5.0)
    finally:
        monitor.stop()

    # Repeated "connected" checks produce exactly one event
    assert recording_sink.connected_values == [True]
