"""
Async Event Bus Tests

Tests for fire-and-forget delivery:
- publish() returns before subscribers run
- Delivery order matches publish order
- One failing subscriber does not affect the others

To run these tests:
    pytest tests/connectivity/implementations/test_async_event_bus.py -v
"""

import threading

import pytest

from connectivity.implementations.async_event_bus import AsyncEventBus
from connectivity.models.connectivity_state import ConnectivityChangedEvent


@pytest.mark.unit_integration
def test_delivers_in_publish_order(event_bus):
    received = []
    event_bus.subscribe(lambda event: received.append(event.connected))

    for connected in [True, False, True, False]:
        event_bus.publish(ConnectivityChangedEvent(connected))

    assert event_bus.wait_until_idle(timeout=5.0)
    assert received == [True, False, True, False]


@pytest.mark.unit_integration
def test_publish_does_not_wait_for_subscribers(event_bus):
    release = threading.Event()
    delivered = threading.Event()

    def slow_subscriber(event):
        release.wait(timeout=5.0)
        delivered.set()

    event_bus.subscribe(slow_subscriber)

    event_bus.publish(ConnectivityChangedEvent(True))

    # publish() already returned while the subscriber is still blocked
    assert not delivered.is_set()
    release.set()
    assert delivered.wait(timeout=5.0)


@pytest.mark.unit_integration
def test_failing_subscriber_isolated(event_bus):
    received = []

    def broken(event):
        raise RuntimeError("subscriber bug")

    event_bus.subscribe(broken)
    event_bus.subscribe(lambda event: received.append(event))

    event_bus.publish(ConnectivityChangedEvent(False))
    event_bus.wait_until_idle(timeout=5.0)

    assert received == [ConnectivityChangedEvent(False)]
    assert event_bus.failed_count == 1
    assert event_bus.delivered_count == 1


@pytest.mark.unit_integration
def test_unsubscribe(event_bus):
    received = []

    def subscriber(event):
        received.append(event)

    event_bus.subscribe(subscriber)
    event_bus.unsubscribe(subscriber)

    event_bus.publish(ConnectivityChangedEvent(True))
    event_bus.wait_until_idle(timeout=5.0)

    assert received == []
    assert event_bus.get_status()["subscribers"] == 0


@pytest.mark.unit
def test_subscribe_twice_registers_once(event_bus):
    def subscriber(event):
        pass

    event_bus.subscribe(subscriber)
    event_bus.subscribe(subscriber)

    assert event_bus.get_status()["subscribers"] == 1


@pytest.mark.unit
def test_publish_after_stop_is_dropped(event_bus):
    received = []
    event_bus.subscribe(received.append)

    event_bus.stop()
    event_bus.publish(ConnectivityChangedEvent(True))

    assert received == []
    assert not event_bus.is_busy()
    assert event_bus.get_status()["worker_running"] is False


@pytest.mark.unit_integration
def test_publish_racing_stop_leaves_bus_idle():
    """Events published while stop() runs are delivered or dropped, never stranded"""
    bus = AsyncEventBus()
    start = threading.Barrier(5)

    def publisher():
        start.wait()
        for _ in range(200):
            bus.publish(ConnectivityChangedEvent(True))

    threads = [threading.Thread(target=publisher) for _ in range(4)]
    for t in threads:
        t.start()

    start.wait()
    bus.stop()
    for t in threads:
        t.join()

    assert bus.wait_until_idle(timeout=2.0)
    assert bus.get_queue_size() == 0
