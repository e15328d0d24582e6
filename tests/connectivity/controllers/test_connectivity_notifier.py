"""
Connectivity Notifier Tests

To run these tests:
    pytest tests/connectivity/controllers/test_connectivity_notifier.py -v
"""

import pytest

from connectivity.constants import SYNC_PATH_CONNECTIVITY
from connectivity.controllers.connectivity_notifier import ConnectivityNotifier
from connectivity.models.connectivity_state import (
    ConnectivityChangedEvent,
    ConnectivityState,
)


@pytest.mark.unit
def test_notify_publishes_event(recording_sink, sync_channel):
    notifier = ConnectivityNotifier(recording_sink, sync_channel)

    notifier.notify(False)

    assert recording_sink.events == [ConnectivityChangedEvent(connected=False)]
    # notify() does not publish a snapshot on its own
    assert sync_channel.get_latest(SYNC_PATH_CONNECTIVITY) is None


@pytest.mark.unit
def test_publish_snapshot(recording_sink, sync_channel):
    notifier = ConnectivityNotifier(recording_sink, sync_channel)

    notifier.publish_snapshot(ConnectivityState(internet=True, local_address="10.1.1.1"))

    snapshot = sync_channel.get_latest(SYNC_PATH_CONNECTIVITY)
    assert snapshot["internet"] is True
    assert snapshot["local_address"] == "10.1.1.1"
    assert not recording_sink.was_called()


@pytest.mark.unit
def test_custom_sync_path(recording_sink, sync_channel):
    notifier = ConnectivityNotifier(recording_sink, sync_channel, sync_path="net/status")

    notifier.publish_snapshot(ConnectivityState(internet=False))

    assert sync_channel.publish_count("net/status") == 1


@pytest.mark.unit
def test_sink_failure_is_logged_not_raised(recording_sink, sync_channel, caplog):
    recording_sink.fail_with = ValueError("bad subscriber")
    notifier = ConnectivityNotifier(recording_sink, sync_channel)

    notifier.notify(True)

    assert "Failed to publish" in caplog.text
