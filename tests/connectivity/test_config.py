"""
Connectivity Config Tests

Tests for YAML loading, defaults and validation.

To run these tests:
    pytest tests/connectivity/test_config.py -v
"""

import pytest
import yaml

from connectivity.config import ConnectivityConfig, ConnectivityConfigError
from connectivity.constants import (
    DEFAULT_CONNECT_TIMEOUT_MILLIS,
    DEFAULT_PROBE_PORT,
    DEFAULT_PROBE_TARGETS,
)


def write_yaml(path, data):
    path.write_text(yaml.safe_dump(data))
    return path


@pytest.mark.unit
def test_defaults_without_file(tmp_path):
    config = ConnectivityConfig(tmp_path / "missing.yaml", create_if_missing=False)

    assert config.probe_targets == list(DEFAULT_PROBE_TARGETS)
    assert config.probe_port == DEFAULT_PROBE_PORT
    assert config.connect_timeout_millis == DEFAULT_CONNECT_TIMEOUT_MILLIS
    assert not (tmp_path / "missing.yaml").exists()


@pytest.mark.unit
def test_creates_default_file(tmp_path):
    path = tmp_path / "config" / "connectivity.yaml"

    ConnectivityConfig(path)

    assert path.exists()
    saved = yaml.safe_load(path.read_text())
    assert saved["probe_targets"] == list(DEFAULT_PROBE_TARGETS)


@pytest.mark.unit
def test_file_overrides_defaults(tmp_path):
    path = write_yaml(tmp_path / "c.yaml", {
        "probe_targets": ["a.test", "b.test"],
        "connect_timeout_millis": 2000,
        "check_interval_seconds": 15,
        "sync_directory": str(tmp_path / "sync"),
    })

    config = ConnectivityConfig(path)

    assert config.probe_targets == ["a.test", "b.test"]
    assert config.connect_timeout_millis == 2000
    assert config.check_interval_seconds == 15
    assert config.sync_directory == tmp_path / "sync"
    # Untouched keys keep their defaults
    assert config.probe_port == DEFAULT_PROBE_PORT


@pytest.mark.unit
def test_comma_separated_targets(tmp_path):
    path = write_yaml(tmp_path / "c.yaml", {"probe_targets": "a.test, b.test"})

    assert ConnectivityConfig(path).probe_targets == ["a.test", "b.test"]


@pytest.mark.unit
@pytest.mark.parametrize(
    "overrides",
    [
        {"probe_targets": []},
        {"probe_targets": ["ok.test", 42]},
        {"probe_port": 0},
        {"probe_port": 70000},
        {"probe_port": "80"},
        {"connect_timeout_millis": -1},
        {"connect_timeout_millis": True},
        {"check_interval_seconds": 0},
    ],
)
def test_invalid_values_rejected(tmp_path, overrides):
    path = write_yaml(tmp_path / "c.yaml", overrides)

    with pytest.raises(ConnectivityConfigError):
        ConnectivityConfig(path)


@pytest.mark.unit
def test_unreadable_yaml_uses_defaults(tmp_path):
    path = tmp_path / "c.yaml"
    path.write_text("probe_targets: [unclosed")

    config = ConnectivityConfig(path)

    assert config.probe_targets == list(DEFAULT_PROBE_TARGETS)


@pytest.mark.unit
def test_non_mapping_yaml_uses_defaults(tmp_path):
    path = tmp_path / "c.yaml"
    path.write_text("- just\n- a\n- list\n")

    assert ConnectivityConfig(path).probe_port == DEFAULT_PROBE_PORT


@pytest.mark.unit
def test_set_validates_and_saves(tmp_path):
    path = tmp_path / "c.yaml"
    config = ConnectivityConfig(path)

    config.set("probe_targets", ["only.test"])
    assert yaml.safe_load(path.read_text())["probe_targets"] == ["only.test"]

    with pytest.raises(ConnectivityConfigError):
        config.set("probe_port", -5)
    assert config.probe_port == DEFAULT_PROBE_PORT


@pytest.mark.unit
def test_reload_picks_up_changes(tmp_path):
    path = write_yaml(tmp_path / "c.yaml", {"probe_port": 8080})
    config = ConnectivityConfig(path)

    write_yaml(path, {"probe_port": 443})
    config.reload()

    assert config.probe_port == 443
