"""
Tests for collector configuration.
"""

import pytest

from multiflow_collector.config import CollectorConfig


def test_defaults(monkeypatch):
    """Test defaults when no environment overrides are set."""
    for name in (
        "MULTIFLOW_COLLECTOR_NETFLOW_PORT",
        "MULTIFLOW_COLLECTOR_SFLOW_PORT",
        "MULTIFLOW_COLLECTOR_UDP_RCVBUF",
        "MULTIFLOW_COLLECTOR_LOG_DATAGRAMS",
        "MULTIFLOW_COLLECTOR_MAX_FLOWSETS",
    ):
        monkeypatch.delenv(name, raising=False)

    config = CollectorConfig()

    assert config.netflow_port == 9000
    assert config.sflow_port == 6343
    assert config.http_port == 8081
    assert config.recv_buffer_size == 65535
    assert config.udp_rcvbuf_size is None
    assert config.max_flowsets == 256
    assert config.log_datagrams is False


def test_environment_overrides(monkeypatch):
    """Test environment variables are read at construction time."""
    monkeypatch.setenv("MULTIFLOW_COLLECTOR_NETFLOW_PORT", "2055")
    monkeypatch.setenv("MULTIFLOW_COLLECTOR_SFLOW_PORT", "16343")
    monkeypatch.setenv("MULTIFLOW_COLLECTOR_UDP_RCVBUF", "4194304")
    monkeypatch.setenv("MULTIFLOW_COLLECTOR_LOG_DATAGRAMS", "True")
    monkeypatch.setenv("MULTIFLOW_COLLECTOR_MAX_FLOWSETS", "30")

    config = CollectorConfig()

    assert config.netflow_port == 2055
    assert config.sflow_port == 16343
    assert config.udp_rcvbuf_size == 4194304
    assert config.log_datagrams is True
    assert config.max_flowsets == 30


def test_explicit_values_win():
    config = CollectorConfig(netflow_port=9995, bind_host="127.0.0.1")
    assert config.netflow_port == 9995
    assert config.bind_host == "127.0.0.1"
