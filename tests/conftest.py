"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from stingray_cli.client.stingray import Client
from stingray_cli.config.manager import ConfigManager
from stingray_cli.config.models import ApplianceProfile

LB = "https://lb:9070"
CONFIG_ROOT = f"{LB}/api/tm/3.5/config/active"
STATS_ROOT = f"{LB}/api/tm/3.5/status/local_tm/statistics"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("STINGRAY_URL", "STINGRAY_USERNAME", "STINGRAY_PASSWORD", "STINGRAY_PROFILE"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def tmp_config(tmp_path: Path) -> Path:
    """Return a temporary config file path."""
    return tmp_path / "config.toml"


@pytest.fixture
def config_manager(tmp_config: Path) -> ConfigManager:
    """Return a ConfigManager pointed at a temp config file."""
    return ConfigManager(config_path=tmp_config)


@pytest.fixture
def sample_profile() -> ApplianceProfile:
    """Return a sample appliance profile for testing."""
    return ApplianceProfile(
        name="test-lb",
        url="https://localhost:9070",
        username="admin",
        password="secret",
    )


@pytest.fixture
def client():
    with Client(LB, "admin", "secret") as c:
        yield c


@pytest.fixture
def mock_pool() -> dict:
    """Pool configuration document as returned by GET config/active/pools/web."""
    return {
        "properties": {
            "basic": {
                "bandwidth_class": "",
                "monitors": ["Ping"],
                "nodes_table": [
                    {"node": "10.0.0.1:80", "state": "active", "weight": 1, "priority": 1},
                    {"node": "10.0.0.2:80", "state": "draining", "weight": 2, "priority": 1},
                ],
                "note": "",
                "passive_monitoring": True,
            },
            "load_balancing": {"algorithm": "round_robin", "priority_enabled": False},
            "connection": {"max_connect_time": 4, "max_reply_time": 30},
            "ssl": {"enable": False},
        }
    }


@pytest.fixture
def mock_node_stats() -> dict:
    return {
        "statistics": {
            "bytes_from_node": 0,
            "bytes_from_node_hi": 1,
            "bytes_from_node_lo": 0,
            "bytes_to_node": 0,
            "bytes_to_node_hi": 0,
            "bytes_to_node_lo": 4294967295,
            "current_conn": 3,
            "current_requests": 2,
            "errors": 0,
            "failures": 1,
            "new_conn": 10,
            "pooled_conn": 4,
            "port": 80,
            "response_max": 120,
            "response_min": 2,
            "response_mean": 15,
            "state": "alive",
            "total_conn": 1000,
        }
    }


@pytest.fixture
def mock_pool_stats() -> dict:
    return {
        "statistics": {
            "algorithm": "roundRobin",
            "bytes_in": 5,
            "bytes_in_hi": 2,
            "bytes_in_low": 7,
            "bytes_out": 0,
            "bytes_out_hi": 0,
            "bytes_out_low": 42,
            "conns_queued": 0,
            "disabled": 0,
            "draining": 1,
            "max_queue_time": 0,
            "mean_queue_time": 0,
            "min_queue_time": 0,
            "nodes": 2,
            "persistence": "none",
            "queue_timeouts": 0,
            "session_migrated": 0,
            "state": "active",
            "total_conn": 77,
        }
    }


@pytest.fixture
def mock_listing() -> dict:
    return {
        "children": [
            {"name": "a", "href": "/api/tm/3.5/config/active/pools/a"},
            {"name": "c", "href": "/api/tm/3.5/config/active/pools/c"},
            {"name": "b", "href": "/api/tm/3.5/config/active/pools/b"},
        ]
    }
