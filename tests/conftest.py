"""
Shared fixtures for split-DNS sync tests
"""

import json
from unittest.mock import create_autospec

import pytest

from splitdns_sync.clients import TailscaleClient


ENV_VARS = [
    "TAILSCALE_API_KEY",
    "TAILSCALE_CLIENT_ID",
    "TAILSCALE_CLIENT_SECRET",
    "TAILSCALE_TAILNET",
    "TAILSCALE_BASE_URL",
    "TAILSCALE_API_TIMEOUT",
    "SPLITDNS_CONFIG",
    "SPLITDNS_INTERVAL",
    "LOG_LEVEL",
    "LOG_FILE",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep credentials from the developer's shell out of the tests"""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def write_config(tmp_path):
    """Write a config file and return its path"""

    def _write(content, name="config.json"):
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content)
        else:
            path.write_text(json.dumps(content))
        return path

    return _write


@pytest.fixture
def mock_client():
    """TailscaleClient double with no devices and no services"""
    client = create_autospec(TailscaleClient, instance=True)
    client.list_devices.return_value = []
    client.get_service.side_effect = AssertionError("unexpected service lookup")
    client.get_split_dns.return_value = {}
    client.set_split_dns.side_effect = lambda table: dict(table)
    return client
