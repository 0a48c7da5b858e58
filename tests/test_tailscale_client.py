"""
Tests for the Tailscale API client
"""

from unittest.mock import MagicMock, PropertyMock

import pytest
import requests

from splitdns_sync.clients import TailscaleClient
from splitdns_sync.exceptions import AuthError, TailscaleAPIError
from splitdns_sync.models import Device, ServiceInfo

from helpers import make_response

BASE = "https://api.tailscale.com"


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def client(session):
    strategy = MagicMock()
    strategy.session = session
    strategy.auth_name = "API key"
    return TailscaleClient("example.com", BASE + "/", strategy, timeout=30)


def test_list_devices(client, session):
    session.request.return_value = make_response(200, {"devices": [
        {
            "id": "123",
            "name": "my-router.tail1234.ts.net",
            "hostname": "my-router",
            "addresses": ["100.64.0.5", "fd7a:115c:a1e0::5"],
        },
        {"name": "laptop.tail1234.ts.net", "hostname": "laptop"},
    ]})

    devices = client.list_devices()

    session.request.assert_called_once_with(
        "GET", f"{BASE}/api/v2/tailnet/example.com/devices", timeout=30
    )
    assert devices == [
        Device("my-router.tail1234.ts.net", "my-router", ["100.64.0.5", "fd7a:115c:a1e0::5"], "123"),
        Device("laptop.tail1234.ts.net", "laptop", [], None),
    ]
    assert devices[0].primary_address == "100.64.0.5"
    assert devices[1].primary_address is None


def test_list_devices_empty(client, session):
    session.request.return_value = make_response(200, {})

    assert client.list_devices() == []


def test_list_devices_error_status(client, session):
    session.request.return_value = make_response(403, {"message": "forbidden"})

    with pytest.raises(TailscaleAPIError, match="status 403: forbidden") as exc_info:
        client.list_devices()

    assert exc_info.value.status_code == 403


def test_transport_error_is_wrapped(client, session):
    session.request.side_effect = requests.Timeout("timed out")

    with pytest.raises(TailscaleAPIError, match="timed out"):
        client.list_devices()


def test_auth_failure_propagates():
    strategy = MagicMock()
    type(strategy).session = PropertyMock(side_effect=AuthError("bad creds", 401))
    client = TailscaleClient("-", BASE, strategy)

    with pytest.raises(AuthError):
        client.list_devices()


def test_get_service(client, session):
    session.request.return_value = make_response(200, {"name": "svc:my-gateway", "addrs": ["100.64.0.1"]})

    info = client.get_service("svc:my-gateway")

    session.request.assert_called_once_with(
        "GET", f"{BASE}/api/v2/tailnet/example.com/services/svc:my-gateway/", timeout=30
    )
    assert info == ServiceInfo("svc:my-gateway", ["100.64.0.1"])


def test_get_service_not_found(client, session):
    session.request.return_value = make_response(404, ValueError("no body"))

    with pytest.raises(TailscaleAPIError, match="API returned status 404") as exc_info:
        client.get_service("svc:missing")

    assert exc_info.value.status_code == 404


def test_get_service_requires_exact_ok(client, session):
    """Test any non-200 status, even 2xx, is a failure for service lookups"""
    session.request.return_value = make_response(204, content=b"")

    with pytest.raises(TailscaleAPIError):
        client.get_service("svc:my-gateway")


def test_get_service_bad_json(client, session):
    session.request.return_value = make_response(200, ValueError("Expecting value"))

    with pytest.raises(TailscaleAPIError, match="decoding response"):
        client.get_service("svc:my-gateway")


def test_get_service_null_body(client, session):
    """Test a null body decodes to a service with no addresses"""
    session.request.return_value = make_response(200, None, content=b"null")

    assert client.get_service("svc:my-gateway") == ServiceInfo("", [])


@pytest.mark.parametrize("body", [[], ["100.64.0.1"], "100.64.0.1", {"addrs": "100.64.0.1"}])
def test_get_service_wrong_shape(client, session, body):
    session.request.return_value = make_response(200, body)

    with pytest.raises(TailscaleAPIError, match="decoding"):
        client.get_service("svc:my-gateway")


def test_list_devices_null_body(client, session):
    session.request.return_value = make_response(200, None, content=b"null")

    assert client.list_devices() == []


@pytest.mark.parametrize("body", [
    [],
    {"devices": "my-router"},
    {"devices": [None]},
    {"devices": [["my-router"]]},
    {"devices": [{"hostname": "my-router", "addresses": "100.64.0.5"}]},
    {"devices": [{"hostname": 42}]},
])
def test_list_devices_wrong_shape(client, session, body):
    session.request.return_value = make_response(200, body)

    with pytest.raises(TailscaleAPIError, match="decoding"):
        client.list_devices()


def test_get_split_dns_wrong_shape(client, session):
    session.request.return_value = make_response(200, [])

    with pytest.raises(TailscaleAPIError, match="expected a JSON object"):
        client.get_split_dns()

    session.request.return_value = make_response(200, {"example.com": "1.1.1.1"})

    with pytest.raises(TailscaleAPIError, match="not a list"):
        client.get_split_dns()


def test_set_split_dns_ignores_odd_echo(client, session):
    """Test an accepted update is not failed by a non-object response body"""
    session.request.return_value = make_response(200, [])

    assert client.set_split_dns({"example.com": ["1.1.1.1"]}) == {"example.com": ["1.1.1.1"]}


def test_default_tailnet_url():
    session = MagicMock()
    session.request.return_value = make_response(200, {"devices": []})
    strategy = MagicMock()
    strategy.session = session
    client = TailscaleClient("-", BASE, strategy)

    client.list_devices()

    session.request.assert_called_once_with(
        "GET", f"{BASE}/api/v2/tailnet/-/devices", timeout=None
    )


def test_set_split_dns(client, session):
    table = {"example.com": ["100.64.0.1"], "internal.example.com": ["192.168.1.1", "100.64.0.5"]}
    session.request.return_value = make_response(200, table)

    result = client.set_split_dns(table)

    session.request.assert_called_once_with(
        "PUT", f"{BASE}/api/v2/tailnet/example.com/dns/split-dns", timeout=30, json=table
    )
    assert result == table


def test_set_split_dns_no_content(client, session):
    session.request.return_value = make_response(204, content=b"")

    assert client.set_split_dns({"example.com": ["1.1.1.1"]}) == {"example.com": ["1.1.1.1"]}


def test_set_split_dns_error(client, session):
    session.request.return_value = make_response(400, {"message": "invalid nameserver"})

    with pytest.raises(TailscaleAPIError, match="invalid nameserver"):
        client.set_split_dns({"example.com": ["bogus"]})


def test_get_split_dns(client, session):
    session.request.return_value = make_response(200, {"example.com": ["1.1.1.1"], "empty.com": None})

    assert client.get_split_dns() == {"example.com": ["1.1.1.1"], "empty.com": []}


def test_context_manager_disconnects(session):
    strategy = MagicMock()
    with TailscaleClient("-", BASE, strategy):
        pass

    strategy.disconnect.assert_called_once()
