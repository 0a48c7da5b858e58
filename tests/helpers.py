"""
Test doubles for API responses and Tailscale entities
"""

from unittest.mock import MagicMock

from splitdns_sync.models import Device, ServiceInfo


def make_response(status_code=200, json_data=None, content=b"{}", url="https://api.example/"):
    """Build a requests.Response double"""
    response = MagicMock()
    response.status_code = status_code
    response.url = url
    response.content = content
    if isinstance(json_data, Exception):
        response.json.side_effect = json_data
    else:
        response.json.return_value = json_data
    return response


def device(hostname, name=None, addresses=None, device_id=None):
    return Device(
        name=name if name is not None else f"{hostname}.tail1234.ts.net",
        hostname=hostname,
        addresses=addresses if addresses is not None else [],
        device_id=device_id
    )


def service(name, addrs):
    return ServiceInfo(name=name, addrs=addrs)
