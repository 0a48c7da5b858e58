"""
Tailscale API client.

Thin synchronous wrapper over the v2 REST API, scoped to one tailnet.
Only the endpoints split-DNS sync needs are covered: the device list,
service lookup and the split-DNS configuration.
"""

import logging
from typing import Dict, List, Optional
from urllib.parse import quote
import requests

from ..config import TailscaleConfig
from ..exceptions import TailscaleAPIError
from ..models import Device, ServiceInfo, SplitDNSTable
from ..strategies import AuthStrategy

logger = logging.getLogger(__name__)


class TailscaleClient:
    """
    Client for one tailnet of the Tailscale API.

    Authentication is delegated to an AuthStrategy, which owns the
    underlying requests.Session.
    """

    def __init__(self,
                 tailnet: str,
                 base_url: str,
                 auth_strategy: AuthStrategy,
                 timeout: Optional[float] = None):
        """
        Initialize client.

        Args:
            tailnet: Tailnet name, or '-' for the credentials' own tailnet
            base_url: API base URL without trailing slash
            auth_strategy: Configured credential scheme
            timeout: Optional per-request timeout in seconds (None waits forever)
        """
        self.tailnet = tailnet
        self.base_url = base_url.rstrip("/")
        self.auth_strategy = auth_strategy
        self.timeout = timeout

    @property
    def auth_name(self) -> str:
        return self.auth_strategy.auth_name

    def _tailnet_url(self, path: str) -> str:
        tailnet = quote(self.tailnet, safe="-.@")
        return f"{self.base_url}{TailscaleConfig.API_PREFIX}/tailnet/{tailnet}/{path}"

    def _request(self, method: str, url: str, expected=(200,), **kwargs) -> requests.Response:
        """
        Send a request on the authenticated session.

        Raises:
            TailscaleAPIError: On transport failure or an unexpected status code
        """
        session = self.auth_strategy.session
        logger.debug(f"{method} {url}")

        try:
            response = session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise TailscaleAPIError(f"{method} {url}: {e}") from e

        if response.status_code not in expected:
            message = _error_message(response)
            raise TailscaleAPIError(
                f"API returned status {response.status_code}{message}",
                status_code=response.status_code
            )

        return response

    def _decode_json(self, response: requests.Response):
        try:
            return response.json()
        except ValueError as e:
            raise TailscaleAPIError(f"decoding response from {response.url}: {e}") from e

    def _decode(self, response: requests.Response) -> dict:
        """
        Decode a JSON object body. A null body decodes to an empty object.

        Raises:
            TailscaleAPIError: If the body is not JSON or not an object
        """
        payload = self._decode_json(response)

        if payload is None:
            return {}
        if not isinstance(payload, dict):
            raise TailscaleAPIError(
                f"decoding response from {response.url}: expected a JSON object, got {type(payload).__name__}"
            )
        return payload

    def list_devices(self) -> List[Device]:
        """
        Get all devices in the tailnet.

        Returns:
            List of Device objects in API order
        """
        response = self._request("GET", self._tailnet_url("devices"))
        payload = self._decode(response)

        entries = payload.get("devices") or []
        try:
            if not isinstance(entries, list):
                raise ValueError(f"devices is {type(entries).__name__}, not a list")
            devices = [Device.from_api(d) for d in entries]
        except ValueError as e:
            raise TailscaleAPIError(f"decoding device list: {e}") from e

        logger.debug(f"Listed {len(devices)} devices in tailnet {self.tailnet}")
        return devices

    def get_service(self, service_name: str) -> ServiceInfo:
        """
        Look up a single service.

        Args:
            service_name: Service name including the 'svc:' prefix

        Returns:
            ServiceInfo for the service
        """
        # Only an exact 200 counts as success for the services endpoint
        url = self._tailnet_url(f"services/{quote(service_name, safe=':')}/")
        response = self._request("GET", url, expected=(200,))
        payload = self._decode(response)

        try:
            return ServiceInfo.from_api(payload)
        except ValueError as e:
            raise TailscaleAPIError(f"decoding service {service_name}: {e}") from e

    def get_split_dns(self) -> SplitDNSTable:
        """Get the tailnet's current split-DNS configuration"""
        response = self._request("GET", self._tailnet_url("dns/split-dns"))
        payload = self._decode(response)

        table: SplitDNSTable = {}
        for domain, nameservers in payload.items():
            if nameservers is not None and not isinstance(nameservers, list):
                raise TailscaleAPIError(f"decoding split DNS: nameservers for {domain} are not a list")
            table[domain] = list(nameservers or [])
        return table

    def set_split_dns(self, table: SplitDNSTable) -> SplitDNSTable:
        """
        Replace the tailnet's split-DNS configuration.

        Args:
            table: Mapping of domain -> nameserver addresses

        Returns:
            The configuration as reported back by the API
        """
        response = self._request(
            "PUT",
            self._tailnet_url("dns/split-dns"),
            expected=(200, 201, 204),
            json=table
        )
        if response.status_code == 204 or not response.content:
            return dict(table)
        payload = self._decode_json(response)
        return payload if isinstance(payload, dict) else dict(table)

    def disconnect(self) -> None:
        """Close the underlying session"""
        self.auth_strategy.disconnect()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.disconnect()


def _error_message(response: requests.Response) -> str:
    """Pull the 'message' field out of an API error body, if there is one"""
    try:
        body = response.json()
    except ValueError:
        return ""
    if isinstance(body, dict) and body.get("message"):
        return f": {body['message']}"
    return ""
