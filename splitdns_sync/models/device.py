"""
Tailscale device data model.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Device:
    """
    Immutable view of a tailnet device.

    Attributes:
        name: Display name, usually the MagicDNS FQDN (e.g. 'my-router.tail1234.ts.net')
        hostname: Machine hostname as reported by the node (e.g. 'my-router')
        addresses: Tailscale addresses in API order; the first is canonical
        device_id: Optional API identifier, only used in log messages
    """
    name: str
    hostname: str
    addresses: List[str] = field(default_factory=list)
    device_id: Optional[str] = None

    @classmethod
    def from_api(cls, data: dict) -> 'Device':
        """
        Build a Device from one entry of the API's 'devices' array.

        Raises:
            ValueError: If the entry or its addresses field has the wrong shape
        """
        if not isinstance(data, dict):
            raise ValueError(f"device entry is {type(data).__name__}, not an object")
        for key in ("name", "hostname"):
            if not isinstance(data.get(key) or "", str):
                raise ValueError(f"{key} is {type(data[key]).__name__}, not a string")
        addresses = data.get("addresses") or []
        if not isinstance(addresses, list):
            raise ValueError(f"addresses is {type(addresses).__name__}, not a list")
        return cls(
            name=data.get("name") or "",
            hostname=data.get("hostname") or "",
            addresses=list(addresses),
            device_id=data.get("id") or data.get("nodeId")
        )

    @property
    def primary_address(self) -> Optional[str]:
        return self.addresses[0] if self.addresses else None
