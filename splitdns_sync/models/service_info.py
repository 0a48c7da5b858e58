"""
Tailscale service data model.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class ServiceInfo:
    """
    Immutable view of a Tailscale service (VIP service).

    Attributes:
        name: Service name including the 'svc:' prefix
        addrs: Service addresses in API order; the first is canonical
    """
    name: str
    addrs: List[str] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: dict) -> 'ServiceInfo':
        """
        Build a ServiceInfo from the services endpoint body.

        Raises:
            ValueError: If the body or its addrs field has the wrong shape
        """
        if not isinstance(data, dict):
            raise ValueError(f"service entry is {type(data).__name__}, not an object")
        addrs = data.get("addrs") or []
        if not isinstance(addrs, list):
            raise ValueError(f"addrs is {type(addrs).__name__}, not a list")
        return cls(
            name=data.get("name") or "",
            addrs=list(addrs)
        )

    @property
    def primary_address(self) -> Optional[str]:
        return self.addrs[0] if self.addrs else None
