"""
Nameserver reference - Value Object pattern.
A single entry from a domain's nameserver list in the config file.
"""

from dataclasses import dataclass
from enum import Enum


class ReferenceKind(Enum):
    """How a nameserver reference is resolved"""
    SERVICE = "svc"
    DEVICE = "device"
    LITERAL = "literal"


@dataclass(frozen=True)
class NameserverReference:
    """
    Immutable nameserver reference.

    Attributes:
        kind: SERVICE, DEVICE or LITERAL
        raw: The string exactly as written in the config
        target: What gets looked up. For services this is the full
            'svc:<name>' string, for devices the bare hostname, for
            literals the raw value.
    """
    kind: ReferenceKind
    raw: str
    target: str

    @property
    def needs_lookup(self) -> bool:
        return self.kind is not ReferenceKind.LITERAL

    def __str__(self) -> str:
        return self.raw
