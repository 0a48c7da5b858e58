"""
Data models and value objects.
Immutable data structures for nameserver references and Tailscale entities.
"""

from .nameserver_ref import NameserverReference, ReferenceKind
from .device import Device
from .service_info import ServiceInfo
from .split_dns import SplitDNSConfig, SplitDNSTable, TableDiff, diff_tables

__all__ = [
    'NameserverReference',
    'ReferenceKind',
    'Device',
    'ServiceInfo',
    'SplitDNSConfig',
    'SplitDNSTable',
    'TableDiff',
    'diff_tables',
]
