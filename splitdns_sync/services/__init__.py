"""
Services - resolution, update and the run loop.
"""

from .resolver_service import ReferenceResolver, find_device
from .dns_updater import DNSUpdater
from .sync_service import SplitDNSSyncService, SyncPreview, initialize_sync_service
from .run_loop import RunLoop

__all__ = [
    'ReferenceResolver',
    'find_device',
    'DNSUpdater',
    'SplitDNSSyncService',
    'SyncPreview',
    'initialize_sync_service',
    'RunLoop',
]
