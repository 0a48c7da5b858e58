"""
Sync Service - resolve and push one split-DNS table.

Owns the API client and the loaded config for the lifetime of the process.
"""

import logging
from typing import NamedTuple, Optional

from ..clients import TailscaleClient
from ..exceptions import TailscaleAPIError
from ..models import SplitDNSConfig, SplitDNSTable, TableDiff, diff_tables
from ..parsers import load_config
from ..repositories import create_client
from .dns_updater import DNSUpdater
from .resolver_service import ReferenceResolver

logger = logging.getLogger(__name__)


class SyncPreview(NamedTuple):
    """Outcome of a dry run"""

    table: SplitDNSTable
    current: Optional[SplitDNSTable]
    diff: Optional[TableDiff]


class SplitDNSSyncService:
    """
    Main sync service - orchestrates one resolve/update cycle.

    Design Pattern: Facade Pattern
    Provides a simple interface over the resolver, the updater and the client.
    """

    def __init__(self, client: TailscaleClient, config: SplitDNSConfig):
        """
        Initialize sync service.

        Args:
            client: Authenticated Tailscale client
            config: Loaded split-DNS config, not modified
        """
        self._client = client
        self._config = config
        self._resolver = ReferenceResolver(client)
        self._updater = DNSUpdater(client)

    @property
    def config(self) -> SplitDNSConfig:
        return self._config

    def resolve(self) -> SplitDNSTable:
        """Resolve the config into a split-DNS table without submitting it"""
        return self._resolver.resolve(self._config)

    def run_cycle(self) -> SplitDNSTable:
        """
        Resolve the config and replace the remote split-DNS table.

        Returns:
            The submitted table

        Raises:
            SyncError: If resolution or the update fails
        """
        table = self.resolve()
        self._updater.update(table)
        return table

    def preview(self) -> SyncPreview:
        """
        Resolve the config and compare it with the remote table.

        Resolution errors propagate. If the current remote table cannot be
        read the preview still carries the resolved table.
        """
        table = self.resolve()

        try:
            current = self._client.get_split_dns()
        except TailscaleAPIError as e:
            logger.warning(f"Could not read current split DNS configuration: {e}")
            return SyncPreview(table=table, current=None, diff=None)

        return SyncPreview(table=table, current=current, diff=diff_tables(current, table))

    def disconnect(self):
        """Release the API session"""
        try:
            self._client.disconnect()
        except Exception as e:
            logger.warning(f"Error disconnecting from Tailscale API: {e}")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.disconnect()


def initialize_sync_service(config_path: str,
                            tailnet: str,
                            api_key: Optional[str],
                            client_id: Optional[str],
                            client_secret: Optional[str],
                            base_url: str,
                            timeout: Optional[float] = None) -> SplitDNSSyncService:
    """
    Load the config, then build the client.

    Raises:
        ConfigError: If the config file cannot be loaded
        URLError: If base_url cannot be parsed
        AuthConfigError: If no credentials were given
    """
    config = load_config(config_path)
    client = create_client(tailnet, api_key, client_id, client_secret, base_url, timeout=timeout)
    return SplitDNSSyncService(client, config)
