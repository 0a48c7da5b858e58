import logging

from ..clients import TailscaleClient
from ..exceptions import TailscaleAPIError, UpdateError
from ..models import SplitDNSTable

logger = logging.getLogger(__name__)


class DNSUpdater:
    """Submits a resolved split-DNS table as a full replacement"""

    def __init__(self, client: TailscaleClient):
        self._client = client

    def update(self, table: SplitDNSTable) -> None:
        """
        Log the table and push it to the tailnet.

        Raises:
            UpdateError: If the API call fails. Nothing is rolled back or retried.
        """
        logger.info(f"Updating split DNS configuration with {len(table)} domains...")
        for domain, nameservers in table.items():
            logger.info(f"  {domain} -> {nameservers}")

        try:
            self._client.set_split_dns(table)
        except TailscaleAPIError as e:
            raise UpdateError(f"updating split DNS: {e}") from e

        logger.info("Successfully updated split DNS configuration")
