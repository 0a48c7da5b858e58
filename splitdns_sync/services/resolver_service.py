"""
Reference Resolver - turns a split-DNS config into a split-DNS table.

Every svc: and device: reference is replaced by the first address of
the entity it names. Literal nameservers pass through untouched. Any
single failure aborts the whole pass; a partial table is never returned.
"""

import logging
from typing import List, Optional

from ..clients import TailscaleClient
from ..exceptions import (
    DeviceListError,
    DeviceResolutionError,
    ServiceResolutionError,
    TailscaleAPIError,
)
from ..models import Device, NameserverReference, ReferenceKind, SplitDNSConfig, SplitDNSTable
from ..parsers import ReferenceParser

logger = logging.getLogger(__name__)


def find_device(hostname: str, devices: List[Device]) -> Optional[Device]:
    """
    Find the device a device: reference points at.

    Match order, each tried across the whole list before the next:
    1. Exact hostname
    2. Exact display name
    3. Display name starting with '<hostname>.' (MagicDNS FQDN)

    Args:
        hostname: Target from the device: reference
        devices: Device list for this pass

    Returns:
        First matching device, or None
    """
    for device in devices:
        if device.hostname == hostname:
            return device

    for device in devices:
        if device.name == hostname:
            return device

    prefix = hostname + "."
    for device in devices:
        if device.name.startswith(prefix):
            return device

    return None


class ReferenceResolver:
    """
    Resolves nameserver references against the Tailscale API.

    The device list is fetched at most once per resolve() call, and only
    if the config contains a device: reference. Services are looked up
    once per occurrence.
    """

    def __init__(self, client: TailscaleClient):
        self._client = client
        self._parser = ReferenceParser()

    def resolve(self, config: SplitDNSConfig) -> SplitDNSTable:
        """
        Resolve every domain in the config.

        Args:
            config: Mapping of domain -> nameserver references

        Returns:
            Mapping of domain -> nameserver addresses, reference order preserved.
            Domains with no references map to None.

        Raises:
            DeviceListError: If the device list is needed but cannot be fetched
            ServiceResolutionError: If a service lookup fails or has no addresses
            DeviceResolutionError: If a device is not found or has no addresses
        """
        devices: List[Device] = []
        if self._parser.has_device_references(config):
            devices = self._fetch_devices()

        table: SplitDNSTable = {}
        for domain, nameservers in config.items():
            resolved = []
            for reference in self._parser.parse_list(nameservers):
                resolved.append(self._resolve_reference(domain, reference, devices))
            # An empty list is sent as null, which clears the domain on the tailnet
            table[domain] = resolved or None

        return table

    def _fetch_devices(self) -> List[Device]:
        try:
            devices = self._client.list_devices()
        except TailscaleAPIError as e:
            raise DeviceListError(f"listing devices: {e}") from e

        logger.info(f"Fetched {len(devices)} devices")
        return devices

    def _resolve_reference(self,
                           domain: str,
                           reference: NameserverReference,
                           devices: List[Device]) -> str:
        if not reference.needs_lookup:
            logger.debug(f"Using literal nameserver {reference.raw} for domain {domain}")
            return reference.raw

        if reference.kind is ReferenceKind.SERVICE:
            logger.info(f"Resolving service {reference.target} for domain {domain}...")
            address = self.resolve_service(reference.target)
            logger.info(f"  Resolved {reference.raw} to {address}")
            return address

        logger.info(f"Resolving device {reference.target} for domain {domain}...")
        address = self.resolve_device(reference.target, devices)
        logger.info(f"  Resolved {reference.raw} to {address}")
        return address

    def resolve_service(self, service_name: str) -> str:
        """
        Resolve a service to its first address.

        Args:
            service_name: Service name including the 'svc:' prefix
        """
        try:
            service = self._client.get_service(service_name)
        except TailscaleAPIError as e:
            raise ServiceResolutionError(service_name, str(e)) from e

        address = service.primary_address
        if address is None:
            raise ServiceResolutionError(service_name, f"service {service_name} has no addresses")

        return address

    def resolve_device(self, hostname: str, devices: List[Device]) -> str:
        """
        Resolve a device hostname to its first address.

        Args:
            hostname: Hostname from the device: reference
            devices: Device list fetched for this pass
        """
        device = find_device(hostname, devices)
        if device is None:
            raise DeviceResolutionError(hostname, f"device {hostname} not found")

        address = device.primary_address
        if address is None:
            raise DeviceResolutionError(hostname, f"device {hostname} has no addresses")

        logger.debug(f"Matched {hostname} to device {device.name} ({device.device_id})")
        return address
