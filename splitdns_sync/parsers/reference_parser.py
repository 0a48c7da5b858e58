"""
Reference parser for nameserver entries in the split-DNS config.

Logic:
1. 'svc:<name>' is a Tailscale service, looked up by its full prefixed name
2. 'device:<hostname>' is a tailnet device, matched against the device list
3. Anything else is a literal nameserver address, passed through unchecked
"""

from typing import Iterable, List

from ..models import NameserverReference, ReferenceKind, SplitDNSConfig


class ReferenceParser:
    """
    Parser for nameserver reference strings.

    Only the prefix is inspected. Domain names, service names, hostnames
    and literal addresses are not validated.
    """

    SERVICE_PREFIX = "svc:"
    DEVICE_PREFIX = "device:"

    @classmethod
    def parse(cls, value: str) -> NameserverReference:
        """
        Parse a single nameserver reference.

        Args:
            value: Reference string from the config

        Returns:
            NameserverReference with kind and lookup target

        Examples:
            >>> ReferenceParser.parse('svc:my-gateway').target
            'svc:my-gateway'
            >>> ReferenceParser.parse('device:my-router').target
            'my-router'
            >>> ReferenceParser.parse('192.168.1.1').kind
            <ReferenceKind.LITERAL: 'literal'>
        """
        if value.startswith(cls.SERVICE_PREFIX):
            return NameserverReference(ReferenceKind.SERVICE, value, value)
        if value.startswith(cls.DEVICE_PREFIX):
            return NameserverReference(ReferenceKind.DEVICE, value, value[len(cls.DEVICE_PREFIX):])
        return NameserverReference(ReferenceKind.LITERAL, value, value)

    @classmethod
    def parse_list(cls, values: Iterable[str]) -> List[NameserverReference]:
        """Parse a domain's nameserver list, preserving order"""
        return [cls.parse(value) for value in values]

    @classmethod
    def is_device_reference(cls, value: str) -> bool:
        return value.startswith(cls.DEVICE_PREFIX)

    @classmethod
    def has_device_references(cls, config: SplitDNSConfig) -> bool:
        """
        Check whether any domain in the config names a device.

        Used to decide whether the device list has to be fetched at all.
        """
        return any(
            cls.is_device_reference(ns)
            for nameservers in config.values()
            for ns in nameservers
        )
