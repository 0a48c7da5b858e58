"""
Tailscale Split DNS Sync

Keeps a tailnet's split-DNS table in step with its services and devices.
Nameservers in the config may be Tailscale services (svc:name), tailnet
devices (device:hostname) or literal addresses; each run resolves them
and replaces the split-DNS configuration.

Architecture:
- Strategy Pattern for credential schemes (API key, OAuth)
- Factory Pattern for creating strategies and the API client
- Facade Pattern for the sync service
- Value Object Pattern for immutable data models
"""

from .models import Device, NameserverReference, ReferenceKind, ServiceInfo
from .strategies import AuthStrategy, AuthType, ApiKeyStrategy, OAuthStrategy
from .repositories import StrategyFactory, create_client
from .clients import TailscaleClient
from .parsers import load_config, ReferenceParser, DurationParser
from .services import ReferenceResolver, DNSUpdater, SplitDNSSyncService, RunLoop
from .formatters import SplitDNSFormatter

__version__ = "1.0.0"

__all__ = [
    # Models
    "Device",
    "NameserverReference",
    "ReferenceKind",
    "ServiceInfo",
    # Strategies
    "AuthStrategy",
    "AuthType",
    "ApiKeyStrategy",
    "OAuthStrategy",
    # Factories
    "StrategyFactory",
    "create_client",
    # Clients
    "TailscaleClient",
    # Parsers
    "load_config",
    "ReferenceParser",
    "DurationParser",
    # Services
    "ReferenceResolver",
    "DNSUpdater",
    "SplitDNSSyncService",
    "RunLoop",
    # Formatters
    "SplitDNSFormatter",
]
