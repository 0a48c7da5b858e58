"""
Shared exception classes used across the package.

Startup errors (config, credentials, base URL, interval) are always fatal.
Cycle errors (SyncError subclasses) abort the current resolve/update pass;
the run loop decides whether that ends the process.
"""

from typing import Optional


class SplitDNSSyncError(Exception):
    """Base class for all errors raised by this package"""
    pass


# ============================================================================
# Startup errors
# ============================================================================

class ConfigError(SplitDNSSyncError):
    """
    Raised when the split-DNS config file cannot be used.

    Examples:
        - File missing or unreadable
        - Content is not valid JSON
        - Top-level value is not an object of string -> array of strings
    """
    pass


class AuthConfigError(SplitDNSSyncError):
    """Raised when neither an API key nor OAuth client credentials are set"""
    pass


class URLError(SplitDNSSyncError):
    """Raised when the API base URL cannot be parsed"""
    pass


class InvalidIntervalError(SplitDNSSyncError):
    """Raised when the daemon interval string is not a valid duration"""
    pass


# ============================================================================
# Transport errors
# ============================================================================

class TailscaleAPIError(SplitDNSSyncError):
    """
    Raised when a Tailscale API call fails.

    Covers transport failures, non-success status codes and
    response bodies that cannot be decoded.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class AuthError(TailscaleAPIError):
    """Raised when an OAuth access token cannot be obtained"""
    pass


# ============================================================================
# Cycle errors
# ============================================================================

class SyncError(SplitDNSSyncError):
    """Base class for failures that abort a single resolve/update cycle"""
    pass


class DeviceListError(SyncError):
    """Raised when the device inventory cannot be fetched"""
    pass


class ServiceResolutionError(SyncError):
    """Raised when a svc: reference cannot be resolved to an address"""

    def __init__(self, reference: str, reason: str):
        super().__init__(f"resolving service {reference}: {reason}")
        self.reference = reference


class DeviceResolutionError(SyncError):
    """Raised when a device: reference cannot be resolved to an address"""

    def __init__(self, hostname: str, reason: str):
        super().__init__(f"resolving device {hostname}: {reason}")
        self.hostname = hostname


class UpdateError(SyncError):
    """Raised when the split-DNS table cannot be submitted"""
    pass


__all__ = [
    "SplitDNSSyncError",
    "ConfigError",
    "AuthConfigError",
    "URLError",
    "InvalidIntervalError",
    "TailscaleAPIError",
    "AuthError",
    "SyncError",
    "DeviceListError",
    "ServiceResolutionError",
    "DeviceResolutionError",
    "UpdateError",
]
