"""
API clients.
"""

from .tailscale_client import TailscaleClient

__all__ = ['TailscaleClient']
