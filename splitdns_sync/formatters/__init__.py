"""
Output formatters for dry-run previews.
"""

from .base_formatter import OutputFormatter
from .split_dns_formatter import SplitDNSFormatter

__all__ = ['OutputFormatter', 'SplitDNSFormatter']
