"""
Parser utilities for the config file, nameserver references and intervals.
"""

from .config_parser import load_config
from .duration_parser import DurationParser
from .reference_parser import ReferenceParser

__all__ = ['load_config', 'DurationParser', 'ReferenceParser']
