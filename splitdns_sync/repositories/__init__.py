"""
Repositories and factories - Factory Pattern implementation.
"""

from .strategy_factory import StrategyFactory
from .client_factory import create_client, normalize_base_url

__all__ = ['StrategyFactory', 'create_client', 'normalize_base_url']
