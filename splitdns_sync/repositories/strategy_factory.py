"""
Strategy Factory - Factory Pattern implementation.
Creates auth strategy instances based on credential scheme.
"""

import logging
from typing import Dict, List, Type, Optional

from ..strategies import AuthStrategy, AuthType, ApiKeyStrategy, OAuthStrategy

logger = logging.getLogger(__name__)


class StrategyFactory:
    """
    Factory for creating auth strategy instances.

    Design Pattern: Factory Pattern + Registry Pattern
    Registers all available strategies and creates instances on demand.
    """

    _STRATEGIES: Dict[AuthType, Type[AuthStrategy]] = {
        AuthType.API_KEY: ApiKeyStrategy,
        AuthType.OAUTH: OAuthStrategy,
    }

    @classmethod
    def create_strategy(cls,
                        auth_type: AuthType,
                        credentials: Dict[str, str],
                        timeout: Optional[float] = None) -> AuthStrategy:
        """
        Create an auth strategy instance.

        Args:
            auth_type: Credential scheme
            credentials: Scheme-specific credentials
            timeout: Optional timeout in seconds for auth requests

        Returns:
            Strategy instance (not yet connected)

        Raises:
            ValueError: If the scheme is not supported
        """
        strategy_class = cls._STRATEGIES.get(auth_type)

        if not strategy_class:
            supported = ", ".join(t.value for t in cls.get_supported_auth_types())
            raise ValueError(f"Unknown auth type: {auth_type} (supported: {supported})")

        logger.debug(f"Creating strategy for auth type: {auth_type.value}")
        return strategy_class(credentials, timeout)

    @classmethod
    def get_supported_auth_types(cls) -> List[AuthType]:
        return list(cls._STRATEGIES.keys())

    @classmethod
    def register_strategy(cls, auth_type: AuthType, strategy_class: Type[AuthStrategy]):
        """
        Register a new strategy (for extensibility).

        Args:
            auth_type: Credential scheme
            strategy_class: Strategy class to register
        """
        cls._STRATEGIES[auth_type] = strategy_class
        logger.info(f"Registered strategy for auth type: {auth_type.value}")
