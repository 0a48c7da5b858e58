"""
Auth strategy implementations - Strategy Pattern.
Each Tailscale credential scheme (API key, OAuth) has its own strategy.
"""

from .base_strategy import AuthStrategy, AuthType
from .api_key_strategy import ApiKeyStrategy
from .oauth_strategy import OAuthStrategy

__all__ = [
    'AuthStrategy',
    'AuthType',
    'ApiKeyStrategy',
    'OAuthStrategy',
]
