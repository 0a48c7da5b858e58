"""
Client Factory - builds an authenticated TailscaleClient.

Credential precedence:
1. OAuth client credentials, when both client id and secret are set
2. API key
3. Otherwise there is nothing to authenticate with (AuthConfigError)
"""

import logging
from typing import Optional
from urllib.parse import urlparse

from ..clients import TailscaleClient
from ..config import TailscaleConfig
from ..exceptions import AuthConfigError, URLError
from ..strategies import AuthType
from .strategy_factory import StrategyFactory

logger = logging.getLogger(__name__)


def normalize_base_url(base_url: str) -> str:
    """
    Validate and normalize the API base URL.

    Args:
        base_url: e.g. 'https://api.tailscale.com'

    Returns:
        The URL without a trailing slash

    Raises:
        URLError: If the URL is not an absolute http(s) URL
    """
    try:
        parsed = urlparse(base_url)
        # Accessing port validates it
        parsed.port
    except ValueError as e:
        raise URLError(f"invalid base URL: {e}") from e

    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise URLError(f"invalid base URL: {base_url!r}")

    return base_url.rstrip("/")


def create_client(tailnet: str,
                  api_key: Optional[str],
                  client_id: Optional[str],
                  client_secret: Optional[str],
                  base_url: str,
                  timeout: Optional[float] = None) -> TailscaleClient:
    """
    Create an authenticated Tailscale API client.

    Args:
        tailnet: Tailnet name ('-' for the credentials' default tailnet)
        api_key: Tailscale API key
        client_id: OAuth client id
        client_secret: OAuth client secret
        base_url: API base URL
        timeout: Optional per-request timeout in seconds

    Returns:
        TailscaleClient ready to use

    Raises:
        URLError: If base_url cannot be parsed
        AuthConfigError: If no usable credentials were given
    """
    base_url = normalize_base_url(base_url)

    if client_id and client_secret:
        logger.info("Using OAuth client credentials authentication")
        strategy = StrategyFactory.create_strategy(
            AuthType.OAUTH,
            {
                "client_id": client_id,
                "client_secret": client_secret,
                "token_url": base_url + TailscaleConfig.OAUTH_TOKEN_PATH
            },
            timeout=timeout
        )
    elif api_key:
        logger.info("Using API key authentication")
        strategy = StrategyFactory.create_strategy(
            AuthType.API_KEY,
            {"api_key": api_key},
            timeout=timeout
        )
    else:
        raise AuthConfigError("need either api key or oauth creds")

    if not strategy.is_configured():
        raise AuthConfigError(f"{strategy.auth_name} credentials are incomplete")

    return TailscaleClient(tailnet, base_url, strategy, timeout=timeout)
