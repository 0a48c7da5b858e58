"""
Base auth strategy - Abstract base class using Strategy Pattern.
Defines the interface that all Tailscale credential schemes implement.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, Dict
import requests

logger = logging.getLogger(__name__)


class AuthType(Enum):
    """Credential scheme enumeration"""
    API_KEY = "API_KEY"
    OAUTH = "OAUTH"


class AuthStrategy(ABC):
    """
    Abstract base class for auth strategies.

    Design Pattern: Strategy Pattern
    Each credential scheme implements this interface and hands out a
    requests.Session that is authenticated for the Tailscale API.

    Responsibilities:
    - Own the HTTP session
    - Authenticate it (and re-authenticate when credentials expire)
    - Release it on disconnect
    """

    def __init__(self, credentials: Dict[str, str], timeout: Optional[float] = None):
        """
        Initialize strategy with credentials.

        Args:
            credentials: Dictionary of scheme-specific credentials
            timeout: Optional timeout in seconds for auth requests
        """
        self.credentials = credentials
        self.timeout = timeout
        self._session: Optional[requests.Session] = None
        self._auth_token: Optional[str] = None

    @property
    @abstractmethod
    def auth_name(self) -> str:
        """Human readable scheme name for log messages"""
        pass

    @abstractmethod
    def is_configured(self) -> bool:
        """
        Check if all credentials this scheme needs are present.

        Returns:
            True if the scheme can be used
        """
        pass

    @abstractmethod
    def ensure_connected(self) -> None:
        """
        Ensure the session exists and carries valid credentials.

        Raises:
            AuthError: If credentials are rejected or cannot be obtained
        """
        pass

    @property
    def session(self) -> requests.Session:
        """Authenticated session, connecting first if necessary"""
        self.ensure_connected()
        return self._session

    def disconnect(self) -> None:
        """Close the session and forget any credentials derived from it"""
        if self._session is not None:
            self._session.close()
            logger.debug(f"Closed {self.auth_name} session")
        self._session = None
        self._auth_token = None
