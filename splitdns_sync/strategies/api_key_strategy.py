import logging
import requests
from .base_strategy import AuthStrategy

logger = logging.getLogger(__name__)


class ApiKeyStrategy(AuthStrategy):
    """Tailscale API key authentication (HTTP basic, key as username)"""

    @property
    def auth_name(self) -> str:
        return "API key"

    def is_configured(self) -> bool:
        """Check if an API key is set"""
        return bool(self.credentials.get("api_key"))

    def ensure_connected(self) -> None:
        if self._session and self._auth_token:
            return

        self._session = requests.Session()
        self._auth_token = self.credentials["api_key"]
        self._session.auth = (self._auth_token, "")
        self._session.headers.update({"Accept": "application/json"})
