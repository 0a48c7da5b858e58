import logging
import time
from typing import Dict, Optional
import requests
from .base_strategy import AuthStrategy
from ..exceptions import AuthError

logger = logging.getLogger(__name__)


class OAuthStrategy(AuthStrategy):
    """Tailscale OAuth client-credentials authentication"""

    # Refresh this many seconds before the token actually expires
    EXPIRY_MARGIN_SECONDS = 10

    def __init__(self, credentials: Dict[str, str], timeout: Optional[float] = None):
        super().__init__(credentials, timeout)
        self.token_url = credentials.get("token_url")
        self._expires_at: Optional[float] = None

    @property
    def auth_name(self) -> str:
        return "OAuth client credentials"

    def is_configured(self) -> bool:
        """Check if client id, client secret and token URL are set"""
        return all([
            self.credentials.get("client_id"),
            self.credentials.get("client_secret"),
            self.token_url
        ])

    def _token_expired(self) -> bool:
        if self._expires_at is None:
            return False
        return time.monotonic() >= self._expires_at - self.EXPIRY_MARGIN_SECONDS

    def ensure_connected(self) -> None:
        """Fetch an access token if there is none or it is about to expire"""
        if self._session and self._auth_token and not self._token_expired():
            return

        if self._session is None:
            self._session = requests.Session()
            self._session.headers.update({"Accept": "application/json"})
        else:
            self._session.headers.pop("Authorization", None)

        logger.debug(f"Requesting OAuth access token from {self.token_url}")
        token_data = {
            "grant_type": "client_credentials",
            "client_id": self.credentials["client_id"],
            "client_secret": self.credentials["client_secret"]
        }

        try:
            response = self._session.post(self.token_url, data=token_data, timeout=self.timeout)
        except requests.RequestException as e:
            raise AuthError(f"requesting OAuth token: {e}") from e

        if response.status_code != 200:
            raise AuthError(
                f"OAuth token endpoint returned status {response.status_code}",
                status_code=response.status_code
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise AuthError(f"decoding OAuth token response: {e}") from e

        if not isinstance(payload, dict):
            raise AuthError(f"OAuth token response is {type(payload).__name__}, not an object")

        token = payload.get("access_token")
        if not token or not isinstance(token, str):
            raise AuthError("OAuth token response has no access_token")

        expires_in = payload.get("expires_in")
        try:
            self._expires_at = time.monotonic() + float(expires_in) if expires_in else None
        except (TypeError, ValueError) as e:
            raise AuthError(f"OAuth token response has invalid expires_in {expires_in!r}") from e
        self._auth_token = token
        self._session.headers.update({"Authorization": f"Bearer {token}"})
        logger.debug(f"Obtained OAuth access token (expires in {expires_in}s)")

    def disconnect(self) -> None:
        super().disconnect()
        self._expires_at = None
