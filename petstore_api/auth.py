"""
Petfinder OAuth2 Token Provider

Obtains bearer tokens with the client credentials flow.
Tokens are fetched lazily and replaced only when upstream rejects them;
there is no expiry timer.
"""

import asyncio
import logging
import time
from dataclasses import dataclass, field

import httpx

from .config import Settings
from .errors import AuthenticationError
from .logging_config import token_presence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccessToken:
    """Immutable OAuth2 token snapshot."""

    access_token: str
    token_type: str = "Bearer"
    expires_in: int | None = None  # informational only
    issued_at: float = field(default_factory=time.time)

    @property
    def authorization(self) -> str:
        """Authorization header value."""
        return f"{self.token_type} {self.access_token}"

    def __repr__(self) -> str:
        return f"AccessToken(token_type={self.token_type!r}, expires_in={self.expires_in!r})"


class TokenProvider:
    """
    OAuth2 client for the Petfinder token endpoint.

    Holds at most one AccessToken. A refresh swaps the held snapshot under a
    lock; callers that name an already-replaced snapshot get the new one
    back instead of triggering another exchange.
    """

    def __init__(self, settings: Settings, http: httpx.AsyncClient):
        self.settings = settings
        self._http = http
        self._token: AccessToken | None = None
        self._lock = asyncio.Lock()
        self.exchange_count = 0

    @property
    def current(self) -> AccessToken | None:
        return self._token

    async def get_token(self) -> AccessToken:
        """Return the held token, exchanging credentials first if none is held."""
        token = self._token
        if token is not None:
            return token
        return await self.refresh()

    async def get_auth_header(self) -> str:
        token = await self.get_token()
        return token.authorization

    async def refresh(self, stale: AccessToken | None = None) -> AccessToken:
        """
        Replace the held token with a freshly exchanged one.

        The held token is dropped before the exchange, so a failed exchange
        leaves no token held.

        Args:
            stale: The token the caller saw rejected. If another caller has
                already replaced it, the replacement is returned as-is.

        Raises:
            AuthenticationError: If the exchange fails.
        """
        async with self._lock:
            current = self._token
            if current is not None and current is not stale:
                return current
            # A rejected token is never kept, even if the exchange below fails
            self.invalidate()
            self._token = await self._exchange()
            return self._token

    def invalidate(self) -> None:
        """Drop the held token."""
        if self._token is not None:
            logger.info("Discarding held access token")
        self._token = None

    @property
    def token_status(self) -> str:
        return "held" if self._token is not None else "no_token"

    async def _exchange(self) -> AccessToken:
        """Request a new token from the OAuth2 endpoint."""
        if not self.settings.is_configured:
            logger.error("Token request skipped: PETFINDER_API_KEY / PETFINDER_API_SECRET not configured")
            raise AuthenticationError("Petfinder credentials not configured")

        data = {
            "grant_type": "client_credentials",
            "client_id": self.settings.api_key,
            "client_secret": self.settings.api_secret,
        }

        logger.info(f"Requesting OAuth2 token from {self.settings.token_url}")
        self.exchange_count += 1

        try:
            response = await self._http.post(self.settings.token_url, data=data)
        except httpx.RequestError as e:
            logger.error(f"Token request error: {e}")
            raise AuthenticationError(f"Token request failed: {e}") from e

        if response.status_code != 200:
            logger.error(f"Token request failed: {response.status_code} - {response.text}")
            raise AuthenticationError(
                f"Authentication failed with status {response.status_code}",
                details={"upstream_status": response.status_code},
            )

        try:
            token_data = response.json()
        except ValueError as e:
            logger.error(f"Token response was not JSON: {e}")
            raise AuthenticationError("Token response was not valid JSON") from e

        access_token = token_data.get("access_token")
        if not access_token:
            logger.error(f"Token response missing access_token ({token_presence('access_token', access_token)})")
            raise AuthenticationError("Token response did not contain an access_token")

        token = AccessToken(
            access_token=access_token,
            token_type=token_data.get("token_type") or "Bearer",
            expires_in=token_data.get("expires_in"),
        )
        logger.info(f"Token obtained ({token_presence('access_token', access_token)}, expires_in={token.expires_in})")
        return token
