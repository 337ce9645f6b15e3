"""
Petfinder API Client

Handles all HTTP communication with the Petfinder v2 REST API.
Features:
- Bearer authentication through TokenProvider
- One re-authentication and retry when upstream answers 401
- Upstream errors mapped onto the service error hierarchy
"""

import logging
from typing import Any

import httpx

from .auth import TokenProvider
from .config import Settings
from .errors import NotFoundError, UpstreamAuthError, UpstreamError

logger = logging.getLogger(__name__)


class PetfinderClient:
    """
    Async Petfinder REST API client.

    Usage:
        client = PetfinderClient(settings, tokens, http)
        page = await client.list_animals(type="dog", page=2)
        animal = await client.get_animal(42)
        types = await client.list_types()
    """

    def __init__(self, settings: Settings, tokens: TokenProvider, http: httpx.AsyncClient):
        self.settings = settings
        self.tokens = tokens
        self._http = http
        self._request_count = 0

    @property
    def request_count(self) -> int:
        return self._request_count

    async def _send(self, method: str, url: str, authorization: str, **kwargs) -> httpx.Response:
        try:
            response = await self._http.request(
                method,
                url,
                headers={"Authorization": authorization, "Accept": "application/json"},
                **kwargs,
            )
        except httpx.RequestError as e:
            logger.error(f"Request error: {method} {url}: {e}")
            raise UpstreamError(f"Upstream request failed: {e}") from e

        self._request_count += 1
        logger.debug(f"Petfinder API: {method} {url} -> {response.status_code}")
        return response

    async def _request(self, method: str, path: str, **kwargs) -> dict[str, Any]:
        """
        Execute an authenticated request and return the parsed JSON object.

        Handles:
        - Token rejected (401) -> refresh token, retry exactly once
        - Anything else >= 400 -> UpstreamError carrying the upstream status
        """
        url = f"{self.settings.base_url}{path}"

        token = await self.tokens.get_token()
        response = await self._send(method, url, token.authorization, **kwargs)

        if response.status_code == 401:
            logger.warning(f"Token rejected by upstream for {method} {path}, re-authenticating")
            token = await self.tokens.refresh(stale=token)
            response = await self._send(method, url, token.authorization, **kwargs)
            if response.status_code == 401:
                logger.error(f"Upstream rejected refreshed token for {method} {path}")
                raise UpstreamAuthError(
                    "Upstream rejected the request after re-authentication",
                    details={"upstream_status": 401, "path": path},
                )

        if response.status_code >= 400:
            raise self._error_for(response, path)

        try:
            body = response.json()
        except ValueError as e:
            raise UpstreamError("Upstream returned invalid JSON", upstream_status=response.status_code) from e

        if not isinstance(body, dict):
            logger.error(f"Unexpected {type(body).__name__} body from {method} {path}")
            raise UpstreamError(
                "Upstream returned an unexpected response body",
                upstream_status=response.status_code,
                details={"path": path},
            )
        return body

    def _error_for(self, response: httpx.Response, path: str) -> UpstreamError:
        message = _upstream_message(response)
        logger.error(f"API error: {response.status_code} {path} - {message}")
        return UpstreamError(message, upstream_status=response.status_code, details={"path": path})

    # =========================================================================
    # Animals
    # =========================================================================

    async def list_animals(self, **filters: Any) -> dict[str, Any]:
        """
        Fetch one page of animals.

        Args:
            **filters: Petfinder query parameters (type, breed, page, limit, ...).
                None values are dropped.

        Returns:
            Page body: {"animals": [...], "pagination": {...}}
        """
        params = {key: value for key, value in filters.items() if value is not None}
        return await self._request("GET", "/animals", params=params)

    async def get_animal(self, animal_id: int) -> dict[str, Any]:
        """Get a single animal by ID."""
        try:
            body = await self._request("GET", f"/animals/{animal_id}")
        except UpstreamError as e:
            if e.upstream_status == 404:
                raise NotFoundError("Pet", animal_id) from e
            raise
        return body.get("animal", body)

    # =========================================================================
    # Types
    # =========================================================================

    async def list_types(self) -> list[dict[str, Any]]:
        """List all animal types."""
        body = await self._request("GET", "/types")
        return body.get("types", [])


def _upstream_message(response: httpx.Response) -> str:
    """Pull a readable message out of a problem-details body, else the raw text."""
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
    if isinstance(body, dict):
        return str(body.get("detail") or body.get("title") or body)
    return str(body)
