"""
Pet Store API

Pet-store style CRUD endpoints backed by the Petfinder v2 API.

Modules:
- config: Configuration management
- errors: Custom exception classes and the JSON error body
- models: Pydantic request/response schemas
- auth: OAuth2 client-credentials token provider
- client: Petfinder API client with retry-after-401
- routes: FastAPI endpoint routers
- main: Application factory and server entrypoint
"""

from .auth import AccessToken, TokenProvider
from .client import PetfinderClient
from .config import Settings, get_settings
from .errors import (
    AuthenticationError,
    NotFoundError,
    PetstoreError,
    UpstreamAuthError,
    UpstreamError,
)

__version__ = "1.0.0"

__all__ = [
    # Configuration
    "Settings",
    "get_settings",
    # Errors
    "PetstoreError",
    "AuthenticationError",
    "UpstreamAuthError",
    "UpstreamError",
    "NotFoundError",
    # Upstream
    "AccessToken",
    "TokenProvider",
    "PetfinderClient",
]
