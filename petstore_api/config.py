"""
Pet Store API Configuration

Petfinder credentials and server settings.
Credentials are loaded from secret files (recommended) or environment variables.
No hardcoded credentials - secrets must be provided.
"""

import logging
import os
from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


def _read_secret_file(env_var: str) -> str | None:
    """Read secret from the file path specified in env var."""
    file_path = os.getenv(env_var)
    if file_path:
        path = Path(file_path)
        if path.exists():
            return path.read_text().strip()
        logger.warning(f"Secret file for {env_var} not found: {file_path}")
    return None


class Settings(BaseSettings):
    """
    Service configuration from environment.

    Environment Variables:
        PETFINDER_API_KEY / PETFINDER_API_KEY_FILE: OAuth client ID
        PETFINDER_API_SECRET / PETFINDER_API_SECRET_FILE: OAuth client secret
        PETFINDER_BASE_URL: Upstream REST base (default: https://api.petfinder.com/v2)
        PETFINDER_TOKEN_URL: OAuth2 token endpoint
        PETFINDER_TIMEOUT_SECONDS: HTTP client timeout (default: 30)
        PETSTORE_HOST / PETSTORE_PORT: Listener address (default: 0.0.0.0:3000)
        PETSTORE_LOG_LEVEL: Root log level (default: INFO)
        PETSTORE_JSON_LOGS: Emit JSON log lines (default: false)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # API Credentials
    api_key: str = Field(default="", validation_alias="PETFINDER_API_KEY")
    api_secret: str = Field(default="", validation_alias="PETFINDER_API_SECRET")

    # URLs
    base_url: str = Field(
        default="https://api.petfinder.com/v2",
        validation_alias="PETFINDER_BASE_URL",
    )
    token_url: str = Field(
        default="https://api.petfinder.com/v2/oauth2/token",
        validation_alias="PETFINDER_TOKEN_URL",
    )
    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        validation_alias="PETFINDER_TIMEOUT_SECONDS",
    )

    # Server
    host: str = Field(default="0.0.0.0", validation_alias="PETSTORE_HOST")
    port: int = Field(default=3000, validation_alias="PETSTORE_PORT")
    log_level: str = Field(default="INFO", validation_alias="PETSTORE_LOG_LEVEL")
    json_logs: bool = Field(default=False, validation_alias="PETSTORE_JSON_LOGS")

    @model_validator(mode="after")
    def _load_secret_files(self) -> "Settings":
        # Secret files win over plain env vars
        self.api_key = _read_secret_file("PETFINDER_API_KEY_FILE") or self.api_key
        self.api_secret = _read_secret_file("PETFINDER_API_SECRET_FILE") or self.api_secret
        return self

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key and self.api_secret)

    def __repr__(self) -> str:
        """Safe repr that doesn't expose credentials."""
        return f"Settings(base_url={self.base_url!r}, port={self.port!r}, configured={self.is_configured!r})"

    __str__ = __repr__


# Global configuration - lazy loaded
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get service settings (lazy loaded)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset the cached settings (for testing)."""
    global _settings
    _settings = None
