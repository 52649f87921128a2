"""
Centralized configuration for the OrderDesk backend.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings should be namespaced (e.g., SUPABASE_*, AUTH_*, ORDER_*).
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "OrderDesk API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["GET", "POST", "PUT", "DELETE"]
    cors_allow_headers: list[str] = ["Content-Type", "Authorization"]

    # Supabase
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    supabase_db_url: str = ""  # direct Postgres URI, migrations only

    # Identity provider (OIDC issuer, e.g. Auth0)
    auth_issuer: str = ""
    auth_audience: str = ""
    auth_algorithms: list[str] = ["RS256"]
    auth_jwks_url: str = ""
    auth_jwt_secret: str = ""  # HS256 shared secret for local development

    # Order policy
    order_min_quantity: int = 1
    order_max_quantity: int = 100
    order_message_max_length: int = 500
    order_location_min_length: int = 2
    order_location_max_length: int = 50
    order_product_min_length: int = 2
    order_product_max_length: int = 100
    non_delivery_weekday: int = 6  # date.weekday(): Monday=0, Sunday=6
    delivery_timezone: str = "Asia/Colombo"
    enforce_catalog_membership: bool = False

    # Client
    api_base_url: str = "http://localhost:8000/api"
    api_timeout: float = 10.0
    session_file: str = "~/.orderdesk/session.json"

    @property
    def jwks_url(self) -> str:
        """JWKS endpoint, derived from the issuer unless set explicitly."""
        if self.auth_jwks_url:
            return self.auth_jwks_url
        if not self.auth_issuer:
            return ""
        return self.auth_issuer.rstrip("/") + "/.well-known/jwks.json"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
