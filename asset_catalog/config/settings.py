"""
Application configuration using Pydantic settings.

Configuration is loaded from environment variables with sensible defaults.
Using Pydantic's BaseSettings means we get:
- Type validation at startup (fail fast if config is wrong)
- Documentation of what's required vs optional
- Easy testing with different configurations

Mock mode serves an in-memory demo bucket so the API can run locally
without storage credentials.

The listing page size, traversal depth and bucket name are fixed
constants of the storage client, not settings.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

BUCKET_NAME = "game-assets"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables.
    For lists (like cors_origins), use comma-separated values in env.
    """

    # API Configuration
    api_title: str = "Asset Catalog API"
    api_version: str = "v1"

    # Supabase Storage Configuration
    supabase_url: str = Field(
        default="https://kteobfyferrukqeolofj.supabase.co",
        description="Base URL of the Supabase project hosting the asset bucket"
    )
    supabase_service_role_key: str = Field(
        default="",
        description="Service credential sent as both apikey and bearer token on listing calls"
    )
    storage_mock_mode: bool = Field(
        default=False,
        description="Serve an in-memory demo bucket instead of calling Supabase."
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    # CORS
    cors_origins: str = Field(
        default="http://localhost:3000",
        description="Comma-separated list of allowed CORS origins. Use * for development only."
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    @property
    def storage_base_url(self) -> str:
        return f"{self.supabase_url.rstrip('/')}/storage/v1"

    @property
    def listing_url(self) -> str:
        """Endpoint for one-level listings of the asset bucket."""
        return f"{self.storage_base_url}/object/list/{BUCKET_NAME}"

    @property
    def public_base_url(self) -> str:
        """Prefix for public read URLs; append "<category>/<item name>"."""
        return f"{self.storage_base_url}/object/public/{BUCKET_NAME}"

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse comma-separated CORS origins into a list."""
        if self.cors_origins == "*":
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    def validate_required_fields(self) -> list[str]:
        """
        Validate that required fields are set based on mock mode settings.

        Returns list of missing required fields. The credential has an
        empty default so the app still boots; listings will then fail
        and degrade to an empty catalog.
        """
        missing = []

        if not self.storage_mock_mode:
            if not self.supabase_url:
                missing.append("SUPABASE_URL")
            if not self.supabase_service_role_key:
                missing.append("SUPABASE_SERVICE_ROLE_KEY")

        return missing


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    For tests, call get_settings.cache_clear() to reset.
    """
    return Settings()
