"""Application configuration using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Shopify Admin API
    shopify_store_url: str = ""  # e.g., "https://my-store.myshopify.com"
    shopify_access_token: str = ""
    shopify_api_version: str = "2025-01"
    shopify_request_timeout: float = 30.0

    # Application
    debug: bool = False
    log_level: str = "info"


settings = Settings()
