"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    api_version: str = "0.1.0"
    debug: bool = False

    # Database
    database_url: str = "postgresql+asyncpg://customizer:customizer_dev_password@db:5432/customizer"
    create_tables_on_startup: bool = False

    # Pricing
    currency: str = "USD"

    # Storefront
    catalog_api_url: str = "http://localhost:8000/api"
    catalog_api_timeout: float = 10.0

    # Cart platform
    cart_url: str = "http://localhost:3000"
    cart_add_path: str = "/cart/add.js"
    cart_timeout: float = 10.0

    # Logging
    log_level: str = "INFO"

    class Config:
        """Pydantic configuration."""

        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
