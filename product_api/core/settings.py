"""
Application configuration settings
"""
from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Application settings read from environment variables or .env"""

    app_title: str = Field(default="Product Catalog API")

    # Database
    database_url: str = Field(default="sqlite:///./products.db")
    database_echo: bool = Field(default=False)

    # CSV import
    csv_max_upload_bytes: int = Field(default=10 * 1024 * 1024)  # 10MB
    csv_bulk_batch_size: int = Field(default=1000, ge=1)

    # Pagination
    default_page_limit: int = Field(default=10, gt=0)
    max_page_limit: int = Field(default=500, gt=0)

    # HTTP
    cors_origins: List[str] = Field(default=["*"])
    slow_request_threshold: float = Field(default=1.0)

    # Logging
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> AppSettings:
    """Get cached settings instance"""
    return AppSettings()
