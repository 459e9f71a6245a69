"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from ``BRICKFOLIO_*`` environment variables."""

    # Collection document
    data_source: str = Field(
        default="public/sets.json",
        description="URL or file path of the sets.json collection document",
    )
    request_timeout: float = Field(default=10.0, gt=0)

    # Explorer
    suggestion_limit: int = Field(default=6, ge=0)
    spotlight_limit: int = Field(default=15, ge=0)

    # Data build
    csv_path: str = "Brickset-mySets-owned.csv"
    output_path: str = "public/sets.json"

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="BRICKFOLIO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
