"""Configuration management for the console."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="ODPS_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Service Configuration
    endpoint: Optional[str] = Field(None, description="Service REST endpoint")
    access_id: Optional[str] = Field(None, description="Access id for the service")
    access_key: Optional[str] = Field(None, description="Access key for the service")
    timeout_seconds: float = Field(default=30, description="Timeout for one service request in seconds")
    page_size: int = Field(default=1000, description="Page size for table listings")

    # Session Configuration
    project: Optional[str] = Field(None, description="Default project for commands that omit one")

    # Logging Configuration
    log_level: str = Field(default="WARNING", description="Log level")


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from the environment and an optional .env file.

    Args:
        env_file: Optional path overriding the default ``.env``

    Returns:
        Settings instance
    """
    if env_file is not None:
        return Settings(_env_file=env_file)
    return Settings()
