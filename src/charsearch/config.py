from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseModel):
    """Application-specific configuration values."""

    name: str = "charsearch"
    env: str = "development"
    log_level: str = "INFO"
    log_file: Optional[str] = None
    # Transport settings for FastMCP: "stdio" (default), "http", or "sse"
    transport: Literal["stdio", "http", "sse"] = "stdio"
    host: str = "127.0.0.1"
    port: int = 8000


class StoreConfig(BaseModel):
    """Selects the document store backend."""

    # "embedded" keeps everything in process memory (tests, demos)
    backend: Literal["mongo", "embedded"] = "mongo"


class MongoConfig(BaseModel):
    """MongoDB connection configuration values."""

    url: str = "mongodb://localhost:27017"
    database: str = "charsearch"
    collection: str = "character"
    server_selection_timeout_ms: int = 5000
    app_name: Optional[str] = "charsearch"


class Settings(BaseSettings):
    """Top-level settings loaded from environment variables and .env only."""

    model_config = SettingsConfigDict(
        env_prefix="CHARSEARCH_",
        env_nested_delimiter="__",
        env_file=".env",
        extra="ignore",
    )

    app: AppConfig = AppConfig()
    store: StoreConfig = StoreConfig()
    mongo: MongoConfig = MongoConfig()


def load_settings() -> Settings:
    """Load settings from environment variables and .env only."""
    return Settings()  # type: ignore[call-arg]
