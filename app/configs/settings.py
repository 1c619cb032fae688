"""Application settings and configuration constants.

This module contains application settings, constants, and configuration
values for the Blogging API backend.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from pydantic import SecretStr
from pydantic_settings.main import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).parent.parent.parent / ".env"

# --- Constants ---
WORDS_PER_MINUTE = 200
PASSWORD_MIN_LENGTH = 6
TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 500
TAG_MAX_LENGTH = 50
MAX_TAGS = 20

# Response constants
DEFAULT_ERROR_MESSAGE = "Internal Server Error"
BLOG_NOT_FOUND = "Blog not found"
INVALID_CREDENTIALS = "Invalid email or password"


class Settings(BaseSettings):
    """Application settings with validation and default values."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Blogging API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Environment
    ENVIRONMENT: Literal["development", "staging", "production", "test"] = "development"
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = True
    LOG_FILE: str = "logs/app.log"
    CORS_ORIGINS: list[str] = ["*"]

    # Database Configuration
    DATABASE_URL: str = "sqlite+aiosqlite:///./blogging.db"
    DATABASE_ECHO: bool = False
    POOL_SIZE: int = 5
    MAX_OVERFLOW: int = 10
    POOL_TIMEOUT: int = 30
    POOL_RECYCLE: int = 1800

    # JWT Configuration
    SECRET_KEY: SecretStr = SecretStr("change-me-in-production")
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    JWT_ISSUER: str = "blogging-api"
    JWT_AUDIENCE: str = "blogging-api-users"

    # Password hashing
    PASSWORD_SECURITY_LEVEL: Literal["low", "medium", "high"] = "medium"

    # Pagination
    DEFAULT_PAGE_LIMIT: int = 20
    MAX_PAGE_LIMIT: int = 100

    # Rate limiting
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_STORAGE_URI: str = "memory://"


settings = Settings()


class LimiterConfig(BaseSettings):
    """Rate limiter configuration passed straight into slowapi's ``Limiter``."""

    model_config = SettingsConfigDict(env_prefix="LIMITER_", case_sensitive=False)

    enabled: bool = settings.RATE_LIMIT_ENABLED
    storage_uri: str = settings.RATE_LIMIT_STORAGE_URI
    headers_enabled: bool = False
    strategy: Literal["fixed-window", "moving-window"] = "fixed-window"


@dataclass(frozen=True, slots=True)
class HasherConfig:
    """Argon2id cost parameters for one security level."""

    memory_cost: int
    time_cost: int
    parallelism: int


# Memory cost is expressed in KiB
CONFIG_MAP: dict[str, HasherConfig] = {
    "low": HasherConfig(memory_cost=8 * 1024, time_cost=1, parallelism=1),
    "medium": HasherConfig(memory_cost=64 * 1024, time_cost=2, parallelism=2),
    "high": HasherConfig(memory_cost=256 * 1024, time_cost=3, parallelism=4),
}
