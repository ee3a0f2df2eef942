# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import load_settings
#   settings = load_settings()
#   print(settings.DB_HOST)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# Settings are validated once at startup. A missing database or object storage
# value stops the process before the server binds a port.
# =============================================================================

from functools import lru_cache
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

from app.exceptions import ConfigurationError


# Required variables, grouped by the collaborator they configure
DATABASE_FIELDS = ("DB_HOST", "DB_USER", "DB_PASSWORD", "DB_NAME")
OBJECT_STORAGE_FIELDS = (
    "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY",
    "AWS_REGION",
    "S3_BUCKET_NAME",
)

CONFIG_GROUPS = {
    "database": DATABASE_FIELDS,
    "object storage": OBJECT_STORAGE_FIELDS,
}


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses pydantic-settings to:
    - Automatically load from .env file
    - Treat empty values as missing
    - Provide defaults for the optional server and pool settings
    """

    # -------------------------------------------------------------------------
    # MySQL Configuration
    # -------------------------------------------------------------------------
    # These are required - app won't start without them

    DB_HOST: str = Field(..., description="MySQL server hostname")

    DB_USER: str = Field(..., description="MySQL user name")

    DB_PASSWORD: str = Field(..., description="MySQL password")

    DB_NAME: str = Field(..., description="Database holding the products table")

    DB_PORT: int = Field(
        default=3306,
        ge=1,
        le=65535,
        description="MySQL server port"
    )

    DB_CONNECTION_LIMIT: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Maximum number of pooled database connections"
    )

    # -------------------------------------------------------------------------
    # S3 Configuration
    # -------------------------------------------------------------------------
    # Also required

    AWS_ACCESS_KEY_ID: str = Field(..., description="AWS access key ID")

    AWS_SECRET_ACCESS_KEY: str = Field(..., description="AWS secret access key")

    AWS_REGION: str = Field(..., description="Region of the bucket (e.g., us-east-1)")

    S3_BUCKET_NAME: str = Field(..., description="Bucket holding the banner image")

    BANNER_OBJECT_KEY: str = Field(
        default="banner.jpg",
        min_length=1,
        description="Key of the banner image inside the bucket"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    DEBUG: bool = Field(
        default=False,
        description="Enable debug logging"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the server to"
    )

    PORT: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Port for the server"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        # DB_HOST= (empty) counts as unset
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator(*DATABASE_FIELDS, *OBJECT_STORAGE_FIELDS)
    @classmethod
    def _reject_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def database_url(self) -> URL:
        """
        SQLAlchemy URL for the async MySQL driver.

        Built with URL.create so special characters in the password
        do not need manual escaping.
        """
        return URL.create(
            "mysql+aiomysql",
            username=self.DB_USER,
            password=self.DB_PASSWORD,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        )


def _incomplete_groups(exc: ValidationError) -> tuple[list[str], list[str]]:
    """Map validation errors onto the configuration groups they belong to."""
    failed = {str(error["loc"][0]) for error in exc.errors() if error["loc"]}

    groups: list[str] = []
    fields: list[str] = []
    for group, names in CONFIG_GROUPS.items():
        missing = [name for name in names if name in failed]
        if missing:
            groups.append(group)
            fields.extend(missing)

    # Anything else that failed is an optional setting with a bad value
    fields.extend(sorted(failed - set(fields)))
    return groups, fields


def load_settings(env_file: str | None = ".env") -> Settings:
    """
    Build and validate Settings.

    Args:
        env_file: .env path to read, or None to use only the process environment

    Returns:
        Settings: Validated settings

    Raises:
        ConfigurationError: If any required value is missing or invalid
    """
    try:
        return Settings(_env_file=env_file)
    except ValidationError as e:
        groups, fields = _incomplete_groups(e)
        raise ConfigurationError(groups, fields) from e


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once.
    """
    return load_settings()
