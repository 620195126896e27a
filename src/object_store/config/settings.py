# src/object_store/config/settings.py
import logging
from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """
    Single source of truth for object store settings.

    Configuration precedence:
    1. Environment variables prefixed with OBJECT_STORE_ (highest priority)
    2. .env file (if exists)
    3. Default values in this class (lowest priority)

    Usage:
        from object_store.config.settings import get_settings
        settings = get_settings()
        store = create_store(settings)
    """

    # Root folder
    root_folder_id: Optional[str] = Field(
        default=None,
        description="Id given to the root folder instead of an allocated one"
    )

    root_folder_name: str = Field(
        default="root",
        description="Name of the root folder"
    )

    # Seeding
    seed_dir: Optional[str] = Field(
        default=None,
        description="Local directory mirrored into a new store"
    )

    max_seed_file_bytes: Optional[int] = Field(
        default=None,
        ge=0,
        description="Files larger than this are skipped when seeding"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )

    model_config = SettingsConfigDict(
        env_prefix="OBJECT_STORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Invalid log_level: {v}. Must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return level

    @field_validator('root_folder_id')
    @classmethod
    def blank_root_id_means_unset(cls, v):
        """An empty OBJECT_STORE_ROOT_FOLDER_ID falls back to an allocated id."""
        return v or None


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
