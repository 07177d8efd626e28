"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, computed_field, field_validator


class CORSConfig(BaseModel):
    """CORS configuration for the application."""

    origins: list[str] = Field(default=["http://localhost:5173"])
    allow_credentials: bool = True
    allow_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    )
    allow_headers: list[str] = Field(default=["*"])


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="plain", description="Log format")
    file: str | None = Field(default=None, description="Log file path")
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )


class DatabaseConfig(BaseModel):
    """Database configuration model."""

    url: str = Field(
        default="sqlite:///./bookshelf.db",
        description="Database connection URL",
    )
    echo: bool = Field(default=False, description="Echo SQL statements")
    pool_size: int = Field(default=20, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum pool overflow")
    pool_timeout: int = Field(default=30, description="Pool timeout in seconds")
    pool_recycle: int = Field(default=1800, description="Pool recycle time in seconds")
    create_tables: bool = Field(
        default=True, description="Create missing tables when the API starts"
    )

    @computed_field
    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    @computed_field
    @property
    def connection_string(self) -> str:
        """Connection string handed to SQLAlchemy."""
        return self.url


class StorageConfig(BaseModel):
    """Cover image storage configuration."""

    web_root: str = Field(
        default="wwwroot", description="Directory holding publicly served files"
    )
    image_folder: str = Field(
        default="images/books",
        description="Folder below web_root where book covers are written",
    )
    cache_max_age_seconds: int = Field(
        default=60 * 60 * 24 * 7,
        description="Cache-Control max-age sent with served cover images",
    )

    @field_validator("image_folder")
    @classmethod
    def _strip_slashes(cls, value: str) -> str:
        folder = value.strip().strip("/")
        if not folder:
            raise ValueError("image_folder must not be empty")
        return folder

    @property
    def root_path(self) -> Path:
        """Directory where cover files are stored on disk."""
        return Path(self.web_root) / self.image_folder

    @property
    def public_prefix(self) -> str:
        """URL path prefix under which covers are published."""
        return f"/{self.image_folder}"


class PaginationConfig(BaseModel):
    """Defaults applied to list requests."""

    default_page_size: int = Field(default=10, ge=1)
    max_page_size: int = Field(default=100, ge=1)


class AppConfig(BaseModel):
    """Application configuration model."""

    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    host: str = Field(default="localhost", description="Application host")
    port: int = Field(default=8000, description="Application port")
    cors: CORSConfig = Field(
        default_factory=CORSConfig, description="CORS configuration"
    )

    @property
    def base_url(self) -> str:
        """Construct the base URL from host and port."""
        scheme = "https" if self.environment == "production" else "http"
        return f"{scheme}://{self.host}:{self.port}"


class ConfigData(BaseModel):
    """Root configuration model that matches the config.yaml structure."""

    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    database: DatabaseConfig = Field(
        default_factory=DatabaseConfig, description="Database configuration"
    )
    storage: StorageConfig = Field(
        default_factory=StorageConfig, description="Cover image storage"
    )
    pagination: PaginationConfig = Field(
        default_factory=PaginationConfig, description="List pagination defaults"
    )
    app: AppConfig = Field(
        default_factory=AppConfig, description="Application configuration"
    )
