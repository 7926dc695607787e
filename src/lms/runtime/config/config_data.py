"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

import os
from typing import Literal

from loguru import logger
from pydantic import BaseModel, Field


class CORSConfig(BaseModel):
    """CORS configuration for the application."""

    origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:3001"]
    )
    allow_credentials: bool = True
    allow_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    )
    allow_headers: list[str] = Field(default=["*"])


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="json", description="Log format")
    file: str | None = Field(default="logs/lms.log", description="Log file path")
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )


class DatabaseConfig(BaseModel):
    """Database configuration model."""

    url: str = Field(
        default="sqlite:///./library.db",
        description="Database connection URL",
    )
    environment_mode: str = Field(
        default="development", description="Environment mode: development, production or test"
    )
    pool_size: int = Field(default=20, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum pool overflow")
    pool_timeout: int = Field(default=30, description="Pool timeout in seconds")
    pool_recycle: int = Field(default=1800, description="Pool recycle time in seconds")
    statement_timeout_ms: int = Field(
        default=30000, description="Server-side statement timeout in milliseconds"
    )
    echo: bool = Field(default=False, description="Echo SQL statements")
    password_env_var: str | None = Field(
        default=None,
        description="Environment variable name containing database password",
    )
    password_file: str | None = Field(
        default=None,
        description="Path to file containing database password",
    )

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    @property
    def password(self) -> str | None:
        """
        Get the database password from the appropriate source.
        1. Outside production, parse it from the URL if present
        2. In production, read it from `password_file` or the variable named by `password_env_var`
        """
        from sqlalchemy.engine import make_url

        if self.environment_mode in ("development", "test"):
            return make_url(self.url).password

        if self.environment_mode != "production":
            raise ValueError(
                "Invalid environment_mode; must be 'development', 'production', or 'test'"
            )

        if self.password_file:
            try:
                with open(self.password_file) as f:
                    return f.read().strip()
            except OSError as e:
                raise ValueError("Failed to read database password from file.") from e
        if self.password_env_var:
            password = os.getenv(self.password_env_var)
            if password:
                return password
            raise ValueError(f"Environment variable {self.password_env_var} not set")
        return make_url(self.url).password

    @property
    def connection_string(self) -> str:
        """Construct the database connection string with the resolved password."""
        from sqlalchemy.engine import make_url

        base_url = make_url(self.url)
        if self.is_sqlite:
            return str(base_url)

        resolved_password = self.password
        if base_url.password and self.environment_mode == "production":
            logger.warning(
                "Database URL contains a password in production mode; "
                "consider using a secrets file or environment variable."
            )
        if resolved_password and resolved_password != base_url.password:
            base_url = base_url.set(password=resolved_password)
        # render_as_string keeps the password instead of masking it
        return base_url.render_as_string(hide_password=False)


class LibraryConfig(BaseModel):
    """Circulation and listing rules."""

    page_size: int = Field(default=10, ge=1, description="Books per listing page")
    loan_days: int = Field(default=30, ge=1, description="Days a book may be borrowed")
    fine_per_day: int = Field(
        default=1, ge=0, description="Fine charged per overdue day"
    )


class AlipayConfig(BaseModel):
    """Alipay gateway configuration model."""

    enabled: bool = Field(default=False, description="Enable the Alipay gateway")
    app_id: str | None = Field(default=None, description="Alipay application id")
    private_key: str | None = Field(default=None, description="Application RSA private key (PEM)")
    alipay_public_key: str | None = Field(
        default=None, description="Alipay RSA public key (PEM)"
    )
    notify_url: str | None = Field(
        default=None, description="Asynchronous notification callback URL"
    )
    sign_type: Literal["RSA", "RSA2"] = Field(default="RSA2", description="Signature type")
    sandbox: bool = Field(default=True, description="Use the Alipay sandbox")


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

    app: AppConfig = Field(
        default_factory=AppConfig, description="Application configuration"
    )
    database: DatabaseConfig = Field(
        default_factory=DatabaseConfig, description="Database configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    library: LibraryConfig = Field(
        default_factory=LibraryConfig, description="Circulation configuration"
    )
    alipay: AlipayConfig = Field(
        default_factory=AlipayConfig, description="Alipay configuration"
    )
