"""
Starred Restaurants API — Application Configuration
====================================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the app factory, logging setup and middleware.
When:  Loaded once at module import time.
"""

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator
from typing import List


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for local development; nothing is
    required to start the service.
    """

    app_name: str = Field(default="Starred Restaurants API")

    # ── Routing ───────────────────────────────────────────────────────────
    # Mount points for the two routers. The starred router is a sub-router
    # of the outer app and only knows paths relative to this prefix.
    starred_prefix: str = Field(default="/starred-restaurants")
    restaurants_prefix: str = Field(default="/restaurants")

    @field_validator("starred_prefix", "restaurants_prefix")
    @classmethod
    def validate_prefix(cls, v: str) -> str:
        """Prefixes must start with '/' and must not end with one."""
        v = "/" + v.strip().strip("/")
        if v == "/":
            raise ValueError("Router prefix must not be empty")
        return v

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated URLs
    cors_origins: str = Field(default="http://localhost:3000")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8000, ge=1024, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


# Singleton instance — imported throughout the application
settings = Settings()
