"""
Notes App Backend — Application Configuration
===============================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by main.py (app factory, logging) and the CLI entrypoint.
When:  Loaded once at module import time.

There is deliberately very little to configure: the note store lives in
process memory, so no connection strings or storage paths exist.
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Development is opt-in: set ENVIRONMENT=development to seed example
    notes into the store on startup. Any other environment starts empty.
    """

    app_name: str = Field(default="Notes App API")

    # ── Environment ───────────────────────────────────────────────────────
    # What: Deployment flavour. Only "development" seeds example notes.
    # Valid: development, production, test
    environment: str = Field(default="production")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Ensures environment is one of the known deployment flavours."""
        valid = {"development", "production", "test"}
        lower = v.strip().lower()
        if lower not in valid:
            raise ValueError(f"Invalid environment '{v}'. Must be one of: {valid}")
        return lower

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    # ── CORS ──────────────────────────────────────────────────────────────
    # What: Allowed origins for cross-origin requests
    # Format: Comma-separated URLs, or "*" to accept (and echo) any origin
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def cors_allow_any_origin(self) -> bool:
        return "*" in self.cors_origins_list

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

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # ENVIRONMENT and environment both work
        "extra": "ignore",
    }


# Singleton instance, imported by the app factory
settings = Settings()
