"""
Notes API — Application Configuration
======================================

What:  Centralized configuration management using Pydantic Settings.
How:   Values come from environment variables (or a .env file), are coerced
       and range-checked once, and are exposed through the `settings` object.
Who:   Read by main.create_app() and the logging setup. Tests pass their own
       Settings instance to create_app() instead of patching the singleton.

Environment variables (case-insensitive):
    APP_NAME, BACKEND_HOST, BACKEND_PORT, LOG_LEVEL, CORS_ORIGINS,
    DOCS_URL, NOTES_LOCK_STRIPES
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for a local demo; nothing here is
    secret because the service keeps no credentials.
    """

    # ── Application ───────────────────────────────────────────────────────
    app_name: str = Field(default="Personal Notes API")
    docs_url: str = Field(default="/docs")

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

    # ── CORS ──────────────────────────────────────────────────────────────
    # Comma-separated origins; "*" allows any origin.
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list, dropping blanks."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Note Store ────────────────────────────────────────────────────────
    # Number of striped locks guarding store mutations. Keys hash onto a
    # stripe, so writers to different notes rarely share a lock.
    notes_lock_stripes: int = Field(default=64, ge=1, le=4096)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


settings = Settings()
