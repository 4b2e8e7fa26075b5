"""
NoteKeeper Backend - Application Configuration
================================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the application factory, the server entry point and
       the logging setup.
When:  Loaded once at module import time. `create_app()` also accepts an
       explicit Settings instance so tests can build apps with overrides.
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every value has a development default; nothing is required.
    Attributes are grouped by concern.
    """

    # ── Note Store ────────────────────────────────────────────────────────
    # Number of placeholder notes created when the application is built.
    # Seeded ids run 0..seed_count-1.
    seed_count: int = Field(default=15, ge=0, le=1000)

    # Title of each seeded note; `{index}` is replaced with the note id.
    seed_title_template: str = Field(default="Note {index}")

    @field_validator("seed_title_template")
    @classmethod
    def validate_seed_title_template(cls, v: str) -> str:
        """Template may only reference `{index}`; rendered once here to prove it."""
        try:
            v.format(index=0)
        except (KeyError, IndexError, ValueError) as e:
            raise ValueError(
                f"Invalid seed_title_template '{v}'. Only the {{index}} placeholder is allowed"
            ) from e
        return v

    # ── HTTP ──────────────────────────────────────────────────────────────
    # Prefix for the note routes. Empty serves /note and /note/{id}.
    api_prefix: str = Field(default="")

    @field_validator("api_prefix")
    @classmethod
    def validate_api_prefix(cls, v: str) -> str:
        """Prefix must be empty or an absolute path without a trailing slash."""
        v = v.strip()
        if not v:
            return ""
        if not v.startswith("/"):
            raise ValueError(f"Invalid api_prefix '{v}'. Must start with '/'")
        return v.rstrip("/")

    # Comma-separated list, parsed by cors_origins_list.
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

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # SEED_COUNT and seed_count both work
    }

    def seed_title(self, index: int) -> str:
        """Render the placeholder title for seeded note `index`."""
        return self.seed_title_template.format(index=index)


# Singleton instance - imported throughout the application
settings = Settings()
