"""
NoteKeeper Backend: Application Configuration
===============================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads NOTEKEEPER_* environment variables (or a .env
       file), validates types/ranges, and provides a default `settings`
       object. The CLI builds its own Settings from command-line options.
Who:   Imported by main.py, cli.py and the test suite.
When:  Loaded once at module import time; validated before the app starts.

Note:
    None of these values reach NoteStore. Host, port and cache directory
    are startup concerns of the transport shell only.
"""

from pathlib import Path
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

# Directory holding UploadForm.html, shipped inside the package
DEFAULT_PUBLIC_DIR = str(Path(__file__).resolve().parent / "public")


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have sensible defaults for development. Attributes are
    grouped by concern for readability.
    """

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="127.0.0.1", description="Address to bind")
    port: int = Field(default=8081, ge=1, le=65535, description="TCP port to bind")

    # What: Working directory reserved for the service
    # Created at startup; notes themselves stay in memory only
    cache_dir: str = Field(default="./cache", description="Path to the cache directory")

    # ── Static Pages ──────────────────────────────────────────────────────
    public_dir: str = Field(
        default=DEFAULT_PUBLIC_DIR,
        description="Directory containing UploadForm.html",
    )

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated origins, or "*" for any
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Logging ───────────────────────────────────────────────────────────
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

    @field_validator("cache_dir")
    @classmethod
    def validate_cache_dir(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("cache_dir must not be empty")
        return v

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_prefix": "NOTEKEEPER_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


# Default instance for `uvicorn notekeeper.main:app`
settings = Settings()
