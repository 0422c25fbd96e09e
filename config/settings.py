"""
Configuration loader for the PPA dashboard.

Loads all settings from environment variables (and a local .env file).
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional
from dotenv import load_dotenv

from config.constants import (
    API_KEY_ENV_VARS,
    CONFIG_DIR,
    DATABASE_PATH,
    DEFAULT_MODEL,
    DEFAULT_STORAGE_BACKEND,
)

# Load .env file from the working directory or a parent
load_dotenv()

STORAGE_BACKENDS = ("duckdb", "file", "memory")


@dataclass
class AppSettings:
    """Runtime settings for the dashboard."""

    # Assistant credentials
    api_key: str
    model: str

    # Seconds; None waits for the reply indefinitely
    request_timeout: Optional[float]

    # Persistence
    storage_backend: str
    database_path: Path
    storage_dir: Path

    log_level: str

    @classmethod
    def from_env(cls) -> "AppSettings":
        """Load configuration from environment variables."""

        api_key = ""
        for var in API_KEY_ENV_VARS:
            api_key = os.getenv(var, "").strip()
            if api_key:
                break

        timeout_str = os.getenv("PPA_REQUEST_TIMEOUT", "").strip()
        try:
            request_timeout = float(timeout_str) if timeout_str else None
        except ValueError:
            request_timeout = None

        return cls(
            api_key=api_key,
            model=os.getenv("PPA_MODEL", DEFAULT_MODEL).strip() or DEFAULT_MODEL,
            request_timeout=request_timeout,
            storage_backend=os.getenv("PPA_STORAGE_BACKEND", DEFAULT_STORAGE_BACKEND).strip().lower(),
            database_path=Path(os.getenv("PPA_DATABASE_PATH", str(DATABASE_PATH))),
            storage_dir=Path(os.getenv("PPA_STORAGE_DIR", str(CONFIG_DIR))),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key.strip())

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []

        if self.storage_backend not in STORAGE_BACKENDS:
            errors.append(
                f"PPA_STORAGE_BACKEND must be one of {', '.join(STORAGE_BACKENDS)} "
                f"(got '{self.storage_backend}')"
            )
        if not self.model:
            errors.append("PPA_MODEL must not be empty")
        if self.request_timeout is not None and self.request_timeout <= 0:
            errors.append("PPA_REQUEST_TIMEOUT must be a positive number of seconds")

        return errors


def configure_logging(level: str = "INFO"):
    """Configure root logging once per process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
