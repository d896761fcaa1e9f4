"""Application settings loaded from environment variables.

Settings are read once per process; override them by exporting the
variables before the app starts (e.g. `LOG_LEVEL=DEBUG`).
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import List


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    """Runtime configuration for the API and logging."""

    app_name: str
    app_version: str
    cors_origins: List[str]
    log_level: str
    log_dir: str
    log_to_file: bool


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Build settings from the environment (cached)."""
    origins = os.getenv("CORS_ORIGINS", "*")
    default_log_dir = os.path.join(os.path.dirname(__file__), "..", "logs")
    return Settings(
        app_name=os.getenv("APP_NAME", "Health Calculators API"),
        app_version=os.getenv("APP_VERSION", "1.0.0"),
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        log_dir=os.getenv("LOG_DIR", default_log_dir),
        log_to_file=_env_bool("LOG_TO_FILE", True),
    )
