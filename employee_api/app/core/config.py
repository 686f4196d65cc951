"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration; override them via
environment variables in a deployment.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


def _env_optional_int(name: str) -> Optional[int]:
    value = os.getenv(name, "").strip()
    return int(value) if value else None


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Employee Directory API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_bool("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Prefix under which all routes are mounted, e.g. ``/api/v1``.  Empty
    # by default so that ``/employees`` and ``/health`` sit at the root.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Number of synthetic employees generated when the application starts.
    seed_count: int = int(os.getenv("SEED_COUNT", "10000"))

    # When set, synthetic data is reproducible between runs.
    faker_seed: Optional[int] = _env_optional_int("FAKER_SEED")
    faker_locale: str = os.getenv("FAKER_LOCALE", "en_US")

    # Whether a ``hireDate`` supplied in an update payload overwrites the
    # stored value.  Enabled by default: updates are a plain shallow merge.
    allow_hire_date_update: bool = _env_bool("ALLOW_HIRE_DATE_UPDATE", "true")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
