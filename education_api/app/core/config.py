"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with a local SQLite file and the development profile.
In a production deployment you should override these via environment
variables.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Education Management API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty only the console handler
    # is attached.
    log_file: str = os.getenv("LOG_FILE", "")

    # Deployment profile reported by ``GET /api/v1/info/environment``.
    # Recognised values are ``dev`` and ``prod``.
    app_profile: str = os.getenv("APP_PROFILE", "dev")

    # Path to the SQLite database.  If a relative path is provided, it
    # will be resolved relative to the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "education.db")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
