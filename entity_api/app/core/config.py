"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all, listening on port 3001
and accepting cross‑origin requests from the front end at
``http://localhost:8001``.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Entity API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty, logs only go to the console.
    log_file: str = os.getenv("LOG_FILE", "")

    # One line per completed request on the ``entity_api.access`` logger.
    access_log: bool = _env_flag("ACCESS_LOG", "true")

    # The single origin allowed to call the API from a browser.  Credentials
    # (cookies, authorization headers) are allowed for that origin only.
    cors_origin: str = os.getenv("CORS_ORIGIN", "http://localhost:8001")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3001"))

    # Populate a freshly created store with ten sample entities and a few
    # historical request logs.
    seed_data: bool = _env_flag("SEED_DATA", "true")

    # Path of the interactive API documentation.
    docs_url: str = os.getenv("DOCS_URL", "/api-docs")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
