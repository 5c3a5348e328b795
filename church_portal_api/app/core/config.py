"""
Simple configuration management.

The ``Settings`` dataclass reads configuration from environment
variables, after loading a ``.env`` file from the working directory
if one exists.  Defaults are provided for all fields so the API can
start locally against a default MongoDB instance.

Settings are constructed once when the application is created and
passed explicitly to the components that need them (database layer,
media store, subscription gateway).  Nothing else reads the
environment.
"""

import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _env(name: str, default: str = "") -> str:
    return os.getenv(name, default)


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: _env("PROJECT_NAME", "Church Portal API"))
    api_version: str = field(default_factory=lambda: _env("API_VERSION", "1.0.0"))
    debug: bool = field(default_factory=lambda: _env_bool("DEBUG"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: _env("LOG_FILE"))

    # MongoDB connection string and database name.  ``MONGODB_URI``
    # follows the standard ``mongodb://`` / ``mongodb+srv://`` format.
    mongodb_uri: str = field(default_factory=lambda: _env("MONGODB_URI", "mongodb://localhost:27017"))
    database_name: str = field(default_factory=lambda: _env("MONGODB_DB", "church_portal"))
    # Milliseconds to wait for a server before a query fails.
    mongodb_timeout_ms: int = field(default_factory=lambda: int(_env("MONGODB_TIMEOUT_MS", "5000")))

    # Directory where uploaded images are written and the URL prefix
    # under which they are served.  Relative directories are resolved
    # against the current working directory.
    upload_dir: str = field(default_factory=lambda: _env("UPLOAD_DIR", "uploads"))
    uploads_url_path: str = field(default_factory=lambda: _env("UPLOADS_URL_PATH", "/uploads"))

    default_page_size: int = field(default_factory=lambda: int(_env("DEFAULT_PAGE_SIZE", "28")))

    # Mailchimp credentials.  The server prefix is the data‑center
    # subdomain (``us21`` in ``us21.api.mailchimp.com``); when empty it is
    # taken from the API key suffix.
    mailchimp_api_key: str = field(default_factory=lambda: _env("MAILCHIMP_API_KEY"))
    mailchimp_audience_id: str = field(default_factory=lambda: _env("MAILCHIMP_AUDIENCE_ID"))
    mailchimp_server_prefix: str = field(default_factory=lambda: _env("MAILCHIMP_SERVER_PREFIX"))
    mailchimp_timeout: float = field(default_factory=lambda: float(_env("MAILCHIMP_TIMEOUT", "10")))

    host: str = field(default_factory=lambda: _env("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(_env("PORT", "5000")))

    # Comma‑separated list of allowed origins, ``*`` for any.
    cors_origins: str = field(default_factory=lambda: _env("CORS_ORIGINS", "*"))

    # Optional path to a built single‑page frontend (e.g. ``frontend/dist``).
    frontend_dist: str = field(default_factory=lambda: _env("FRONTEND_DIST"))

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]
