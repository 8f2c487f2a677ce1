"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields and
match the original deployment (port 1000, ``db.sqlite3`` next to the
project, frontend bundled with the package).  Tests construct their
own ``Settings`` instances with explicit overrides.
"""

import os
from dataclasses import dataclass
from pathlib import Path


PACKAGE_DIR = Path(__file__).resolve().parent.parent
DEFAULT_STATIC_DIR = str(PACKAGE_DIR / "static")


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Crop Price Dashboard")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "1000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Path to the SQLite file holding ``store_product`` and
    # ``app_userprofile``.  Relative paths are resolved against the
    # project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "db.sqlite3")

    # When true, a store that cannot be opened aborts startup.  When
    # false the server keeps running and every query answers 500.
    database_required: bool = _env_flag("DATABASE_REQUIRED", "true")

    # Directory served as static files; ``index_file`` inside it is
    # returned for the root path.
    static_dir: str = os.getenv("STATIC_DIR", DEFAULT_STATIC_DIR)
    index_file: str = os.getenv("INDEX_FILE", "index.html")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
