"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API can be started locally without any setup.  Tests and scripts may
build their own ``Settings`` instance and pass it to ``create_app``.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "NexaOps API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Path to the SQLite database file.  Relative paths are resolved
    # against the current working directory by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "nexaops.db")

    # Seconds to wait for a locked database before giving up.  A timeout
    # surfaces as a persistence error instead of hanging the request.
    db_timeout: float = float(os.getenv("DB_TIMEOUT", "10"))

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Simulated delivery time (seconds) for demo notifications.
    notification_delay_whatsapp: float = float(os.getenv("NOTIFICATION_DELAY_WHATSAPP", "1.5"))
    notification_delay_sms: float = float(os.getenv("NOTIFICATION_DELAY_SMS", "0.8"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
