"""Server configuration — reads settings from environment variables.

All settings have sensible defaults for local development.  In production
the values are typically overridden via env vars.
"""

import os
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ServerSettings:
    """Immutable server configuration read from environment at startup."""

    # Network
    host: str = "0.0.0.0"
    port: int = 8080

    # CORS: comma-separated origins, or "*" for wide-open dev mode
    cors_origins: list[str] = field(default_factory=lambda: ["*"])

    # Question file (None → bundled survey_engine/data/questions.yaml)
    question_file: str | None = None

    # Logging
    log_level: str = "INFO"


def load_settings() -> ServerSettings:
    """Build settings from ``SURVEY_*`` environment variables."""
    raw_origins = os.getenv("SURVEY_CORS_ORIGINS", "*")
    origins = [o.strip() for o in raw_origins.split(",") if o.strip()]

    return ServerSettings(
        host=os.getenv("SURVEY_HOST", "0.0.0.0"),
        port=int(os.getenv("SURVEY_PORT", "8080")),
        cors_origins=origins,
        question_file=os.getenv("SURVEY_QUESTION_FILE") or None,
        log_level=os.getenv("SURVEY_LOG_LEVEL", "INFO").upper(),
    )
