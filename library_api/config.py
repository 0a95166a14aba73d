import logging
import os
from pathlib import Path

DB_PATH = os.environ.get("LIBRARY_DB_PATH", str(Path.cwd() / "library.db"))
DATABASE_URL = f"sqlite+aiosqlite:///{DB_PATH}"
ALEMBIC_CONFIG = os.environ.get("LIBRARY_ALEMBIC_CONFIG", str(Path(__file__).resolve().parent.parent / "alembic.ini"))

API_TITLE = os.environ.get("LIBRARY_API_TITLE", "Library API")


def parse_log_level(value: str | None, default: str = "INFO") -> str:
    level = (value or default).strip().upper()
    if level not in logging.getLevelNamesMapping():
        return default
    return level


LOG_LEVEL = parse_log_level(os.environ.get("LIBRARY_LOG_LEVEL"))

# API versioning
DEFAULT_API_VERSION = "1.0"
SUPPORTED_API_VERSIONS = ("1.0", "2.0")
SUPPORTED_VERSIONS_HEADER = {"api-supported-versions": ", ".join(SUPPORTED_API_VERSIONS)}
