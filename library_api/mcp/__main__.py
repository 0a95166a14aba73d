"""Serve the library MCP tools over stdio against an in-process app."""

import logging
from pathlib import Path

from alembic import command
from alembic.config import Config
from httpx import ASGITransport, AsyncClient

from library_api.app import create_app
from library_api.config import ALEMBIC_CONFIG, DATABASE_URL, DB_PATH
from library_api.mcp.client import LibraryClient
from library_api.mcp.server import create_mcp_server

logger = logging.getLogger(__name__)


def run_migrations(db_path: str = DB_PATH, database_url: str = DATABASE_URL, config_file: str = ALEMBIC_CONFIG) -> None:
    """Bring the database at ``db_path`` up to the latest schema revision."""
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    alembic_cfg = Config(config_file)
    alembic_cfg.attributes["database_url"] = database_url
    logger.info("Migrating %s", db_path)
    command.upgrade(alembic_cfg, "head")


def main() -> None:
    run_migrations()

    http = AsyncClient(transport=ASGITransport(app=create_app()), base_url="http://localhost")
    create_mcp_server(LibraryClient(http)).run(transport="stdio")


if __name__ == "__main__":
    main()
