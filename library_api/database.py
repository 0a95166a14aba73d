from collections.abc import AsyncIterator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from library_api.config import DATABASE_URL


def _set_sqlite_pragma(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def enable_foreign_keys(engine: AsyncEngine) -> None:
    """SQLite only enforces foreign keys (and ON DELETE CASCADE) per connection, when asked."""
    event.listen(engine.sync_engine, "connect", _set_sqlite_pragma)


engine = create_async_engine(DATABASE_URL, echo=False)
enable_foreign_keys(engine)
SessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


class Base(DeclarativeBase):
    pass


async def get_session() -> AsyncIterator[AsyncSession]:
    async with SessionLocal() as session:
        yield session
