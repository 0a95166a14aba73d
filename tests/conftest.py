import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from library_api.database import Base, enable_foreign_keys, get_session
from library_api.app import create_app
from library_api.models import Author, Book

TEST_DB_URL = "sqlite+aiosqlite://"  # in-memory

engine = create_async_engine(TEST_DB_URL, echo=False)
enable_foreign_keys(engine)
TestSession = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture(autouse=True)
async def setup_db():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def session():
    async with TestSession() as s:
        yield s


@pytest.fixture
async def client():
    app = create_app()

    async def override_session():
        async with TestSession() as s:
            yield s

    app.dependency_overrides[get_session] = override_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
async def george(session):
    author = Author(first_name="George", last_name="RR Martin")
    session.add(author)
    await session.commit()
    return author


@pytest.fixture
async def stephen(session):
    author = Author(first_name="Stephen", last_name="Fry")
    session.add(author)
    await session.commit()
    return author


@pytest.fixture
async def game_of_thrones(session, george):
    book = Book(
        author_id=george.id,
        title="A Game of Thrones",
        description="The first novel in A Song of Ice and Fire.",
        amount_of_pages=694,
    )
    session.add(book)
    await session.commit()
    return book
