import uuid
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy import delete, func, select
from sqlalchemy.exc import OperationalError

from library_api.errors import PersistenceFailure
from library_api.models import Author, Book
from library_api.services.repositories import AuthorRepository, BookRepository


@pytest.mark.asyncio
async def test_author_exists(session, george):
    authors = AuthorRepository(session)
    assert await authors.author_exists(george.id) is True
    assert await authors.author_exists(uuid.uuid4()) is False


@pytest.mark.asyncio
async def test_get_book_is_scoped_to_author(session, stephen, game_of_thrones):
    books = BookRepository(session)
    assert (await books.get_book(game_of_thrones.author_id, game_of_thrones.id)).title == "A Game of Thrones"
    assert await books.get_book(stephen.id, game_of_thrones.id) is None


@pytest.mark.asyncio
async def test_add_book_assigns_id_on_save(session, george):
    books = BookRepository(session)
    book = Book(author_id=george.id, title="Fevre Dream")
    books.add_book(book)
    await books.save()
    assert isinstance(book.id, uuid.UUID)
    assert [b.title for b in await books.get_books(george.id)] == ["Fevre Dream"]


def test_add_book_requires_author():
    books = BookRepository(MagicMock())
    with pytest.raises(ValueError):
        books.add_book(Book(title="Orphan"))


@pytest.mark.asyncio
async def test_save_rolls_back_and_raises_persistence_failure():
    session = MagicMock()
    session.commit = AsyncMock(side_effect=OperationalError("COMMIT", {}, Exception("database is locked")))
    session.rollback = AsyncMock()

    with pytest.raises(PersistenceFailure):
        await BookRepository(session).save()
    session.rollback.assert_awaited_once()


@pytest.mark.asyncio
async def test_save_rejects_book_without_existing_author(session):
    books = BookRepository(session)
    books.add_book(Book(author_id=uuid.uuid4(), title="Orphan"))
    with pytest.raises(PersistenceFailure):
        await books.save()
    assert await session.scalar(select(func.count()).select_from(Book)) == 0


@pytest.mark.asyncio
async def test_deleting_author_deletes_books(session, george, game_of_thrones):
    await session.execute(delete(Author).where(Author.id == george.id))
    await session.commit()
    assert await session.scalar(select(func.count()).select_from(Author)) == 0
    assert await session.scalar(select(func.count()).select_from(Book)) == 0
