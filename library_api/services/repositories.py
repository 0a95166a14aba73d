"""Data access for authors and their books."""

import logging
import uuid
from collections.abc import Sequence

from sqlalchemy import exists, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from library_api.errors import PersistenceFailure
from library_api.models import Author, Book

logger = logging.getLogger(__name__)


class _Repository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self) -> None:
        """Commit pending changes, rolling back and raising PersistenceFailure on error."""
        try:
            await self.session.commit()
        except SQLAlchemyError as exc:
            logger.exception("Commit failed, rolling back")
            await self.session.rollback()
            raise PersistenceFailure(str(exc)) from exc


class AuthorRepository(_Repository):
    async def author_exists(self, author_id: uuid.UUID) -> bool:
        stmt = select(exists().where(Author.id == author_id))
        return bool((await self.session.execute(stmt)).scalar())

    async def get_authors(self) -> Sequence[Author]:
        result = await self.session.execute(select(Author).order_by(Author.last_name, Author.first_name))
        return result.scalars().all()

    async def get_author(self, author_id: uuid.UUID) -> Author | None:
        result = await self.session.execute(select(Author).where(Author.id == author_id))
        return result.scalar_one_or_none()

    def update_author(self, author: Author, changes: dict) -> None:
        for key, value in changes.items():
            setattr(author, key, value)


class BookRepository(_Repository):
    async def get_books(self, author_id: uuid.UUID) -> Sequence[Book]:
        stmt = select(Book).where(Book.author_id == author_id).order_by(Book.title)
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def get_book(self, author_id: uuid.UUID, book_id: uuid.UUID) -> Book | None:
        stmt = select(Book).where(Book.id == book_id, Book.author_id == author_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    def add_book(self, book: Book) -> None:
        if book.author_id is None:
            raise ValueError("A book must belong to an author")
        self.session.add(book)
