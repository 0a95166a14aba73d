"""Conversions between persisted entities, creation payloads and response views.

Every function here is pure: the same input always yields an equal view.
"""

import uuid

from library_api.models import Author, Book
from library_api.schemas.author import AuthorResponse
from library_api.schemas.book import (
    BookForCreation,
    BookForCreationWithAmountOfPages,
    BookResponse,
    BookWithConcatenatedAuthorName,
)


def concatenate_author_name(author: Author) -> str:
    return f"{author.first_name} {author.last_name}"


def to_author(author: Author) -> AuthorResponse:
    return AuthorResponse(id=author.id, first_name=author.first_name, last_name=author.last_name)


def to_book(book: Book) -> BookResponse:
    return BookResponse(
        id=book.id,
        author_id=book.author_id,
        title=book.title,
        description=book.description,
        amount_of_pages=book.amount_of_pages,
    )


def to_book_with_concatenated_author_name(book: Book, author: Author) -> BookWithConcatenatedAuthorName:
    """Build the concatenated-name view.

    The owning author is passed in explicitly instead of being read from the
    ``book.author`` relationship, which may not be loaded.
    """
    if author is None or author.id != book.author_id:
        raise ValueError(f"Author {getattr(author, 'id', None)} does not own book {book.id}")
    return BookWithConcatenatedAuthorName(
        id=book.id,
        author=concatenate_author_name(author),
        title=book.title,
        description=book.description,
    )


def book_from_creation(author_id: uuid.UUID, data: BookForCreation) -> Book:
    book = Book(author_id=author_id, title=data.title, description=data.description)
    if isinstance(data, BookForCreationWithAmountOfPages):
        book.amount_of_pages = data.amount_of_pages
    return book
