import logging
import uuid
from dataclasses import dataclass

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from library_api import media_types
from library_api.database import get_session
from library_api.errors import ParentNotFound, ResourceNotFound
from library_api.formatters import render
from library_api.mapping import (
    book_from_creation,
    to_book,
    to_book_with_concatenated_author_name,
)
from library_api.negotiation import (
    ACCEPT,
    CONTENT_TYPE,
    MediaTypeRegistry,
    accept_generic,
    read_payload,
)
from library_api.schemas.book import (
    BookForCreation,
    BookForCreationWithAmountOfPages,
    BookResponse,
    BookWithConcatenatedAuthorName,
)
from library_api.services.repositories import AuthorRepository, BookRepository

logger = logging.getLogger(__name__)

BOOKS_PATH = "/api/authors/{author_id}/books"
BOOK_PATH = BOOKS_PATH + "/{book_id}"

router = APIRouter(prefix=BOOKS_PATH, tags=["books"])
variants = MediaTypeRegistry()

ERROR_RESPONSES = {
    404: {"description": "The author or the book does not exist"},
    406: {"description": "None of the accepted media types can be produced"},
}
XML_RESPONSE = {"content": {media_types.XML: {}}}


@dataclass
class BookContext:
    authors: AuthorRepository
    books: BookRepository


def get_book_context(session: AsyncSession = Depends(get_session)) -> BookContext:
    return BookContext(authors=AuthorRepository(session), books=BookRepository(session))


async def _find_book(ctx: BookContext, author_id: uuid.UUID, book_id: uuid.UUID):
    if not await ctx.authors.author_exists(author_id):
        logger.info("Author %s not found", author_id)
        raise ParentNotFound()
    book = await ctx.books.get_book(author_id, book_id)
    if book is None:
        logger.info("Book %s not found for author %s", book_id, author_id)
        raise ResourceNotFound()
    return book


@variants.variant(
    BOOK_PATH, "GET",
    header=ACCEPT,
    media_types=(media_types.JSON, media_types.BOOK, media_types.XML),
    schema=BookResponse,
    operation_id="GetBook",
)
async def get_plain_book(ctx: BookContext, author_id: uuid.UUID, book_id: uuid.UUID) -> BookResponse:
    return to_book(await _find_book(ctx, author_id, book_id))


@variants.variant(
    BOOK_PATH, "GET",
    header=ACCEPT,
    media_types=(media_types.BOOK_WITH_CONCATENATED_AUTHOR_NAME,),
    schema=BookWithConcatenatedAuthorName,
    operation_id="GetBook",
)
async def get_book_with_concatenated_author_name(
    ctx: BookContext, author_id: uuid.UUID, book_id: uuid.UUID
) -> BookWithConcatenatedAuthorName:
    author = await ctx.authors.get_author(author_id)
    if author is None:
        logger.info("Author %s not found", author_id)
        raise ParentNotFound()
    book = await ctx.books.get_book(author_id, book_id)
    if book is None:
        logger.info("Book %s not found for author %s", book_id, author_id)
        raise ResourceNotFound()
    return to_book_with_concatenated_author_name(book, author)


async def _create_book(ctx: BookContext, author_id: uuid.UUID, data: BookForCreation) -> BookResponse:
    if not await ctx.authors.author_exists(author_id):
        logger.info("Author %s not found, book not created", author_id)
        raise ParentNotFound()
    book = book_from_creation(author_id, data)
    ctx.books.add_book(book)
    await ctx.books.save()
    logger.info("Created book %s for author %s", book.id, author_id)
    return to_book(book)


@variants.variant(
    BOOKS_PATH, "POST",
    header=CONTENT_TYPE,
    media_types=(media_types.JSON, media_types.BOOK_FOR_CREATION),
    schema=BookForCreation,
    operation_id="CreateBook",
)
async def create_book(ctx: BookContext, author_id: uuid.UUID, data: BookForCreation) -> BookResponse:
    return await _create_book(ctx, author_id, data)


@variants.variant(
    BOOKS_PATH, "POST",
    header=CONTENT_TYPE,
    media_types=(media_types.BOOK_FOR_CREATION_WITH_AMOUNT_OF_PAGES,),
    schema=BookForCreationWithAmountOfPages,
    operation_id="CreateBook",
)
async def create_book_with_amount_of_pages(
    ctx: BookContext, author_id: uuid.UUID, data: BookForCreationWithAmountOfPages
) -> BookResponse:
    return await _create_book(ctx, author_id, data)


@router.get(
    "",
    response_model=list[BookResponse],
    responses={200: XML_RESPONSE, **ERROR_RESPONSES},
)
async def list_books(
    author_id: uuid.UUID,
    media_type: str = Depends(accept_generic),
    ctx: BookContext = Depends(get_book_context),
):
    if not await ctx.authors.author_exists(author_id):
        logger.info("Author %s not found", author_id)
        raise ParentNotFound()
    books = [to_book(book) for book in await ctx.books.get_books(author_id)]
    return render(books, media_type, "Book")


@router.get(
    "/{book_id}",
    name="GetBook",
    operation_id="GetBook",
    response_model=BookResponse,
    responses=ERROR_RESPONSES,
    summary="Get a book by id for a specific author",
)
async def get_book(
    author_id: uuid.UUID,
    book_id: uuid.UUID,
    request: Request,
    ctx: BookContext = Depends(get_book_context),
):
    variant, media_type = variants.resolve(BOOK_PATH, "GET", request.headers.get(ACCEPT))
    view = await variant.handler(ctx, author_id, book_id)
    return render(view, media_type, "Book")


@router.post(
    "",
    name="CreateBook",
    operation_id="CreateBook",
    response_model=BookResponse,
    status_code=201,
    responses={
        201: XML_RESPONSE,
        404: {"description": "The author does not exist"},
        406: {"description": "None of the accepted media types can be produced"},
        415: {"description": "The request content type is not supported"},
    },
)
async def create_book_endpoint(
    author_id: uuid.UUID,
    request: Request,
    ctx: BookContext = Depends(get_book_context),
):
    variant, _ = variants.resolve(BOOKS_PATH, "POST", request.headers.get(CONTENT_TYPE))
    media_type = accept_generic(request)
    data = await read_payload(request, variant.schema)
    view = await variant.handler(ctx, author_id, data)
    location = request.url_for("GetBook", author_id=str(author_id), book_id=str(view.id))
    return render(view, media_type, "Book", status_code=201, headers={"Location": str(location)})
