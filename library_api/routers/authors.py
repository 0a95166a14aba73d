import logging
import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from library_api import media_types
from library_api.database import get_session
from library_api.errors import ParentNotFound
from library_api.formatters import render
from library_api.mapping import to_author
from library_api.negotiation import accept_generic
from library_api.schemas.author import AuthorForUpdate, AuthorResponse
from library_api.services.repositories import AuthorRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/authors", tags=["authors"])

XML_RESPONSE = {"content": {media_types.XML: {}}}
NOT_FOUND_RESPONSE = {"description": "Author not found"}
NOT_ACCEPTABLE_RESPONSE = {"description": "None of the accepted media types can be produced"}


def get_author_repository(session: AsyncSession = Depends(get_session)) -> AuthorRepository:
    return AuthorRepository(session)


@router.get("", response_model=list[AuthorResponse], responses={200: XML_RESPONSE, 406: NOT_ACCEPTABLE_RESPONSE})
async def list_authors(
    media_type: str = Depends(accept_generic),
    authors: AuthorRepository = Depends(get_author_repository),
):
    return render([to_author(author) for author in await authors.get_authors()], media_type, "Author")


@router.get(
    "/{author_id}",
    response_model=AuthorResponse,
    responses={200: XML_RESPONSE, 404: NOT_FOUND_RESPONSE, 406: NOT_ACCEPTABLE_RESPONSE},
)
async def get_author(
    author_id: uuid.UUID,
    media_type: str = Depends(accept_generic),
    authors: AuthorRepository = Depends(get_author_repository),
):
    author = await authors.get_author(author_id)
    if author is None:
        logger.info("Author %s not found", author_id)
        raise ParentNotFound()
    return render(to_author(author), media_type, "Author")


@router.put(
    "/{author_id}",
    response_model=AuthorResponse,
    responses={200: XML_RESPONSE, 404: NOT_FOUND_RESPONSE, 406: NOT_ACCEPTABLE_RESPONSE},
)
async def update_author(
    author_id: uuid.UUID,
    data: AuthorForUpdate,
    media_type: str = Depends(accept_generic),
    authors: AuthorRepository = Depends(get_author_repository),
):
    author = await authors.get_author(author_id)
    if author is None:
        logger.info("Author %s not found", author_id)
        raise ParentNotFound()
    authors.update_author(author, data.model_dump())
    await authors.save()
    return render(to_author(author), media_type, "Author")
