from fastapi import APIRouter, Depends

from library_api.formatters import render
from library_api.mapping import to_author
from library_api.negotiation import accept_generic
from library_api.routers.authors import NOT_ACCEPTABLE_RESPONSE, XML_RESPONSE, get_author_repository
from library_api.schemas.author import AuthorResponse
from library_api.services.repositories import AuthorRepository

router = APIRouter(prefix="/api/v2/authors", tags=["authors"])


@router.get(
    "",
    response_model=list[AuthorResponse],
    responses={200: XML_RESPONSE, 406: NOT_ACCEPTABLE_RESPONSE},
    summary="Get a list of authors, V2",
)
async def list_authors_v2(
    media_type: str = Depends(accept_generic),
    authors: AuthorRepository = Depends(get_author_repository),
):
    return render([to_author(author) for author in await authors.get_authors()], media_type, "Author")
