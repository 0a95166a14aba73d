"""Error taxonomy for the library API and its HTTP mapping."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from library_api.config import SUPPORTED_VERSIONS_HEADER

logger = logging.getLogger(__name__)


class LibraryAPIError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.detail)


class NotFoundError(LibraryAPIError):
    """All not-found causes render the same response body."""

    status_code = status.HTTP_404_NOT_FOUND
    detail = "Not found"


class ParentNotFound(NotFoundError):
    pass


class ResourceNotFound(NotFoundError):
    pass


class UnacceptableRepresentation(LibraryAPIError):
    status_code = status.HTTP_406_NOT_ACCEPTABLE
    detail = "None of the requested media types can be produced"


class UnsupportedPayload(LibraryAPIError):
    status_code = status.HTTP_415_UNSUPPORTED_MEDIA_TYPE
    detail = "Unsupported request content type"


class PersistenceFailure(LibraryAPIError):
    detail = "The change could not be saved"


class MediaTypeConflictError(Exception):
    """Raised while registering handler variants whose media types overlap."""


async def library_error_handler(request: Request, exc: LibraryAPIError) -> JSONResponse:
    if isinstance(exc, PersistenceFailure):
        logger.error("Persistence failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Answer unhandled exceptions.

    Starlette runs this handler outside every user middleware, so the
    supported-versions header is set here as well.
    """
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": LibraryAPIError.detail},
        headers=SUPPORTED_VERSIONS_HEADER,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(LibraryAPIError, library_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
