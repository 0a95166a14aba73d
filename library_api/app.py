import logging

from fastapi import FastAPI, Request

from library_api.config import API_TITLE, DEFAULT_API_VERSION, LOG_LEVEL, SUPPORTED_VERSIONS_HEADER
from library_api.docs import install_openapi
from library_api.errors import register_exception_handlers
from library_api.routers import authors, authors_v2, books

VERSIONED_ROUTERS = {
    "1.0": [authors.router, books.router],
    "2.0": [authors_v2.router],
}


def create_app() -> FastAPI:
    logging.getLogger("library_api").setLevel(LOG_LEVEL)

    app = FastAPI(title=API_TITLE, version=DEFAULT_API_VERSION)
    for routers in VERSIONED_ROUTERS.values():
        for router in routers:
            app.include_router(router)

    register_exception_handlers(app)
    install_openapi(app, books.variants, VERSIONED_ROUTERS)

    @app.middleware("http")
    async def report_api_versions(request: Request, call_next):
        response = await call_next(request)
        response.headers.update(SUPPORTED_VERSIONS_HEADER)
        return response

    return app


app = create_app()
