"""OpenAPI documents for the library API.

FastAPI documents one response schema per operation. The books endpoints
can produce and consume several representations, so every registered
media-type variant is injected into the operation it shares an operation
id with: into the 200 response for reads, into the request body for writes.
"""

from fastapi import APIRouter, FastAPI
from fastapi.openapi.utils import get_openapi
from pydantic import BaseModel

from library_api.negotiation import ACCEPT, MediaTypeRegistry

API_DESCRIPTION = "Through this API you can access authors and their books"
API_CONTACT = {"name": "Library API maintainers", "url": "https://example.com/library-api"}
API_LICENSE = {"name": "MIT License", "url": "https://opensource.org/licenses/MIT"}


def _find_operation(openapi: dict, operation_id: str) -> dict | None:
    for path_item in openapi.get("paths", {}).values():
        for operation in path_item.values():
            if isinstance(operation, dict) and operation.get("operationId") == operation_id:
                return operation
    return None


def _schema_ref(model: type[BaseModel], components: dict) -> dict:
    schema = model.model_json_schema(ref_template="#/components/schemas/{model}")
    for name, definition in schema.pop("$defs", {}).items():
        components.setdefault(name, definition)
    components.setdefault(model.__name__, schema)
    return {"$ref": f"#/components/schemas/{model.__name__}"}


def inject_variant_schemas(openapi: dict, registry: MediaTypeRegistry) -> dict:
    components = openapi.setdefault("components", {}).setdefault("schemas", {})
    for operation_id, variants in registry.operations().items():
        operation = _find_operation(openapi, operation_id)
        if operation is None:
            continue
        for variant in variants:
            ref = _schema_ref(variant.schema, components)
            content = {media_type: {"schema": ref} for media_type in sorted(variant.media_types)}
            if variant.header == ACCEPT:
                ok = operation.get("responses", {}).get("200")
                if ok is None:
                    continue
                ok.setdefault("content", {}).update(content)
            else:
                body = operation.setdefault("requestBody", {"required": True, "content": {}})
                body["content"].update(content)
    return openapi


def build_openapi(title: str, version: str, routes, registry: MediaTypeRegistry) -> dict:
    openapi = get_openapi(
        title=title,
        version=version,
        description=API_DESCRIPTION,
        contact=API_CONTACT,
        license_info=API_LICENSE,
        routes=routes,
    )
    return inject_variant_schemas(openapi, registry)


def _add_version_document(app: FastAPI, version: str, routes: list, registry: MediaTypeRegistry) -> None:
    cache: dict[str, dict] = {}

    @app.get(f"/openapi/v{version.split('.')[0]}.json", include_in_schema=False)
    async def version_document():
        if "openapi" not in cache:
            cache["openapi"] = build_openapi(app.title, version, routes, registry)
        return cache["openapi"]


def install_openapi(app: FastAPI, registry: MediaTypeRegistry, versions: dict[str, list[APIRouter]]) -> None:
    """Replace app.openapi with the augmented document and add one document per API version."""

    def openapi() -> dict:
        if app.openapi_schema is None:
            app.openapi_schema = build_openapi(app.title, app.version, app.routes, registry)
        return app.openapi_schema

    app.openapi = openapi

    for version, routers in versions.items():
        routes = [route for router in routers for route in router.routes]
        _add_version_document(app, version, routes, registry)
