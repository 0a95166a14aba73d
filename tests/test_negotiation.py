from itertools import combinations

import pytest
from pydantic import BaseModel

from library_api.errors import MediaTypeConflictError, UnacceptableRepresentation, UnsupportedPayload
from library_api.negotiation import ACCEPT, CONTENT_TYPE, MediaTypeRegistry, parse_media_types
from library_api.routers.books import variants as book_variants


class View(BaseModel):
    id: int


async def handler():
    return View(id=1)


async def other_handler():
    return View(id=2)


def _registry() -> MediaTypeRegistry:
    registry = MediaTypeRegistry()
    registry.register(
        "/things/{id}", "GET", handler,
        header=ACCEPT, media_types=("application/json", "application/vnd.thing+json"),
        schema=View, operation_id="GetThing",
    )
    registry.register(
        "/things/{id}", "GET", other_handler,
        header=ACCEPT, media_types=("application/vnd.thing.full+json",),
        schema=View, operation_id="GetThing",
    )
    return registry


def test_parse_media_types():
    assert parse_media_types(None) == []
    assert parse_media_types("") == []
    assert parse_media_types("Application/JSON; charset=utf-8, text/html;q=0.5,,") == [
        "application/json",
        "text/html",
    ]


def test_resolve_exact_match():
    registry = _registry()
    variant, media_type = registry.resolve("/things/{id}", "get", "application/vnd.thing.full+json")
    assert variant.handler is other_handler
    assert media_type == "application/vnd.thing.full+json"


def test_resolve_uses_client_order():
    registry = _registry()
    variant, media_type = registry.resolve(
        "/things/{id}", "GET", "application/vnd.thing+json, application/vnd.thing.full+json"
    )
    assert variant.handler is handler
    assert media_type == "application/vnd.thing+json"


@pytest.mark.parametrize("accept", [None, "*/*", "application/*", "text/plain"])
def test_resolve_without_match_is_not_acceptable(accept):
    with pytest.raises(UnacceptableRepresentation):
        _registry().resolve("/things/{id}", "GET", accept)


def test_resolve_write_without_match_is_unsupported():
    registry = MediaTypeRegistry()
    registry.register(
        "/things", "POST", handler,
        header=CONTENT_TYPE, media_types=("application/json",),
        schema=View, operation_id="CreateThing",
    )
    with pytest.raises(UnsupportedPayload):
        registry.resolve("/things", "POST", "text/plain")


def test_resolve_unknown_endpoint():
    with pytest.raises(KeyError):
        _registry().resolve("/nope", "GET", "application/json")


def test_overlapping_media_types_fail_at_registration():
    registry = _registry()
    with pytest.raises(MediaTypeConflictError, match="application/json"):
        registry.register(
            "/things/{id}", "GET", handler,
            header=ACCEPT, media_types=("APPLICATION/JSON",),
            schema=View, operation_id="GetThing",
        )
    assert len(registry.variants("/things/{id}", "GET")) == 2


def test_same_media_type_on_other_endpoint_is_allowed():
    registry = _registry()
    registry.register(
        "/things/{id}", "DELETE", handler,
        header=ACCEPT, media_types=("application/json",),
        schema=View, operation_id="DeleteThing",
    )
    assert len(registry.variants("/things/{id}", "DELETE")) == 1


def test_mixed_headers_fail_at_registration():
    registry = _registry()
    with pytest.raises(MediaTypeConflictError):
        registry.register(
            "/things/{id}", "GET", handler,
            header=CONTENT_TYPE, media_types=("text/csv",),
            schema=View, operation_id="GetThing",
        )


def test_mismatched_operation_id_fails_at_registration():
    registry = _registry()
    with pytest.raises(MediaTypeConflictError):
        registry.register(
            "/things/{id}", "GET", handler,
            header=ACCEPT, media_types=("text/csv",),
            schema=View, operation_id="GetOtherThing",
        )


def test_empty_media_types_fail_at_registration():
    with pytest.raises(MediaTypeConflictError):
        MediaTypeRegistry().register(
            "/things", "GET", handler,
            header=ACCEPT, media_types=(),
            schema=View, operation_id="GetThings",
        )


def test_decorator_registers_and_returns_function():
    registry = MediaTypeRegistry()

    @registry.variant("/things", "GET", header=ACCEPT, media_types=("application/json",), schema=View, operation_id="ListThings")
    async def list_things():
        return []

    assert registry.variants("/things", "GET")[0].handler is list_things
    assert registry.variants("/things", "GET")[0].name == "list_things"


def test_operations_group_variants():
    operations = _registry().operations()
    assert list(operations) == ["GetThing"]
    assert len(operations["GetThing"]) == 2


def test_book_variants_are_pairwise_disjoint():
    operations = book_variants.operations()
    assert set(operations) == {"GetBook", "CreateBook"}
    for siblings in operations.values():
        assert len(siblings) == 2
        for a, b in combinations(siblings, 2):
            assert not a.media_types & b.media_types
