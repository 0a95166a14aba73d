"""Media-type driven selection of handler variants.

A logical endpoint (path + method) may have several handler variants, each
bound to a fixed set of media types. Reads are selected on the ``Accept``
header, writes on ``Content-Type``. Matching is exact token membership:
parameters such as ``q=`` are dropped and wildcards never select a variant.
Sibling variants must declare disjoint media types; an overlap raises
MediaTypeConflictError when the variant is registered.
"""

import logging
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from library_api.errors import MediaTypeConflictError, UnacceptableRepresentation, UnsupportedPayload
from library_api.media_types import GENERIC_ACCEPT, JSON

logger = logging.getLogger(__name__)

ACCEPT = "accept"
CONTENT_TYPE = "content-type"


def parse_media_types(value: str | None) -> list[str]:
    """Split a header value into bare, lower-cased media-type tokens, in order."""
    if not value:
        return []
    tokens = []
    for part in value.split(","):
        token = part.split(";", 1)[0].strip().lower()
        if token:
            tokens.append(token)
    return tokens


@dataclass(frozen=True)
class Variant:
    name: str
    operation_id: str
    path: str
    method: str
    header: str
    media_types: frozenset[str]
    schema: type[BaseModel]
    handler: Callable[..., Awaitable[Any]]


class MediaTypeRegistry:
    def __init__(self) -> None:
        self._variants: dict[tuple[str, str], list[Variant]] = {}

    def register(
        self,
        path: str,
        method: str,
        handler: Callable[..., Awaitable[Any]],
        *,
        header: str,
        media_types: Iterable[str],
        schema: type[BaseModel],
        operation_id: str,
        name: str | None = None,
    ) -> Variant:
        method = method.upper()
        header = header.lower()
        tokens = frozenset(t.lower() for t in media_types)
        if not tokens:
            raise MediaTypeConflictError(f"{method} {path}: a variant needs at least one media type")
        if header not in (ACCEPT, CONTENT_TYPE):
            raise MediaTypeConflictError(f"{method} {path}: cannot select variants on header {header!r}")

        variant = Variant(
            name=name or handler.__name__,
            operation_id=operation_id,
            path=path,
            method=method,
            header=header,
            media_types=tokens,
            schema=schema,
            handler=handler,
        )
        siblings = self._variants.setdefault((path, method), [])
        for other in siblings:
            if other.header != header:
                raise MediaTypeConflictError(
                    f"{method} {path}: {variant.name} selects on {header}, {other.name} on {other.header}"
                )
            if other.operation_id != operation_id:
                raise MediaTypeConflictError(
                    f"{method} {path}: {variant.name} and {other.name} disagree on operation id"
                )
            overlap = other.media_types & tokens
            if overlap:
                raise MediaTypeConflictError(
                    f"{method} {path}: {variant.name} and {other.name} both accept {', '.join(sorted(overlap))}"
                )
        siblings.append(variant)
        logger.debug("Registered %s for %s %s on %s", variant.name, method, path, sorted(tokens))
        return variant

    def variant(self, path: str, method: str, **options):
        """Decorator form of register()."""

        def decorator(func):
            self.register(path, method, func, **options)
            return func

        return decorator

    def variants(self, path: str, method: str) -> list[Variant]:
        """Variants of an endpoint in registration order; the first is the primary one."""
        return list(self._variants.get((path, method.upper()), []))

    def operations(self) -> dict[str, list[Variant]]:
        grouped: dict[str, list[Variant]] = {}
        for siblings in self._variants.values():
            for variant in siblings:
                grouped.setdefault(variant.operation_id, []).append(variant)
        return grouped

    def resolve(self, path: str, method: str, header_value: str | None) -> tuple[Variant, str]:
        """Return the matching variant and the media type that selected it.

        Tokens are tried in the order the client listed them.
        """
        siblings = self._variants.get((path, method.upper()))
        if not siblings:
            raise KeyError(f"No variants registered for {method.upper()} {path}")

        for token in parse_media_types(header_value):
            for variant in siblings:
                if token in variant.media_types:
                    return variant, token

        header = siblings[0].header
        logger.info("No variant of %s %s matches %s: %r", method.upper(), path, header, header_value)
        if header == ACCEPT:
            raise UnacceptableRepresentation()
        raise UnsupportedPayload()


async def read_payload(request: Request, schema: type[BaseModel]) -> BaseModel:
    """Parse and validate a JSON request body against the selected variant's payload schema."""
    try:
        body = await request.json()
    except ValueError:
        raise RequestValidationError(
            [{"type": "json_invalid", "loc": ("body",), "msg": "JSON decode error", "input": {}}]
        )
    try:
        return schema.model_validate(body)
    except ValidationError as exc:
        errors = [{**err, "loc": ("body", *err["loc"])} for err in exc.errors(include_url=False, include_context=False)]
        raise RequestValidationError(errors, body=body)


def accept_generic(request: Request) -> str:
    """Pick the response type of a single-representation endpoint.

    A missing Accept header means JSON. Otherwise the first listed token that
    can be served wins, and none raises UnacceptableRepresentation.
    """
    tokens = parse_media_types(request.headers.get(ACCEPT))
    if not tokens:
        return JSON
    for token in tokens:
        if token in GENERIC_ACCEPT:
            return GENERIC_ACCEPT[token]
    logger.info("Rejecting %s %s for Accept %r", request.method, request.url.path, request.headers.get(ACCEPT))
    raise UnacceptableRepresentation()
