"""Response bodies for the JSON and XML representations.

XML documents follow the element naming of a data-contract serializer: a
single view is rendered as ``<Book>...</Book>``, a list as
``<ArrayOfBook><Book>...</Book>...</ArrayOfBook>``.
"""

import xmltodict
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

from library_api.media_types import XML


def to_xml(content: BaseModel | list[BaseModel], element: str) -> str:
    if isinstance(content, list):
        document = {f"ArrayOf{element}": {element: [item.model_dump(mode="json") for item in content]}}
    else:
        document = {element: content.model_dump(mode="json")}
    return xmltodict.unparse(document)


def render(
    content: BaseModel | list[BaseModel],
    media_type: str,
    element: str,
    status_code: int = 200,
    headers: dict[str, str] | None = None,
) -> Response:
    """Serialize ``content`` in the negotiated media type."""
    if media_type == XML:
        return Response(to_xml(content, element), status_code=status_code, media_type=XML, headers=headers)
    return JSONResponse(jsonable_encoder(content), status_code=status_code, media_type=media_type, headers=headers)
