import uuid

from pydantic import BaseModel, ConfigDict, Field


class BookForCreation(BaseModel):
    """Basic creation payload. Identity is always assigned by the server."""

    title: str = Field(..., min_length=1, max_length=150)
    description: str | None = Field(None, max_length=2500)


class BookForCreationWithAmountOfPages(BookForCreation):
    amount_of_pages: int = Field(..., gt=0)


class BookResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    author_id: uuid.UUID
    title: str
    description: str | None
    amount_of_pages: int | None


class BookWithConcatenatedAuthorName(BaseModel):
    id: uuid.UUID
    author: str = Field(..., description="The author's first and last name")
    title: str
    description: str | None
