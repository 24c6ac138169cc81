"""Pydantic request/response schemas used by the API.

Schemas keep API input/output shapes stable and provide validation for
controller handlers and tests.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BookIn(BaseModel):
    """Payload for creating or replacing a book (no identifier)."""
    title: str = Field(max_length=255)
    author: str = Field(max_length=255)
    price: float = Field(ge=0, allow_inf_nan=False)

    @field_validator("title", "author")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value


class BookOut(BaseModel):
    """A stored book including its assigned identifier."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    author: str
    price: float


class CatalogEntryOut(BookOut):
    """Result of a downstream catalog lookup.

    `fallback` is True when the placeholder record was served instead of
    the catalog's answer.
    """
    fallback: bool = False


class AdminSummary(BaseModel):
    """Response of the protected admin endpoint."""
    username: str
    profile: str
    book_count: int
