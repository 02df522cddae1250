"""
Pydantic schemas for catalog API request/response validation.

These schemas define the external shapes of the API contract:
create-shapes (no id), update-shapes (id in the body) and response-shapes.
JSON keys are camelCase; Python attributes stay snake_case.

Response embeds are depth-limited: an author lists BookSummary items
(no author inside), a book carries an AuthorSummary (no books inside).
No business logic belongs here.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

NAME_MAX_LEN = 100
TITLE_MAX_LEN = 200
ISBN_MAX_LEN = 50
IMAGE_MAX_LEN = 500


class CamelModel(BaseModel):
    """Base shape: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Authors ──────────────────────────────────────────────────────────


class AuthorCreateRequest(CamelModel):
    """Request schema for creating an author.

    Attributes:
        first_name: Given name, required.
        last_name: Family name, required.
        bio: Free-text biography.
    """

    first_name: str = Field(..., min_length=1, max_length=NAME_MAX_LEN)
    last_name: str = Field(..., min_length=1, max_length=NAME_MAX_LEN)
    bio: Optional[str] = None


class AuthorUpdateRequest(AuthorCreateRequest):
    """Request schema for updating an author. The id selects the record."""

    id: int = Field(..., ge=1)


class AuthorSummary(CamelModel):
    """An author embedded in a book response."""

    id: int
    first_name: str
    last_name: str
    bio: Optional[str] = None


class BookSummary(CamelModel):
    """A book embedded in an author response."""

    id: int
    title: str
    year: Optional[int] = None
    isbn: Optional[str] = None
    summary: Optional[str] = None
    image: Optional[str] = None
    price: Optional[float] = None
    author_id: Optional[int] = None


class AuthorResponse(AuthorSummary):
    """Response schema for an author, with the books it owns."""

    books: list[BookSummary] = Field(default_factory=list)


# ── Books ────────────────────────────────────────────────────────────


class BookCreateRequest(CamelModel):
    """Request schema for creating a book.

    Attributes:
        title: Book title, required.
        year: Publication year.
        isbn: ISBN, unique across the catalog when present.
        summary: Short description.
        image: Cover image reference.
        price: Retail price.
        author_id: Id of the owning author.
    """

    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LEN)
    year: Optional[int] = None
    isbn: Optional[str] = Field(default=None, max_length=ISBN_MAX_LEN)
    summary: Optional[str] = None
    image: Optional[str] = Field(default=None, max_length=IMAGE_MAX_LEN)
    price: Optional[float] = None
    author_id: Optional[int] = None


class BookUpdateRequest(BookCreateRequest):
    """Request schema for updating a book. The id selects the record."""

    id: int = Field(..., ge=1)


class BookResponse(BookSummary):
    """Response schema for a book, with its author when it has one."""

    author: Optional[AuthorSummary] = None


# ── Shared ───────────────────────────────────────────────────────────


class ErrorResponse(BaseModel):
    """Standard error response schema.

    ``detail`` maps field names to validation messages on 400 responses.
    """

    error: str
    detail: Optional[dict[str, list[str]]] = None


class HealthResponse(BaseModel):
    """Response schema for health check endpoint."""

    status: str
    version: str
