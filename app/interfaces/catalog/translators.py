"""
Shape translator between domain records and external shapes.

Pure structural copies, field by field, in both directions.
No coercion beyond what the target type accepts; optional stays optional;
nested collections keep their order. Every field present on both sides
survives a round trip unchanged; the response -> update-shape helpers at
the bottom of the module close that loop for clients that fetch, edit and
send a record back.
"""

from typing import Optional

from app.domain.catalog.entities import Author, Book
from app.interfaces.catalog.schemas import (
    AuthorCreateRequest,
    AuthorResponse,
    AuthorSummary,
    AuthorUpdateRequest,
    BookCreateRequest,
    BookResponse,
    BookSummary,
    BookUpdateRequest,
)


# ── Domain -> response ───────────────────────────────────────────────


def to_book_summary(book: Book) -> BookSummary:
    return BookSummary(
        id=book.id,
        title=book.title,
        year=book.year,
        isbn=book.isbn,
        summary=book.summary,
        image=book.image,
        price=book.price,
        author_id=book.author_id,
    )


def to_author_summary(author: Author) -> AuthorSummary:
    return AuthorSummary(
        id=author.id,
        first_name=author.first_name,
        last_name=author.last_name,
        bio=author.bio,
    )


def to_author_response(author: Author) -> AuthorResponse:
    """Project an author and its books, without nesting authors again."""
    return AuthorResponse(
        id=author.id,
        first_name=author.first_name,
        last_name=author.last_name,
        bio=author.bio,
        books=[to_book_summary(book) for book in author.books],
    )


def to_book_response(book: Book) -> BookResponse:
    """Project a book and its author, without nesting books again."""
    return BookResponse(
        id=book.id,
        title=book.title,
        year=book.year,
        isbn=book.isbn,
        summary=book.summary,
        image=book.image,
        price=book.price,
        author_id=book.author_id,
        author=to_author_summary(book.author) if book.author is not None else None,
    )


# ── Request -> domain ────────────────────────────────────────────────


def author_from_create(shape: Optional[AuthorCreateRequest]) -> Optional[Author]:
    """Build an unsaved author. Absent input stays absent."""
    if shape is None:
        return None
    return Author(
        first_name=shape.first_name,
        last_name=shape.last_name,
        bio=shape.bio,
    )


def author_from_update(shape: Optional[AuthorUpdateRequest]) -> Optional[Author]:
    if shape is None:
        return None
    return Author(
        id=shape.id,
        first_name=shape.first_name,
        last_name=shape.last_name,
        bio=shape.bio,
    )


def book_from_create(shape: Optional[BookCreateRequest]) -> Optional[Book]:
    """Build an unsaved book. Absent input stays absent."""
    if shape is None:
        return None
    return Book(
        title=shape.title,
        year=shape.year,
        isbn=shape.isbn,
        summary=shape.summary,
        image=shape.image,
        price=shape.price,
        author_id=shape.author_id,
    )


def book_from_update(shape: Optional[BookUpdateRequest]) -> Optional[Book]:
    if shape is None:
        return None
    return Book(
        id=shape.id,
        title=shape.title,
        year=shape.year,
        isbn=shape.isbn,
        summary=shape.summary,
        image=shape.image,
        price=shape.price,
        author_id=shape.author_id,
    )


# ── Response -> request (round trip) ─────────────────────────────────


def author_update_from_response(response: AuthorResponse) -> AuthorUpdateRequest:
    """Turn a fetched author back into an update body."""
    return AuthorUpdateRequest(
        id=response.id,
        first_name=response.first_name,
        last_name=response.last_name,
        bio=response.bio,
    )


def book_update_from_response(response: BookResponse) -> BookUpdateRequest:
    """Turn a fetched book back into an update body."""
    return BookUpdateRequest(
        id=response.id,
        title=response.title,
        year=response.year,
        isbn=response.isbn,
        summary=response.summary,
        image=response.image,
        price=response.price,
        author_id=response.author_id,
    )
