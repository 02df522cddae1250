"""
FastAPI routers for the catalog bounded context.

All routes delegate to resource handlers. No business logic here.
Shapes are validated by Pydantic schemas and converted by the translator.
Error mapping is handled by centralized error handlers.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status

from app.application.catalog.authors import AuthorHandler
from app.application.catalog.books import BookHandler
from app.interfaces.catalog.dependencies import get_author_handler, get_book_handler
from app.interfaces.catalog.schemas import (
    AuthorCreateRequest,
    AuthorResponse,
    AuthorUpdateRequest,
    BookCreateRequest,
    BookResponse,
    BookUpdateRequest,
    ErrorResponse,
)
from app.interfaces.catalog.translators import (
    author_from_create,
    author_from_update,
    book_from_create,
    book_from_update,
    to_author_response,
    to_book_response,
)

SERVER_ERROR = {500: {"model": ErrorResponse}}
BAD_INPUT = {400: {"model": ErrorResponse}}
NOT_FOUND = {404: {"description": "No record with this id"}}

authors_router = APIRouter(prefix="/authors", tags=["authors"])
books_router = APIRouter(prefix="/books", tags=["books"])


# ── Authors ──────────────────────────────────────────────────────────


@authors_router.get(
    "",
    response_model=list[AuthorResponse],
    responses=SERVER_ERROR,
    summary="Get all authors",
)
def list_authors(
    handler: AuthorHandler = Depends(get_author_handler),
) -> list[AuthorResponse]:
    """Return every author with the books they own."""
    return [to_author_response(author) for author in handler.list_all()]


@authors_router.get(
    "/{author_id}",
    response_model=AuthorResponse,
    responses={**NOT_FOUND, **SERVER_ERROR},
    summary="Get an author by id",
)
def get_author(
    author_id: int,
    handler: AuthorHandler = Depends(get_author_handler),
) -> AuthorResponse:
    """Return one author's record."""
    return to_author_response(handler.get(author_id))


@authors_router.post(
    "",
    response_model=AuthorResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**BAD_INPUT, **SERVER_ERROR},
    summary="Create an author",
)
def create_author(
    request: Request,
    response: Response,
    body: Optional[AuthorCreateRequest] = None,
    handler: AuthorHandler = Depends(get_author_handler),
) -> AuthorResponse:
    """Create an author and return it as stored."""
    created = handler.create(author_from_create(body))
    response.headers["Location"] = f"{request.url.path.rstrip('/')}/{created.id}"
    return to_author_response(created)


@authors_router.put(
    "",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**BAD_INPUT, **NOT_FOUND, **SERVER_ERROR},
    summary="Update an author",
)
def update_author(
    body: Optional[AuthorUpdateRequest] = None,
    author_id: Optional[int] = Query(default=None, alias="id"),
    handler: AuthorHandler = Depends(get_author_handler),
) -> Response:
    """Update the author identified by the id in the body."""
    handler.update(author_from_update(body), author_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@authors_router.put(
    "/{author_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**BAD_INPUT, **NOT_FOUND, **SERVER_ERROR},
    summary="Update an author (id in path and body)",
)
def update_author_by_path(
    author_id: int,
    body: Optional[AuthorUpdateRequest] = None,
    handler: AuthorHandler = Depends(get_author_handler),
) -> Response:
    """Update an author; the path id must match the body id."""
    handler.update(author_from_update(body), author_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@authors_router.delete(
    "/{author_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**BAD_INPUT, **NOT_FOUND, **SERVER_ERROR},
    summary="Delete an author",
)
def delete_author(
    author_id: int,
    handler: AuthorHandler = Depends(get_author_handler),
) -> Response:
    """Delete an author. Their books remain, without an author."""
    handler.delete(author_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ── Books ────────────────────────────────────────────────────────────


@books_router.get(
    "",
    response_model=list[BookResponse],
    responses=SERVER_ERROR,
    summary="Get all books",
)
def list_books(
    handler: BookHandler = Depends(get_book_handler),
) -> list[BookResponse]:
    """Return every book with its author."""
    return [to_book_response(book) for book in handler.list_all()]


@books_router.get(
    "/{book_id}",
    response_model=BookResponse,
    responses={**NOT_FOUND, **SERVER_ERROR},
    summary="Get a book by id",
)
def get_book(
    book_id: int,
    handler: BookHandler = Depends(get_book_handler),
) -> BookResponse:
    """Return one book's record."""
    return to_book_response(handler.get(book_id))


@books_router.post(
    "",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**BAD_INPUT, **SERVER_ERROR},
    summary="Create a book",
)
def create_book(
    request: Request,
    response: Response,
    body: Optional[BookCreateRequest] = None,
    handler: BookHandler = Depends(get_book_handler),
) -> BookResponse:
    """Create a book and return it as stored."""
    created = handler.create(book_from_create(body))
    response.headers["Location"] = f"{request.url.path.rstrip('/')}/{created.id}"
    return to_book_response(created)


@books_router.put(
    "",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**BAD_INPUT, **NOT_FOUND, **SERVER_ERROR},
    summary="Update a book",
)
def update_book(
    body: Optional[BookUpdateRequest] = None,
    book_id: Optional[int] = Query(default=None, alias="id"),
    handler: BookHandler = Depends(get_book_handler),
) -> Response:
    """Update the book identified by the id in the body."""
    handler.update(book_from_update(body), book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@books_router.put(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**BAD_INPUT, **NOT_FOUND, **SERVER_ERROR},
    summary="Update a book (id in path and body)",
)
def update_book_by_path(
    book_id: int,
    body: Optional[BookUpdateRequest] = None,
    handler: BookHandler = Depends(get_book_handler),
) -> Response:
    """Update a book; the path id must match the body id."""
    handler.update(book_from_update(body), book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@books_router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**BAD_INPUT, **NOT_FOUND, **SERVER_ERROR},
    summary="Delete a book",
)
def delete_book(
    book_id: int,
    handler: BookHandler = Depends(get_book_handler),
) -> Response:
    """Delete a book."""
    handler.delete(book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
