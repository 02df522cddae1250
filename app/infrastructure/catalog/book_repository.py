"""
Adapter: Book repository.

Implements BookRepository port on top of a SQLAlchemy engine.
Books are returned with their owning author (without the author's books).
"""

import logging
from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Engine, RowMapping
from sqlalchemy.exc import IntegrityError

from app.domain.catalog.entities import Author, Book
from app.domain.catalog.ports import BookRepository
from app.infrastructure.catalog.tables import authors, book_from_row, book_values, books

logger = logging.getLogger(__name__)

_BOOK_WITH_AUTHOR = select(
    books,
    authors.c.first_name.label("author_first_name"),
    authors.c.last_name.label("author_last_name"),
    authors.c.bio.label("author_bio"),
).select_from(books.outerjoin(authors, books.c.author_id == authors.c.id))


def _book_with_author(row: RowMapping) -> Book:
    author = None
    if row["author_id"] is not None and row["author_first_name"] is not None:
        author = Author(
            id=row["author_id"],
            first_name=row["author_first_name"],
            last_name=row["author_last_name"],
            bio=row["author_bio"],
        )
    return book_from_row(row, author)


class SqlBookRepository(BookRepository):
    """Persists books to the ``books`` table.

    Implements the BookRepository port defined in the domain layer.
    An unknown ``author_id`` or a duplicate ISBN is a constraint
    violation and is reported as ``False``.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def find_all(self) -> list[Book]:
        """Return all books ordered by id, each with its author."""
        with self._engine.connect() as conn:
            rows = conn.execute(_BOOK_WITH_AUTHOR.order_by(books.c.id)).mappings().all()
        return [_book_with_author(row) for row in rows]

    def find_by_id(self, record_id: int) -> Optional[Book]:
        """Return the book with its author, or None if not found."""
        with self._engine.connect() as conn:
            row = conn.execute(
                _BOOK_WITH_AUTHOR.where(books.c.id == record_id)
            ).mappings().first()
        return _book_with_author(row) if row is not None else None

    def create(self, record: Book) -> bool:
        """Insert a book and set the generated id on ``record``."""
        try:
            with self._engine.begin() as conn:
                result = conn.execute(insert(books).values(**book_values(record)))
                record.id = result.inserted_primary_key[0]
        except IntegrityError as exc:
            record.id = None
            logger.warning("Book insert rejected: %s", exc.orig)
            return False

        logger.debug("Inserted book id=%d.", record.id)
        return True

    def update(self, record: Book) -> bool:
        """Overwrite the book row matching ``record.id``."""
        try:
            with self._engine.begin() as conn:
                result = conn.execute(
                    update(books)
                    .where(books.c.id == record.id)
                    .values(**book_values(record))
                )
                changed = result.rowcount
        except IntegrityError as exc:
            logger.warning("Book update rejected: %s", exc.orig)
            return False
        return changed == 1

    def delete(self, record: Book) -> bool:
        """Delete the book row matching ``record.id``."""
        with self._engine.begin() as conn:
            result = conn.execute(delete(books).where(books.c.id == record.id))
            changed = result.rowcount
        return changed == 1
