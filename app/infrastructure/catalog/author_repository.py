"""
Adapter: Author repository.

Implements AuthorRepository port on top of a SQLAlchemy engine.
Authors are always returned with their books, ordered by book id.
"""

import logging
from collections import defaultdict
from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError

from app.domain.catalog.entities import Author, Book
from app.domain.catalog.ports import AuthorRepository
from app.infrastructure.catalog.tables import (
    author_from_row,
    author_values,
    authors,
    book_from_row,
    books,
)

logger = logging.getLogger(__name__)


class SqlAuthorRepository(AuthorRepository):
    """Persists authors to the ``authors`` table.

    Implements the AuthorRepository port defined in the domain layer.
    Constraint violations are reported as ``False``; other database
    errors propagate to the caller.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def find_all(self) -> list[Author]:
        """Return all authors ordered by id, each with its books."""
        with self._engine.connect() as conn:
            author_rows = conn.execute(
                select(authors).order_by(authors.c.id)
            ).mappings().all()
            book_rows = conn.execute(
                select(books)
                .where(books.c.author_id.is_not(None))
                .order_by(books.c.id)
            ).mappings().all()

        owned: dict[int, list[Book]] = defaultdict(list)
        for row in book_rows:
            owned[row["author_id"]].append(book_from_row(row))

        return [author_from_row(row, owned.get(row["id"], [])) for row in author_rows]

    def find_by_id(self, record_id: int) -> Optional[Author]:
        """Return the author with its books, or None if not found."""
        with self._engine.connect() as conn:
            row = conn.execute(
                select(authors).where(authors.c.id == record_id)
            ).mappings().first()
            if row is None:
                return None
            book_rows = conn.execute(
                select(books)
                .where(books.c.author_id == record_id)
                .order_by(books.c.id)
            ).mappings().all()

        return author_from_row(row, [book_from_row(b) for b in book_rows])

    def create(self, record: Author) -> bool:
        """Insert an author and set the generated id on ``record``.

        Books attached to the record are not persisted here; they are
        created through the book repository with ``author_id`` set.
        """
        try:
            with self._engine.begin() as conn:
                result = conn.execute(insert(authors).values(**author_values(record)))
                record.id = result.inserted_primary_key[0]
        except IntegrityError as exc:
            record.id = None
            logger.warning("Author insert rejected: %s", exc.orig)
            return False

        logger.debug("Inserted author id=%d.", record.id)
        return True

    def update(self, record: Author) -> bool:
        """Overwrite the author row matching ``record.id``."""
        try:
            with self._engine.begin() as conn:
                result = conn.execute(
                    update(authors)
                    .where(authors.c.id == record.id)
                    .values(**author_values(record))
                )
                changed = result.rowcount
        except IntegrityError as exc:
            logger.warning("Author update rejected: %s", exc.orig)
            return False
        return changed == 1

    def delete(self, record: Author) -> bool:
        """Delete the author row. Its books stay, with ``author_id`` cleared."""
        try:
            with self._engine.begin() as conn:
                result = conn.execute(delete(authors).where(authors.c.id == record.id))
                changed = result.rowcount
        except IntegrityError as exc:
            logger.warning("Author delete rejected: %s", exc.orig)
            return False
        return changed == 1
