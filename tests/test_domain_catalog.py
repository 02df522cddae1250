"""
Tests for the catalog domain layer.

Tests domain entities and error classes in isolation.
No external dependencies or IO required.
"""

import pytest

from app.domain.catalog.entities import Author, Book
from app.domain.catalog.errors import (
    CatalogDomainError,
    ErrorKind,
    InvalidInputError,
    PersistenceFailedError,
    RecordNotFoundError,
    UnexpectedCatalogError,
)


class TestAuthorEntity:
    """Tests for the Author entity."""

    def test_unsaved_author_has_no_id(self) -> None:
        """An author built in memory waits for storage to assign its id."""
        author = Author(first_name="Jane", last_name="Austen")
        assert author.id is None
        assert author.bio is None
        assert author.books == []

    def test_books_are_not_shared_between_instances(self) -> None:
        first = Author(first_name="A", last_name="B")
        second = Author(first_name="C", last_name="D")
        first.books.append(Book(title="Emma"))
        assert second.books == []


class TestBookEntity:
    """Tests for the Book entity."""

    def test_only_title_is_mandatory(self) -> None:
        book = Book(title="Persuasion")
        assert book.id is None
        assert book.author_id is None
        assert book.author is None
        assert book.price is None


class TestDomainErrors:
    """Tests for domain error classes."""

    @pytest.mark.parametrize(
        ("error", "kind"),
        [
            (InvalidInputError("bad"), ErrorKind.INVALID_INPUT),
            (RecordNotFoundError("Author", 3), ErrorKind.NOT_FOUND),
            (PersistenceFailedError("Author", "Creation"), ErrorKind.PERSISTENCE_DECLINED),
            (UnexpectedCatalogError("RuntimeError"), ErrorKind.UNEXPECTED),
        ],
    )
    def test_every_error_is_tagged(self, error: CatalogDomainError, kind: ErrorKind) -> None:
        assert isinstance(error, CatalogDomainError)
        assert error.kind is kind

    def test_not_found_message_contains_entity_and_id(self) -> None:
        error = RecordNotFoundError("Book", 42)
        assert error.message == "Book not found: 42"
        assert error.record_id == 42

    def test_persistence_failed_message(self) -> None:
        """Declined writes read like 'Author Creation Failed'."""
        assert PersistenceFailedError("Author", "Creation").message == "Author Creation Failed"

    def test_invalid_input_defaults_to_no_fields(self) -> None:
        assert InvalidInputError("bad").fields == {}
