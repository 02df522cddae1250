"""
Tests for the SQLAlchemy catalog repositories.

Runs against an in-memory SQLite database with foreign keys enforced.
"""

import pytest

from app.domain.catalog.entities import Author, Book
from app.infrastructure.catalog.author_repository import SqlAuthorRepository
from app.infrastructure.catalog.book_repository import SqlBookRepository


@pytest.fixture
def author_store(engine) -> SqlAuthorRepository:
    return SqlAuthorRepository(engine)


@pytest.fixture
def book_store(engine) -> SqlBookRepository:
    return SqlBookRepository(engine)


def _author(store: SqlAuthorRepository, first: str = "Jane", last: str = "Austen") -> Author:
    author = Author(first_name=first, last_name=last)
    assert store.create(author)
    return author


class TestSqlAuthorRepository:
    """Tests for SqlAuthorRepository."""

    def test_create_assigns_id(self, author_store) -> None:
        author = _author(author_store)
        assert author.id is not None
        assert author.id >= 1

    def test_find_by_id_missing(self, author_store) -> None:
        assert author_store.find_by_id(404) is None

    def test_find_all_groups_books_by_author(self, author_store, book_store) -> None:
        austen = _author(author_store)
        bronte = _author(author_store, "Charlotte", "Bronte")
        for title, owner in [("Emma", austen), ("Jane Eyre", bronte), ("Persuasion", austen)]:
            assert book_store.create(Book(title=title, author_id=owner.id))
        assert book_store.create(Book(title="Anonymous"))

        found = author_store.find_all()

        assert [a.id for a in found] == [austen.id, bronte.id]
        assert [b.title for b in found[0].books] == ["Emma", "Persuasion"]
        assert [b.title for b in found[1].books] == ["Jane Eyre"]

    def test_update_existing(self, author_store) -> None:
        author = _author(author_store)
        author.bio = "English novelist"
        assert author_store.update(author)
        assert author_store.find_by_id(author.id).bio == "English novelist"

    def test_update_missing_returns_false(self, author_store) -> None:
        assert not author_store.update(Author(id=99, first_name="A", last_name="B"))

    def test_delete_keeps_books_without_author(self, author_store, book_store) -> None:
        author = _author(author_store)
        book = Book(title="Emma", author_id=author.id)
        book_store.create(book)

        assert author_store.delete(author)

        assert author_store.find_by_id(author.id) is None
        orphan = book_store.find_by_id(book.id)
        assert orphan.author_id is None
        assert orphan.author is None

    def test_delete_missing_returns_false(self, author_store) -> None:
        assert not author_store.delete(Author(id=99, first_name="A", last_name="B"))


class TestSqlBookRepository:
    """Tests for SqlBookRepository."""

    def test_round_trip_all_fields(self, author_store, book_store) -> None:
        author = _author(author_store)
        book = Book(
            title="Emma",
            year=1815,
            isbn="978-0141439587",
            summary="Matchmaking in Highbury.",
            image="covers/emma.jpg",
            price=9.99,
            author_id=author.id,
        )
        assert book_store.create(book)

        stored = book_store.find_by_id(book.id)

        assert stored.title == "Emma"
        assert stored.year == 1815
        assert stored.isbn == "978-0141439587"
        assert stored.summary == "Matchmaking in Highbury."
        assert stored.image == "covers/emma.jpg"
        assert stored.price == pytest.approx(9.99)
        assert stored.author.first_name == "Jane"
        assert stored.author.books == []

    def test_unknown_author_is_rejected(self, book_store) -> None:
        """A dangling foreign key is an expected failure, reported as False."""
        book = Book(title="Ghost", author_id=12345)
        assert not book_store.create(book)
        assert book.id is None

    def test_duplicate_isbn_is_rejected(self, book_store) -> None:
        assert book_store.create(Book(title="One", isbn="111"))
        assert not book_store.create(Book(title="Two", isbn="111"))

    def test_update_and_delete(self, book_store) -> None:
        book = Book(title="Draft")
        book_store.create(book)

        book.title = "Final"
        assert book_store.update(book)
        assert book_store.find_by_id(book.id).title == "Final"

        assert book_store.delete(book)
        assert book_store.find_by_id(book.id) is None
        assert not book_store.delete(book)

    def test_find_all_in_id_order(self, book_store) -> None:
        for title in ("C", "A", "B"):
            book_store.create(Book(title=title))
        assert [b.title for b in book_store.find_all()] == ["C", "A", "B"]
