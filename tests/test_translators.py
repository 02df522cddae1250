"""
Tests for the shape translator.

Checks the depth-limited embeds, the camelCase wire format, and that
pass-through fields survive record -> response -> update -> record.
"""

from app.domain.catalog.entities import Author, Book
from app.interfaces.catalog.schemas import AuthorCreateRequest, BookCreateRequest
from app.interfaces.catalog.translators import (
    author_from_create,
    author_from_update,
    author_update_from_response,
    book_from_create,
    book_from_update,
    book_update_from_response,
    to_author_response,
    to_book_response,
)


def _book(**overrides) -> Book:
    values = dict(
        id=11,
        title="Emma",
        year=1815,
        isbn="978-0141439587",
        summary="Matchmaking.",
        image="covers/emma.jpg",
        price=9.99,
        author_id=1,
    )
    values.update(overrides)
    return Book(**values)


class TestDomainToResponse:
    """Record -> response-shape."""

    def test_author_embeds_book_summaries_in_order(self) -> None:
        author = Author(
            id=1,
            first_name="Jane",
            last_name="Austen",
            books=[_book(id=12, title="Persuasion"), _book()],
        )

        response = to_author_response(author)

        assert [b.title for b in response.books] == ["Persuasion", "Emma"]
        assert "author" not in response.books[0].model_dump()

    def test_book_embeds_author_summary(self) -> None:
        author = Author(id=1, first_name="Jane", last_name="Austen")
        response = to_book_response(_book(author=author))
        assert response.author.first_name == "Jane"
        assert "books" not in response.author.model_dump()

    def test_book_without_author(self) -> None:
        assert to_book_response(_book(author_id=None)).author is None

    def test_wire_format_is_camel_case(self) -> None:
        payload = to_book_response(_book()).model_dump(by_alias=True)
        assert payload["authorId"] == 1
        assert "author_id" not in payload


class TestRequestToDomain:
    """Create/update-shape -> record."""

    def test_create_never_carries_an_id(self) -> None:
        shape = AuthorCreateRequest.model_validate(
            {"id": 5, "firstName": "Jane", "lastName": "Austen"}
        )
        author = author_from_create(shape)
        assert author.id is None
        assert (author.first_name, author.last_name) == ("Jane", "Austen")

    def test_book_create_copies_optional_fields(self) -> None:
        shape = BookCreateRequest.model_validate({"title": "Emma", "price": 4.5})
        book = book_from_create(shape)
        assert book.price == 4.5
        assert book.year is None
        assert book.author_id is None

    def test_absent_shape_stays_absent(self) -> None:
        assert author_from_create(None) is None
        assert author_from_update(None) is None
        assert book_from_create(None) is None
        assert book_from_update(None) is None


class TestRoundTrip:
    """Shared fields come back unchanged."""

    def test_author_round_trip(self) -> None:
        original = Author(id=3, first_name="Jane", last_name="Austen", bio="Novelist")
        restored = author_from_update(author_update_from_response(to_author_response(original)))
        assert restored == original

    def test_book_round_trip(self) -> None:
        original = _book()
        restored = book_from_update(book_update_from_response(to_book_response(original)))
        assert restored == original
