"""
Resource handler for books.

Input: Book records and book ids.
Output: Book records with their author summary loaded.
Side effects: Writes to the book repository.
Failure cases: see app.application.catalog.resource_handler.
"""

from app.application.catalog.resource_handler import ResourceHandler
from app.domain.catalog.entities import Book


class BookHandler(ResourceHandler[Book]):
    """CRUD operations on books. Only the title is mandatory."""

    entity_name = "Book"
    entity_plural = "Books"
    required_fields = ("title",)
