"""
Resource handler for authors.

Input: Author records and author ids.
Output: Author records with their books loaded.
Side effects: Writes to the author repository.
Failure cases: see app.application.catalog.resource_handler.
"""

from app.application.catalog.resource_handler import ResourceHandler
from app.domain.catalog.entities import Author


class AuthorHandler(ResourceHandler[Author]):
    """CRUD operations on authors. First and last name are mandatory."""

    entity_name = "Author"
    entity_plural = "Authors"
    required_fields = ("first_name", "last_name")
