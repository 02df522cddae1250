"""
Domain entities for the catalog bounded context.

Entities represent core business objects with identity and lifecycle.
Identifiers are assigned by storage, so a record that has not been
persisted yet carries ``id=None``.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Book:
    """A book in the catalog, optionally owned by one author.

    ``author`` is only populated when the record is read back from storage
    together with its owner; writes go through ``author_id``.
    """

    title: str
    id: Optional[int] = None
    year: Optional[int] = None
    isbn: Optional[str] = None
    summary: Optional[str] = None
    image: Optional[str] = None
    price: Optional[float] = None
    author_id: Optional[int] = None
    author: Optional["Author"] = None


@dataclass
class Author:
    """An author and the books they own, ordered as storage returns them."""

    first_name: str
    last_name: str
    id: Optional[int] = None
    bio: Optional[str] = None
    books: list[Book] = field(default_factory=list)
