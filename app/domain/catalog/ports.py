"""
Port interfaces (ABCs) for the catalog bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from app.domain.catalog.entities import Author, Book

RecordT = TypeVar("RecordT")


class RecordRepository(ABC, Generic[RecordT]):
    """Port for persisting one entity type.

    Writes report expected failures (constraint violations, vanished rows)
    by returning ``False``. Anything else is allowed to raise.
    """

    @abstractmethod
    def find_all(self) -> list[RecordT]:
        """Return every record, in storage order."""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, record_id: int) -> Optional[RecordT]:
        """Return the record with the given id, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def create(self, record: RecordT) -> bool:
        """Insert a record and set its storage-assigned ``id`` on success."""
        raise NotImplementedError

    @abstractmethod
    def update(self, record: RecordT) -> bool:
        """Overwrite the stored record matching ``record.id``."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, record: RecordT) -> bool:
        """Remove the stored record matching ``record.id``."""
        raise NotImplementedError


class AuthorRepository(RecordRepository[Author]):
    """Port for persisting and retrieving authors with their books."""


class BookRepository(RecordRepository[Book]):
    """Port for persisting and retrieving books with their author."""


class LoggerService(ABC):
    """Port for the observability side channel.

    Implementations must never raise: a broken log sink cannot change
    the outcome of a request.
    """

    @abstractmethod
    def info(self, message: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def warn(self, message: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def error(self, message: str) -> None:
        raise NotImplementedError
