"""
Domain-specific errors for the catalog bounded context.

All errors raised from the domain and application layers are defined here.
Each error is tagged with an ErrorKind so the interface layer can map a
whole family of failures to one HTTP response.
No framework imports allowed.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Internal classification of a catalog failure."""

    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    PERSISTENCE_DECLINED = "persistence_declined"
    UNEXPECTED = "unexpected"


class CatalogDomainError(Exception):
    """Base error for all catalog domain errors."""

    kind = ErrorKind.UNEXPECTED

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class InvalidInputError(CatalogDomainError):
    """Raised when a request body is absent or fails field checks.

    Attributes:
        fields: Field name to list of messages, as much as is known.
    """

    kind = ErrorKind.INVALID_INPUT

    def __init__(
        self, message: str, fields: Optional[dict[str, list[str]]] = None
    ) -> None:
        super().__init__(message)
        self.fields = fields or {}


class RecordNotFoundError(CatalogDomainError):
    """Raised when a lookup by identifier yields nothing."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, entity: str, record_id: int) -> None:
        super().__init__(f"{entity} not found: {record_id}")
        self.entity = entity
        self.record_id = record_id


class PersistenceFailedError(CatalogDomainError):
    """Raised when a repository reports that it declined a write."""

    kind = ErrorKind.PERSISTENCE_DECLINED

    def __init__(self, entity: str, operation: str) -> None:
        super().__init__(f"{entity} {operation} Failed")
        self.entity = entity
        self.operation = operation


class UnexpectedCatalogError(CatalogDomainError):
    """Wraps any other exception raised while handling a request."""

    kind = ErrorKind.UNEXPECTED

    def __init__(self, reason: str) -> None:
        super().__init__(f"Unexpected error: {reason}")
        self.reason = reason
