"""
Generic resource handler: the CRUD pipeline shared by every catalog entity.

Input: domain records already translated from request shapes, or ids.
Output: domain records, ready to be translated into response shapes.
Side effects: writes through the repository port, messages to the logger port.
Failure cases: InvalidInputError, RecordNotFoundError,
PersistenceFailedError, UnexpectedCatalogError.

Every public operation is guarded: whatever goes wrong inside it leaves
as a CatalogDomainError, so the interface layer only ever has to map
error kinds.
"""

import functools
from typing import Callable, Generic, Optional, TypeVar

from app.domain.catalog.errors import (
    CatalogDomainError,
    ErrorKind,
    InvalidInputError,
    PersistenceFailedError,
    RecordNotFoundError,
    UnexpectedCatalogError,
)
from app.domain.catalog.ports import LoggerService, RecordRepository, RecordT

F = TypeVar("F", bound=Callable)


def guarded(operation: F) -> F:
    """Convert any failure of a handler operation into a domain error.

    Declined writes and unexpected exceptions are logged at error level.
    Client-side failures (bad input, not found) pass through silently.
    """

    @functools.wraps(operation)
    def wrapper(self: "ResourceHandler", *args, **kwargs):
        try:
            return operation(self, *args, **kwargs)
        except CatalogDomainError as exc:
            if exc.kind in (ErrorKind.PERSISTENCE_DECLINED, ErrorKind.UNEXPECTED):
                self._log("error", exc.message)
            raise
        except Exception as exc:
            self._log("error", f"{type(exc).__name__}: {exc}")
            raise UnexpectedCatalogError(type(exc).__name__) from exc

    return wrapper  # type: ignore[return-value]


class ResourceHandler(Generic[RecordT]):
    """Orchestrates list/get/create/update/delete for one entity type.

    Subclasses set ``entity_name``, ``entity_plural`` and
    ``required_fields``; everything else is shared.
    """

    entity_name: str = "Record"
    entity_plural: str = "Records"
    required_fields: tuple[str, ...] = ()

    def __init__(
        self,
        repository: RecordRepository[RecordT],
        logger: LoggerService,
    ) -> None:
        self._repository = repository
        self._logger = logger

    @guarded
    def list_all(self) -> list[RecordT]:
        """Return every record in storage order."""
        self._log("info", f"Attempted Get All {self.entity_plural}")
        records = self._repository.find_all()
        self._log("info", f"Successfully got all {self.entity_plural}")
        return records

    @guarded
    def get(self, record_id: int) -> RecordT:
        """Return one record.

        Raises:
            RecordNotFoundError: If no record has this id.
        """
        self._log("info", f"Attempted Get {self.entity_name} id={record_id}")
        record = self._repository.find_by_id(record_id)
        if record is None:
            self._log("warn", f"{self.entity_name} with id={record_id} not found")
            raise RecordNotFoundError(self.entity_name, record_id)
        return record

    @guarded
    def create(self, record: Optional[RecordT]) -> RecordT:
        """Persist a new record and return it as stored.

        The storage-assigned id is read back from the repository so the
        caller sees the persisted state, not its own input.

        Raises:
            InvalidInputError: If the record is absent or incomplete.
            PersistenceFailedError: If the repository declines the insert
                or reports success without assigning an id.
        """
        self._log("info", f"Attempted Create {self.entity_name}")
        self._validate(record)
        record.id = None

        if not self._repository.create(record) or record.id is None:
            self._decline("Creation")

        created = self._repository.find_by_id(record.id)
        self._log("info", f"Created {self.entity_name} id={record.id}")
        return created if created is not None else record

    @guarded
    def update(self, record: Optional[RecordT], record_id: Optional[int] = None) -> None:
        """Overwrite an existing record identified by its own ``id``.

        ``record_id`` is the identifier from the URL, if the caller sent
        one; it only has to agree with the body.

        Raises:
            InvalidInputError: If the record is incomplete or the ids disagree.
            RecordNotFoundError: If no record has the body's id.
            PersistenceFailedError: If the repository declines the update.
        """
        self._log("info", f"Attempted Update {self.entity_name} id={record_id}")
        self._validate(record)
        if record.id is None:
            raise InvalidInputError(
                f"{self.entity_name} id is required",
                {"id": ["Field required"]},
            )
        if record_id is not None and record_id != record.id:
            raise InvalidInputError(
                "Identifier mismatch",
                {"id": [f"Body id {record.id} does not match path id {record_id}"]},
            )

        if self._repository.find_by_id(record.id) is None:
            self._log("warn", f"{self.entity_name} with id={record.id} not found")
            raise RecordNotFoundError(self.entity_name, record.id)

        if not self._repository.update(record):
            self._decline("Update")
        self._log("info", f"Updated {self.entity_name} id={record.id}")

    @guarded
    def delete(self, record_id: int) -> None:
        """Remove an existing record.

        Raises:
            InvalidInputError: If the id is lower than 1.
            RecordNotFoundError: If no record has this id.
            PersistenceFailedError: If the repository declines the delete.
        """
        self._log("info", f"Attempted Delete {self.entity_name} id={record_id}")
        if record_id < 1:
            raise InvalidInputError(
                "Invalid identifier", {"id": ["Must be greater than or equal to 1"]}
            )

        record = self._repository.find_by_id(record_id)
        if record is None:
            self._log("warn", f"{self.entity_name} with id={record_id} not found")
            raise RecordNotFoundError(self.entity_name, record_id)

        if not self._repository.delete(record):
            self._decline("Delete")
        self._log("info", f"Deleted {self.entity_name} id={record_id}")

    def _log(self, level: str, message: str) -> None:
        """Send a message to the logger port; a failing sink is ignored."""
        try:
            getattr(self._logger, level)(message)
        except Exception:  # noqa: BLE001
            pass

    def _validate(self, record: Optional[RecordT]) -> None:
        if record is None:
            raise InvalidInputError(
                "Request body is required", {"body": ["Field required"]}
            )

        missing = {}
        for name in self.required_fields:
            value = getattr(record, name, None)
            if value is None or (isinstance(value, str) and not value.strip()):
                missing[name] = ["Field required"]
        if missing:
            raise InvalidInputError(f"Invalid {self.entity_name}", missing)

    def _decline(self, operation: str) -> None:
        error = PersistenceFailedError(self.entity_name, operation)
        self._log("warn", error.message)
        raise error
