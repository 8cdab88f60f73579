"""Audit store interface and in-memory implementation."""

from abc import ABC, abstractmethod
from uuid import UUID

from active_audit.core.audit.schemas import AuditFilter, AuditRecord
from active_audit.core.errors import AuditWriteError


class AuditStore(ABC):
    """Persistence sink for audit records.

    Implementations raise AuditWriteError when a record is rejected.
    """

    @abstractmethod
    def create(self, record: AuditRecord) -> AuditRecord:
        """Durably write a record.

        Raises:
            AuditWriteError: If the record is rejected
        """

    @abstractmethod
    def query(self, audit_filter: AuditFilter) -> list[AuditRecord]:
        """Return every record matching the filter, oldest first."""


class InMemoryAuditStore(AuditStore):
    """In-memory implementation of AuditStore for testing and development.

    Uses a list with linear scan for queries. Records are deep-copied
    on the way in and out, so callers cannot rewrite stored history.
    Not suitable for production use.
    """

    def __init__(self) -> None:
        """Initialize empty storage."""
        self._records: list[AuditRecord] = []
        self._ids: set[UUID] = set()

    def create(self, record: AuditRecord) -> AuditRecord:
        """Append a record, rejecting duplicate ids."""
        if record.id in self._ids:
            raise AuditWriteError(
                "Duplicate audit record",
                record_id=str(record.id),
            )
        self._records.append(record.model_copy(deep=True))
        self._ids.add(record.id)
        return record

    def query(self, audit_filter: AuditFilter) -> list[AuditRecord]:
        """List records for a scope and association chain in write order."""
        return [
            record.model_copy(deep=True)
            for record in self._records
            if record.matches(audit_filter)
        ]

    def __len__(self) -> int:
        return len(self._records)
