"""SQLAlchemy-backed audit store."""

from datetime import UTC, datetime

import structlog
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from active_audit.core.audit.models import AuditLog
from active_audit.core.audit.schemas import (
    AssociationLink,
    AuditAction,
    AuditFilter,
    AuditRecord,
)
from active_audit.core.audit.serializers import serialize_value, serialize_values
from active_audit.core.audit.store import AuditStore
from active_audit.core.errors import AuditWriteError


log = structlog.get_logger()


class SQLAlchemyAuditStore(AuditStore):
    """Audit store writing to the ``audit_logs`` table.

    Attribute values are converted to JSON-safe primitives on write, so
    records read back carry the serialized form (UUIDs and datetimes as
    strings, and so on).
    """

    def __init__(self, session: Session, flush: bool = True) -> None:
        """Initialize the store.

        Args:
            session: Session the audit rows are added to
            flush: Flush after each write. Must be False when writing
                from inside a flush hook; rejected rows then raise the
                SQLAlchemyError from the caller's next flush.
        """
        self.session = session
        self.flush = flush

    def create(self, record: AuditRecord) -> AuditRecord:
        """Add an audit row for the record to the session."""
        entry = to_audit_log(record)
        try:
            self.session.add(entry)
            if self.flush:
                self.session.flush()
        except SQLAlchemyError as exc:
            log.warning(
                "audit_write_failed",
                record_id=str(record.id),
                action=record.action.value,
                error=str(exc),
            )
            raise AuditWriteError(
                "Audit store rejected the record",
                record_id=str(record.id),
                details={"error": str(exc)},
            ) from exc
        return record

    def query(self, audit_filter: AuditFilter) -> list[AuditRecord]:
        """List records for a scope and association chain, oldest first."""
        stmt = (
            select(AuditLog)
            .where(
                AuditLog.scope == audit_filter.scope,
                AuditLog.association_key == audit_filter.association_key,
            )
            .order_by(AuditLog.created_at, AuditLog.id)
        )
        return [from_audit_log(entry) for entry in self.session.scalars(stmt)]


def to_audit_log(record: AuditRecord) -> AuditLog:
    """Map an audit record to a table row."""
    entity = record.association_chain[0]
    return AuditLog(
        id=record.id,
        scope=record.scope,
        action=record.action.value,
        auditable_type=entity.type_name,
        auditable_id=str(entity.id),
        association_key=record.association_key,
        association_chain=[link.model_dump() for link in record.association_chain],
        modifier_id=str(serialize_value(record.modifier_id)),
        original=serialize_values(record.original),
        modified=serialize_values(record.modified),
        created_at=record.created_at,
    )


def from_audit_log(entry: AuditLog) -> AuditRecord:
    """Map a table row back to an audit record."""
    return AuditRecord(
        id=entry.id,
        association_chain=[
            AssociationLink.model_validate(link) for link in entry.association_chain
        ],
        scope=entry.scope,
        action=AuditAction(entry.action),
        modifier_id=entry.modifier_id,
        original=dict(entry.original),
        modified=dict(entry.modified),
        created_at=_as_utc(entry.created_at),
    )


def _as_utc(value: datetime) -> datetime:
    """Attach UTC to timestamps the backend returns naive (e.g. SQLite)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value
