"""Automatic audit capture via SQLAlchemy event listeners.

Provides automatic tracking of model changes for models that
inherit from AuditMixin. Audit rows are added to the same session as
the change, so they commit or roll back together with it.
"""

from collections.abc import Mapping
from typing import Any

import structlog
from sqlalchemy import event, inspect
from sqlalchemy.orm import Session

from active_audit.core.audit.builder import audit_filter_for
from active_audit.core.audit.context import AuditContext
from active_audit.core.audit.diff import ChangePair
from active_audit.core.audit.repos import SQLAlchemyAuditStore
from active_audit.core.audit.schemas import AuditAction, AuditOptions, AuditRecord
from active_audit.core.audit.service import AuditRecorder


log = structlog.get_logger()

# session.info key holding an explicitly bound AuditContext
SESSION_CONTEXT_KEY = "active_audit.context"


class SQLAlchemyEntity:
    """Expose a mapped instance as an auditable entity.

    Only attributes already loaded on the instance are read, so building
    a record never emits SQL.
    """

    def __init__(self, obj: Any) -> None:
        self.obj = obj
        self.state = inspect(obj)
        self.mapper = self.state.mapper

    @property
    def audit_identity(self) -> Any:
        identity = self.state.identity or self.mapper.primary_key_from_instance(
            self.obj
        )
        if len(identity) == 1:
            return identity[0]
        # Composite keys collapse to one string
        return ",".join(str(part) for part in identity)

    @property
    def audit_type_name(self) -> str:
        return self.obj.__class__.__name__

    @property
    def audit_options(self) -> AuditOptions:
        return self.obj.get_audit_options()

    def audit_snapshot(self) -> Mapping[str, Any]:
        loaded = self.state.dict
        return {
            attr.key: loaded[attr.key]
            for attr in self.mapper.column_attrs
            if attr.key in loaded
        }

    def audit_changes(self) -> Mapping[str, ChangePair]:
        """Extract changes from a modified object.

        Returns:
            Dictionary of changes {field: (old, new)}
        """
        changes = {}

        for attr in self.mapper.column_attrs:
            history = self.state.attrs[attr.key].history
            if history.has_changes():
                old_value = history.deleted[0] if history.deleted else None
                new_value = history.added[0] if history.added else None
                changes[attr.key] = (old_value, new_value)

        return changes


def _should_audit(obj: Any) -> bool:
    """Check if an object should be audited.

    Args:
        obj: SQLAlchemy model instance

    Returns:
        True if the object has __audit__ = True
    """
    return getattr(obj, "__audit__", False)


def bind_audit_context(session: Session, context: AuditContext | None) -> None:
    """Attach an explicit audit context to a session.

    Flushes of this session record with the bound context instead of the
    context-local one. Pass None to unbind.
    """
    if context is None:
        session.info.pop(SESSION_CONTEXT_KEY, None)
    else:
        session.info[SESSION_CONTEXT_KEY] = context


def _after_flush(session: Session, _flush_context: Any) -> None:
    """Record audit entries for the objects just flushed.

    Runs after the flush SQL has been emitted, so new objects have
    their identities while attribute history is still intact.
    """
    pending: list[tuple[AuditAction, Any]] = []

    for obj in session.new:
        if _should_audit(obj):
            pending.append((AuditAction.CREATE, obj))

    for obj in session.dirty:
        # Only audit if there are actual changes
        if _should_audit(obj) and session.is_modified(obj):
            pending.append((AuditAction.UPDATE, obj))

    for obj in session.deleted:
        if _should_audit(obj):
            pending.append((AuditAction.DESTROY, obj))

    if not pending:
        return

    context = session.info.get(SESSION_CONTEXT_KEY)
    recorder = AuditRecorder(SQLAlchemyAuditStore(session, flush=False))

    for action, obj in pending:
        recorder.record(action, SQLAlchemyEntity(obj), context)

    log.debug("audit_flush_recorded", count=len(pending))


def setup_audit_listeners(target: Any = Session) -> None:
    """Set up SQLAlchemy event listeners for automatic auditing.

    Call this during application startup to enable automatic
    audit logging for models with __audit__ = True. Audit rows are
    written by the next flush, which commit performs.

    Because the rows are only staged inside the flush hook, a row the
    database rejects surfaces from that next flush (usually commit) as
    the raw SQLAlchemyError, not as AuditWriteError. The transaction
    is rolled back with the entity change either way.

    Args:
        target: Session class, sessionmaker or session to listen on
    """
    if not event.contains(target, "after_flush", _after_flush):
        event.listen(target, "after_flush", _after_flush)


def remove_audit_listeners(target: Any = Session) -> None:
    """Remove listeners installed by setup_audit_listeners."""
    if event.contains(target, "after_flush", _after_flush):
        event.remove(target, "after_flush", _after_flush)


def audited_changes(session: Session, obj: Any) -> list[AuditRecord]:
    """Return every audit record written for a mapped instance.

    Args:
        session: Session to query the audit table with
        obj: Audited model instance

    Returns:
        Records in the instance's scope for its association chain
    """
    store = SQLAlchemyAuditStore(session)
    return store.query(audit_filter_for(SQLAlchemyEntity(obj)))
