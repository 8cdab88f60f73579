"""Audit recorder: lifecycle dispatch and history lookup."""

import structlog

from active_audit.core.audit.builder import audit_filter_for, build_audit_attributes
from active_audit.core.audit.context import AuditContext, resolve_modifier_id
from active_audit.core.audit.providers import AuditableEntity
from active_audit.core.audit.schemas import AuditAction, AuditRecord
from active_audit.core.audit.store import AuditStore


log = structlog.get_logger()


class AuditRecorder:
    """Records create, update and destroy events for auditable entities.

    Every entry point builds one AuditRecord and writes it to the store.
    Failures are never swallowed: a missing modifier raises
    ModifierNotSetError before anything is built, and a rejected write
    raises AuditWriteError from the store.
    """

    def __init__(self, store: AuditStore) -> None:
        """Initialize audit recorder.

        Args:
            store: Sink that audit records are written to
        """
        self.store = store

    def record(
        self,
        action: AuditAction,
        entity: AuditableEntity,
        context: AuditContext | None = None,
    ) -> AuditRecord:
        """Build and write the audit record for one lifecycle event.

        Args:
            action: Lifecycle action being audited
            entity: The entity being created, updated or destroyed
            context: Explicit audit context; the context-local one is
                used when omitted

        Returns:
            The written audit record

        Raises:
            ModifierNotSetError: If no modifier is available
            AuditWriteError: If the store rejects the record
        """
        modifier_id = resolve_modifier_id(context)
        record = build_audit_attributes(action, entity, modifier_id)
        self.store.create(record)

        log.info(
            "audit_record_created",
            action=action.value,
            scope=record.scope,
            association_key=record.association_key,
            modifier_id=str(modifier_id),
        )

        return record

    def audit_create(
        self,
        entity: AuditableEntity,
        context: AuditContext | None = None,
    ) -> AuditRecord:
        """Record the creation of an entity."""
        return self.record(AuditAction.CREATE, entity, context)

    def audit_update(
        self,
        entity: AuditableEntity,
        context: AuditContext | None = None,
    ) -> AuditRecord:
        """Record the changed attributes of an entity."""
        return self.record(AuditAction.UPDATE, entity, context)

    def audit_destroy(
        self,
        entity: AuditableEntity,
        context: AuditContext | None = None,
    ) -> AuditRecord:
        """Record the final snapshot of a destroyed entity."""
        return self.record(AuditAction.DESTROY, entity, context)

    def audited_changes(self, entity: AuditableEntity) -> list[AuditRecord]:
        """Return every audit record written for an entity in its scope."""
        return self.store.query(audit_filter_for(entity))
