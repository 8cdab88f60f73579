"""Build audit records from an entity and a lifecycle action."""

from typing import Any, assert_never

from active_audit.core.audit.diff import (
    ChangePair,
    except_columns,
    pair_with_absent,
    transform_changes,
)
from active_audit.core.audit.providers import AuditableEntity
from active_audit.core.audit.schemas import (
    AssociationLink,
    AuditAction,
    AuditFilter,
    AuditRecord,
)


def association_chain_for(entity: AuditableEntity) -> list[AssociationLink]:
    """Association chain locating an entity: just the entity itself."""
    return [
        AssociationLink(id=entity.audit_identity, type_name=entity.audit_type_name)
    ]


def audit_filter_for(entity: AuditableEntity) -> AuditFilter:
    """Query key matching every record written for an entity."""
    return AuditFilter(
        scope=entity.audit_options.scope,
        association_chain=association_chain_for(entity),
    )


def audited_changes_for(
    action: AuditAction,
    entity: AuditableEntity,
) -> dict[str, ChangePair]:
    """Select the ``(old, new)`` pairs to record for an action.

    Create and destroy record the full snapshot as new values. Update
    records only what changed. The exclusion list applies to create and
    update, and to destroy only when ``exclude_on_destroy`` is set.
    """
    options = entity.audit_options

    if action is AuditAction.CREATE:
        changes = pair_with_absent(entity.audit_snapshot())
        return except_columns(changes, options.excluded_columns)
    elif action is AuditAction.UPDATE:
        return except_columns(entity.audit_changes(), options.excluded_columns)
    elif action is AuditAction.DESTROY:
        changes = pair_with_absent(entity.audit_snapshot())
        if options.exclude_on_destroy:
            return except_columns(changes, options.excluded_columns)
        return changes
    else:
        assert_never(action)


def build_audit_attributes(
    action: AuditAction,
    entity: AuditableEntity,
    modifier_id: Any,
) -> AuditRecord:
    """Build the audit record for one lifecycle event.

    Args:
        action: Lifecycle action being audited
        entity: The entity being created, updated or destroyed
        modifier_id: Identity of the acting modifier

    Returns:
        An unsaved AuditRecord
    """
    original, modified = transform_changes(audited_changes_for(action, entity))

    return AuditRecord(
        association_chain=association_chain_for(entity),
        scope=entity.audit_options.scope,
        action=action,
        modifier_id=modifier_id,
        original=original,
        modified=modified,
    )
