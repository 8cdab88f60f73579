"""Attribute-level audit recording.

Provides:
- Change diffing and audit record construction
- AuditRecorder for create/update/destroy dispatch and history lookup
- AuditStore interface with an in-memory implementation

The SQLAlchemy pieces live in ``active_audit.core.audit.models``,
``active_audit.core.audit.repos`` and ``active_audit.core.audit.middleware``.
"""

from active_audit.core.audit.builder import build_audit_attributes
from active_audit.core.audit.context import (
    AuditContext,
    audit_context,
    clear_audit_context,
    get_audit_context,
    resolve_modifier_id,
    set_audit_context,
)
from active_audit.core.audit.diff import transform_changes
from active_audit.core.audit.providers import (
    AuditableEntity,
    ChangeProvider,
    EntityState,
    SnapshotProvider,
)
from active_audit.core.audit.schemas import (
    AssociationLink,
    AuditAction,
    AuditFilter,
    AuditOptions,
    AuditRecord,
)
from active_audit.core.audit.service import AuditRecorder
from active_audit.core.audit.store import AuditStore, InMemoryAuditStore


__all__ = [
    "AssociationLink",
    "AuditAction",
    "AuditContext",
    "AuditFilter",
    "AuditOptions",
    "AuditRecord",
    "AuditRecorder",
    "AuditStore",
    "AuditableEntity",
    "ChangeProvider",
    "EntityState",
    "InMemoryAuditStore",
    "SnapshotProvider",
    "audit_context",
    "build_audit_attributes",
    "clear_audit_context",
    "get_audit_context",
    "resolve_modifier_id",
    "set_audit_context",
    "transform_changes",
]
