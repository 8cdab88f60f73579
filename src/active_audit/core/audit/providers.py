"""Capability interfaces the recorder needs from a host entity."""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from active_audit.core.audit.diff import ChangePair
from active_audit.core.audit.schemas import AuditOptions


@runtime_checkable
class SnapshotProvider(Protocol):
    """Supplies the entity's current attribute values."""

    def audit_snapshot(self) -> Mapping[str, Any]: ...


@runtime_checkable
class ChangeProvider(Protocol):
    """Supplies ``(old, new)`` pairs for attributes changed since load."""

    def audit_changes(self) -> Mapping[str, ChangePair]: ...


@runtime_checkable
class AuditableEntity(SnapshotProvider, ChangeProvider, Protocol):
    """An entity the recorder can audit."""

    @property
    def audit_identity(self) -> Any: ...

    @property
    def audit_type_name(self) -> str: ...

    @property
    def audit_options(self) -> AuditOptions: ...


class EntityState:
    """Plain auditable entity for hosts without an ORM adapter.

    Example:
        entity = EntityState(
            identity=42,
            type_name="Post",
            options=AuditOptions(scope="content"),
            snapshot={"title": "Hello"},
        )
    """

    def __init__(
        self,
        identity: Any,
        type_name: str,
        options: AuditOptions,
        snapshot: Mapping[str, Any] | None = None,
        changes: Mapping[str, ChangePair] | None = None,
    ) -> None:
        self.identity = identity
        self.type_name = type_name
        self.options = options
        self.snapshot = dict(snapshot or {})
        self.changes = dict(changes or {})

    @property
    def audit_identity(self) -> Any:
        return self.identity

    @property
    def audit_type_name(self) -> str:
        return self.type_name

    @property
    def audit_options(self) -> AuditOptions:
        return self.options

    def audit_snapshot(self) -> Mapping[str, Any]:
        return self.snapshot

    def audit_changes(self) -> Mapping[str, ChangePair]:
        return self.changes
