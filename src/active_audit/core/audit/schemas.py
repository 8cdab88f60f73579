"""Pydantic schemas for audit records and their lookup keys."""

from datetime import UTC, datetime
from enum import StrEnum
from typing import Any
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator


def utc_now() -> datetime:
    """Return current UTC time."""
    return datetime.now(UTC)


class AuditAction(StrEnum):
    """Lifecycle action that produced an audit record."""

    CREATE = "create"
    UPDATE = "update"
    DESTROY = "destroy"


class AssociationLink(BaseModel):
    """One hop in an association chain: an entity identity and its type."""

    model_config = ConfigDict(frozen=True)

    id: str | int
    type_name: str = Field(..., min_length=1)

    @field_validator("id", mode="before")
    @classmethod
    def normalize_id(cls, v: Any) -> Any:
        """Store UUID identities as strings so chains compare after a round trip."""
        if isinstance(v, UUID):
            return str(v)
        return v

    @property
    def key(self) -> str:
        """Lookup key for this link, e.g. ``Post:42``."""
        return f"{self.type_name}:{self.id}"


def association_key(chain: list[AssociationLink]) -> str:
    """Build the lookup key for an association chain.

    Args:
        chain: Ordered links, outermost ancestor last

    Returns:
        Links joined as ``Type:id/Type:id``
    """
    return "/".join(link.key for link in chain)


class AuditOptions(BaseModel):
    """Per-entity audit configuration."""

    model_config = ConfigDict(frozen=True)

    scope: str = Field(..., min_length=1)
    excluded_columns: frozenset[str] = frozenset()
    # Destroy captures the full snapshot unless this is set
    exclude_on_destroy: bool = False


class AuditFilter(BaseModel):
    """Query key for retrieving an entity's audit history."""

    model_config = ConfigDict(frozen=True)

    scope: str
    association_chain: list[AssociationLink] = Field(..., min_length=1)

    @property
    def association_key(self) -> str:
        """Lookup key for the filter's chain."""
        return association_key(self.association_chain)


class AuditRecord(BaseModel):
    """Attribute-level audit record for one lifecycle event.

    Immutable once built. ``original`` holds prior values and
    ``modified`` holds new values; absent values are omitted from
    either map.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4, description="Unique identifier")
    association_chain: list[AssociationLink] = Field(..., min_length=1)
    scope: str = Field(..., min_length=1)
    action: AuditAction
    modifier_id: Any = Field(..., description="Acting principal")
    original: dict[str, Any] = Field(default_factory=dict)
    modified: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=utc_now)

    @property
    def association_key(self) -> str:
        """Lookup key for the record's chain."""
        return association_key(self.association_chain)

    def matches(self, audit_filter: AuditFilter) -> bool:
        """Check whether this record belongs to the filter's scope and chain."""
        return (
            self.scope == audit_filter.scope
            and self.association_key == audit_filter.association_key
        )
