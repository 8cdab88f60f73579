"""Audit log database model.

Stores one row per audited lifecycle event. The association chain is
kept both as JSON and as a flat ``association_key`` so history lookups
are a plain indexed equality match.
"""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from active_audit.core.database.base import Base, UUIDMixin


class AuditLog(Base, UUIDMixin):
    """Audit log entry for one create, update or destroy.

    Attributes:
        scope: Audit namespace the entry belongs to
        action: Lifecycle action (create, update, destroy)
        auditable_type: Type name of the audited entity
        auditable_id: Identity of the audited entity
        association_key: Lookup key derived from the association chain
        association_chain: Ordered [{id, type_name}] links
        modifier_id: Identity of the acting modifier
        original: Prior attribute values
        modified: New attribute values
        created_at: When the entry was built
    """

    __tablename__ = "audit_logs"

    scope: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        index=True,
    )
    action: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
    )

    # What was audited
    auditable_type: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
    )
    auditable_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    association_key: Mapped[str] = mapped_column(
        String(1024),
        nullable=False,
        index=True,
    )
    association_chain: Mapped[list[dict[str, Any]]] = mapped_column(
        JSON,
        nullable=False,
    )

    # Who
    modifier_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
    )

    # Data
    original: Mapped[dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
        default=dict,
    )
    modified: Mapped[dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
        default=dict,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return (
            f"<AuditLog(id={self.id}, action={self.action}, "
            f"auditable_type={self.auditable_type}, "
            f"auditable_id={self.auditable_id})>"
        )
