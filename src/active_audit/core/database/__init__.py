"""Database layer - base models, mixins and session helpers."""

from active_audit.core.database.base import AuditMixin, Base, UUIDMixin
from active_audit.core.database.session import (
    create_db_engine,
    create_session_factory,
)


__all__ = [
    "AuditMixin",
    "Base",
    "UUIDMixin",
    "create_db_engine",
    "create_session_factory",
]
