"""Core recording, persistence and cross-cutting concerns."""

from active_audit.core.database import AuditMixin, Base
from active_audit.core.errors import (
    AuditError,
    AuditWriteError,
    ModifierNotSetError,
)


__all__ = [
    # Database
    "AuditMixin",
    # Errors
    "AuditError",
    "AuditWriteError",
    "Base",
    "ModifierNotSetError",
]
