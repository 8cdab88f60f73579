"""Audit error types."""

from active_audit.core.errors.exceptions import (
    AuditError,
    AuditWriteError,
    ModifierNotSetError,
)


__all__ = [
    "AuditError",
    "AuditWriteError",
    "ModifierNotSetError",
]
