"""Exceptions raised by the audit recorder.

Both failure kinds are hard failures of the current operation: nothing
is retried and nothing is recovered locally. Callers (usually an ORM
lifecycle hook) decide whether the triggering mutation is rolled back.
"""

from typing import Any


class AuditError(Exception):
    """Base exception for all audit errors.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code
        details: Additional error details
    """

    message: str = "Audit failed"
    error_code: str = "audit_error"

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.message
        self.error_code = error_code or self.error_code
        self.details = details or {}
        super().__init__(self.message)


class ModifierNotSetError(AuditError):
    """Raised when no acting modifier is available at audit time.

    Example:
        raise ModifierNotSetError(details={"action": "update"})
    """

    message = "No current modifier is set for this operation"
    error_code = "modifier_not_set"


class AuditWriteError(AuditError):
    """Raised when an audit store rejects a record.

    Example:
        raise AuditWriteError(
            "Duplicate audit record",
            record_id=str(record.id),
        )
    """

    message = "Audit store rejected the record"
    error_code = "audit_write_failed"

    def __init__(
        self,
        message: str | None = None,
        record_id: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if record_id:
            details["record_id"] = record_id
        super().__init__(message=message, details=details, **kwargs)
