"""Acting-modifier context for audit recording.

The modifier is passed explicitly as an ``AuditContext`` wherever the
caller has one. Hosts that record from ORM hooks, where no argument can
be threaded through, set a context-local one around each operation:

    set_audit_context(AuditContext(modifier_id=user.id))
    try:
        ...  # mutate and flush
    finally:
        clear_audit_context()

or, equivalently, ``with audit_context(modifier_id=user.id): ...``.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

from active_audit.core.errors import ModifierNotSetError


class AuditContext:
    """Identity of the principal performing the current operation."""

    def __init__(
        self,
        modifier_id: Any,
        request_id: str | None = None,
    ) -> None:
        """Initialize audit context.

        Args:
            modifier_id: Identity of the acting modifier
            request_id: Request correlation ID
        """
        self.modifier_id = modifier_id
        self.request_id = request_id

    def __repr__(self) -> str:
        return (
            f"<AuditContext(modifier_id={self.modifier_id}, "
            f"request_id={self.request_id})>"
        )


# Each thread / async task sees its own context
_audit_context: ContextVar[AuditContext | None] = ContextVar(
    "audit_context", default=None
)


def set_audit_context(context: AuditContext) -> None:
    """Set the context-local audit context for the current operation."""
    _audit_context.set(context)


def clear_audit_context() -> None:
    """Clear the audit context after the operation completes."""
    _audit_context.set(None)


def get_audit_context() -> AuditContext | None:
    """Get the context-local audit context, if one is set."""
    return _audit_context.get()


@contextmanager
def audit_context(
    modifier_id: Any,
    request_id: str | None = None,
) -> Iterator[AuditContext]:
    """Set an audit context for the duration of a block.

    The previous context is restored on exit, so blocks may nest.

    Args:
        modifier_id: Identity of the acting modifier
        request_id: Request correlation ID

    Yields:
        The active AuditContext
    """
    context = AuditContext(modifier_id=modifier_id, request_id=request_id)
    token = _audit_context.set(context)
    try:
        yield context
    finally:
        _audit_context.reset(token)


def resolve_modifier_id(context: AuditContext | None = None) -> Any:
    """Resolve the acting modifier's identity.

    An explicit context wins over the context-local one.

    Args:
        context: Explicit audit context, if the caller has one

    Returns:
        The modifier identity

    Raises:
        ModifierNotSetError: If neither context carries a modifier
    """
    context = context or get_audit_context()
    if context is None or context.modifier_id is None:
        raise ModifierNotSetError()
    return context.modifier_id
