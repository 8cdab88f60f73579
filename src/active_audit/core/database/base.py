"""SQLAlchemy declarative base and common mixins."""

from typing import Any, ClassVar
from uuid import UUID, uuid4

from sqlalchemy import event, inspect
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from active_audit.config import get_settings
from active_audit.core.audit.schemas import AuditOptions


class Base(DeclarativeBase):
    """Base class for the library's own tables."""

    pass


class UUIDMixin:
    """Mixin that adds a UUID primary key."""

    id: Mapped[UUID] = mapped_column(
        primary_key=True,
        default=uuid4,
        index=True,
    )


def _load_prior_value(
    target: Any,
    value: Any,
    oldvalue: Any,
    initiator: Any,
) -> None:
    """No-op set listener; registering it with active_history loads old values."""


class AuditMixin:
    """Mixin that enables automatic audit recording.

    Models that inherit from this mixin have an audit record written
    whenever they are created, updated or deleted, once
    ``setup_audit_listeners`` has been called.

    Example:
        class Post(Base, AuditMixin):
            __tablename__ = "posts"
            __audit_scope__ = "content"
            __audit_except__ = ("view_count",)

            id: Mapped[int] = mapped_column(primary_key=True)
            title: Mapped[str] = mapped_column(String(255))
    """

    # Marker attribute checked by the audit listeners
    __audit__: ClassVar[bool] = True

    # Falls back to settings.default_scope
    __audit_scope__: ClassVar[str | None] = None

    # Merged with settings.global_excluded_columns
    __audit_except__: ClassVar[tuple[str, ...]] = ()

    __audit_exclude_on_destroy__: ClassVar[bool] = False

    @classmethod
    def get_audit_options(cls) -> AuditOptions:
        """Build the audit options for this model."""
        settings = get_settings()
        return AuditOptions(
            scope=cls.__audit_scope__ or settings.default_scope,
            excluded_columns=frozenset(
                (*settings.global_excluded_columns, *cls.__audit_except__)
            ),
            exclude_on_destroy=cls.__audit_exclude_on_destroy__,
        )

    @classmethod
    def __declare_last__(cls) -> None:
        """Load a column's prior value before it is overwritten.

        Without this, assigning to an attribute expired by commit records
        no old value, and re-assigning the current value looks like a
        change.
        """
        for attr in inspect(cls).column_attrs:
            class_attr = getattr(cls, attr.key)
            if not event.contains(class_attr, "set", _load_prior_value):
                event.listen(
                    class_attr, "set", _load_prior_value, active_history=True
                )
