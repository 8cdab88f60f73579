"""Host models used to exercise the SQLAlchemy integration."""

from datetime import UTC, datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from active_audit.core.database import AuditMixin


class HostBase(DeclarativeBase):
    """Declarative base standing in for a host application's models."""

    pass


class Post(HostBase, AuditMixin):
    """Audited model with a per-model excluded column."""

    __tablename__ = "posts"
    __audit_scope__ = "content"
    __audit_except__ = ("view_count",)

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(String(255))
    body: Mapped[str | None] = mapped_column(Text, nullable=True)
    view_count: Mapped[int] = mapped_column(default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
    )


class Comment(HostBase, AuditMixin):
    """Audited model using the default scope."""

    __tablename__ = "comments"

    id: Mapped[int] = mapped_column(primary_key=True)
    text: Mapped[str] = mapped_column(Text)


class Tag(HostBase):
    """Model without AuditMixin; never audited."""

    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(50))
