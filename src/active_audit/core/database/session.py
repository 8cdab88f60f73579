"""Engine and session factory helpers."""

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from active_audit.config import AuditSettings, get_settings


def create_db_engine(
    database_url: str | None = None,
    audit_settings: AuditSettings | None = None,
) -> Engine:
    """Create an engine for the audit database.

    Args:
        database_url: Overrides settings.database_url
        audit_settings: Settings to read defaults from

    Returns:
        A configured SQLAlchemy engine
    """
    audit_settings = audit_settings or get_settings()
    return create_engine(
        database_url or audit_settings.database_url,
        echo=audit_settings.database_echo,
    )


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create a session factory bound to an engine."""
    return sessionmaker(
        bind=engine,
        expire_on_commit=False,
        autoflush=False,
    )
