"""Pytest configuration and shared fixtures."""

from collections.abc import Generator

import pytest
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from active_audit.core.audit import (
    AuditOptions,
    InMemoryAuditStore,
    clear_audit_context,
)
from active_audit.core.audit.middleware import (
    remove_audit_listeners,
    setup_audit_listeners,
)
from active_audit.core.audit.models import AuditLog  # noqa: F401
from active_audit.core.database import Base, create_session_factory
from tests.factories.models import HostBase


@pytest.fixture(autouse=True)
def reset_audit_context() -> Generator[None, None, None]:
    """Make sure no modifier leaks between tests."""
    clear_audit_context()
    yield
    clear_audit_context()


@pytest.fixture
def store() -> InMemoryAuditStore:
    """Provide an empty in-memory audit store."""
    return InMemoryAuditStore()


@pytest.fixture
def options() -> AuditOptions:
    """Audit options with one excluded column."""
    return AuditOptions(scope="content", excluded_columns=frozenset({"b"}))


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """Create an in-memory SQLite engine with all tables."""
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(engine)
    HostBase.metadata.create_all(engine)

    yield engine

    engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> Generator[sessionmaker[Session], None, None]:
    """Session factory with audit listeners installed."""
    factory = create_session_factory(engine)
    setup_audit_listeners(factory)

    yield factory

    remove_audit_listeners(factory)


@pytest.fixture
def db(session_factory: sessionmaker[Session]) -> Generator[Session, None, None]:
    """Provide a database session with audit listeners."""
    with session_factory() as session:
        yield session
