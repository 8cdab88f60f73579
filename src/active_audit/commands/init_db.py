"""Command: active-audit init-db - Create the audit table."""

import typer
from rich.console import Console


console = Console()


def init_db(
    database_url: str | None = typer.Option(
        None, "--database-url", "-d", help="Database URL (defaults to settings)"
    ),
) -> None:
    """Create the audit_logs table if it does not exist."""
    from active_audit.core.audit.models import AuditLog
    from active_audit.core.database import create_db_engine

    engine = create_db_engine(database_url)
    try:
        AuditLog.__table__.create(engine, checkfirst=True)
    finally:
        engine.dispose()

    console.print(
        f"[green]✓[/green] Table [cyan]{AuditLog.__tablename__}[/cyan] is ready"
    )
