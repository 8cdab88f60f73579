"""Command: active-audit history - Show an entity's audit trail."""

import json

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table


console = Console()


def history(
    type_name: str = typer.Argument(..., help="Type name of the audited entity"),
    entity_id: str = typer.Argument(..., help="Identity of the audited entity"),
    scope: str | None = typer.Option(
        None, "--scope", "-s", help="Audit scope (defaults to settings)"
    ),
    database_url: str | None = typer.Option(
        None, "--database-url", "-d", help="Database URL (defaults to settings)"
    ),
) -> None:
    """Show the audit records of one entity, oldest first."""
    from sqlalchemy.exc import SQLAlchemyError

    from active_audit.config import get_settings
    from active_audit.core.audit.repos import SQLAlchemyAuditStore
    from active_audit.core.audit.schemas import AssociationLink, AuditFilter
    from active_audit.core.database import create_db_engine, create_session_factory

    audit_filter = AuditFilter(
        scope=scope or get_settings().default_scope,
        association_chain=[AssociationLink(id=entity_id, type_name=type_name)],
    )

    engine = create_db_engine(database_url)
    try:
        with create_session_factory(engine)() as session:
            records = SQLAlchemyAuditStore(session).query(audit_filter)
    except SQLAlchemyError as e:
        console.print(
            f"[red]Error:[/red] Could not read audit history: {escape(str(e))}"
        )
        raise typer.Exit(1) from e
    finally:
        engine.dispose()

    if not records:
        console.print(
            f"[yellow]No audit records for {audit_filter.association_key} "
            f"in scope '{audit_filter.scope}'.[/yellow]"
        )
        return

    table = Table(
        title=f"Audit trail: {audit_filter.association_key}", show_header=True
    )
    table.add_column("When", style="dim", no_wrap=True)
    table.add_column("Action", style="cyan", no_wrap=True)
    table.add_column("Modifier", no_wrap=True)
    table.add_column("Original")
    table.add_column("Modified", style="green")

    for record in records:
        table.add_row(
            record.created_at.isoformat(timespec="seconds"),
            record.action.value,
            str(record.modifier_id),
            json.dumps(record.original, sort_keys=True),
            json.dumps(record.modified, sort_keys=True),
        )

    console.print()
    console.print(table)
    console.print()
