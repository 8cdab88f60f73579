"""Main active-audit CLI application."""

import typer
from rich.console import Console

from active_audit import __version__
from active_audit.commands import history, init_db
from active_audit.core.logging import configure_logging


console = Console()

app = typer.Typer(
    name="active-audit",
    help="Inspect and manage audit trails.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Register commands
app.command(name="init-db")(init_db.init_db)
app.command(name="history")(history.history)


@app.callback(invoke_without_command=True)
def version_callback(
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit."
    ),
) -> None:
    """active-audit CLI - Inspect and manage audit trails."""
    if version:
        console.print(f"[bold cyan]active-audit[/bold cyan] version {__version__}")
        raise typer.Exit()


def main() -> None:
    """Entry point for the CLI."""
    configure_logging()
    app()


if __name__ == "__main__":
    main()
