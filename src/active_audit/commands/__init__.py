"""CLI commands for active-audit."""
