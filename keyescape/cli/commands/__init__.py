"""CLI command registry."""

import typer

from .escape import register_escape_commands


def register_commands(app: typer.Typer) -> None:
    """Register all CLI commands with the main app."""
    register_escape_commands(app)


__all__ = ["register_commands"]
