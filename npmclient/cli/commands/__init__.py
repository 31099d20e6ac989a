"""CLI command modules."""

from __future__ import annotations

from typing import NoReturn

import typer
from rich.console import Console

_console = Console()


def fail(message: str) -> NoReturn:
    """Print an error and exit with status 1."""
    _console.print(f"[red]{message}[/red]")
    raise typer.Exit(1)
