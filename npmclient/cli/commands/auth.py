"""Authentication commands for the npmclient CLI."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from ...config import RegistrySettings
from ...exceptions import NPMClientError
from ...status import get_status, verify_token
from ...types import ProvisioningState
from ...workflow import ProvisioningWorkflow, delete_credential_files
from . import fail

app = typer.Typer(help="Manage registry credentials")
console = Console()


@app.command()
def login(
    username: str = typer.Option(..., prompt=True, help="Registry username"),
    password: str = typer.Option(..., prompt=True, hide_input=True, help="Registry password"),
    email: str = typer.Option(..., prompt=True, help="Email address registered with the registry"),
    search_root: Path = typer.Option(
        None,
        "--search-root",
        help="Directory searched for the npm-login executable (default: current directory)",
    ),
) -> None:
    """Log in through the external npm-login tool and configure this project.

    The login tool may prompt for more input; the command waits until it exits.
    """
    workflow = ProvisioningWorkflow(search_root=search_root)
    settings = workflow.settings

    console.print(f"\n[bold]Logging in to {settings.url}...[/bold]")
    result = workflow.run(workflow.request(username, password, email))

    if result.state is ProvisioningState.REGISTERED:
        console.print("\n[green]Successfully authenticated![/green]")
        console.print(f"  Registry {settings.name} added for scope(s): {', '.join(settings.scopes)}")
    elif result.state is ProvisioningState.DONE:
        console.print("\n[yellow]Login did not produce a token. Nothing was configured.[/yellow]")
    else:
        fail(f"\nLogin failed: {escape(result.error or 'unknown error')}")


@app.command()
def logout() -> None:
    """Delete cached credentials (~/.npmrc and ~/.upmconfig.toml)."""
    try:
        deleted = delete_credential_files()
    except OSError as e:
        fail(f"Could not delete cached credentials: {escape(str(e))}")
    if not deleted:
        console.print("[yellow]No cached credentials found.[/yellow]")
        return
    for path in deleted:
        console.print(f"[green]Successfully deleted {path.name} file[/green]")


@app.command()
def status(
    verify: bool = typer.Option(False, "--verify", help="Check the token against the registry"),
) -> None:
    """Show current credential status."""
    settings = RegistrySettings()
    try:
        current = get_status(settings)
    except (NPMClientError, OSError) as e:
        fail(f"Could not read credentials: {escape(str(e))}")

    if not current.authenticated:
        console.print("[yellow]Not authenticated.[/yellow]")
        console.print("Run [bold]npmclient auth login[/bold] to authenticate.")
        raise typer.Exit(1)

    console.print("[green]Authenticated[/green]")
    console.print(f"  Registry: {settings.url}")
    console.print(f"  Token: {current.masked_token}")
    console.print(f"  .npmrc: {current.npmrc_path}")
    upm_state = "present" if current.upm_config_present else "missing"
    console.print(f"  .upmconfig.toml: {upm_state}")
    if not current.manifest_present:
        console.print("  [dim]No Packages/manifest.json in the current directory.[/dim]")

    if not verify:
        return

    try:
        username = verify_token(settings.url, current.token)
        console.print(f"\n[green]Token is valid[/green] (user: {username or 'unknown'}).")
    except Exception as e:
        console.print(f"\n[yellow]Warning: Could not verify token: {escape(str(e))}[/yellow]")
