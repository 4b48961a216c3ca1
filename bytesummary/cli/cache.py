"""Clear-cache command implementation."""

import typer
from rich.console import Console

from ..config import Config
from ..db import BlogStorage, create_store
from ..errors import StoreError

console = Console()


def clear_cache_command(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete every cached blog, the index and the job status."""
    if not yes:
        typer.confirm("Delete all cached blog summaries?", abort=True)

    try:
        deleted = BlogStorage(create_store(Config())).clear_cache()
    except StoreError as e:
        console.print(f"[red]❌ Failed to clear cache: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✅ Cache cleared. Deleted {deleted} blog entries.[/green]")
