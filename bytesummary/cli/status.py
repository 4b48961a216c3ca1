"""Status command implementation."""

import typer
from rich.console import Console
from rich.table import Table

from ..config import Config
from ..db import JobStatusRepository, create_store
from ..errors import StoreError

console = Console()

STATUS_STYLES = {
    "idle": "dim",
    "running": "yellow",
    "completed": "green",
    "error": "red",
}


def status_command() -> None:
    """Show the status of the latest refresh."""
    config = Config()

    try:
        jobs = JobStatusRepository(create_store(config), ttl_hours=config.config.pipeline.job_ttl_hours)
        status = jobs.get_or_idle()
    except StoreError as e:
        console.print(f"[red]❌ Could not read job status: {e}[/red]")
        raise typer.Exit(1)

    style = STATUS_STYLES.get(status.status, "bold")
    console.print(f"[{style}]{status.status.upper()}[/{style}] {status.message}")

    if status.started_at:
        console.print(f"[dim]Started: {status.started_at.isoformat()}[/dim]")
    if status.completed_at:
        console.print(f"[dim]Completed: {status.completed_at.isoformat()}[/dim]")

    if status.sources:
        table = Table(title=f"Articles: {status.processed_articles}/{status.total_articles}")
        table.add_column("Source", style="cyan")
        table.add_column("Status", style="bold")
        table.add_column("Found", justify="right")
        table.add_column("Processed", justify="right")

        for source_id, progress in status.sources.items():
            table.add_row(
                f"{progress.name} ({source_id})",
                progress.status,
                str(progress.articles_found),
                str(progress.articles_processed),
            )
        console.print(table)

    for error in status.errors:
        target = error.url or error.source
        console.print(f"[red]✗ {target}: {error.error}[/red]")
