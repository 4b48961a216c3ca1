"""Run command implementation."""

from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn

from ..config import Config
from ..db import validate_connection
from ..models import JobStatus
from ..pipeline import build_pipeline, run_with_summary

console = Console()


def run_command(
    max_articles: Optional[int] = typer.Option(
        None,
        "--max-articles",
        "-n",
        help="Maximum articles per source",
        min=1,
    ),
) -> None:
    """Fetch, summarize and index the latest articles from every source."""
    try:
        config = Config()

        if max_articles is not None:
            config.config.pipeline.max_articles_per_source = max_articles

        if config.config.store.backend == "postgres":
            console.print("[dim]Checking database connection...[/dim]")
            if not validate_connection(config.get_db_config()):
                console.print("[red]❌ Database connection failed![/red]")
                console.print("Please check your database configuration and ensure Postgres is running.")
                raise typer.Exit(1)

        pipeline = build_pipeline(config)

        console.print(Panel.fit("📰 ByteSummary Refresh", style="bold blue"))

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            TextColumn("{task.completed}/{task.total} articles"),
            TimeElapsedColumn(),
            console=console,
        ) as progress:
            task = progress.add_task("Starting...", total=None)

            def on_update(status: JobStatus) -> None:
                progress.update(
                    task,
                    description=status.message,
                    completed=status.processed_articles,
                    total=status.total_articles or None,
                )

            status = run_with_summary(pipeline, on_update=on_update)

        if status.status == "error":
            raise typer.Exit(1)

    except KeyboardInterrupt:
        console.print("\n[yellow]Pipeline interrupted by user[/yellow]")
        raise typer.Exit(1)
