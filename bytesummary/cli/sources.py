"""Custom source management commands."""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from ..config import Config
from ..config.constants import BLOG_SOURCES
from ..db import SourceManager, create_store
from ..errors import FetchError, SourceError
from ..ingestion import BlogFetcher

console = Console()
sources_app = typer.Typer(help="Manage custom blog sources")

UserOption = typer.Option(..., "--user", "-u", help="Owner of the custom sources")


def _manager() -> SourceManager:
    return SourceManager(create_store(Config()))


@sources_app.command("list")
def sources_list(
    user: Optional[str] = typer.Option(None, "--user", "-u", help="Show this user's custom sources"),
) -> None:
    """List built-in sources and custom sources."""
    manager = _manager()
    custom = manager.get_user_sources(user) if user else manager.get_all_custom_sources()

    table = Table(title="Blog Sources")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="bold")
    table.add_column("Type", style="magenta")
    table.add_column("URL", style="blue")

    for source in BLOG_SOURCES + custom:
        table.add_row(
            source.id,
            f"{source.logo} {source.name}",
            "custom" if source.is_custom else "built-in",
            source.url,
        )

    console.print(table)


@sources_app.command("add")
def sources_add(
    user: str = UserOption,
    name: str = typer.Option(..., "--name", "-n", help="Source name"),
    url: str = typer.Option(..., "--url", help="Blog listing URL"),
    logo: Optional[str] = typer.Option(None, "--logo", help="Logo glyph"),
    color: Optional[str] = typer.Option(None, "--color", help="Color hint"),
) -> None:
    """Add a custom source."""
    try:
        source = _manager().add_user_source(user, name, url, logo=logo, color=color)
    except SourceError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✅ Added source: {source.name} ({source.id})[/green]")


@sources_app.command("remove")
def sources_remove(
    source_id: str = typer.Argument(..., help="Source id to remove"),
    user: str = UserOption,
) -> None:
    """Remove a custom source."""
    if not _manager().remove_user_source(user, source_id):
        console.print(f"[red]Source '{source_id}' not found.[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✅ Removed source: {source_id}[/green]")


@sources_app.command("test")
def sources_test(
    source_id: Optional[str] = typer.Argument(None, help="Source id to test (or test all)"),
) -> None:
    """Fetch listing pages and report how many articles each yields."""
    config = Config()
    manager = SourceManager(create_store(config))
    sources = BLOG_SOURCES + manager.get_all_custom_sources()

    if source_id:
        sources = [s for s in sources if s.id == source_id]
        if not sources:
            console.print(f"[red]Source '{source_id}' not found.[/red]")
            raise typer.Exit(1)

    fetcher = BlogFetcher(timeout=config.config.fetch.timeout, user_agent=config.config.fetch.user_agent)
    for source in sources:
        try:
            articles = fetcher.discover_articles(source)
        except FetchError as e:
            console.print(f"[red]❌ {source.name}: Failed - {e}[/red]")
            continue

        if articles:
            console.print(f"[green]✅ {source.name}: {len(articles)} articles[/green]")
            for article in articles[:3]:
                console.print(f"   [dim]{article.title} - {article.url}[/dim]")
        else:
            console.print(f"[yellow]⚠️  {source.name}: No articles found[/yellow]")
