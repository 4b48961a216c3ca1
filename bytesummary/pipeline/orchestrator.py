"""Pipeline orchestrator that discovers, summarizes and indexes blog articles."""

import time
import uuid
from typing import Callable, Dict, List, Optional

import pendulum
from fastapi import BackgroundTasks
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..config import Config, PipelineConfig
from ..config.constants import BLOG_SOURCES
from ..db import BlogStorage, JobStatusRepository, KeyValueStore, SourceManager, create_store, generate_blog_id
from ..errors import StoreError
from ..generation import BlogSummarizer, create_llm_provider
from ..ingestion import BlogFetcher, detect_category, extract_article_content, extract_title
from ..models import BlogEntry, CandidateArticle, JobError, JobStatus, Source, SourceProgress

console = Console()

StatusCallback = Callable[[JobStatus], None]


class BlogPipeline:
    """Run one pass over every source and record progress in the job status."""

    def __init__(
        self,
        store: KeyValueStore,
        fetcher: BlogFetcher,
        summarizer: BlogSummarizer,
        settings: Optional[PipelineConfig] = None,
        sources: Optional[List[Source]] = None,
    ) -> None:
        """
        Initialize the pipeline.

        Args:
            store: Backing key-value store
            fetcher: Listing and article fetcher
            summarizer: Summary generator
            settings: Pipeline limits (defaults from PipelineConfig)
            sources: Built-in sources to crawl (defaults to BLOG_SOURCES)
        """
        self.settings = settings or PipelineConfig()
        self.fetcher = fetcher
        self.summarizer = summarizer
        self.blogs = BlogStorage(
            store,
            index_limit=self.settings.index_limit,
            ttl_days=self.settings.blog_ttl_days,
        )
        self.jobs = JobStatusRepository(store, ttl_hours=self.settings.job_ttl_hours)
        self.source_manager = SourceManager(store)
        self.builtin_sources = list(BLOG_SOURCES if sources is None else sources)
        self.status: Optional[JobStatus] = None
        self.on_update: Optional[StatusCallback] = None

    def collect_sources(self) -> List[Source]:
        """Built-in sources followed by custom sources, deduplicated by URL."""
        sources: List[Source] = []
        seen_urls = set()
        for source in self.builtin_sources + self.source_manager.get_all_custom_sources():
            if source.url in seen_urls:
                continue
            seen_urls.add(source.url)
            sources.append(source)
        return sources

    def _save_status(self) -> None:
        self.jobs.save(self.status)
        if self.on_update is not None:
            self.on_update(self.status)

    def _record_error(self, source: Source, error: str, url: Optional[str] = None) -> None:
        self.status.errors.append(JobError(source=source.id, url=url, error=error))

    def run(self, on_update: Optional[StatusCallback] = None) -> JobStatus:
        """
        Run the pipeline over every source.

        Source and article failures are recorded in the job status and do
        not stop the run.

        Args:
            on_update: Called with the status after every write

        Returns:
            Final job status
        """
        self.on_update = on_update
        sources = self.collect_sources()

        self.status = JobStatus(
            run_id=uuid.uuid4().hex,
            status="running",
            message="Starting blog fetch...",
            started_at=pendulum.now("UTC"),
            sources={
                s.id: SourceProgress(name=s.name, logo=s.logo, is_custom=s.is_custom)
                for s in sources
            },
        )

        try:
            self._save_status()

            for source in sources:
                self.process_source(source)

            self.status.status = "completed"
            self.status.message = f"Completed! Processed {self.status.processed_articles} articles."
            console.print(f"[green]{self.status.message}[/green]")
            self.status.completed_at = pendulum.now("UTC")
            self._save_status()

        except Exception as e:
            console.print(f"[red]Pipeline error: {e}[/red]")
            self.status.status = "error"
            self.status.message = f"Error: {e}"
            self.status.completed_at = pendulum.now("UTC")
            self._save_status()

        return self.status

    def process_source(self, source: Source) -> None:
        """Discover and process the newest articles of one source."""
        console.print(f"[bold]Fetching {source.name}...[/bold]")
        progress = self.status.sources[source.id]
        progress.status = "fetching"
        self.status.message = f"Fetching {source.name}..."
        self._save_status()

        try:
            candidates = self.fetcher.discover_articles(source)
        except Exception as e:
            console.print(f"[red]Error fetching {source.name}: {e}[/red]")
            progress.status = "error"
            progress.error = str(e)
            self._record_error(source, str(e))
            self._save_status()
            return

        selected = candidates[: self.settings.max_articles_per_source]
        progress.status = "processing"
        progress.articles_found = len(candidates)
        self.status.total_articles += len(selected)
        self.status.message = f"Processing {len(selected)} articles from {source.name}..."
        self._save_status()

        for candidate in selected:
            try:
                if self.process_article(source, candidate):
                    progress.articles_processed += 1
                    self.status.processed_articles += 1
            except Exception as e:
                console.print(f"[red]Error processing {candidate.url}: {e}[/red]")
                self._record_error(source, str(e), url=candidate.url)

            try:
                self._save_status()
            except StoreError as e:
                console.print(f"[red]Failed to save job status after {candidate.url}: {e}[/red]")
                self._record_error(source, f"Failed to save job status: {e}", url=candidate.url)

        progress.status = "completed"
        self._save_status()

    def process_article(self, source: Source, candidate: CandidateArticle) -> bool:
        """
        Summarize and index one article.

        Returns:
            True if the article is now indexed, False if it was skipped
        """
        blog_id = generate_blog_id(candidate.url)

        existing = self.blogs.get_entry(blog_id)
        if existing is not None:
            self.blogs.add_to_index(existing, source)
            return True

        page = self.fetcher.fetch_article(candidate.url)
        content = extract_article_content(page.html)
        if len(content) < self.settings.min_content_length:
            console.print(f"[dim]Skipping {candidate.url}: only {len(content)} chars of content[/dim]")
            return False

        title = candidate.title or extract_title(page.html) or "Untitled"
        summary = self.summarizer.summarize(title, content)
        category = detect_category(content, title)

        entry = BlogEntry(
            id=blog_id,
            source=source.id,
            source_name=source.name,
            source_logo=source.logo,
            source_color=source.color,
            url=candidate.url,
            title=title,
            category=category,
            summary=summary.brief,
            full_summary=summary.detailed,
            key_points=summary.key_points,
            technologies=summary.technologies,
            fetched_at=pendulum.now("UTC"),
            content_length=len(content),
        )

        self.blogs.save_entry(entry)
        self.blogs.add_to_index(entry, source)
        console.print(f"[green]✓[/green] Processed: {title[:50]}...")
        return True


def build_pipeline(config: Config, store: Optional[KeyValueStore] = None) -> BlogPipeline:
    """Wire a pipeline from configuration."""
    if store is None:
        store = create_store(config)

    fetch_config = config.config.fetch
    llm_config = config.get_llm_config()

    return BlogPipeline(
        store=store,
        fetcher=BlogFetcher(timeout=fetch_config.timeout, user_agent=fetch_config.user_agent),
        summarizer=BlogSummarizer(
            create_llm_provider(llm_config),
            max_tokens=llm_config.get("max_tokens", 800),
        ),
        settings=config.config.pipeline,
    )


def start_background_run(background_tasks: BackgroundTasks, pipeline: BlogPipeline) -> None:
    """Schedule a pipeline run after the current response is sent."""
    background_tasks.add_task(pipeline.run)


def print_run_summary(status: JobStatus, duration: float) -> None:
    """Print a per-source summary table for a finished run."""
    table = Table(title="Run Summary")
    table.add_column("Source", style="cyan")
    table.add_column("Status", style="bold")
    table.add_column("Found", justify="right")
    table.add_column("Processed", justify="right")
    table.add_column("Details", style="dim")

    for progress in status.sources.values():
        marker = {
            "completed": "[green]✓[/green]",
            "error": "[red]✗[/red]",
        }.get(progress.status, progress.status)
        table.add_row(
            f"{progress.logo or ''} {progress.name}".strip(),
            marker,
            str(progress.articles_found),
            str(progress.articles_processed),
            progress.error or "",
        )

    console.print(table)

    style = "green" if status.status == "completed" else "red"
    error_counts: Dict[str, int] = {}
    for error in status.errors:
        error_counts[error.source] = error_counts.get(error.source, 0) + 1

    lines = [
        status.message,
        "",
        f"Articles: {status.processed_articles}/{status.total_articles}",
        f"Errors: {len(status.errors)}",
        f"Duration: {duration:.1f} seconds",
    ]
    if error_counts:
        lines.append("Errors by source: " + ", ".join(f"{k} ({v})" for k, v in error_counts.items()))

    console.print(Panel("\n".join(lines), style=style))


def run_with_summary(pipeline: BlogPipeline, on_update: Optional[StatusCallback] = None) -> JobStatus:
    """Run the pipeline and print its summary."""
    start = time.time()
    status = pipeline.run(on_update=on_update)
    print_run_summary(status, time.time() - start)
    return status
