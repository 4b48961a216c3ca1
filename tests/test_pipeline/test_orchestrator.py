"""End-to-end tests for the pipeline against a mocked web."""

import httpx
import pytest

from bytesummary.config import PipelineConfig
from bytesummary.config.constants import BLOG_SOURCES, JOB_STATUS_KEY
from bytesummary.db import BlogStorage, JobStatusRepository, MemoryStore, SourceManager
from bytesummary.errors import StoreError
from bytesummary.generation import BlogSummarizer, MockLLMProvider
from bytesummary.ingestion import BlogFetcher
from bytesummary.pipeline import BlogPipeline

META = BLOG_SOURCES[0]
UBER = BLOG_SOURCES[1]

ARTICLE_BODY = "Machine learning inference at scale. " * 20


def post_url(i: int) -> str:
    return f"https://engineering.fb.com/2024/01/0{i}/ml/post-number-{i}/"


META_LISTING = "\n".join(f'<a href="{post_url(i)}">Post Number {i}</a>' for i in range(1, 8))


class FakeWeb:
    """Routes requests to canned pages and counts hits."""

    def __init__(self) -> None:
        self.pages = {META.url: (200, META_LISTING)}
        for i in range(1, 8):
            self.pages[post_url(i)] = (
                200,
                f"<html><head><title>Post</title></head><body><p>{ARTICLE_BODY}</p></body></html>",
            )
        self.hits = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.hits.append(url)
        status, body = self.pages.get(url, (404, ""))
        return httpx.Response(status, text=body)


@pytest.fixture
def web() -> FakeWeb:
    return FakeWeb()


@pytest.fixture
def provider() -> MockLLMProvider:
    return MockLLMProvider()


@pytest.fixture
def make_pipeline(store, web, provider):
    def _make(sources=None) -> BlogPipeline:
        return BlogPipeline(
            store=store,
            fetcher=BlogFetcher(transport=httpx.MockTransport(web)),
            summarizer=BlogSummarizer(provider),
            settings=PipelineConfig(),
            sources=[META] if sources is None else sources,
        )

    return _make


class TestRun:
    def test_processes_first_five_articles(self, store, make_pipeline, provider) -> None:
        status = make_pipeline().run()

        assert status.status == "completed"
        assert status.total_articles == 5
        assert status.processed_articles == 5
        assert status.message == "Completed! Processed 5 articles."
        assert status.errors == []

        progress = status.sources["meta"]
        assert progress.status == "completed"
        assert progress.articles_found == 7
        assert progress.articles_processed == 5

        index = BlogStorage(store).get_index()
        assert len(index) == 5
        assert index[0].title == "Post Number 5"
        assert len(provider.calls) == 5

    def test_entry_contents(self, store, make_pipeline) -> None:
        make_pipeline().run()

        storage = BlogStorage(store)
        entry = storage.get_entry(storage.get_index()[-1].id)

        assert entry.url == post_url(1)
        assert entry.title == "Post Number 1"
        assert entry.category == "ml"
        assert entry.summary == "Mock summary of the article."
        assert entry.full_summary == "A longer mock summary of the article."
        assert entry.source_name == META.name
        assert entry.content_length > 200

    def test_status_is_persisted(self, store, make_pipeline) -> None:
        status = make_pipeline().run()

        stored = JobStatusRepository(store).get()
        assert stored.run_id == status.run_id
        assert stored.status == "completed"
        assert stored.completed_at is not None

    def test_reports_every_transition(self, make_pipeline) -> None:
        seen = []

        make_pipeline().run(on_update=lambda s: seen.append((s.status, s.sources["meta"].status)))

        assert seen[0] == ("running", "pending")
        assert ("running", "fetching") in seen
        assert ("running", "processing") in seen
        assert seen[-1] == ("completed", "completed")

    def test_rerun_uses_cache(self, store, make_pipeline, provider, web) -> None:
        make_pipeline().run()
        web.hits.clear()

        status = make_pipeline().run()

        assert status.processed_articles == 5
        assert len(provider.calls) == 5
        assert web.hits == [META.url]
        assert len(BlogStorage(store).get_index()) == 5


class FlakyStatusStore(MemoryStore):
    """Fails one job-status write, counted from the start of the run."""

    def __init__(self, fail_on: int) -> None:
        super().__init__()
        self.fail_on = fail_on
        self.status_writes = 0

    def put(self, key, value, ttl=None) -> None:
        if key == JOB_STATUS_KEY:
            self.status_writes += 1
            if self.status_writes == self.fail_on:
                raise StoreError("connection reset")
        super().put(key, value, ttl=ttl)


class TestFailures:
    def test_article_failure_is_recorded(self, make_pipeline, web) -> None:
        web.pages[post_url(3)] = (500, "")

        status = make_pipeline().run()

        assert status.status == "completed"
        assert status.total_articles == 5
        assert status.processed_articles == 4
        assert len(status.errors) == 1
        assert status.errors[0].source == "meta"
        assert status.errors[0].url == post_url(3)
        assert "500" in status.errors[0].error

    def test_short_content_is_skipped_silently(self, make_pipeline, web) -> None:
        web.pages[post_url(2)] = (200, "<p>Too short.</p>")

        status = make_pipeline().run()

        assert status.processed_articles == 4
        assert status.errors == []

    def test_listing_failure_marks_source(self, make_pipeline, web) -> None:
        status = make_pipeline(sources=[UBER, META]).run()

        assert status.status == "completed"
        assert status.sources["uber"].status == "error"
        assert "404" in status.sources["uber"].error
        assert status.errors[0].source == "uber"
        assert status.errors[0].url is None
        assert status.sources["meta"].status == "completed"
        assert status.processed_articles == 5

    def test_summary_failure_still_indexes(self, store, make_pipeline, provider) -> None:
        provider.responses = [RuntimeError("quota")]

        make_pipeline().run()

        storage = BlogStorage(store)
        entry = storage.get_entry(storage.get_index()[-1].id)
        assert entry.summary == "Summary generation failed"
        assert entry.key_points == ["Error occurred during analysis"]

    def test_status_write_failure_only_affects_that_article(self, web, provider) -> None:
        # Writes: start, fetching, processing, then one per article.
        store = FlakyStatusStore(fail_on=4)
        pipeline = BlogPipeline(
            store=store,
            fetcher=BlogFetcher(transport=httpx.MockTransport(web)),
            summarizer=BlogSummarizer(provider),
            sources=[META],
        )

        status = pipeline.run()

        assert status.status == "completed"
        assert status.processed_articles == 5
        assert len(status.errors) == 1
        assert status.errors[0].url == post_url(1)
        assert "connection reset" in status.errors[0].error
        assert JobStatusRepository(store).get().status == "completed"


class TestSources:
    def test_custom_sources_deduplicated_by_url(self, store, make_pipeline) -> None:
        manager = SourceManager(store)
        manager.add_user_source("alice", "Meta again", META.url)
        custom = manager.add_user_source("bob", "Example", "https://blog.example.com/")

        sources = make_pipeline().collect_sources()

        assert [s.id for s in sources] == ["meta", custom.id]
        assert sources[1].is_custom

    def test_custom_source_is_processed(self, store, make_pipeline, web) -> None:
        custom = SourceManager(store).add_user_source("bob", "Example", "https://blog.example.com/")
        web.pages["https://blog.example.com/"] = (
            200,
            '<h2><a href="/posts/building-reliable-systems">Building Reliable Systems at Scale</a></h2>',
        )
        web.pages["https://blog.example.com/posts/building-reliable-systems"] = (
            200,
            f"<p>{ARTICLE_BODY}</p>",
        )

        status = make_pipeline(sources=[]).run()

        progress = status.sources[custom.id]
        assert progress.is_custom
        assert progress.articles_processed == 1
        assert status.processed_articles == 1
