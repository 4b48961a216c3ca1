"""Shared fixtures."""

from typing import Callable, Optional

import pendulum
import pytest

from bytesummary.db import BlogStorage, MemoryStore, generate_blog_id
from bytesummary.models import BlogEntry

NOW = pendulum.datetime(2024, 6, 1, 12, 0, 0, tz="UTC")


class FakeClock:
    """Settable clock for TTL tests."""

    def __init__(self, now=NOW) -> None:
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + pendulum.duration(**kwargs)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def storage(store) -> BlogStorage:
    return BlogStorage(store)


@pytest.fixture
def make_entry() -> Callable[..., BlogEntry]:
    def _make(
        url: str,
        source: str = "meta",
        category: str = "engineering",
        fetched_at: Optional[pendulum.DateTime] = None,
        title: Optional[str] = None,
    ) -> BlogEntry:
        return BlogEntry(
            id=generate_blog_id(url),
            source=source,
            source_name=f"{source.title()} Engineering",
            source_logo="🔵",
            source_color="#0668E1",
            url=url,
            title=title or f"Article at {url}",
            category=category,
            summary="Brief summary.",
            full_summary="Detailed summary.",
            key_points=["One", "Two"],
            technologies=["Python"],
            fetched_at=fetched_at or pendulum.now("UTC"),
            content_length=1200,
        )

    return _make
