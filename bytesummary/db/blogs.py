"""Blog entry storage and the bounded blog index."""

import hashlib
from datetime import datetime
from typing import List, Optional

import pendulum

from ..config.constants import BLOG_KEY_PREFIX, INDEX_KEY, JOB_STATUS_KEY
from ..models import BlogEntry, BlogIndexEntry, Source
from .store import KeyValueStore

DAY_SECONDS = 24 * 60 * 60


def generate_blog_id(url: str) -> str:
    """Derive the stable blog id for an article URL."""
    return hashlib.sha256(url.encode("utf-8")).hexdigest()[:16]


class BlogStorage:
    """Handle blog entry persistence and index maintenance."""

    def __init__(
        self,
        store: KeyValueStore,
        index_limit: int = 100,
        ttl_days: int = 30,
    ) -> None:
        """
        Initialize blog storage.

        Args:
            store: Backing key-value store
            index_limit: Maximum number of entries kept in the index
            ttl_days: Expiry for entries and the index
        """
        self.store = store
        self.index_limit = index_limit
        self.ttl = ttl_days * DAY_SECONDS

    @staticmethod
    def _entry_key(blog_id: str) -> str:
        return f"{BLOG_KEY_PREFIX}{blog_id}"

    def get_entry(self, blog_id: str) -> Optional[BlogEntry]:
        """Load a full blog entry by id."""
        data = self.store.get(self._entry_key(blog_id))
        if data is None:
            return None
        return BlogEntry.model_validate(data)

    def has_entry(self, blog_id: str) -> bool:
        """Check whether an entry was already processed."""
        return self.store.get(self._entry_key(blog_id)) is not None

    def save_entry(self, entry: BlogEntry) -> None:
        """Persist a full blog entry."""
        self.store.put(self._entry_key(entry.id), entry.to_record(), ttl=self.ttl)

    def get_index(self) -> List[BlogIndexEntry]:
        """Load the index, newest first."""
        data = self.store.get(INDEX_KEY) or []
        return [BlogIndexEntry.model_validate(item) for item in data]

    def add_to_index(self, entry: BlogEntry, source: Source) -> bool:
        """
        Insert an entry at the front of the index unless already present.

        Returns:
            True if the index changed
        """
        index = self.get_index()
        if any(item.id == entry.id for item in index):
            return False

        index.insert(0, BlogIndexEntry.from_entry(entry, source))
        index = index[: self.index_limit]

        self.store.put(INDEX_KEY, [item.to_record() for item in index], ttl=self.ttl)
        return True

    def list_blogs(
        self,
        source: str = "all",
        category: str = "all",
        days: int = 30,
        now: Optional[datetime] = None,
    ) -> List[BlogIndexEntry]:
        """
        Filter the index for listing.

        Args:
            source: Source id or "all"
            category: Category id or "all"
            days: Only entries fetched strictly within the last N days
            now: Reference time (defaults to the current time)

        Returns:
            Matching entries sorted by fetch time, newest first
        """
        if now is None:
            now = pendulum.now("UTC")
        cutoff = now - pendulum.duration(days=days)

        blogs = []
        for blog in self.get_index():
            if source != "all" and blog.source != source:
                continue
            if category != "all" and blog.category != category:
                continue
            if blog.fetched_at <= cutoff:
                continue
            blogs.append(blog)

        blogs.sort(key=lambda b: b.fetched_at, reverse=True)
        return blogs

    def clear_cache(self) -> int:
        """
        Delete the index, the job status and every blog entry.

        Returns:
            Number of blog entries deleted
        """
        self.store.delete(INDEX_KEY)
        self.store.delete(JOB_STATUS_KEY)

        keys = self.store.list_keys(BLOG_KEY_PREFIX)
        for key in keys:
            self.store.delete(key)
        return len(keys)
