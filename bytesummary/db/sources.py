"""Custom source management."""

import uuid
from typing import List, Optional
from urllib.parse import urlparse

import pendulum
from rich.console import Console

from ..config.constants import USER_SOURCES_PREFIX
from ..errors import SourceError, StoreError
from ..models import Source
from .store import KeyValueStore

console = Console()


def _is_valid_url(url: str) -> bool:
    parsed = urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


class SourceManager:
    """Manage user-added sources in the store."""

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    @staticmethod
    def _key(user_id: str) -> str:
        return f"{USER_SOURCES_PREFIX}{user_id}"

    def get_user_sources(self, user_id: str) -> List[Source]:
        """Get all sources owned by a user."""
        data = self.store.get(self._key(user_id)) or []
        return [Source.model_validate(item) for item in data]

    def _save_user_sources(self, user_id: str, sources: List[Source]) -> None:
        self.store.put(self._key(user_id), [s.to_record() for s in sources])

    def add_user_source(
        self,
        user_id: str,
        name: str,
        url: str,
        logo: Optional[str] = None,
        color: Optional[str] = None,
    ) -> Source:
        """
        Add a custom source for a user.

        Raises:
            SourceError: If name/url are missing, the URL is malformed or
                the user already has a source with this URL
        """
        if not name or not url:
            raise SourceError("Name and URL are required")
        if not _is_valid_url(url):
            raise SourceError("Invalid URL format")

        sources = self.get_user_sources(user_id)
        if any(s.url == url for s in sources):
            raise SourceError("Source with this URL already exists")

        source = Source(
            id=f"custom_{uuid.uuid4().hex[:8]}",
            name=name,
            url=url,
            logo=logo or "📰",
            color=color or "#6b7280",
            is_custom=True,
            user_id=user_id,
            created_at=pendulum.now("UTC"),
        )
        sources.append(source)
        self._save_user_sources(user_id, sources)
        return source

    def remove_user_source(self, user_id: str, source_id: str) -> bool:
        """Remove a user's source by id. Returns False if it was not found."""
        sources = self.get_user_sources(user_id)
        remaining = [s for s in sources if s.id != source_id]
        if len(remaining) == len(sources):
            return False
        self._save_user_sources(user_id, remaining)
        return True

    def get_all_custom_sources(self) -> List[Source]:
        """Get custom sources across all users, deduplicated by URL."""
        all_sources: List[Source] = []
        seen_urls = set()

        try:
            for key in self.store.list_keys(USER_SOURCES_PREFIX):
                for item in self.store.get(key) or []:
                    source = Source.model_validate(item)
                    if source.url in seen_urls:
                        continue
                    seen_urls.add(source.url)
                    source.is_custom = True
                    all_sources.append(source)
        except StoreError as e:
            console.print(f"[red]Error loading custom sources: {e}[/red]")

        return all_sources
