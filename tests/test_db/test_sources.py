"""Tests for custom source management."""

import pytest

from bytesummary.db import SourceManager
from bytesummary.errors import SourceError


@pytest.fixture
def manager(store) -> SourceManager:
    return SourceManager(store)


class TestAddUserSource:
    def test_adds_source(self, manager) -> None:
        source = manager.add_user_source("alice", "Example Blog", "https://blog.example.com/")

        assert source.id.startswith("custom_")
        assert source.is_custom
        assert source.user_id == "alice"
        assert source.logo == "📰"
        assert source.color == "#6b7280"
        assert [s.id for s in manager.get_user_sources("alice")] == [source.id]

    def test_requires_name_and_url(self, manager) -> None:
        with pytest.raises(SourceError, match="Name and URL are required"):
            manager.add_user_source("alice", "", "https://blog.example.com/")
        with pytest.raises(SourceError, match="Name and URL are required"):
            manager.add_user_source("alice", "Example", "")

    def test_rejects_malformed_url(self, manager) -> None:
        with pytest.raises(SourceError, match="Invalid URL format"):
            manager.add_user_source("alice", "Example", "not a url")

    def test_rejects_duplicate_url_for_same_user(self, manager) -> None:
        manager.add_user_source("alice", "Example", "https://blog.example.com/")

        with pytest.raises(SourceError, match="already exists"):
            manager.add_user_source("alice", "Example again", "https://blog.example.com/")

    def test_same_url_for_different_users(self, manager) -> None:
        manager.add_user_source("alice", "Example", "https://blog.example.com/")
        manager.add_user_source("bob", "Example", "https://blog.example.com/")

        assert len(manager.get_user_sources("bob")) == 1


class TestRemoveUserSource:
    def test_remove(self, manager) -> None:
        source = manager.add_user_source("alice", "Example", "https://blog.example.com/")

        assert manager.remove_user_source("alice", source.id)
        assert manager.get_user_sources("alice") == []

    def test_remove_unknown(self, manager) -> None:
        assert not manager.remove_user_source("alice", "custom_missing")

    def test_remove_only_from_owner(self, manager) -> None:
        source = manager.add_user_source("alice", "Example", "https://blog.example.com/")

        assert not manager.remove_user_source("bob", source.id)
        assert len(manager.get_user_sources("alice")) == 1


class TestGetAllCustomSources:
    def test_deduplicates_by_url(self, manager) -> None:
        manager.add_user_source("alice", "Example", "https://blog.example.com/")
        manager.add_user_source("bob", "Example", "https://blog.example.com/")
        manager.add_user_source("bob", "Other", "https://other.example.com/")

        urls = [s.url for s in manager.get_all_custom_sources()]

        assert sorted(urls) == ["https://blog.example.com/", "https://other.example.com/"]
