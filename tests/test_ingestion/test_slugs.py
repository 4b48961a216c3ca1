"""Tests for slug helpers."""

from bytesummary.config.constants import SKIP_PATTERNS
from bytesummary.ingestion.slugs import (
    is_skipped_url,
    last_path_segment,
    normalize_url,
    slug_to_title,
    strip_hash_suffix,
)


class TestSlugToTitle:
    def test_capitalizes_each_word(self) -> None:
        assert slug_to_title("scaling-kafka-at-uber") == "Scaling Kafka At Uber"

    def test_keeps_rest_of_word_untouched(self) -> None:
        assert slug_to_title("why-gRPC-wins") == "Why GRPC Wins"

    def test_single_word(self) -> None:
        assert slug_to_title("observability") == "Observability"


class TestNormalizeUrl:
    def test_adds_trailing_slash(self) -> None:
        assert normalize_url("https://blog.cloudflare.com/post") == "https://blog.cloudflare.com/post/"

    def test_collapses_repeated_slashes_at_end(self) -> None:
        assert normalize_url("https://blog.cloudflare.com/post///") == "https://blog.cloudflare.com/post/"


class TestStripHashSuffix:
    def test_removes_medium_post_id(self) -> None:
        assert strip_hash_suffix("how-we-scaled-3f2a9b8c7d1e") == "how-we-scaled"

    def test_leaves_short_suffix(self) -> None:
        assert strip_hash_suffix("release-2024") == "release-2024"


class TestLastPathSegment:
    def test_ignores_trailing_slash(self) -> None:
        assert last_path_segment("https://example.com/blog/my-post/") == "my-post"

    def test_root_is_empty(self) -> None:
        assert last_path_segment("https://example.com/") == ""


class TestIsSkippedUrl:
    def test_skips_path_segment(self) -> None:
        assert is_skipped_url("https://example.com/tag/python/", SKIP_PATTERNS)

    def test_skips_final_segment(self) -> None:
        assert is_skipped_url("https://example.com/about", SKIP_PATTERNS)

    def test_skips_segment_followed_by_query(self) -> None:
        assert is_skipped_url("https://example.com/search?q=x", SKIP_PATTERNS)

    def test_allows_article_containing_word(self) -> None:
        assert not is_skipped_url("https://example.com/blog/tagging-at-scale", SKIP_PATTERNS)
