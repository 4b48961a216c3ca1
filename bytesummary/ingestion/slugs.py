"""URL slug helpers shared by the extractors."""

import re
from typing import Iterable
from urllib.parse import urlparse

HASH_SUFFIX_RE = re.compile(r"-[a-f0-9]{10,}$", re.IGNORECASE)


def slug_to_title(slug: str) -> str:
    """Turn a URL slug into a readable title.

    Each hyphen-separated word gets an upper-cased first letter; the rest of
    the word is left untouched.
    """
    return " ".join(word[:1].upper() + word[1:] for word in slug.split("-"))


def strip_trailing_slash(url: str) -> str:
    """Remove trailing slashes."""
    return url.rstrip("/")


def normalize_url(url: str) -> str:
    """Normalize to exactly one trailing slash."""
    return strip_trailing_slash(url) + "/"


def strip_hash_suffix(slug: str) -> str:
    """Drop a Medium-style hex id suffix from a slug."""
    return HASH_SUFFIX_RE.sub("", slug)


def last_path_segment(url: str) -> str:
    """Final non-empty path segment of a URL, or an empty string."""
    parts = [p for p in urlparse(url).path.split("/") if p]
    return parts[-1] if parts else ""


def is_skipped_url(url: str, patterns: Iterable[str]) -> bool:
    """Check a URL against a list of path words that mark non-article pages."""
    url_lower = url.lower()
    return any(
        f"/{p}/" in url_lower or f"/{p}?" in url_lower or url_lower.endswith(f"/{p}")
        for p in patterns
    )
