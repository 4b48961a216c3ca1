"""Article link extraction for arbitrary user-added blogs."""

import re
from typing import List, Optional
from urllib.parse import urljoin, urlparse

from rich.console import Console

from ..config.constants import SKIP_PATTERNS
from ..models import CandidateArticle
from .candidates import CandidateCollector
from .slugs import (
    is_skipped_url,
    last_path_segment,
    slug_to_title,
    strip_hash_suffix,
    strip_trailing_slash,
)

console = Console()

MAX_GENERIC_ARTICLES = 20

MEDIUM_UUID_LINK_RE = re.compile(
    r'href="(https?://[^"]*/[a-z0-9-]+-[a-f0-9]{10,})"[^>]*>', re.IGNORECASE
)
MEDIUM_HEADING_LINK_RE = re.compile(
    r'<h[23][^>]*>(?:(?!</h[23]>).)*?<a[^>]*href="([^"]+)"[^>]*>([^<]{10,200})</a>',
    re.IGNORECASE | re.DOTALL,
)
MEDIUM_DATA_HREF_RE = re.compile(r'data-href="([^"]+)"[^>]*>([^<]{15,})<', re.IGNORECASE)

HEADING_LINK_RE = re.compile(
    r'<h[1-3][^>]*>(?:(?!</h[1-3]>)[\s\S])*?<a[^>]*href="([^"]+)"[^>]*>([^<]{15,200})</a>',
    re.IGNORECASE,
)
ARTICLE_CLASS_LINK_RE = re.compile(
    r'<a[^>]*href="([^"]+)"[^>]*class="[^"]*(?:post|article|entry|story)[^"]*"[^>]*>([^<]{10,})<',
    re.IGNORECASE,
)
ANY_HREF_RE = re.compile(r'href="([^"]+)"', re.IGNORECASE)
HEX_TAIL_RE = re.compile(r"[a-f0-9]{10,}$", re.IGNORECASE)
WHITESPACE_RE = re.compile(r"\s+")

IGNORED_SCHEMES = ("#", "javascript:", "mailto:")


def _clean_title(text: str) -> str:
    return WHITESPACE_RE.sub(" ", text).strip()


class GenericExtractor:
    """Pattern cascade over one listing page of an unknown blog."""

    def __init__(self, html: str, base_url: str) -> None:
        self.html = html or ""
        self.base_url = base_url
        parsed = urlparse(base_url)
        self.hostname = (parsed.hostname or "").lower()
        self.origin = f"{parsed.scheme}://{parsed.netloc}"
        self.is_medium = (
            "medium.com" in self.hostname
            or "medium.com" in self.html
            or "data-post-id" in self.html
        )

    def resolve(self, href: str) -> Optional[str]:
        """Absolute URL for an href, or None for links that never lead to posts."""
        href = href.strip()
        if not href or href.lower().startswith(IGNORED_SCHEMES):
            return None
        if href.startswith("http://") or href.startswith("https://"):
            return href
        if href.startswith("/") and not href.startswith("//"):
            return f"{self.origin}{href}"
        try:
            return urljoin(self.base_url, href)
        except ValueError:
            return None

    def same_domain(self, url: str, allow_medium: bool) -> bool:
        """Whether url is on the source's host (or a Medium subdomain)."""
        try:
            host = (urlparse(url).hostname or "").lower()
        except ValueError:
            return False
        if host == self.hostname:
            return True
        return allow_medium and host.endswith(".medium.com")

    def on_site_or_medium(self, url: str) -> bool:
        if self.same_domain(url, allow_medium=True):
            return True
        try:
            return (urlparse(url).hostname or "").lower() == "medium.com"
        except ValueError:
            return False

    # Medium passes

    def medium_uuid_links(self, found: CandidateCollector) -> None:
        """Medium post URLs end with a hex post id after the slug."""
        for match in MEDIUM_UUID_LINK_RE.finditer(self.html):
            url = match.group(1)
            if not self.on_site_or_medium(url) or is_skipped_url(url, SKIP_PATTERNS):
                continue
            slug = strip_hash_suffix(last_path_segment(url))
            if len(slug) > 5:
                found.add(url, slug_to_title(slug))

    def medium_heading_links(self, found: CandidateCollector) -> None:
        for match in MEDIUM_HEADING_LINK_RE.finditer(self.html):
            url = self.resolve(match.group(1))
            title = _clean_title(match.group(2))
            if not url or not self.on_site_or_medium(url):
                continue
            if is_skipped_url(url, SKIP_PATTERNS):
                continue
            if len(title) >= 10:
                found.add(url, title)

    def medium_data_href_links(self, found: CandidateCollector) -> None:
        for match in MEDIUM_DATA_HREF_RE.finditer(self.html):
            url = self.resolve(match.group(1))
            if not url or not self.on_site_or_medium(url):
                continue
            if is_skipped_url(url, SKIP_PATTERNS):
                continue
            found.add(url, _clean_title(match.group(2)))

    # Generic passes

    def heading_links(self, found: CandidateCollector) -> None:
        """Headings wrapping a link with headline-length text."""
        for match in HEADING_LINK_RE.finditer(self.html):
            url = self.resolve(match.group(1))
            title = _clean_title(match.group(2))
            if not url or not self.same_domain(url, allow_medium=True):
                continue
            if is_skipped_url(url, SKIP_PATTERNS):
                continue
            if len(title) >= 15:
                found.add(strip_trailing_slash(url), title)

    def article_class_links(self, found: CandidateCollector) -> None:
        """Anchors whose class names suggest a post card."""
        for match in ARTICLE_CLASS_LINK_RE.finditer(self.html):
            url = self.resolve(match.group(1))
            title = _clean_title(match.group(2))
            if not url or not self.same_domain(url, allow_medium=self.is_medium):
                continue
            if is_skipped_url(url, SKIP_PATTERNS):
                continue
            if len(title) >= 10:
                found.add(strip_trailing_slash(url), title)

    def slug_links(self, found: CandidateCollector) -> None:
        """Any same-site link whose last path segment looks like a post slug."""
        for match in ANY_HREF_RE.finditer(self.html):
            url = self.resolve(match.group(1))
            if not url or not self.same_domain(url, allow_medium=self.is_medium):
                continue

            slug = last_path_segment(url)
            if len(slug) < 8 or slug.lower() in SKIP_PATTERNS:
                continue
            looks_like_article = "-" in slug or HEX_TAIL_RE.search(slug) is not None
            if not looks_like_article or slug.isdigit():
                continue
            if is_skipped_url(url, SKIP_PATTERNS):
                continue

            title = slug_to_title(strip_hash_suffix(slug))
            if len(title) >= 5:
                found.add(strip_trailing_slash(url), title)

    def extract(self, limit: int = MAX_GENERIC_ARTICLES) -> List[CandidateArticle]:
        found = CandidateCollector(limit=limit)

        passes = []
        if self.is_medium:
            passes += [self.medium_uuid_links, self.medium_heading_links, self.medium_data_href_links]
        passes += [self.heading_links, self.article_class_links, self.slug_links]

        for extraction_pass in passes:
            try:
                extraction_pass(found)
            except Exception as e:
                console.print(f"[yellow]Extraction pass {extraction_pass.__name__} failed: {e}[/yellow]")

        return found.result()


def extract_generic_articles(
    html: str,
    base_url: str,
    limit: int = MAX_GENERIC_ARTICLES,
) -> List[CandidateArticle]:
    """
    Find article links on an arbitrary blog listing page.

    Args:
        html: Raw listing HTML
        base_url: Final (post-redirect) URL of the listing page
        limit: Maximum number of candidates returned

    Returns:
        Up to limit candidates in discovery order; empty on malformed input
    """
    try:
        extractor = GenericExtractor(html, base_url)
    except Exception as e:
        console.print(f"[yellow]Cannot extract from {base_url}: {e}[/yellow]")
        return []
    if extractor.is_medium:
        console.print("[dim]Detected Medium blog[/dim]")
    return extractor.extract(limit=limit)
