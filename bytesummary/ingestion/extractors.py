"""Article link extraction for the built-in engineering blogs.

Each source gets an ordered list of passes. A pass is a plain function that
scans the raw listing HTML with a regular expression and feeds whatever it
finds into a shared CandidateCollector. All passes run; the collector keeps
the first title seen for each URL. Adding support for a markup change means
appending a pass, not rewriting the existing ones.
"""

import re
from functools import partial
from typing import Callable, Dict, List, Optional

from rich.console import Console

from ..config.constants import SKIP_PATTERNS
from ..models import CandidateArticle, Source
from .candidates import CandidateCollector
from .generic import extract_generic_articles
from .slugs import is_skipped_url, normalize_url, slug_to_title, strip_trailing_slash

console = Console()

ExtractionPass = Callable[[str, CandidateCollector], None]

# Meta

META_DATED_LINK_RE = re.compile(
    r'<a[^>]*href="(https://engineering\.fb\.com/\d{4}/\d{2}/\d{2}/[^"]+)"[^>]*>([^<]*)</a>',
    re.IGNORECASE,
)
META_HEADING_LINK_RE = re.compile(
    r'<h[23][^>]*>(?:(?!</h[23]>).)*?<a[^>]*href="(https://engineering\.fb\.com/[^"]+)"[^>]*>([^<]+)</a>',
    re.IGNORECASE | re.DOTALL,
)


def meta_dated_links(html: str, found: CandidateCollector) -> None:
    """Anchors pointing at /YYYY/MM/DD/ article permalinks."""
    for match in META_DATED_LINK_RE.finditer(html):
        url = normalize_url(match.group(1))
        if is_skipped_url(url, SKIP_PATTERNS):
            continue
        found.add(url, match.group(2))


def meta_heading_links(html: str, found: CandidateCollector) -> None:
    """Post titles rendered as h2/h3 headings wrapping a link."""
    for match in META_HEADING_LINK_RE.finditer(html):
        url = normalize_url(match.group(1))
        if url == "https://engineering.fb.com/" or is_skipped_url(url, SKIP_PATTERNS):
            continue
        found.add(url, match.group(2))


# Uber

UBER_SKIP_PATHS = [
    "/engineering", "/advertising", "/earn", "/ride", "/eat", "/merchants",
    "/business", "/freight", "/health", "/higher-education", "/transit",
    "/careers", "/community-support", "/research", "/category", "/tag",
]
UBER_RELATIVE_RE = re.compile(r'href="(/blog/[a-z0-9-]+/?)"[^>]*>', re.IGNORECASE)
UBER_ABSOLUTE_RE = re.compile(
    r'href="(https://www\.uber\.com/(?:en-[A-Z]{2}/)?blog/[a-z0-9-]+/?)"[^>]*>',
    re.IGNORECASE,
)
UBER_LOCALE_RE = re.compile(r"/en-[A-Z]{2}/blog/")
UBER_SLUG_RE = re.compile(r"/blog/([^/]+)")


def uber_relative_links(html: str, found: CandidateCollector) -> None:
    """Site-relative /blog/<slug> links."""
    for match in UBER_RELATIVE_RE.finditer(html):
        path = strip_trailing_slash(match.group(1))
        slug = path.replace("/blog/", "", 1)
        if any(p in path for p in UBER_SKIP_PATHS) or len(slug) < 5:
            continue
        found.add(f"https://www.uber.com{path}/", slug_to_title(slug))


def uber_absolute_links(html: str, found: CandidateCollector) -> None:
    """Absolute blog links, with any locale prefix folded away."""
    for match in UBER_ABSOLUTE_RE.finditer(html):
        url = UBER_LOCALE_RE.sub("/blog/", normalize_url(match.group(1)))
        slug_match = UBER_SLUG_RE.search(url)
        if not slug_match or len(slug_match.group(1)) < 5:
            continue
        if any(p in url for p in UBER_SKIP_PATHS):
            continue
        found.add(url, slug_to_title(slug_match.group(1)))


# Cloudflare

CLOUDFLARE_SKIP_SLUGS = [
    "tag", "author", "page", "category", "search", "about", "contact", "rss", "feed", "cdn-cgi",
]
LOCALE_SLUG_RE = re.compile(r"^[a-z]{2}-[a-z]{2}$")
CLOUDFLARE_RELATIVE_RE = re.compile(r'href="/([a-z0-9][a-z0-9-]+)/?"', re.IGNORECASE)
CLOUDFLARE_ABSOLUTE_RE = re.compile(
    r'href="(https://blog\.cloudflare\.com/([a-z0-9][a-z0-9-]+)/?)"[^>]*>',
    re.IGNORECASE,
)


def _cloudflare_slug_ok(slug: str) -> bool:
    return len(slug) >= 8 and slug not in CLOUDFLARE_SKIP_SLUGS and not LOCALE_SLUG_RE.match(slug)


def cloudflare_relative_links(html: str, found: CandidateCollector) -> None:
    """Root-level /<slug> links; posts live directly under the domain."""
    for match in CLOUDFLARE_RELATIVE_RE.finditer(html):
        slug = match.group(1)
        if not _cloudflare_slug_ok(slug):
            continue
        found.add(f"https://blog.cloudflare.com/{slug}/", slug_to_title(slug))


def cloudflare_absolute_links(html: str, found: CandidateCollector) -> None:
    """Absolute blog.cloudflare.com/<slug> links."""
    for match in CLOUDFLARE_ABSOLUTE_RE.finditer(html):
        slug = match.group(2)
        if not _cloudflare_slug_ok(slug):
            continue
        found.add(normalize_url(match.group(1)), slug_to_title(slug))


# Microsoft

MICROSOFT_SKIP_SLUGS = [
    "tag", "author", "page", "category", "search", "about", "contact", "feed", "archive",
]
MICROSOFT_SKIP_BLOGS = ["tag", "author", "page", "category", "search", "feed", "landingpage"]
MICROSOFT_ENGINEERING_RE = re.compile(
    r'href="(https://devblogs\.microsoft\.com/engineering-at-microsoft/([a-z0-9-]+)/?)"[^>]*>',
    re.IGNORECASE,
)
MICROSOFT_BLOG_POST_RE = re.compile(
    r'href="(https://devblogs\.microsoft\.com/([a-z0-9-]+)/([a-z0-9-]+)/?)"[^>]*>',
    re.IGNORECASE,
)
MICROSOFT_TITLED_LINK_RE = re.compile(
    r'<a[^>]*href="(https://devblogs\.microsoft\.com/[^"]+/[^"]+)"[^>]*>([^<]{15,150})</a>',
    re.IGNORECASE,
)


def microsoft_engineering_links(html: str, found: CandidateCollector) -> None:
    """Posts on the Engineering@Microsoft blog itself."""
    for match in MICROSOFT_ENGINEERING_RE.finditer(html):
        slug = match.group(2)
        if len(slug) < 5 or slug in MICROSOFT_SKIP_SLUGS:
            continue
        found.add(normalize_url(match.group(1)), slug_to_title(slug))


def microsoft_devblog_links(html: str, found: CandidateCollector) -> None:
    """Posts on sibling devblogs (/<blog>/<slug>)."""
    for match in MICROSOFT_BLOG_POST_RE.finditer(html):
        blog, slug = match.group(2), match.group(3)
        if blog in MICROSOFT_SKIP_BLOGS or slug in MICROSOFT_SKIP_SLUGS or len(slug) < 5:
            continue
        found.add(normalize_url(match.group(1)), slug_to_title(slug))


def microsoft_titled_links(
    html: str,
    found: CandidateCollector,
    exclude_query_and_fragment: bool = True,
) -> None:
    """Anchors with a visible title long enough to be a headline."""
    for match in MICROSOFT_TITLED_LINK_RE.finditer(html):
        url = normalize_url(match.group(1))
        title = match.group(2).strip()

        if exclude_query_and_fragment and ("?" in url or "#" in url):
            continue
        if len(title) < 15:
            continue
        if is_skipped_url(url, MICROSOFT_SKIP_BLOGS + MICROSOFT_SKIP_SLUGS):
            continue
        found.add(url, title)


SOURCE_PASSES: Dict[str, List[ExtractionPass]] = {
    "meta": [meta_dated_links, meta_heading_links],
    "uber": [uber_relative_links, uber_absolute_links],
    "cloudflare": [cloudflare_relative_links, cloudflare_absolute_links],
    "microsoft": [
        microsoft_engineering_links,
        microsoft_devblog_links,
        partial(microsoft_titled_links, exclude_query_and_fragment=True),
    ],
}


def run_passes(html: str, passes: List[ExtractionPass], label: str) -> List[CandidateArticle]:
    """Run every pass against the same collector, absorbing pass failures."""
    found = CandidateCollector()
    for extraction_pass in passes:
        try:
            extraction_pass(html or "", found)
        except Exception as e:
            name = getattr(extraction_pass, "__name__", repr(extraction_pass))
            console.print(f"[yellow]{label}: extraction pass {name} failed: {e}[/yellow]")
    return found.result()


def extract_articles(
    html: str,
    source: Source,
    final_url: Optional[str] = None,
) -> List[CandidateArticle]:
    """
    Extract candidate articles from a source's listing page.

    Args:
        html: Raw listing HTML
        source: Source the page belongs to
        final_url: URL after redirects, used to resolve links on custom sources

    Returns:
        Deduplicated candidates in discovery order
    """
    passes = SOURCE_PASSES.get(source.id)
    if source.is_custom or passes is None:
        articles = extract_generic_articles(html, final_url or source.url)
        console.print(f"[dim]{source.name} (custom): Found {len(articles)} articles[/dim]")
        return articles

    articles = run_passes(html, passes, source.name)
    console.print(f"[dim]{source.name}: Found {len(articles)} articles[/dim]")
    return articles
