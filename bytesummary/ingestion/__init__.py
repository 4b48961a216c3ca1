"""Article discovery, fetching and text extraction."""

from .classifier import detect_category
from .content import extract_article_content, extract_title
from .extractors import extract_articles
from .fetcher import BlogFetcher
from .generic import extract_generic_articles
from .models import FetchedPage
from .slugs import normalize_url, slug_to_title

__all__ = [
    "BlogFetcher",
    "FetchedPage",
    "detect_category",
    "extract_article_content",
    "extract_articles",
    "extract_generic_articles",
    "extract_title",
    "normalize_url",
    "slug_to_title",
]
