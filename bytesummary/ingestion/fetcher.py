"""Listing and article page fetcher."""

from typing import Dict, List, Optional

import httpx
from rich.console import Console

from ..config.constants import BROWSER_HEADERS, CUSTOM_SOURCE_HEADERS
from ..errors import FetchError
from ..models import CandidateArticle, Source
from .extractors import extract_articles
from .models import FetchedPage

console = Console()


class BlogFetcher:
    """Fetch blog listing pages and article bodies.

    Requests are made one at a time and never retried; any failure surfaces
    as a FetchError for the caller to record.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """
        Initialize blog fetcher.

        Args:
            timeout: Per-request timeout in seconds
            user_agent: Override for the browser User-Agent header
            transport: Custom httpx transport (used by tests)
        """
        self.timeout = timeout
        self.user_agent = user_agent
        self.transport = transport

    def _headers(self, base: Dict[str, str]) -> Dict[str, str]:
        headers = dict(base)
        if self.user_agent:
            headers["User-Agent"] = self.user_agent
        return headers

    def fetch_page(self, url: str, headers: Optional[Dict[str, str]] = None) -> FetchedPage:
        """
        Fetch a single page.

        Raises:
            FetchError: On network failure or a non-2xx response
        """
        try:
            with httpx.Client(
                timeout=self.timeout,
                follow_redirects=True,
                headers=self._headers(headers or BROWSER_HEADERS),
                transport=self.transport,
            ) as client:
                response = client.get(url)
                response.raise_for_status()

                return FetchedPage(
                    url=url,
                    final_url=str(response.url),
                    status_code=response.status_code,
                    html=response.text,
                    content_type=response.headers.get("content-type"),
                )

        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            error_msg = f"HTTP {status}"
            if status == 404:
                error_msg = "Not found (404)"
            elif status == 403:
                error_msg = "Access forbidden (403)"
            elif status >= 500:
                error_msg = f"Server error ({status})"
            raise FetchError(url, f"Failed to fetch {url}: {error_msg}", status_code=status) from e
        except httpx.TimeoutException as e:
            raise FetchError(url, f"Request timed out: {url}") from e
        except httpx.HTTPError as e:
            raise FetchError(url, f"Network error: {e}") from e

    def fetch_listing(self, source: Source) -> FetchedPage:
        """Fetch a source's listing page."""
        headers = CUSTOM_SOURCE_HEADERS if source.is_custom else BROWSER_HEADERS
        page = self.fetch_page(source.url, headers=headers)
        if source.is_custom:
            console.print(
                f"[dim]Fetched custom source {source.name}: final URL {page.final_url}, "
                f"HTML length {len(page.html)}[/dim]"
            )
        return page

    def fetch_article(self, url: str) -> FetchedPage:
        """Fetch an article page."""
        return self.fetch_page(url, headers=BROWSER_HEADERS)

    def discover_articles(self, source: Source) -> List[CandidateArticle]:
        """Fetch a listing page and extract its candidate articles."""
        page = self.fetch_listing(source)
        return extract_articles(page.html, source, final_url=page.final_url)
