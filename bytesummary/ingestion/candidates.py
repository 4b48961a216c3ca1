"""Accumulator for candidate article links found by extraction passes."""

from typing import List, Optional, Set

from ..models import CandidateArticle
from .slugs import strip_trailing_slash


class CandidateCollector:
    """Ordered, URL-deduplicated list of candidates.

    Passes run one after another against the same collector. The first pass
    to report a URL owns it; later passes cannot replace its title.
    """

    def __init__(self, limit: Optional[int] = None) -> None:
        self.limit = limit
        self.articles: List[CandidateArticle] = []
        self._seen: Set[str] = set()

    def __len__(self) -> int:
        return len(self.articles)

    def __contains__(self, url: str) -> bool:
        return strip_trailing_slash(url) in self._seen

    def add(self, url: str, title: str) -> bool:
        """Add a candidate. Returns False for duplicates and empty titles."""
        title = (title or "").strip()
        if not url or not title:
            return False

        key = strip_trailing_slash(url)
        if key in self._seen:
            return False

        self._seen.add(key)
        self.articles.append(CandidateArticle(url=url, title=title))
        return True

    def result(self) -> List[CandidateArticle]:
        """Candidates in discovery order, capped at the limit."""
        if self.limit is None:
            return list(self.articles)
        return self.articles[: self.limit]
