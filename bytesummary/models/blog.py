"""Blog entry models."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from .base import StoredModel
from .source import Source


class CandidateArticle(BaseModel):
    """Article link discovered on a listing page."""

    url: str = Field(..., description="Absolute article URL")
    title: str = Field(..., description="Link text or slug-derived title")


class BlogEntry(StoredModel):
    """Fully processed blog article."""

    id: str = Field(..., description="Deterministic hash of the URL")
    source: str = Field(..., description="Source id")
    source_name: str = Field(..., description="Source display name")
    source_logo: Optional[str] = Field(None, description="Source logo glyph")
    source_color: Optional[str] = Field(None, description="Source color hint")
    url: str = Field(..., description="Article URL")
    title: str = Field(..., description="Article title")
    category: str = Field(..., description="Detected category")
    summary: str = Field(..., description="Brief summary")
    full_summary: str = Field(..., description="Detailed summary")
    key_points: List[str] = Field(default_factory=list)
    technologies: List[str] = Field(default_factory=list)
    fetched_at: datetime = Field(..., description="When the article was processed")
    content_length: int = Field(0, description="Length of extracted text")


class BlogIndexEntry(StoredModel):
    """Lightweight projection of a blog entry used for listing."""

    id: str
    source: str
    source_name: str
    source_logo: Optional[str] = None
    title: str
    category: str
    summary: str
    technologies: List[str] = Field(default_factory=list)
    fetched_at: datetime

    @classmethod
    def from_entry(cls, entry: BlogEntry, source: Source) -> "BlogIndexEntry":
        """Project a full entry, attributed to the source it was found under."""
        return cls(
            id=entry.id,
            source=source.id,
            source_name=source.name,
            source_logo=source.logo,
            title=entry.title,
            category=entry.category,
            summary=entry.summary,
            technologies=entry.technologies or [],
            fetched_at=entry.fetched_at,
        )
