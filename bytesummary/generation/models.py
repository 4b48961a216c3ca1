"""Data models for generation."""

from typing import List, Literal

from pydantic import BaseModel, Field

SummaryKind = Literal["parsed", "raw_text", "placeholder", "failed"]


class BlogSummary(BaseModel):
    """Structured summary of a blog article.

    `kind` records how the summary was obtained: parsed from the model's
    JSON, lifted from free text, a title placeholder, or the failure stub.
    """

    brief: str = Field(..., description="2-3 sentence summary")
    detailed: str = Field(..., description="Detailed summary")
    key_points: List[str] = Field(default_factory=list, description="Key takeaways")
    technologies: List[str] = Field(default_factory=list, description="Technologies mentioned")
    kind: SummaryKind = Field("parsed", description="How the summary was obtained")

    @property
    def is_degraded(self) -> bool:
        """True when the summary is not a confident extraction."""
        return self.kind != "parsed"
