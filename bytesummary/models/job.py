"""Job status models for tracking pipeline runs."""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import Field

from .base import StoredModel

JOB_STATUSES = ("idle", "running", "completed", "error")
SOURCE_STATUSES = ("pending", "fetching", "processing", "completed", "error")


class SourceProgress(StoredModel):
    """Progress of a single source within a run."""

    status: str = Field("pending", description="pending, fetching, processing, completed, error")
    articles_found: int = Field(0, description="Candidates discovered on the listing page")
    articles_processed: int = Field(0, description="Articles processed or already cached")
    name: str = Field(..., description="Source display name")
    logo: Optional[str] = Field(None, description="Source logo glyph")
    is_custom: bool = Field(False, description="Whether this is a user source")
    error: Optional[str] = Field(None, description="Error message if the source failed")


class JobError(StoredModel):
    """Error recorded during a run."""

    source: str = Field(..., description="Source id")
    url: Optional[str] = Field(None, description="Article URL for per-article failures")
    error: str = Field(..., description="Error message")


class JobStatus(StoredModel):
    """Process-wide status record for the latest pipeline run."""

    run_id: Optional[str] = Field(None, description="Identifier of the run that wrote this record")
    status: str = Field("idle", description="idle, running, completed, error")
    message: str = Field("", description="Human-readable progress message")
    started_at: Optional[datetime] = Field(None, description="When the run started")
    completed_at: Optional[datetime] = Field(None, description="When the run finished")
    updated_at: Optional[datetime] = Field(None, description="Last write time")
    sources: Dict[str, SourceProgress] = Field(default_factory=dict)
    total_articles: int = Field(0, description="Articles scheduled for processing")
    processed_articles: int = Field(0, description="Articles processed so far")
    errors: List[JobError] = Field(default_factory=list)
