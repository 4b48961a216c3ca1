"""Data models for ingestion."""

from typing import Optional

from pydantic import BaseModel, Field


class FetchedPage(BaseModel):
    """HTML retrieved from a listing or article URL."""

    url: str = Field(..., description="Requested URL")
    final_url: str = Field(..., description="URL after following redirects")
    status_code: int = Field(200, description="HTTP status code")
    html: str = Field("", description="Response body")
    content_type: Optional[str] = Field(None, description="Response content type")
