"""Source model for blog sources."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import StoredModel


class Source(StoredModel):
    """Engineering blog source, built-in or user-added."""

    id: str = Field(..., description="Stable source identifier")
    name: str = Field(..., description="Display name")
    url: str = Field(..., description="Blog listing URL")
    logo: str = Field("📰", description="Logo glyph")
    color: str = Field("#6b7280", description="Color hint")
    is_custom: bool = Field(False, description="Whether the source was added by a user")
    user_id: Optional[str] = Field(None, description="Owning user for custom sources")
    created_at: Optional[datetime] = Field(None, description="When a custom source was added")
